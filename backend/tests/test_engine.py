"""Check engine — report building and failure propagation."""

import pytest

from capprofile.models.alert import MsgType
from capprofile.profiles import (
    CheckReport,
    ErrorType,
    GoogleProfile,
    InvalidTimestampError,
    ProfileCheckEngine,
    RecommendationType,
)
from tests.builders import compliant_alert, compliant_info


@pytest.fixture
def engine(profile):
    return ProfileCheckEngine(profile)


def test_compliant_alert_passes(engine, alert):
    report = engine.check(alert)

    assert isinstance(report, CheckReport)
    assert report.passed
    assert report.profile == "google"
    assert report.summary == {"errors": 0, "recommendations": 0}
    assert report.errors == [] and report.recommendations == []
    assert report.verdict.startswith("PASS")


def test_recommendations_do_not_fail_report(engine):
    report = engine.check(compliant_alert(info=[compliant_info(contact=None)]))

    assert report.passed
    assert report.summary == {"errors": 0, "recommendations": 1}
    assert report.recommendations[0].code == RecommendationType.CONTACT_IS_RECOMMENDED.value
    assert report.recommendations[0].kind == "recommendation"
    assert "1 recommendation" in report.verdict


def test_errors_fail_report_in_order(engine):
    alert = compliant_alert(msg_type=MsgType.CANCEL, info=[compliant_info(web=None)])

    report = engine.check(alert)

    assert not report.passed
    assert report.verdict.startswith("FAIL")
    assert [(f.location, f.code, f.kind) for f in report.errors] == [
        ("/alert/msgType", ErrorType.UPDATE_OR_CANCEL_MUST_REFERENCE.value, "error"),
        ("/alert/info[0]", ErrorType.WEB_IS_REQUIRED.value, "error"),
    ]
    assert report.errors[1].message == ErrorType.WEB_IS_REQUIRED.message


def test_report_matches_profile_findings(engine, profile):
    alert = compliant_alert(sent="2024-05-01T14:00:00Z", info=[compliant_info(description=None)])

    report = engine.check(alert)

    assert [f.location for f in report.errors] == [r.location for r in profile.check_for_errors(alert)]
    assert [f.code for f in report.recommendations] == [
        r.type.value for r in profile.check_for_recommendations(alert)
    ]


def test_strict_profile_reports_strictness():
    report = ProfileCheckEngine(GoogleProfile(strict_xsd_validation=True)).check(compliant_alert(info=[]))

    assert report.passed
    assert report.strict_xsd_validation is True


def test_invalid_timestamp_propagates(engine):
    alert = compliant_alert(info=[compliant_info(expires="2024-99-99T00:00:00-05:00")])

    with pytest.raises(InvalidTimestampError):
        engine.check(alert)
