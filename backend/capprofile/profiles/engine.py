"""Check Engine — runs a profile against an alert and produces a report.

Usage:
    engine = ProfileCheckEngine(GoogleProfile())
    report = engine.check(alert)
    if not report.passed:
        # Reject the alert, report.errors says why
"""

import time
from functools import lru_cache

import structlog

from capprofile.config import get_settings
from capprofile.models.alert import Alert
from capprofile.profiles.base import CapProfile
from capprofile.profiles.google import GoogleProfile
from capprofile.profiles.report import CheckReport

logger = structlog.get_logger()


class ProfileCheckEngine:
    """Runs both checkers of one profile and wraps the findings in a report.

    The engine holds no per-call state, so one instance can serve
    concurrent requests.
    """

    def __init__(self, profile: CapProfile):
        self.profile = profile

    def check(self, alert: Alert) -> CheckReport:
        """Run error and recommendation checks against the alert.

        Args:
            alert: Parsed, schema-valid CAP alert

        Returns:
            CheckReport with pass/fail and every finding in document order

        Raises:
            InvalidTimestampError: if a present timestamp cannot be parsed
        """
        start_time = time.perf_counter()
        timings: dict[str, float] = {}

        try:
            t_start = time.perf_counter()
            errors = self.profile.check_for_errors(alert)
            timings["errors"] = round((time.perf_counter() - t_start) * 1000, 2)

            t_start = time.perf_counter()
            recommendations = self.profile.check_for_recommendations(alert)
            timings["recommendations"] = round((time.perf_counter() - t_start) * 1000, 2)
        except ValueError as e:
            logger.error(
                "profile_check_failed",
                profile=self.profile.code,
                identifier=alert.identifier,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        report = CheckReport.build(
            self.profile.code,
            errors,
            recommendations,
            strict_xsd_validation=self.profile.strict_xsd_validation,
        )

        logger.info(
            "profile_check_complete",
            profile=self.profile.code,
            identifier=alert.identifier,
            passed=report.passed,
            summary=report.summary,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            timings=timings,
        )

        return report


@lru_cache
def get_check_engine() -> ProfileCheckEngine:
    """Engine for the served profile, configured from settings."""
    settings = get_settings()
    return ProfileCheckEngine(GoogleProfile(strict_xsd_validation=settings.STRICT_XSD_VALIDATION))
