"""Checks API — profile identity and alert checking."""

from fastapi import APIRouter

import structlog

from capprofile.models.alert import Alert
from capprofile.models.responses import ProfileResponse
from capprofile.profiles import CheckReport, get_check_engine

logger = structlog.get_logger()

router = APIRouter()


@router.get("/profile", response_model=ProfileResponse)
async def get_profile():
    """Identity of the profile this service checks against."""
    profile = get_check_engine().profile
    return ProfileResponse(
        name=profile.name,
        code=profile.code,
        documentation_url=profile.documentation_url,
        strict_xsd_validation=profile.strict_xsd_validation,
    )


@router.post("/check", response_model=CheckReport)
async def check_alert(alert: Alert):
    """Check a parsed CAP alert against the profile.

    Errors block publication; recommendations are advisory. An alert whose
    timestamps cannot be parsed is rejected with 422.
    """
    report = get_check_engine().check(alert)
    if not report.passed:
        logger.info("alert_rejected", identifier=alert.identifier, errors=report.summary["errors"])
    return report
