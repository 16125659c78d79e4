"""CAP profiles — semantic rules layered on top of the CAP schema.

Usage:
    from capprofile.profiles import GoogleProfile

    profile = GoogleProfile()
    errors = profile.check_for_errors(alert)
    recommendations = profile.check_for_recommendations(alert)
"""

from capprofile.profiles.base import CapProfile
from capprofile.profiles.engine import ProfileCheckEngine, get_check_engine
from capprofile.profiles.google import GoogleProfile
from capprofile.profiles.reasons import ErrorType, Reason, RecommendationType
from capprofile.profiles.report import CheckReport, Finding
from capprofile.profiles.timestamps import InvalidTimestampError

__all__ = [
    "CapProfile",
    "GoogleProfile",
    "ProfileCheckEngine",
    "get_check_engine",
    "CheckReport",
    "Finding",
    "Reason",
    "ErrorType",
    "RecommendationType",
    "InvalidTimestampError",
]
