"""Reason taxonomy — error and recommendation types plus the Reason carrier.

Every rule a profile evaluates maps to exactly one member of one of the two
closed enums below. Errors block publication; recommendations are advisory.
The enum value is the stable token callers key localization off; ``message``
is only the default English text.
"""

from enum import Enum
from typing import Union
from pydantic import BaseModel


class ErrorType(str, Enum):
    """Profile violations that must block acceptance of an alert."""

    UPDATE_OR_CANCEL_MUST_REFERENCE = "UPDATE_OR_CANCEL_MUST_REFERENCE"
    CATEGORIES_MUST_MATCH = "CATEGORIES_MUST_MATCH"
    EVENTS_IN_SAME_LANGUAGE_MUST_MATCH = "EVENTS_IN_SAME_LANGUAGE_MUST_MATCH"
    EVENT_CODES_MUST_MATCH = "EVENT_CODES_MUST_MATCH"
    INFO_IS_REQUIRED = "INFO_IS_REQUIRED"
    DESCRIPTION_IS_REQUIRED = "DESCRIPTION_IS_REQUIRED"
    WEB_IS_REQUIRED = "WEB_IS_REQUIRED"
    EXPIRES_IS_REQUIRED = "EXPIRES_IS_REQUIRED"
    EFFECTIVE_NOT_AFTER_EXPIRES = "EFFECTIVE_NOT_AFTER_EXPIRES"
    URGENCY_IS_REQUIRED = "URGENCY_IS_REQUIRED"
    SEVERITY_IS_REQUIRED = "SEVERITY_IS_REQUIRED"
    CERTAINTY_IS_REQUIRED = "CERTAINTY_IS_REQUIRED"
    AREA_IS_REQUIRED = "AREA_IS_REQUIRED"
    CIRCLE_POLYGON_OR_GEOCODE_IS_REQUIRED = "CIRCLE_POLYGON_OR_GEOCODE_IS_REQUIRED"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]

    @property
    def is_error(self) -> bool:
        return True


class RecommendationType(str, Enum):
    """Advisory findings — never block acceptance."""

    SENDER_NAME_STRONGLY_RECOMMENDED = "SENDER_NAME_STRONGLY_RECOMMENDED"
    RESPONSE_TYPE_STRONGLY_RECOMMENDED = "RESPONSE_TYPE_STRONGLY_RECOMMENDED"
    INSTRUCTION_STRONGLY_RECOMMENDED = "INSTRUCTION_STRONGLY_RECOMMENDED"
    CIRCLE_POLYGON_ENCOURAGED = "CIRCLE_POLYGON_ENCOURAGED"
    SENT_INCLUDE_TIMEZONE_OFFSET = "SENT_INCLUDE_TIMEZONE_OFFSET"
    EFFECTIVE_INCLUDE_TIMEZONE_OFFSET = "EFFECTIVE_INCLUDE_TIMEZONE_OFFSET"
    ONSET_INCLUDE_TIMEZONE_OFFSET = "ONSET_INCLUDE_TIMEZONE_OFFSET"
    EXPIRES_INCLUDE_TIMEZONE_OFFSET = "EXPIRES_INCLUDE_TIMEZONE_OFFSET"
    HEADLINE_TOO_LONG = "HEADLINE_TOO_LONG"
    HEADLINE_AND_DESCRIPTION_SHOULD_DIFFER = "HEADLINE_AND_DESCRIPTION_SHOULD_DIFFER"
    DESCRIPTION_AND_INSTRUCTION_SHOULD_DIFFER = "DESCRIPTION_AND_INSTRUCTION_SHOULD_DIFFER"
    UNKNOWN_URGENCY_DISCOURAGED = "UNKNOWN_URGENCY_DISCOURAGED"
    UNKNOWN_SEVERITY_DISCOURAGED = "UNKNOWN_SEVERITY_DISCOURAGED"
    UNKNOWN_CERTAINTY_DISCOURAGED = "UNKNOWN_CERTAINTY_DISCOURAGED"
    CONTACT_IS_RECOMMENDED = "CONTACT_IS_RECOMMENDED"
    NONZERO_CIRCLE_RADIUS_RECOMMENDED = "NONZERO_CIRCLE_RADIUS_RECOMMENDED"

    @property
    def message(self) -> str:
        return RECOMMENDATION_MESSAGES[self]

    @property
    def is_error(self) -> bool:
        return False


ReasonType = Union[ErrorType, RecommendationType]


class Reason(BaseModel):
    """A single finding: where in the document, and which rule."""

    location: str
    type: ReasonType

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        return self.type.message

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


# ──────────────────────────────────────────────────────────────────────
# DEFAULT MESSAGES
# ──────────────────────────────────────────────────────────────────────

ERROR_MESSAGES: dict[ErrorType, str] = {
    ErrorType.UPDATE_OR_CANCEL_MUST_REFERENCE: (
        "All related messages that have not yet expired must be referenced "
        'when an "Update" or "Cancel" is issued. This ensures that an '
        '"Update" or "Cancel" applies to at least one non-expired alert.'
    ),
    ErrorType.CATEGORIES_MUST_MATCH: "All <info> blocks must contain the same <category>s",
    ErrorType.EVENTS_IN_SAME_LANGUAGE_MUST_MATCH: (
        "All <info> blocks with the same <language> must contain the same <event>"
    ),
    ErrorType.EVENT_CODES_MUST_MATCH: "All <info> blocks must contain the same <eventCode>s",
    ErrorType.INFO_IS_REQUIRED: "At least one <info> must be present",
    ErrorType.DESCRIPTION_IS_REQUIRED: "<description> must be present",
    ErrorType.WEB_IS_REQUIRED: "<web> must be present",
    ErrorType.EXPIRES_IS_REQUIRED: "<expires> must be present",
    ErrorType.EFFECTIVE_NOT_AFTER_EXPIRES: "<effective> should not come after <expires>",
    ErrorType.URGENCY_IS_REQUIRED: "<urgency> must be present",
    ErrorType.SEVERITY_IS_REQUIRED: "<severity> must be present",
    ErrorType.CERTAINTY_IS_REQUIRED: "<certainty> must be present",
    ErrorType.AREA_IS_REQUIRED: "At least one <area> must be present",
    ErrorType.CIRCLE_POLYGON_OR_GEOCODE_IS_REQUIRED: (
        "Each <area> must have at least one <circle>, <polygon> or <geocode>."
    ),
}

RECOMMENDATION_MESSAGES: dict[RecommendationType, str] = {
    RecommendationType.SENDER_NAME_STRONGLY_RECOMMENDED: "<senderName> is strongly recommended.",
    RecommendationType.RESPONSE_TYPE_STRONGLY_RECOMMENDED: "<responseType> is strongly recommended.",
    RecommendationType.INSTRUCTION_STRONGLY_RECOMMENDED: "<instruction> is strongly recommended.",
    RecommendationType.CIRCLE_POLYGON_ENCOURAGED: (
        "<polygon> and <circle>, while optional, are encouraged as more "
        "accurate representations of <geocode> values"
    ),
    RecommendationType.SENT_INCLUDE_TIMEZONE_OFFSET: (
        "Time zone should be included in <sent> whenever possible."
    ),
    RecommendationType.EFFECTIVE_INCLUDE_TIMEZONE_OFFSET: (
        "Time zone should be included in <effective> whenever possible."
    ),
    RecommendationType.ONSET_INCLUDE_TIMEZONE_OFFSET: (
        "Time zone should be included in <onset> whenever possible."
    ),
    RecommendationType.EXPIRES_INCLUDE_TIMEZONE_OFFSET: (
        "Time zone should be included in <expires> whenever possible."
    ),
    RecommendationType.HEADLINE_TOO_LONG: "Headline should be less than 140 characters",
    RecommendationType.HEADLINE_AND_DESCRIPTION_SHOULD_DIFFER: (
        "Description should provide more detail than the headline and "
        "should not be identical."
    ),
    RecommendationType.DESCRIPTION_AND_INSTRUCTION_SHOULD_DIFFER: (
        "Description should describe the hazard while instruction should "
        "provide human-readable instructions. They should not be identical."
    ),
    RecommendationType.UNKNOWN_URGENCY_DISCOURAGED: "Unknown <urgency> is discouraged.",
    RecommendationType.UNKNOWN_SEVERITY_DISCOURAGED: "Unknown <severity> is discouraged.",
    RecommendationType.UNKNOWN_CERTAINTY_DISCOURAGED: "Unknown <certainty> is discouraged.",
    RecommendationType.CONTACT_IS_RECOMMENDED: (
        "<contact> is recommended to give users a way to provide feedback "
        "and respond to the alert."
    ),
    RecommendationType.NONZERO_CIRCLE_RADIUS_RECOMMENDED: (
        "A CAP <area> defines the area inside which people should be alerted, "
        "not the area of the event causing the alert. This area should "
        "normally have nonzero radius"
    ),
}
