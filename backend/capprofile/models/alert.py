"""CAP alert document model — the already-parsed tree the profiles check.

The tree mirrors CAP 1.2 (Alert → Info* → Area* → Circle/Polygon/Geocode*).
Schema validity is the upstream parser's job; these models only give the
engine a typed, frozen view of the document. Optional elements are ``None``
when absent so presence stays distinguishable from an empty value.

JSON names follow the CAP element names (``msgType``, ``senderName``,
``eventCode``...) through aliases; snake_case names are accepted too.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


_FROZEN = {"frozen": True, "populate_by_name": True}


class MsgType(str, Enum):
    """Nature of the alert message."""

    ALERT = "Alert"
    UPDATE = "Update"
    CANCEL = "Cancel"
    ACK = "Ack"
    ERROR = "Error"


class Status(str, Enum):
    ACTUAL = "Actual"
    EXERCISE = "Exercise"
    SYSTEM = "System"
    TEST = "Test"
    DRAFT = "Draft"


class Scope(str, Enum):
    PUBLIC = "Public"
    RESTRICTED = "Restricted"
    PRIVATE = "Private"


class Category(str, Enum):
    GEO = "Geo"
    MET = "Met"
    SAFETY = "Safety"
    SECURITY = "Security"
    RESCUE = "Rescue"
    FIRE = "Fire"
    HEALTH = "Health"
    ENV = "Env"
    TRANSPORT = "Transport"
    INFRA = "Infra"
    CBRNE = "CBRNE"
    OTHER = "Other"


class ResponseType(str, Enum):
    SHELTER = "Shelter"
    EVACUATE = "Evacuate"
    PREPARE = "Prepare"
    EXECUTE = "Execute"
    AVOID = "Avoid"
    MONITOR = "Monitor"
    ASSESS = "Assess"
    ALL_CLEAR = "AllClear"
    NONE = "None"


class Urgency(str, Enum):
    IMMEDIATE = "Immediate"
    EXPECTED = "Expected"
    FUTURE = "Future"
    PAST = "Past"
    UNKNOWN = "Unknown"


class Severity(str, Enum):
    EXTREME = "Extreme"
    SEVERE = "Severe"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


class Certainty(str, Enum):
    OBSERVED = "Observed"
    LIKELY = "Likely"
    POSSIBLE = "Possible"
    UNLIKELY = "Unlikely"
    UNKNOWN = "Unknown"


class ValuePair(BaseModel):
    """A (valueName, value) pair — used for eventCode and geocode."""

    value_name: str = Field(alias="valueName")
    value: str

    model_config = _FROZEN


class Point(BaseModel):
    latitude: float
    longitude: float

    model_config = _FROZEN


class Circle(BaseModel):
    """A circular area: center point plus radius in kilometers."""

    point: Point
    radius: float

    model_config = _FROZEN


class Polygon(BaseModel):
    points: list[Point] = Field(default_factory=list)

    model_config = _FROZEN


class Area(BaseModel):
    """Geographic target of an info block."""

    area_desc: str = Field(default="", alias="areaDesc")
    polygons: list[Polygon] = Field(default_factory=list, alias="polygon")
    circles: list[Circle] = Field(default_factory=list, alias="circle")
    geocodes: list[ValuePair] = Field(default_factory=list, alias="geocode")
    altitude: Optional[float] = None
    ceiling: Optional[float] = None

    model_config = _FROZEN


class Info(BaseModel):
    """One alert instance scoped to a language/audience."""

    language: str = "en-US"
    categories: list[Category] = Field(default_factory=list, alias="category")
    event: str = ""
    response_types: list[ResponseType] = Field(default_factory=list, alias="responseType")
    urgency: Optional[Urgency] = None
    severity: Optional[Severity] = None
    certainty: Optional[Certainty] = None
    audience: Optional[str] = None
    event_codes: list[ValuePair] = Field(default_factory=list, alias="eventCode")
    effective: Optional[str] = None
    onset: Optional[str] = None
    expires: Optional[str] = None
    sender_name: Optional[str] = Field(default=None, alias="senderName")
    headline: Optional[str] = None
    description: Optional[str] = None
    instruction: Optional[str] = None
    web: Optional[str] = None
    contact: Optional[str] = None
    areas: list[Area] = Field(default_factory=list, alias="area")

    model_config = _FROZEN


class Alert(BaseModel):
    """Root of a CAP document."""

    identifier: str = ""
    sender: str = ""
    sent: str
    status: Status = Status.ACTUAL
    msg_type: MsgType = Field(default=MsgType.ALERT, alias="msgType")
    scope: Scope = Scope.PUBLIC
    references: list[str] = Field(default_factory=list)
    info: list[Info] = Field(default_factory=list)

    model_config = _FROZEN
