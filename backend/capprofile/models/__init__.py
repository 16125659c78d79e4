"""Data models — the CAP alert tree and API response bodies."""

from capprofile.models.alert import (
    Alert,
    Info,
    Area,
    Circle,
    Polygon,
    Point,
    ValuePair,
    MsgType,
    Category,
    ResponseType,
    Urgency,
    Severity,
    Certainty,
)

__all__ = [
    "Alert",
    "Info",
    "Area",
    "Circle",
    "Polygon",
    "Point",
    "ValuePair",
    "MsgType",
    "Category",
    "ResponseType",
    "Urgency",
    "Severity",
    "Certainty",
]
