"""Google Public Alerts profile — CAP rules for alerts published on Google Public Alerts.

Based on http://goo.gl/jgHTe. Most of these checks cannot be expressed in the
CAP xsd schema: they compare info blocks with each other, order timestamps,
or require elements the schema leaves optional.

Locations are XPath-like with zero-based indices in document order, e.g.
``/alert/info[1]/area[0]/circle[2]``.
"""

from typing import Iterator

from capprofile.models.alert import Alert, Area, Certainty, Info, MsgType, Severity, Urgency
from capprofile.profiles.base import CapProfile
from capprofile.profiles.checks import check_zero_timezone, is_blank
from capprofile.profiles.reasons import ErrorType, Reason, RecommendationType
from capprofile.profiles.timestamps import to_datetime

HEADLINE_MAX_LENGTH = 140

# Message types that only make sense when they point at earlier alerts
REFERENCING_MSG_TYPES = {MsgType.UPDATE, MsgType.CANCEL}


class GoogleProfile(CapProfile):
    """Google Public Alerts CAP v1.0."""

    @property
    def name(self) -> str:
        return "Google Public Alerts CAP v1.0"

    @property
    def code(self) -> str:
        return "google"

    @property
    def documentation_url(self) -> str:
        return "http://goo.gl/jgHTe"

    # ── Errors ──

    def check_for_errors(self, alert: Alert) -> tuple[Reason, ...]:
        if self.strict_xsd_validation:
            return ()
        return tuple(self._errors(alert))

    def _errors(self, alert: Alert) -> Iterator[Reason]:
        # An Update or Cancel should reference all active messages
        if alert.msg_type in REFERENCING_MSG_TYPES and not alert.references:
            yield Reason(location="/alert/msgType", type=ErrorType.UPDATE_OR_CANCEL_MUST_REFERENCE)

        # Alerts for public distribution must have an <info>
        if not alert.info:
            yield Reason(location="/alert", type=ErrorType.INFO_IS_REQUIRED)
            return

        baseline = alert.info[0]
        baseline_categories = set(baseline.categories)
        baseline_event_codes = set(baseline.event_codes)
        event_by_language: dict[str, str] = {}

        for i, info in enumerate(alert.info):
            xpath = f"/alert/info[{i}]"

            # ── 1. Infos must agree with each other ──
            if set(info.categories) != baseline_categories:
                yield Reason(location=f"{xpath}/category", type=ErrorType.CATEGORIES_MUST_MATCH)

            if set(info.event_codes) != baseline_event_codes:
                yield Reason(location=f"{xpath}/eventCode", type=ErrorType.EVENT_CODES_MUST_MATCH)

            if info.language in event_by_language:
                if info.event != event_by_language[info.language]:
                    yield Reason(
                        location=f"{xpath}/event",
                        type=ErrorType.EVENTS_IN_SAME_LANGUAGE_MUST_MATCH,
                    )
            else:
                event_by_language[info.language] = info.event

            # ── 2. Required elements ──
            yield from self._required_info_fields(info, xpath)

            # ── 3. <effective> must not come after <expires> ──
            if not is_blank(info.expires):
                effective = info.effective if not is_blank(info.effective) else alert.sent
                if to_datetime(effective) > to_datetime(info.expires):
                    yield Reason(
                        location=f"{xpath}/effective",
                        type=ErrorType.EFFECTIVE_NOT_AFTER_EXPIRES,
                    )

            # ── 4. Each <area> needs a shape or a geocode ──
            for j, area in enumerate(info.areas):
                if not (area.geocodes or area.circles or area.polygons):
                    yield Reason(
                        location=f"{xpath}/area[{j}]",
                        type=ErrorType.CIRCLE_POLYGON_OR_GEOCODE_IS_REQUIRED,
                    )

    def _required_info_fields(self, info: Info, xpath: str) -> Iterator[Reason]:
        """Elements the schema leaves optional but this profile requires."""
        if is_blank(info.description):
            yield Reason(location=xpath, type=ErrorType.DESCRIPTION_IS_REQUIRED)
        if is_blank(info.web):
            yield Reason(location=xpath, type=ErrorType.WEB_IS_REQUIRED)
        if is_blank(info.expires):
            yield Reason(location=xpath, type=ErrorType.EXPIRES_IS_REQUIRED)
        if info.urgency is None:
            yield Reason(location=xpath, type=ErrorType.URGENCY_IS_REQUIRED)
        if info.severity is None:
            yield Reason(location=xpath, type=ErrorType.SEVERITY_IS_REQUIRED)
        if info.certainty is None:
            yield Reason(location=xpath, type=ErrorType.CERTAINTY_IS_REQUIRED)
        if not info.areas:
            yield Reason(location=xpath, type=ErrorType.AREA_IS_REQUIRED)

    # ── Recommendations ──

    def check_for_recommendations(self, alert: Alert) -> tuple[Reason, ...]:
        if self.strict_xsd_validation:
            return ()
        return tuple(self._recommendations(alert))

    def _recommendations(self, alert: Alert) -> Iterator[Reason]:
        # Time zone should be included in all time values
        yield from check_zero_timezone(
            alert.sent, "/alert/sent", RecommendationType.SENT_INCLUDE_TIMEZONE_OFFSET
        )

        for i, info in enumerate(alert.info):
            xpath = f"/alert/info[{i}]"

            yield from check_zero_timezone(
                info.effective, f"{xpath}/effective",
                RecommendationType.EFFECTIVE_INCLUDE_TIMEZONE_OFFSET,
            )
            yield from check_zero_timezone(
                info.onset, f"{xpath}/onset",
                RecommendationType.ONSET_INCLUDE_TIMEZONE_OFFSET,
            )
            yield from check_zero_timezone(
                info.expires, f"{xpath}/expires",
                RecommendationType.EXPIRES_INCLUDE_TIMEZONE_OFFSET,
            )

            yield from self._recommended_text(info, xpath)
            yield from self._unknown_values(info, xpath)

            if is_blank(info.contact):
                yield Reason(location=xpath, type=RecommendationType.CONTACT_IS_RECOMMENDED)

            yield from self._preferred_shapes(info.areas, xpath)

    def _recommended_text(self, info: Info, xpath: str) -> Iterator[Reason]:
        if is_blank(info.sender_name):
            yield Reason(location=xpath, type=RecommendationType.SENDER_NAME_STRONGLY_RECOMMENDED)

        # <responseType> is strongly recommended, along with an <instruction>
        if not info.response_types:
            yield Reason(location=xpath, type=RecommendationType.RESPONSE_TYPE_STRONGLY_RECOMMENDED)
        if is_blank(info.instruction):
            yield Reason(location=xpath, type=RecommendationType.INSTRUCTION_STRONGLY_RECOMMENDED)

        if info.headline is not None and len(info.headline) > HEADLINE_MAX_LENGTH:
            yield Reason(location=f"{xpath}/headline", type=RecommendationType.HEADLINE_TOO_LONG)

        # Absent elements compare as empty text
        description = info.description or ""
        if description == (info.headline or ""):
            yield Reason(
                location=f"{xpath}/headline",
                type=RecommendationType.HEADLINE_AND_DESCRIPTION_SHOULD_DIFFER,
            )

        if not is_blank(info.instruction) and description == info.instruction:
            yield Reason(
                location=f"{xpath}/description",
                type=RecommendationType.DESCRIPTION_AND_INSTRUCTION_SHOULD_DIFFER,
            )

    def _unknown_values(self, info: Info, xpath: str) -> Iterator[Reason]:
        if info.urgency == Urgency.UNKNOWN:
            yield Reason(location=f"{xpath}/urgency", type=RecommendationType.UNKNOWN_URGENCY_DISCOURAGED)
        if info.severity == Severity.UNKNOWN:
            yield Reason(location=f"{xpath}/severity", type=RecommendationType.UNKNOWN_SEVERITY_DISCOURAGED)
        if info.certainty == Certainty.UNKNOWN:
            yield Reason(location=f"{xpath}/certainty", type=RecommendationType.UNKNOWN_CERTAINTY_DISCOURAGED)

    def _preferred_shapes(self, areas: list[Area], xpath: str) -> Iterator[Reason]:
        """<polygon> and <circle> get preferential treatment over <geocode>."""
        has_polygon_or_circle = False
        for j, area in enumerate(areas):
            if area.circles or area.polygons:
                has_polygon_or_circle = True
            for k, circle in enumerate(area.circles):
                if circle.radius == 0:
                    yield Reason(
                        location=f"{xpath}/area[{j}]/circle[{k}]",
                        type=RecommendationType.NONZERO_CIRCLE_RADIUS_RECOMMENDED,
                    )

        if areas and not has_polygon_or_circle:
            yield Reason(location=f"{xpath}/area[0]", type=RecommendationType.CIRCLE_POLYGON_ENCOURAGED)
