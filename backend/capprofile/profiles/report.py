"""Check report — the aggregated outcome of running one profile over one alert."""

from typing import Literal
from pydantic import BaseModel, Field

from capprofile.profiles.reasons import Reason


class Finding(BaseModel):
    """A Reason flattened for JSON consumers."""

    location: str
    code: str                                    # ErrorType / RecommendationType value
    kind: Literal["error", "recommendation"]
    message: str                                 # Default English text

    @classmethod
    def from_reason(cls, reason: Reason) -> "Finding":
        return cls(
            location=reason.location,
            code=reason.type.value,
            kind="error" if reason.type.is_error else "recommendation",
            message=reason.message,
        )


class CheckReport(BaseModel):
    """Complete profile check report — the output of the check engine."""

    profile: str = Field(description="Short code of the profile that ran")
    passed: bool = Field(description="True if the alert has no profile errors")
    strict_xsd_validation: bool = False
    summary: dict = Field(
        description="Count of findings by kind",
        default_factory=lambda: {"errors": 0, "recommendations": 0},
    )
    errors: list[Finding] = Field(default_factory=list)
    recommendations: list[Finding] = Field(default_factory=list)
    verdict: str = Field(default="", description="Human-readable verdict")

    @classmethod
    def build(
        cls,
        profile: str,
        errors: tuple[Reason, ...],
        recommendations: tuple[Reason, ...],
        strict_xsd_validation: bool = False,
    ) -> "CheckReport":
        """Build a report from a profile's ordered findings (order is preserved)."""
        passed = not errors

        if passed and not recommendations:
            verdict = f"PASS — Alert conforms to the '{profile}' profile."
        elif passed:
            verdict = (
                f"PASS — Alert conforms to the '{profile}' profile "
                f"with {len(recommendations)} recommendation(s) to consider."
            )
        else:
            verdict = (
                f"FAIL — {len(errors)} error(s) must be resolved before "
                f"publishing under the '{profile}' profile."
            )

        return cls(
            profile=profile,
            passed=passed,
            strict_xsd_validation=strict_xsd_validation,
            summary={"errors": len(errors), "recommendations": len(recommendations)},
            errors=[Finding.from_reason(r) for r in errors],
            recommendations=[Finding.from_reason(r) for r in recommendations],
            verdict=verdict,
        )
