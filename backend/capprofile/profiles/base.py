"""Profile contract — the interface every CAP profile implements.

A profile is a named set of semantic rules layered on top of the CAP schema.
Implementations are independent and stateless: the only configuration is the
strictness flag, fixed at construction.
"""

from abc import ABC, abstractmethod

from capprofile.models.alert import Alert
from capprofile.profiles.reasons import Reason


class CapProfile(ABC):
    """Abstract CAP profile.

    Contract:
        - check_for_errors() / check_for_recommendations() are deterministic:
          same alert → same ordered findings
        - they never mutate the alert and never raise for a valid document
        - every violated rule is reported; evaluation never stops early
        - an empty result means full compliance for that taxonomy
    """

    def __init__(self, strict_xsd_validation: bool = False):
        """
        Args:
            strict_xsd_validation: If True, only by-the-spec schema validation
                applies and the profile's extra semantic rules are skipped.
                If False (the default), every profile rule runs.
        """
        self._strict_xsd_validation = strict_xsd_validation

    @property
    def strict_xsd_validation(self) -> bool:
        return self._strict_xsd_validation

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable profile name."""
        ...

    @property
    @abstractmethod
    def code(self) -> str:
        """Short code — the profile's canonical string form."""
        ...

    @property
    @abstractmethod
    def documentation_url(self) -> str:
        ...

    @abstractmethod
    def check_for_errors(self, alert: Alert) -> tuple[Reason, ...]:
        """Apply the profile's "must" rules.

        Returns:
            Ordered error findings (empty if compliant)
        """
        ...

    @abstractmethod
    def check_for_recommendations(self, alert: Alert) -> tuple[Reason, ...]:
        """Apply the profile's "should" rules.

        Returns:
            Ordered recommendation findings (empty if none)
        """
        ...

    def __str__(self) -> str:
        return self.code
