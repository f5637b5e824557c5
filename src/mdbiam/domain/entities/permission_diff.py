"""Permission diff - required vs effective action sets."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionDiff:
    """Three-way partition of required and effective actions.

    extra   = effective - required
    missing = required - effective
    present = required & effective
    """

    extra: frozenset[str] = frozenset()
    missing: frozenset[str] = frozenset()
    present: frozenset[str] = frozenset()

    @classmethod
    def compute(cls, required: Iterable[str], effective: Iterable[str]) -> "PermissionDiff":
        """Diff required actions against the effective set. Pure, no I/O."""
        required_set = frozenset(required)
        effective_set = frozenset(effective)
        return cls(
            extra=effective_set - required_set,
            missing=required_set - effective_set,
            present=required_set & effective_set,
        )

    @classmethod
    def empty(cls) -> "PermissionDiff":
        """Result returned when verification could not run."""
        return cls()

    def to_dict(self) -> dict[str, list[str]]:
        """Sorted lists, for JSON output."""
        return {
            "extra": sorted(self.extra),
            "missing": sorted(self.missing),
            "present": sorted(self.present),
        }
