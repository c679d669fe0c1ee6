"""Violations found while checking a network manifest before generation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Severity(enum.Enum):
    """How a violation affects `netbindgen generate`."""

    ERROR = "error"      # Blocks generation unless --force
    WARNING = "warning"


@dataclass(frozen=True)
class NetworkViolation:
    """A problem with one [[networks]] entry of the manifest.

    Attributes:
        severity: Whether this blocks generation or just warns.
        code: Machine-readable violation code (e.g. 'duplicate_name').
        message: Human-readable description of the violation.
        index: Position of the entry in the manifest, which is also its
            position in the generated module.
        network: The entry's name, when it has a usable one.
        field: The Network field at fault (e.g. 'url').
    """

    severity: Severity
    code: str
    message: str
    index: int
    network: str = ""
    field: str = ""

    @property
    def location(self) -> str:
        """Where the violation is, e.g. 'networks[2].url (base)'."""
        loc = f"networks[{self.index}]"
        if self.field:
            loc += f".{self.field}"
        if self.network:
            loc += f" ({self.network})"
        return loc

    def __str__(self) -> str:
        return f"{self.severity.value.upper()} {self.location}: {self.message}"


@dataclass
class ManifestValidation:
    """All violations found in one manifest, in manifest order."""

    violations: list[NetworkViolation] = field(default_factory=list)

    def add(self, violation: NetworkViolation) -> None:
        self.violations.append(violation)

    def extend(self, other: ManifestValidation) -> None:
        self.violations.extend(other.violations)

    @property
    def errors(self) -> list[NetworkViolation]:
        return [v for v in self.violations if v.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[NetworkViolation]:
        return [v for v in self.violations if v.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    def codes(self) -> list[str]:
        return [v.code for v in self.violations]

    def for_network(self, index: int) -> list[NetworkViolation]:
        """Return the violations reported against manifest entry `index`."""
        return [v for v in self.violations if v.index == index]

    def report(self) -> str:
        """Generate a report grouped by manifest entry.

        Field checks and cross-network checks run as separate passes, so
        grouping by index keeps everything about one network together.
        """
        if not self.violations:
            return "No violations found."

        indices = sorted({v.index for v in self.violations})
        lines = [
            f"{len(self.errors)} error(s), {len(self.warnings)} warning(s) "
            f"in {len(indices)} network(s):"
        ]
        for index in indices:
            lines.extend(f"  {v}" for v in self.for_network(index))
        return "\n".join(lines)
