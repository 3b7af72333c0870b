"""Registry data models — the registry document and validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

CONTAINER = "container"
VERIFIER = "verifier"

KEY_PREVIEW_LENGTH = 10


@dataclass
class RegistryPaths:
    """Locations of the three input files."""

    container_schema: Path
    verifier_schema: Path
    registry: Path


@dataclass
class RegistryDocument:
    """The parsed registry file."""

    version: object = None
    containers: dict[str, object] = field(default_factory=dict)  # keyed by identifier
    verifiers: dict[str, object] = field(default_factory=dict)  # keyed by address


@dataclass
class SchemaIssue:
    """A single schema-validation error reported for an entry."""

    path: str  # JSON pointer into the entry, "" for the entry itself
    message: str
    keyword: str = ""
    schema_path: str = ""

    def __str__(self) -> str:
        return f"{self.path or '/'}: {self.message} (keyword: {self.keyword}, schema: {self.schema_path})"


@dataclass
class EntryResult:
    """Outcome of validating one container or verifier entry."""

    kind: str
    key: str
    name: str = ""
    errors: list[SchemaIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def short_key(self) -> str:
        return f"{self.key[:KEY_PREVIEW_LENGTH]}..."


@dataclass
class ValidationReport:
    """Full result of a registry validation run."""

    version: object = None
    containers: list[EntryResult] = field(default_factory=list)
    verifiers: list[EntryResult] = field(default_factory=list)

    @property
    def valid_containers(self) -> int:
        return sum(1 for r in self.containers if r.passed)

    @property
    def valid_verifiers(self) -> int:
        return sum(1 for r in self.verifiers if r.passed)

    @property
    def failures(self) -> list[EntryResult]:
        return [r for r in self.containers + self.verifiers if not r.passed]

    @property
    def is_valid(self) -> bool:
        """True only when every container and verifier entry passed."""
        return not self.failures

    def summary(self) -> str:
        lines = [
            f"Containers: {self.valid_containers}",
            f"Verifiers: {self.valid_verifiers}",
            f"Registry version: {self.version}",
        ]
        return "\n".join(lines)
