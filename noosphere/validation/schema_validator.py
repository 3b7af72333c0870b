"""Schema validator — structural validation of registry entries using JSON Schema.

Each entry kind has its own schema. Schemas are compiled once per run and
applied to every entry of that kind; a schema that is itself invalid is a
fatal error.
"""

from __future__ import annotations

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from noosphere.registry.models import (
    CONTAINER,
    VERIFIER,
    EntryResult,
    RegistryDocument,
    SchemaIssue,
    ValidationReport,
)


def compile_validator(schema: dict) -> Validator:
    """Build a validator for schema, with format checking enabled.

    The dialect is taken from the schema's ``$schema`` keyword, falling back
    to Draft 7 when none is declared.

    Raises:
        jsonschema.SchemaError: If the schema is not a valid JSON Schema.
    """
    cls = validator_for(schema, default=Draft7Validator)
    cls.check_schema(schema)
    return cls(schema, format_checker=FormatChecker())


def validate_entry(validator: Validator, entry) -> list[SchemaIssue]:
    """Validate a single entry. Empty list means valid."""
    errors = sorted(validator.iter_errors(entry), key=lambda e: list(map(str, e.absolute_path)))
    return [
        SchemaIssue(
            path=_pointer(e.absolute_path),
            message=e.message,
            keyword=str(e.validator),
            schema_path="#" + _pointer(e.absolute_schema_path),
        )
        for e in errors
    ]


def validate_registry(
    registry: RegistryDocument,
    container_schema: dict,
    verifier_schema: dict,
) -> ValidationReport:
    """Validate every container and verifier entry in the registry.

    All entries are checked; a failing entry never stops the ones after it.
    """
    report = ValidationReport(version=registry.version)

    container_validator = compile_validator(container_schema)
    for key, entry in registry.containers.items():
        report.containers.append(_check(CONTAINER, key, entry, container_validator))

    verifier_validator = compile_validator(verifier_schema)
    for key, entry in registry.verifiers.items():
        report.verifiers.append(_check(VERIFIER, key, entry, verifier_validator))

    return report


def _check(kind: str, key: str, entry, validator: Validator) -> EntryResult:
    name = entry.get("name", "") if isinstance(entry, dict) else ""
    return EntryResult(
        kind=kind,
        key=key,
        name=str(name),
        errors=validate_entry(validator, entry),
    )


def _pointer(parts) -> str:
    """Render a path deque as a JSON pointer ("" for the root)."""
    return "".join(
        "/" + str(p).replace("~", "~0").replace("/", "~1") for p in parts
    )
