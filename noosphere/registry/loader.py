"""Registry loader — read the registry and its entry schemas from disk.

Loading is all-or-nothing: a missing or malformed file raises straight out
of here and nothing is validated.
"""

from __future__ import annotations

import json
from pathlib import Path

from noosphere.registry.models import RegistryDocument, RegistryPaths

CONTAINER_SCHEMA_PATH = Path("schemas") / "container-schema.json"
VERIFIER_SCHEMA_PATH = Path("schemas") / "verifier-schema.json"
REGISTRY_PATH = Path("registry.json")


def default_paths(base_dir: str | Path | None = None) -> RegistryPaths:
    """Build the input paths relative to base_dir (default: working directory)."""
    base = Path(base_dir) if base_dir else Path(".")
    return RegistryPaths(
        container_schema=base / CONTAINER_SCHEMA_PATH,
        verifier_schema=base / VERIFIER_SCHEMA_PATH,
        registry=base / REGISTRY_PATH,
    )


def load_json(path: str | Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_inputs(paths: RegistryPaths | None = None) -> tuple[dict, dict, RegistryDocument]:
    """Load the container schema, the verifier schema and the registry.

    Args:
        paths: Input locations. Defaults to the fixed paths under the
               current working directory.

    Returns:
        (container_schema, verifier_schema, registry)

    Raises:
        FileNotFoundError: If any of the three files is missing.
        json.JSONDecodeError: If any of the three files is not valid JSON.
        KeyError: If the registry has no 'containers' or 'verifiers' key.
        ValueError: If either of those is not a JSON object.
    """
    paths = paths or default_paths()

    container_schema = load_json(paths.container_schema)
    verifier_schema = load_json(paths.verifier_schema)
    registry = _to_document(load_json(paths.registry))

    return container_schema, verifier_schema, registry


def _to_document(data: dict) -> RegistryDocument:
    containers = data["containers"]
    verifiers = data["verifiers"]
    for section, value in (("containers", containers), ("verifiers", verifiers)):
        if not isinstance(value, dict):
            raise ValueError(
                f"Registry '{section}' must be an object, got {type(value).__name__}"
            )
    return RegistryDocument(
        version=data.get("version"),
        containers=containers,
        verifiers=verifiers,
    )
