"""Declaration serialization and edits-document loading.

Converts Declaration records to/from JSON-compatible dicts, and reads the
edits documents accepted by the command line.

All output is deterministic (sorted keys).

Example:
    from cssvars import scan
    from cssvars.serialization import to_json, from_json

    declarations = scan(":root{--a: 1px;}")
    assert from_json(to_json(declarations)) == declarations

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from cssvars.declaration import Declaration
from cssvars.errors import EditsFileError

_DECLARATION_TYPE = "Declaration"


def to_dict(declaration: Declaration) -> dict[str, Any]:
    """Convert a Declaration to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    """
    result: dict[str, Any] = {"_type": _DECLARATION_TYPE}
    for f in fields(declaration):
        result[f.name] = getattr(declaration, f.name)
    return result


def from_dict(data: dict[str, Any]) -> Declaration:
    """Reconstruct a Declaration from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or not a Declaration.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized declaration"
        raise ValueError(msg)
    if type_name != _DECLARATION_TYPE:
        msg = f"Unknown record type: {type_name!r}"
        raise ValueError(msg)

    kwargs = {f.name: data[f.name] for f in fields(Declaration) if f.name in data}
    return Declaration(**kwargs)


def to_json(declarations: Iterable[Declaration], *, indent: int | None = None) -> str:
    """Serialize declarations to a JSON array string."""
    return json.dumps(
        [to_dict(d) for d in declarations], sort_keys=True, indent=indent
    )


def from_json(data: str) -> list[Declaration]:
    """Deserialize declarations from a JSON array string.

    Raises:
        ValueError: If the JSON is not an array of declarations.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


def load_edits(text: str, source_file: str | None = None) -> dict[str, str]:
    """Parse an edits document mapping property names to new values.

    Accepts either ``{"--name": "value", ...}`` or
    ``{"edits": {"--name": "value", ...}}``.

    Raises:
        EditsFileError: If the text is not JSON or has the wrong shape.

    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EditsFileError(f"Invalid JSON: {exc}", source_file) from exc

    if isinstance(raw, dict) and isinstance(raw.get("edits"), dict):
        raw = raw["edits"]
    if not isinstance(raw, dict):
        raise EditsFileError(
            f"Expected a JSON object, got {type(raw).__name__}", source_file
        )

    edits: dict[str, str] = {}
    for name, value in raw.items():
        if not isinstance(value, str):
            raise EditsFileError(
                f"Value for {name!r} must be a string, got {type(value).__name__}",
                source_file,
            )
        edits[name] = value
    return edits
