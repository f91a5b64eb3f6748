"""Profile document -> Identity mapping driven by a per-provider field table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from socialgate.core.document import Path, ProfileDocument
from socialgate.core.errors import MalformedResponse
from socialgate.core.schemas import Identity

UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Copy the value at ``path`` into ``properties[key]``.

    An absent optional field falls back to ``default``; with no default the
    property is left out. An absent required field fails the mapping.
    """

    key: str
    path: Path
    required: bool = False
    default: str | None = None


def _is_absent(value: Any) -> bool:
    # Empty strings count as missing, same as absent keys and JSON null
    return value is None or value == ""


def _describe(path: Path) -> str:
    return path if isinstance(path, str) else ".".join(str(p) for p in path)


def _scalar(value: Any, path: Path) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise MalformedResponse(
        f"Profile field '{_describe(path)}' is not a scalar value",
        field=_describe(path),
    )


@dataclass(frozen=True, slots=True)
class IdentityMapper:
    """Generic mapping algorithm; providers only differ by their table.

    Args:
        id_path: Path to the provider-native user id (required).
        fields: Property rules applied in order.
    """

    id_path: Path = "id"
    fields: tuple[FieldRule, ...] = ()

    def map(self, document: ProfileDocument, provider_name: str) -> Identity:
        """Build the Identity, or raise before anything is constructed.

        Raises:
            MalformedResponse: Missing native id or required field.
        """
        native_id = document.get(self.id_path)
        if _is_absent(native_id):
            raise MalformedResponse(
                f"No user id '{_describe(self.id_path)}' in {provider_name} profile",
                field=_describe(self.id_path),
            )
        native_id = _scalar(native_id, self.id_path)

        properties: dict[str, str] = {}
        for rule in self.fields:
            value = document.get(rule.path)
            if _is_absent(value):
                if rule.required:
                    raise MalformedResponse(
                        f"Required field '{_describe(rule.path)}' missing from {provider_name} profile",
                        field=_describe(rule.path),
                    )
                if rule.default is not None:
                    properties[rule.key] = rule.default
                continue
            properties[rule.key] = _scalar(value, rule.path)

        return Identity.build(provider_name, native_id, properties)


def display_fields(name_path: Path, picture_path: Path, *extra: FieldRule) -> tuple[FieldRule, ...]:
    """The common table: ``name`` defaulting to ``"unknown"`` plus an optional ``picture``."""
    return (
        FieldRule("name", name_path, default=UNKNOWN),
        FieldRule("picture", picture_path),
        *extra,
    )
