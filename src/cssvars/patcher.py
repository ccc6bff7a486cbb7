"""Span patcher: rewrite declaration values in place.

Applies edits to the original stylesheet text by replacing only the value
spans reported by the scanner. Every other character is reproduced
verbatim. The patcher never re-scans; it trusts the offsets it is given.

Spans are spliced in descending ``start_index`` order so that replacing
one span never shifts the offsets of a span still waiting to be applied.

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from cssvars.declaration import Declaration
from cssvars.utils.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Change:
    """A declaration paired with an edited value that differs from it."""

    declaration: Declaration
    new_value: str

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def selector(self) -> str:
        return self.declaration.selector

    @property
    def old_value(self) -> str:
        return self.declaration.value


def _edited_value(declaration: Declaration, edits: Mapping[str, str]) -> str | None:
    """Return the edit for declaration, or None when it would change nothing."""
    new_value = edits.get(declaration.id)
    if new_value is None or new_value == declaration.value:
        return None
    return new_value


def patch(
    original: str,
    declarations: Iterable[Declaration],
    edits: Mapping[str, str],
) -> str:
    """Replace edited value spans in the original text.

    Args:
        original: Source text the declarations were scanned from
        declarations: Declarations from a single scan of ``original``
        edits: Declaration id -> proposed value. Unknown ids are ignored;
            values identical to the original leave the span untouched.

    Returns:
        New text with only the edited value spans changed.

    Example:
        >>> text = ":root{--a: 1px; --b: 2px;}"
        >>> decls = scan(text)
        >>> patch(text, decls, {decls[0].id: " 3px"})
        ':root{--a: 3px; --b: 2px;}'

    """
    ordered = sorted(declarations, key=lambda d: d.start_index, reverse=True)

    patched = original
    applied = 0
    for declaration in ordered:
        new_value = _edited_value(declaration, edits)
        if new_value is None:
            continue
        patched = (
            patched[: declaration.start_index]
            + new_value
            + patched[declaration.end_index :]
        )
        applied += 1

    log.debug("Applied %d of %d edit(s)", applied, len(edits))
    return patched


def changed_declarations(
    declarations: Iterable[Declaration],
    edits: Mapping[str, str],
) -> list[Change]:
    """List the declarations whose edit differs from the original value.

    Args:
        declarations: Declarations from a single scan
        edits: Declaration id -> proposed value

    Returns:
        Changes in source order.
    """
    changes: list[Change] = []
    for declaration in sorted(declarations, key=lambda d: d.start_index):
        new_value = _edited_value(declaration, edits)
        if new_value is not None:
            changes.append(Change(declaration=declaration, new_value=new_value))
    return changes


__all__ = ["Change", "changed_declarations", "patch"]
