"""Edit session: a caller-owned overlay of edited values.

Declarations are immutable snapshots of the original text. An EditSession
keeps the proposed values separately, keyed by declaration id, and seeds
them with the original values so that "reset" is just re-seeding.

Example:
    >>> session = EditSession(":root{--a: 1px; --b: 2px;}")
    >>> session.set_by_name("--a", " 3px")
    1
    >>> session.render()
    ':root{--a: 3px; --b: 2px;}'

Thread Safety:
    EditSession is mutable and not thread-safe. Use one per editor.

"""

from __future__ import annotations

from collections.abc import Mapping

from cssvars.declaration import Declaration
from cssvars.errors import UnknownDeclarationError
from cssvars.patcher import Change, changed_declarations, patch


class EditSession:
    """Scan a stylesheet once and track edits against its declarations."""

    __slots__ = ("_source", "_source_file", "_declarations", "_by_id", "_values")

    def __init__(self, source: str, *, source_file: str | None = None) -> None:
        from cssvars import scan

        self._source = source
        self._source_file = source_file
        self._declarations: tuple[Declaration, ...] = tuple(
            scan(source, source_file=source_file)
        )
        self._by_id: dict[str, Declaration] = {d.id: d for d in self._declarations}
        self._values: dict[str, str] = {}
        self.reset()

    @property
    def source(self) -> str:
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return self._declarations

    @property
    def values(self) -> Mapping[str, str]:
        """Copy of the current id -> value overlay."""
        return dict(self._values)

    def find(self, declaration_id: str) -> Declaration | None:
        return self._by_id.get(declaration_id)

    def _require(self, declaration_id: str) -> Declaration:
        declaration = self._by_id.get(declaration_id)
        if declaration is None:
            raise UnknownDeclarationError(declaration_id)
        return declaration

    def get(self, declaration_id: str) -> str:
        self._require(declaration_id)
        return self._values[declaration_id]

    def set(self, declaration_id: str, value: str) -> None:
        """Propose a new raw value for one declaration.

        Raises:
            UnknownDeclarationError: If the id is not from this session's scan.
        """
        self._require(declaration_id)
        self._values[declaration_id] = value

    def set_by_name(self, name: str, value: str, selector: str | None = None) -> int:
        """Propose a value for every declaration with the given name.

        Args:
            name: Custom-property name including ``--``
            value: New raw value
            selector: Restrict to declarations under this selector

        Returns:
            Number of declarations updated.
        """
        count = 0
        for declaration in self._declarations:
            if declaration.name != name:
                continue
            if selector is not None and declaration.selector != selector:
                continue
            self._values[declaration.id] = value
            count += 1
        return count

    def reset(self) -> None:
        """Discard all edits, restoring every original value."""
        self._values = {d.id: d.value for d in self._declarations}

    def reset_value(self, declaration_id: str) -> None:
        declaration = self._require(declaration_id)
        self._values[declaration_id] = declaration.value

    def is_modified(self, declaration_id: str) -> bool:
        declaration = self._require(declaration_id)
        return self._values[declaration_id] != declaration.value

    @property
    def modified(self) -> bool:
        return any(self._values[d.id] != d.value for d in self._declarations)

    def changes(self) -> list[Change]:
        """Change log: declarations whose value differs, in source order."""
        return changed_declarations(self._declarations, self._values)

    def filter(self, term: str) -> list[Declaration]:
        """Declarations whose name or selector contains term (case-insensitive)."""
        needle = term.lower()
        return [
            d
            for d in self._declarations
            if needle in d.name.lower() or needle in d.selector.lower()
        ]

    def render(self) -> str:
        """Materialize the fully patched document."""
        return patch(self._source, self._declarations, self._values)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return (
            f"EditSession({len(self._declarations)} declaration(s), "
            f"{len(self.changes())} change(s))"
        )
