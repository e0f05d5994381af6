"""Module map collaborator: registries of mocks and duplicate modules.

The resolver only reads from the map. Keys are exact, case-sensitive
module names; no normalization is applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ModuleMapLike(Protocol):
    """Read-only lookup interface consumed by the resolver."""

    def lookup_mock(self, name: str) -> str | None: ...

    def lookup_duplicate(self, name: str) -> str | None: ...


class ModuleMap:
    """In-memory module map.

    Args:
        mocks: Module name -> absolute path of its mock
        duplicates: Module name -> absolute path registered for that name
    """

    def __init__(
        self,
        mocks: Mapping[str, str] | None = None,
        duplicates: Mapping[str, str] | None = None,
    ):
        self._mocks: dict[str, str] = dict(mocks or {})
        self._duplicates: dict[str, str] = dict(duplicates or {})

    def lookup_mock(self, name: str) -> str | None:
        return self._mocks.get(name)

    def lookup_duplicate(self, name: str) -> str | None:
        return self._duplicates.get(name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ModuleMap:
        """Create from a settings dictionary with ``mocks`` and ``duplicates`` keys."""
        data = data or {}
        return cls(mocks=data.get("mocks") or {}, duplicates=data.get("duplicates") or {})

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"mocks": dict(self._mocks), "duplicates": dict(self._duplicates)}

    def __len__(self) -> int:
        return len(self._mocks) + len(self._duplicates)

    def __repr__(self) -> str:
        return f"ModuleMap(mocks={len(self._mocks)}, duplicates={len(self._duplicates)})"
