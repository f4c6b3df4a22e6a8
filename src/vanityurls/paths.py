"""Configured import paths and prefix lookup.

Paths are sorted once at construction. A lookup is a single lower-bound
search plus a check of the entry just before the insertion point. Only
that one entry is considered, so a configured ancestor hidden behind a
sibling (`/a` behind `/a/b` for `/a/c`) does not match.
"""

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True, slots=True)
class PathConfig:
    """One configured import path and the repository it points at.

    ``path`` never ends in ``/``.
    """

    path: str
    repo: str
    display: str
    vcs: str


class PathConfigSet(Sequence[PathConfig]):
    """Immutable, path-sorted collection of ``PathConfig``.

    Usage::

        paths = PathConfigSet([PathConfig("/pkg", repo, display, "git")])
        pc, subpath = paths.find("/pkg/sub/dir")
        # pc.path == "/pkg", subpath == "sub/dir"
    """

    __slots__ = ("_entries", "_keys")

    def __init__(self, entries: Iterable[PathConfig] = ()) -> None:
        ordered = tuple(sorted(entries, key=lambda pc: pc.path))
        self._entries = ordered
        self._keys = tuple(pc.path for pc in ordered)

    @overload
    def __getitem__(self, index: int) -> PathConfig: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PathConfig, ...]: ...

    def __getitem__(self, index: int | slice) -> PathConfig | tuple[PathConfig, ...]:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PathConfig]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathConfigSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"PathConfigSet({list(self._keys)!r})"

    @property
    def keys(self) -> tuple[str, ...]:
        """Configured paths in sorted order."""
        return self._keys

    def find(self, path: str) -> tuple[PathConfig | None, str]:
        """Match *path* against the configured paths.

        Returns the matched entry and the remainder of *path* below it
        (empty for an exact match), or ``(None, "")`` when nothing
        matches.
        """
        i = bisect_left(self._keys, path)
        if i < len(self._keys) and self._keys[i] == path:
            return self._entries[i], ""
        if i > 0:
            prev = self._entries[i - 1]
            prefix = prev.path + "/"
            if path.startswith(prefix):
                return prev, path[len(prefix) :]
        return None, ""
