"""Directory of DMR user ids read from a ``DMRIds.dat`` style file."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

DEFAULT_IDS_FILE = "DMRIds.dat"


def _atoi(text: str) -> int:
    """Read a leading decimal integer the way ``atoi`` does, 0 when there is none."""
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _parse_record(line: str) -> tuple[int, str] | None:
    """Split a ``<number> <text>`` line into its key and value, or None if it has no value."""
    stripped = line.lstrip(" ")
    if not stripped:
        return None
    key_text, _, rest = stripped.partition(" ")
    value = rest.lstrip("\n").split("\n", 1)[0]
    if not value:
        return None
    return _atoi(key_text), value


def parse_user(entry: str) -> tuple[str, str | None]:
    """Split a directory entry into its callsign and the name after it, if any."""
    stripped = entry.lstrip(" ")
    call, _, rest = stripped.partition(" ")
    return call, (rest or None)


class DmrIdDirectory:
    """Maps DMR ids to the ``callsign name`` text recorded for them."""

    def __init__(self, entries: dict[int, str] | None = None) -> None:
        self._entries: dict[int, str] = dict(entries or {})

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DmrIdDirectory:
        """Build a directory from lines of ``<id> <callsign> <name>``; later ids win."""
        entries: dict[int, str] = {}
        for line in lines:
            record = _parse_record(line)
            if record is not None:
                key, value = record
                entries[key] = value
        return cls(entries)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str] = DEFAULT_IDS_FILE) -> DmrIdDirectory:
        """Read a directory file; a missing file gives an empty directory."""
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                return cls.from_lines(handle)
        except FileNotFoundError:
            return cls()

    def lookup(self, dmr_id: int) -> str | None:
        """Return the entry recorded for ``dmr_id``, or None."""
        return self._entries.get(dmr_id)

    def __contains__(self, dmr_id: object) -> bool:
        return dmr_id in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)