"""The list of stations heard most recently."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from dmrstation.dmrids import DmrIdDirectory, parse_user

MAX_ENTRIES = 24
CALL_SIZE = 10
NAME_SIZE = 18
UNKNOWN_NAME = " - - "
NO_NAME = " "


@dataclass(frozen=True)
class LastHeardEntry:
    """A heard station: callsign (9 characters at most), name (17 at most) and talkgroup."""

    call: str
    name: str
    talkgroup: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "call", self.call[: CALL_SIZE - 1])
        object.__setattr__(self, "name", self.name[: NAME_SIZE - 1])


class LastHeard:
    """Heard stations, newest first, holding at most 24."""

    def __init__(self) -> None:
        self._entries: deque[LastHeardEntry] = deque(maxlen=MAX_ENTRIES)

    def add(self, entry: LastHeardEntry) -> None:
        """Put an entry at the top, dropping the oldest if the list is full."""
        self._entries.appendleft(entry)

    def add_by_id(
        self,
        dmr_id: int,
        talkgroup: int,
        directory: DmrIdDirectory | None = None,
    ) -> LastHeardEntry:
        """Add the station with ``dmr_id``, named from the directory when it is known."""
        record = directory.lookup(dmr_id) if directory is not None else None
        if record is not None:
            call, name = parse_user(record)
            entry = LastHeardEntry(call, name or NO_NAME, talkgroup)
        else:
            entry = LastHeardEntry(str(dmr_id), UNKNOWN_NAME, talkgroup)
        self.add(entry)
        return entry

    def __iter__(self) -> Iterator[LastHeardEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)