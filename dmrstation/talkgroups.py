"""The talkgroup list offered for selection."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dmrstation.dmrids import _parse_record

DEFAULT_TALKGROUPS_FILE = "tgs.dat"
MAX_TALKGROUPS = 150
NAME_SIZE = 12
DISPLAY_SIZE = 20
PRIVATE_MARK = "*"


@dataclass(frozen=True)
class Talkgroup:
    """A talkgroup id and its short name (at most 11 characters)."""

    id: int
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name[: NAME_SIZE - 1])

    def display_name(self) -> str:
        """Text shown in the list: the name alone for private entries, else id and name."""
        if self.name.startswith(PRIVATE_MARK):
            text = self.name
        else:
            text = f"{self.id} {self.name}"
        return text[: DISPLAY_SIZE - 1]

    def is_private(self) -> bool:
        """Whether selecting this entry makes a private call rather than a group call."""
        return PRIVATE_MARK in self.display_name()


class TalkgroupList:
    """Ordered talkgroups, holding at most 150; a full list drops its last entry."""

    def __init__(self, talkgroups: Iterable[Talkgroup] = ()) -> None:
        self._talkgroups: list[Talkgroup] = []
        for talkgroup in talkgroups:
            self.add(talkgroup)

    @classmethod
    def with_defaults(cls) -> TalkgroupList:
        """A list holding the fixed entries: disconnect and the parrot echo service."""
        return cls([Talkgroup(4000, "Disconnect"), Talkgroup(9990, "*Parrot")])

    def add(self, talkgroup: Talkgroup) -> None:
        """Append a talkgroup, first removing the last one if the list is full."""
        if len(self._talkgroups) >= MAX_TALKGROUPS:
            self._talkgroups.pop()
        self._talkgroups.append(talkgroup)

    def load_lines(self, lines: Iterable[str]) -> None:
        """Add talkgroups from lines of ``<id> <name>``."""
        for line in lines:
            record = _parse_record(line)
            if record is not None:
                tg_id, name = record
                self.add(Talkgroup(tg_id, name))

    def load(self, path: str | os.PathLike[str] = DEFAULT_TALKGROUPS_FILE) -> bool:
        """Add talkgroups from a file; return False if the file does not exist."""
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                self.load_lines(handle)
        except FileNotFoundError:
            return False
        return True

    def __iter__(self) -> Iterator[Talkgroup]:
        return iter(self._talkgroups)

    def __len__(self) -> int:
        return len(self._talkgroups)

    def __getitem__(self, index):
        return self._talkgroups[index]