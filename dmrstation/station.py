"""Texts and values the station's display shows."""

from __future__ import annotations

from dataclasses import dataclass

from dmrstation.dmrids import DmrIdDirectory, parse_user

LABEL_SIZE = 30
TIMER_TEXT_SIZE = 10
VOLUME_MAX = 65535


def format_talkgroup_label(talkgroup: int, private: bool = False) -> str:
    """``TG <n>`` for a group call, ``PC <n>`` for a private one, blank for talkgroup 0."""
    if talkgroup == 0:
        return " "
    prefix = "PC" if private else "TG"
    return f"{prefix} {talkgroup}"[: LABEL_SIZE - 1]


def format_caller_label(src: int, directory: DmrIdDirectory | None = None) -> str:
    """Callsign and name of a caller on two lines, or ``ID: <n>`` when unknown."""
    record = directory.lookup(src) if directory is not None else None
    if record is None:
        text = f"ID: {src}"
    else:
        call, name = parse_user(record)
        text = f"{call}\n{name}" if name else call
    return text[: LABEL_SIZE - 1]


def volume_from_percent(percent: float) -> int:
    """Convert a slider position in percent to a 16-bit volume."""
    if percent < 0:
        raise ValueError(f"volume cannot be negative: {percent}")
    return int(VOLUME_MAX * percent / 100)


@dataclass(frozen=True)
class TimeoutTimer:
    """Transmit time-out display; a limit of 0 means no limit."""

    limit: int = 0
    reverse: bool = False

    def initial_text(self) -> str:
        """Text shown when transmission starts."""
        if self.limit != 0 and self.reverse:
            return str(self.limit)[: TIMER_TEXT_SIZE - 1]
        return "0"

    def display(self, elapsed: float) -> tuple[str, bool]:
        """Return the text for ``elapsed`` seconds and whether the limit is exceeded."""
        seconds = int(elapsed)
        expired = False
        if self.limit != 0:
            expired = seconds > self.limit
            if self.reverse:
                seconds = self.limit - seconds
        return str(seconds)[: TIMER_TEXT_SIZE - 1], expired