"""Connection state machine for a homebrew repeater master.

The session does no input or output of its own. Packets go out through the
``send`` callable it is given. Datagrams from the master are passed to
:meth:`HomebrewSession.handle_datagram`, and :meth:`HomebrewSession.tick`
is called once a second. Both return the events the user interface reacts to.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from dmrstation.defines import DataType
from dmrstation.protocol import (
    DMRD_LENGTH,
    MAGIC_ACK,
    MAGIC_CLOSING,
    MAGIC_DMRD,
    MAGIC_NAK,
    MAGIC_PONG,
    FrameType,
    NetStatus,
    build_authorisation,
    build_config,
    build_login,
    build_ping,
    parse_dmrd,
)

logger = logging.getLogger(__name__)

PING_TICKS = 5
PONG_TICKS = 25
RECONNECT_TICKS = 15
INACTIVITY_TICKS = 3

_SALT_OFFSET = len(MAGIC_ACK)
_SALT_LENGTH = 4


@dataclass(frozen=True)
class SessionEvent:
    """Something the session reports to the user interface."""

    class Kind(Enum):
        STATUS = auto()
        CALL_START = auto()
        CALL_STOP = auto()
        VOICE = auto()
        ACTIVATE_TALKGROUP = auto()
        MASTER_CLOSING = auto()

    kind: SessionEvent.Kind
    status: NetStatus | None = None
    src: int = 0
    dst: int = 0
    payload: bytes = b""


class HomebrewSession:
    """Logs in to a master, keeps the link alive and follows incoming calls."""

    def __init__(
        self,
        send: Callable[[bytes], object],
        repeater_id: int,
        callsign: str,
        password: str | bytes,
        dmr_id: int,
        talkgroup: int = 0,
    ) -> None:
        self._send = send
        self.repeater_id = repeater_id
        self.callsign = callsign
        self._password = password
        self.dmr_id = dmr_id
        self.talkgroup = talkgroup
        self.status = NetStatus.WAITING_CONNECT
        self.receiving = False
        self.last_src = 0
        self.last_dst = 0
        self._ping_timer = 0
        self._pong_timeout = 0
        self._reconnect_timer = 0
        self._inactivity = 0

    def _set_status(self, status: NetStatus) -> list[SessionEvent]:
        self.status = status
        return [SessionEvent(SessionEvent.Kind.STATUS, status=status)]

    def _login(self) -> list[SessionEvent]:
        self._send(build_login(self.repeater_id))
        return self._set_status(NetStatus.WAITING_LOGIN)

    def start(self) -> list[SessionEvent]:
        """Send the login request."""
        return self._login()

    def handle_datagram(self, data: bytes) -> list[SessionEvent]:
        """React to one datagram from the master."""
        if not data:
            return []
        self._pong_timeout = 0
        if data.startswith(MAGIC_ACK):
            return self._handle_ack(data)
        if data.startswith(MAGIC_PONG):
            self._ping_timer = 0
            return []
        if data.startswith(MAGIC_CLOSING):
            logger.info("Master closing")
            return [SessionEvent(SessionEvent.Kind.MASTER_CLOSING)]
        if data.startswith(MAGIC_NAK):
            logger.warning("Master refused the session")
            return self._set_status(NetStatus.WAITING_LOGIN)
        if data.startswith(MAGIC_DMRD):
            return self._handle_dmrd(data)
        return []

    def _handle_ack(self, data: bytes) -> list[SessionEvent]:
        if self.status == NetStatus.WAITING_LOGIN:
            salt = bytes(data[_SALT_OFFSET : _SALT_OFFSET + _SALT_LENGTH])
            if len(salt) != _SALT_LENGTH:
                logger.warning("Login acknowledgement without a salt")
                return []
            self._send(build_authorisation(self.repeater_id, salt, self._password))
            return self._set_status(NetStatus.WAITING_AUTHORISATION)
        if self.status == NetStatus.WAITING_AUTHORISATION:
            self._send(build_config(self.repeater_id, self.callsign))
            return self._set_status(NetStatus.WAITING_CONFIG)
        if self.status == NetStatus.WAITING_CONFIG:
            events = self._set_status(NetStatus.RUNNING)
            events.append(
                SessionEvent(
                    SessionEvent.Kind.ACTIVATE_TALKGROUP, src=self.dmr_id, dst=self.talkgroup
                )
            )
            return events
        return []

    def _call_start(self, src: int, dst: int) -> list[SessionEvent]:
        self.last_src = src
        self.last_dst = dst
        return [SessionEvent(SessionEvent.Kind.CALL_START, src=src, dst=dst)]

    def _handle_dmrd(self, data: bytes) -> list[SessionEvent]:
        if len(data) < DMRD_LENGTH:
            return []
        packet = parse_dmrd(data)
        self._inactivity = 0
        if packet.frame_type in (FrameType.VOICE, FrameType.VOICE_SYNC):
            events: list[SessionEvent] = []
            if not self.receiving:
                self.receiving = True
                events.extend(self._call_start(packet.src, packet.dst))
            events.append(SessionEvent(SessionEvent.Kind.VOICE, payload=packet.payload))
            return events
        if packet.frame_type == FrameType.DATA_SYNC:
            if packet.data_type == DataType.VOICE_LC_HEADER:
                self.receiving = True
                return self._call_start(packet.src, packet.dst)
            if packet.data_type == DataType.TERMINATOR_WITH_LC:
                self.receiving = False
                return [SessionEvent(SessionEvent.Kind.CALL_STOP, src=packet.src, dst=packet.dst)]
        return []

    def tick(self) -> list[SessionEvent]:
        """Advance the one-second timers: inactivity, pings, pong timeout and reconnection."""
        if self.status != NetStatus.RUNNING:
            self._reconnect_timer += 1
            if self._reconnect_timer >= RECONNECT_TICKS:
                self._reconnect_timer = 0
                return self._login()
            return []

        events: list[SessionEvent] = []
        self._inactivity += 1
        if self._inactivity >= INACTIVITY_TICKS and self.last_src != 0:
            self.last_src = 0
            self._inactivity = 0
            events.append(SessionEvent(SessionEvent.Kind.CALL_STOP, src=0, dst=self.talkgroup))

        self._ping_timer += 1
        if self._ping_timer >= PING_TICKS:
            self._ping_timer = 0
            self._send(build_ping(self.repeater_id))

        self._pong_timeout += 1
        if self._pong_timeout >= PONG_TICKS:
            logger.warning("Ping timeout")
            events.extend(self._set_status(NetStatus.WAITING_CONNECT))
            self._reconnect_timer = 0
        return events