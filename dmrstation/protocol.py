"""Homebrew repeater protocol packets: login, authorisation, configuration, pings and DMRD frames."""

from __future__ import annotations

import hashlib
import logging
from collections import deque
from dataclasses import dataclass
from enum import IntEnum

from dmrstation.defines import DMR_FRAME_LENGTH_BYTES, DMR_SILENCE_DATA

logger = logging.getLogger(__name__)

DMRD_LENGTH = 53
PAYLOAD_OFFSET = 20
AMBE72_LENGTH = 27
QUEUE_CAPACITY = 50

LOGIN_LENGTH = 8
PING_LENGTH = 11
AUTHORISATION_LENGTH = 40
CONFIG_LENGTH = 302

MAGIC_DMRD = b"DMRD"
MAGIC_LOGIN = b"RPTL"
MAGIC_AUTHORISATION = b"RPTK"
MAGIC_CONFIG = b"RPTC"
MAGIC_PING = b"RPTPING"
MAGIC_ACK = b"RPTACK"
MAGIC_PONG = b"MSTPONG"
MAGIC_CLOSING = b"MSTCL"
MAGIC_NAK = b"MSTNAK"

SILENCE_FRAME = DMR_SILENCE_DATA[2:]

# Station description sent in the configuration packet.
RX_FREQUENCY = 430812500
TX_FREQUENCY = 430812500
TX_POWER = 10
COLOUR_CODE = 1
LATITUDE = " 41.4016"
LONGITUDE = "  -2.1830"
HEIGHT = 0
LOCATION = "Earth"
DESCRIPTION = "DMRStation"
SLOTS = "4"
STATION_URL = ""
SOFTWARE_ID = "20200430"
PACKAGE_ID = "MMDVM_DMRSTATION"

_SLOT2_FLAG = 0x80
_PRIVATE_FLAG = 0x40


class NetStatus(IntEnum):
    """States of the connection to the master."""

    WAITING_CONNECT = 0
    WAITING_LOGIN = 1
    WAITING_AUTHORISATION = 2
    WAITING_CONFIG = 3
    WAITING_OPTIONS = 4
    RUNNING = 5


class FrameType(IntEnum):
    """Frame type carried in bits 5..4 of the DMRD flags byte."""

    VOICE = 0
    VOICE_SYNC = 1
    DATA_SYNC = 2
    RESERVED = 3


@dataclass(frozen=True)
class DmrdPacket:
    """The fields of a received DMRD packet."""

    sequence: int
    src: int
    dst: int
    repeater_id: int
    slot: int
    private: bool
    frame_type: FrameType
    data_type: int
    stream_id: int
    payload: bytes


def _repeater_bytes(repeater_id: int) -> bytes:
    return (repeater_id & 0xFFFFFFFF).to_bytes(4, "big")


def _dmrd_header(
    src: int, dst: int, repeater_id: int, seq: int, stream_id: int, flags: int
) -> bytearray:
    packet = bytearray(DMRD_LENGTH)
    packet[0:4] = MAGIC_DMRD
    packet[4] = seq & 0xFF
    packet[5:8] = (src & 0xFFFFFF).to_bytes(3, "big")
    packet[8:11] = (dst & 0xFFFFFF).to_bytes(3, "big")
    packet[11:15] = _repeater_bytes(repeater_id)
    packet[15] = flags & 0xFF
    packet[16:20] = (stream_id & 0xFFFFFFFF).to_bytes(4, "big")
    return packet


def _voice_flags(voice_seq: int, private: bool) -> int:
    position = (voice_seq & 0x0F) % 6
    if position == 0:
        position = 0x10
    flags = 0x80 + position
    if private:
        flags |= _PRIVATE_FLAG
    return flags


def _left(text: str, width: int) -> str:
    return text[:width].ljust(width)


def _right(text: str, width: int) -> str:
    return text[:width].rjust(width)


def build_login(repeater_id: int) -> bytes:
    """The login request: ``RPTL`` and the repeater id."""
    return MAGIC_LOGIN + _repeater_bytes(repeater_id)


def build_authorisation(repeater_id: int, salt: bytes, password: str | bytes) -> bytes:
    """The authorisation reply: ``RPTK``, the repeater id and SHA-256 of salt and password."""
    if len(salt) != 4:
        raise ValueError("the salt is four bytes")
    encoded = password.encode() if isinstance(password, str) else bytes(password)
    digest = hashlib.sha256(bytes(salt) + encoded).digest()
    return MAGIC_AUTHORISATION + _repeater_bytes(repeater_id) + digest


def build_config(repeater_id: int, callsign: str) -> bytes:
    """The 302-byte station configuration packet."""
    text = "".join(
        (
            _left(callsign, 8),
            f"{RX_FREQUENCY:09d}",
            f"{TX_FREQUENCY:09d}",
            f"{TX_POWER:02d}",
            f"{COLOUR_CODE:02d}",
            _right(LATITUDE, 8),
            _right(LONGITUDE, 9),
            f"{HEIGHT:03d}",
            _left(LOCATION, 20),
            _left(DESCRIPTION, 19),
            SLOTS,
            _left(STATION_URL, 124),
            _left(SOFTWARE_ID, 40),
            _left(PACKAGE_ID, 40),
        )
    )
    return MAGIC_CONFIG + _repeater_bytes(repeater_id) + text.encode("ascii", errors="replace")


def build_ping(repeater_id: int) -> bytes:
    """The keep-alive ping: ``RPTPING`` and the repeater id."""
    return MAGIC_PING + _repeater_bytes(repeater_id)


def build_silence_frame(
    src: int,
    dst: int,
    repeater_id: int,
    seq: int,
    stream_id: int,
    voice_seq: int,
    private: bool = False,
) -> bytes:
    """A DMRD voice burst carrying a silence frame."""
    packet = _dmrd_header(src, dst, repeater_id, seq, stream_id, _voice_flags(voice_seq, private))
    packet[PAYLOAD_OFFSET:] = SILENCE_FRAME
    return bytes(packet)


def build_voice_frame(
    src: int,
    dst: int,
    repeater_id: int,
    seq: int,
    stream_id: int,
    voice_seq: int,
    ambe72: bytes,
    private: bool = False,
) -> bytes:
    """A DMRD voice burst carrying three interleaved AMBE frames (27 bytes)."""
    if len(ambe72) != AMBE72_LENGTH:
        raise ValueError(f"a voice burst carries {AMBE72_LENGTH} AMBE bytes")
    packet = _dmrd_header(src, dst, repeater_id, seq, stream_id, _voice_flags(voice_seq, private))
    packet[20:33] = ambe72[:13]
    packet[33] = ambe72[13] & 0xF0
    packet[39] |= ambe72[13] & 0x0F
    packet[40:53] = ambe72[14:27]
    return bytes(packet)


def parse_dmrd(packet: bytes) -> DmrdPacket:
    """Split a complete DMRD packet into its fields."""
    if packet[:4] != MAGIC_DMRD:
        raise ValueError("not a DMRD packet")
    if len(packet) < DMRD_LENGTH:
        raise ValueError(f"a DMRD packet is {DMRD_LENGTH} bytes, got {len(packet)}")
    flags = packet[15]
    return DmrdPacket(
        sequence=packet[4],
        src=int.from_bytes(packet[5:8], "big"),
        dst=int.from_bytes(packet[8:11], "big"),
        repeater_id=int.from_bytes(packet[11:15], "big"),
        slot=2 if flags & _SLOT2_FLAG else 1,
        private=bool(flags & _PRIVATE_FLAG),
        frame_type=FrameType((flags & 0x30) >> 4),
        data_type=flags & 0x0F,
        stream_id=int.from_bytes(packet[16:20], "big"),
        payload=bytes(packet[PAYLOAD_OFFSET : PAYLOAD_OFFSET + DMR_FRAME_LENGTH_BYTES]),
    )


class FrameQueue:
    """First-in first-out queue of outgoing DMRD packets, holding at most 50."""

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        self.capacity = capacity
        self._frames: deque[bytes] = deque()

    def put(self, frame: bytes) -> bool:
        """Queue a packet; return False and drop it if the queue is full."""
        if len(frame) != DMRD_LENGTH:
            raise ValueError(f"a queued frame is {DMRD_LENGTH} bytes")
        if len(self._frames) >= self.capacity:
            logger.warning("DMR queue overrun")
            return False
        self._frames.append(bytes(frame))
        return True

    def get(self) -> bytes | None:
        """Take the oldest packet, or None if the queue is empty."""
        return self._frames.popleft() if self._frames else None

    def clear(self) -> None:
        """Drop every queued packet."""
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)