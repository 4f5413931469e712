import pytest

from dmrstation.protocol import (
    MAGIC_ACK,
    NetStatus,
    build_authorisation,
    build_config,
    build_login,
    build_ping,
    build_silence_frame,
    build_voice_frame,
)
from dmrstation.session import HomebrewSession, SessionEvent

REPEATER_ID = 214000101
DMR_ID = 2140001
CALLSIGN = "N0CALL"
SALT = b"\x01\x02\x03\x04"
Kind = SessionEvent.Kind


@pytest.fixture
def sent():
    return []


@pytest.fixture
def session(sent):
    password = "password"
    return HomebrewSession(sent.append, REPEATER_ID, CALLSIGN, password, DMR_ID, talkgroup=91)


def _run(session, sent):
    session.start()
    session.handle_datagram(MAGIC_ACK + SALT)
    session.handle_datagram(MAGIC_ACK)
    session.handle_datagram(MAGIC_ACK)
    sent.clear()


def _data_sync(src, dst, data_type):
    packet = bytearray(build_silence_frame(src, dst, REPEATER_ID, 0, 7, 0))
    packet[15] = 0x20 | data_type
    return bytes(packet)


def test_start_sends_login(session, sent):
    events = session.start()
    assert sent == [build_login(REPEATER_ID)]
    assert events == [SessionEvent(Kind.STATUS, status=NetStatus.WAITING_LOGIN)]


def test_login_handshake(session, sent):
    session.start()
    events = session.handle_datagram(MAGIC_ACK + SALT)
    assert sent[-1] == build_authorisation(REPEATER_ID, SALT, "password")
    assert session.status == NetStatus.WAITING_AUTHORISATION
    assert events[0].status == NetStatus.WAITING_AUTHORISATION

    session.handle_datagram(MAGIC_ACK)
    assert sent[-1] == build_config(REPEATER_ID, CALLSIGN)
    assert session.status == NetStatus.WAITING_CONFIG

    events = session.handle_datagram(MAGIC_ACK)
    assert session.status == NetStatus.RUNNING
    assert events[-1] == SessionEvent(Kind.ACTIVATE_TALKGROUP, src=DMR_ID, dst=91)


def test_ack_without_salt_is_ignored(session, sent):
    session.start()
    assert session.handle_datagram(MAGIC_ACK) == []
    assert session.status == NetStatus.WAITING_LOGIN
    assert len(sent) == 1


def test_nak_returns_to_login(session, sent):
    _run(session, sent)
    events = session.handle_datagram(b"MSTNAK")
    assert session.status == NetStatus.WAITING_LOGIN
    assert events == [SessionEvent(Kind.STATUS, status=NetStatus.WAITING_LOGIN)]


def test_master_closing_event(session, sent):
    _run(session, sent)
    assert session.handle_datagram(b"MSTCL") == [SessionEvent(Kind.MASTER_CLOSING)]


def test_empty_datagram_does_nothing(session):
    assert session.handle_datagram(b"") == []


def test_voice_frames_start_a_call_once(session, sent):
    _run(session, sent)
    ambe = bytes(range(27))
    frame = build_voice_frame(1234, 91, REPEATER_ID, 1, 7, 1, ambe)
    events = session.handle_datagram(frame)
    assert [event.kind for event in events] == [Kind.CALL_START, Kind.VOICE]
    assert (events[0].src, events[0].dst) == (1234, 91)
    assert events[1].payload == frame[20:53]
    assert session.receiving
    events = session.handle_datagram(frame)
    assert [event.kind for event in events] == [Kind.VOICE]


def test_header_and_terminator(session, sent):
    _run(session, sent)
    events = session.handle_datagram(_data_sync(1234, 91, 1))
    assert events == [SessionEvent(Kind.CALL_START, src=1234, dst=91)]
    assert session.receiving
    events = session.handle_datagram(_data_sync(1234, 91, 2))
    assert events == [SessionEvent(Kind.CALL_STOP, src=1234, dst=91)]
    assert not session.receiving


def test_short_dmrd_ignored(session, sent):
    _run(session, sent)
    frame = build_voice_frame(1234, 91, REPEATER_ID, 1, 7, 1, bytes(27))
    assert session.handle_datagram(frame[:40]) == []
    assert not session.receiving


def test_ping_every_five_ticks(session, sent):
    _run(session, sent)
    for _ in range(4):
        session.tick()
    assert sent == []
    session.tick()
    assert sent == [build_ping(REPEATER_ID)]


def test_pong_timeout_then_reconnect(session, sent):
    _run(session, sent)
    events = []
    for _ in range(25):
        events.extend(session.tick())
    assert session.status == NetStatus.WAITING_CONNECT
    assert SessionEvent(Kind.STATUS, status=NetStatus.WAITING_CONNECT) in events
    sent.clear()
    for _ in range(14):
        session.tick()
    assert sent == []
    session.tick()
    assert sent == [build_login(REPEATER_ID)]
    assert session.status == NetStatus.WAITING_LOGIN


def test_datagram_resets_pong_timeout(session, sent):
    _run(session, sent)
    for _ in range(24):
        session.tick()
    session.handle_datagram(b"MSTPONG")
    session.tick()
    assert session.status == NetStatus.RUNNING


def test_inactivity_stops_call(session, sent):
    _run(session, sent)
    session.handle_datagram(_data_sync(1234, 91, 1))
    assert session.tick() == []
    assert session.tick() == []
    events = session.tick()
    assert events == [SessionEvent(Kind.CALL_STOP, src=0, dst=91)]
    assert session.last_src == 0