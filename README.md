# dmrstation

Building blocks for a DMR network station that connects to a DMR master
over the Homebrew repeater protocol. Everything is plain Python with no
runtime dependencies beyond the standard library.

| Module | What it holds |
| --- | --- |
| `dmrstation.defines` | DMR constants: sync patterns, CRC masks, sample frames, the `FLCO` and `DataType` enums |
| `dmrstation.bits` | byte/bit conversions and bit-difference counting |
| `dmrstation.qr1676` | the QR(16,7,6) code of the embedded signalling field |
| `dmrstation.rs129` | the Reed–Solomon (12,9) code protecting full link control |
| `dmrstation.ambe` | Golay correction, scrambling and interleaving of 72-bit AMBE frames |
| `dmrstation.protocol` | Homebrew packets, DMRD parsing and the outgoing frame queue |
| `dmrstation.session` | the connection state machine |
| `dmrstation.dmrids` | the DMR user id directory |
| `dmrstation.talkgroups` | the talkgroup list |
| `dmrstation.lastheard` | the list of stations heard most recently |
| `dmrstation.station` | display labels, volume conversion and the transmit time-out timer |

## Bits and error correction

```python
from dmrstation import bits, qr1676, rs129

bits.byte_to_bits_be(0xA5)                # eight booleans, most significant first
bits.bits_to_byte_le([True] + [False] * 7)   # 1
bits.bit_differences(b"\x0f", b"\xff")    # 4; raises ValueError on unequal lengths

parity = rs129.encode(bytes(9))           # three parity bytes, in transmitted order
rs129.check(bytes(9) + parity)            # True when the block's parity matches

codeword = qr1676.encode(b"\x54")         # two-byte codeword for the 7 bits in the top of byte 0
qr1676.decode(codeword)                   # the corrected first byte, data bits at the top
```

## AMBE frames

A 72-bit AMBE frame is handled as four rows of 24 bits (C0..C3) holding
the 49 voice parameter bits.

```python
from dmrstation import ambe

decoded = ambe.decode_frame(nine_bytes)
decoded.bits          # the 49 voice bits
decoded.c0_errors     # bits corrected in C0
decoded.total_errors  # bits corrected in C0 and C1

frame = ambe.encode_49_to_72(forty_nine_bits)   # C0 and C1 Golay checks added
frame = ambe.demodulate(frame)                  # scramble C1 before sending
payload = ambe.interleave(frame)                # nine interleaved bytes
```

The lower-level steps are available too: `deinterleave`, `ecc_c0`,
`demodulate` (its own inverse), `ecc_data`, `golay2312`,
`golay_correct_block`, `golay2312_word` and `parity`.

## Homebrew packets

```python
from dmrstation import protocol

password = "password"
login = protocol.build_login(repeater_id)
auth = protocol.build_authorisation(repeater_id, salt, password)  # salt: 4 bytes
config = protocol.build_config(repeater_id, "N0CALL")             # 302 bytes
ping = protocol.build_ping(repeater_id)

burst = protocol.build_voice_frame(src, dst, repeater_id, seq,
                                   stream_id, voice_seq, ambe27, private=False)
silence = protocol.build_silence_frame(src, dst, repeater_id, seq,
                                       stream_id, voice_seq)

packet = protocol.parse_dmrd(datagram)   # a DmrdPacket; ValueError if not a full DMRD packet
packet.src, packet.dst, packet.frame_type, packet.data_type, packet.payload

queue = protocol.FrameQueue()            # holds at most 50 packets
queue.put(burst)                         # False, and the packet dropped, when full
queue.get()                              # oldest packet, or None
```

`ambe27` is three interleaved AMBE frames, 27 bytes.

## The session

`dmrstation.session.HomebrewSession` follows the login, authorisation and
configuration handshake, sends a ping every 5 ticks, drops to
`NetStatus.WAITING_CONNECT` after 25 ticks without a reply, logs in again
every 15 ticks while not running, and tracks incoming calls.

```python
from dmrstation.session import HomebrewSession, SessionEvent

password = "password"
session = HomebrewSession(sock_send, repeater_id, "N0CALL", password,
                          dmr_id, talkgroup=91)
events = session.start()                   # sends the login request
events = session.handle_datagram(datagram) # for every datagram from the master
events = session.tick()                    # once a second
```

Each call returns a list of `SessionEvent` values whose `kind` is one of
`STATUS`, `CALL_START`, `CALL_STOP`, `VOICE`, `ACTIVATE_TALKGROUP` or
`MASTER_CLOSING`.

## Station data

```python
from dmrstation.dmrids import DmrIdDirectory
from dmrstation.talkgroups import TalkgroupList
from dmrstation.lastheard import LastHeard
from dmrstation.station import (TimeoutTimer, format_caller_label,
                                format_talkgroup_label, volume_from_percent)

directory = DmrIdDirectory.from_file("DMRIds.dat")  # "<id> <call> <name>" per line;
directory.lookup(1234567)                           # a missing file gives an empty directory

talkgroups = TalkgroupList.with_defaults()          # 4000 Disconnect and 9990 *Parrot
talkgroups.load("tgs.dat")                          # "<id> <name>" per line; False if missing
for talkgroup in talkgroups:
    print(talkgroup.display_name(), talkgroup.is_private())

heard = LastHeard()                                 # newest first, at most 24
heard.add_by_id(1234567, 91, directory)

format_talkgroup_label(91)                          # "TG 91"
format_caller_label(1234567, directory)             # "CALL\nName" or "ID: 1234567"
volume_from_percent(30)                             # 19660

timer = TimeoutTimer(limit=180, reverse=True)
timer.initial_text()                                # "180"
timer.display(12.5)                                 # ("168", False)
```

Talkgroups whose name starts with `*` are private calls.

## What the package does not do

The package has no command to run and no user interface. It opens no
network socket: the session only calls the `send` function it is given and
reacts to the datagrams passed to it. It does not encode or decode speech,
record or play audio, or drive PTT or status lines; it handles AMBE frames
only at the bit level.

## Tests

The tests use pytest, installed with the `test` extra.