"""AMBE 3600x2450 voice frame handling: Golay protection, scrambling and interleaving.

A 72-bit DMR AMBE frame is laid out as four rows of 24 bits (C0..C3).
C0 carries 12 data bits protected by a (24,12) Golay code, C1 carries
12 data bits protected by a (23,12) Golay code and scrambled with a
pseudo-random sequence seeded from C0, and C2/C3 carry 11 and 14
unprotected bits. Together they hold the 49 voice parameter bits.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

Frame = list[list[int]]

FRAME_ROWS = 4
FRAME_COLUMNS = 24
AMBE_BITS = 49
AMBE72_BYTES = 9

GOLAY_GENERATOR = (
    0x63A, 0x31D, 0x7B4, 0x3DA, 0x1ED, 0x6CC, 0x366, 0x1B3, 0x6E3, 0x54B, 0x49F, 0x475,
)

# Interleave schedule: (row, column) of the first and second bit of each dibit.
_R_W = (
    0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1,
    0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 2,
    0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2,
)
_R_X = (
    23, 10, 22, 9, 21, 8, 20, 7, 19, 6, 18, 5,
    17, 4, 16, 3, 15, 2, 14, 1, 13, 0, 12, 10,
    11, 9, 10, 8, 9, 7, 8, 6, 7, 5, 6, 4,
)
_R_Y = (
    0, 2, 0, 2, 0, 2, 0, 2, 0, 3, 0, 3,
    1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3,
    1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3,
)
_R_Z = (
    5, 3, 4, 2, 3, 1, 2, 0, 1, 13, 0, 12,
    22, 11, 21, 10, 20, 9, 19, 8, 18, 7, 17, 6,
    16, 5, 15, 4, 14, 3, 13, 2, 12, 1, 11, 0,
)
_SCHEDULE = tuple(zip(_R_W, _R_X, _R_Y, _R_Z))

_GOLAY_POLY = 0xAE3
_BLOCK_LIMIT = 1 << 23


def _expected_ecc(block: int) -> int:
    ecc = 0
    for index, generator in enumerate(GOLAY_GENERATOR):
        if block & (0x400000 >> index):
            ecc ^= generator
    return ecc


def _syndrome(block: int) -> int:
    return _expected_ecc(block) ^ (block & 0x7FF)


def _build_golay_matrix() -> tuple[int, ...]:
    """Map every syndrome to the data-bit part of its error pattern of weight 3 or less."""
    table = [0] * 2048
    for weight in range(4):
        for positions in combinations(range(23), weight):
            error = sum(1 << position for position in positions)
            table[_syndrome(error)] = error >> 11
    return tuple(table)


GOLAY_MATRIX = _build_golay_matrix()


@dataclass(frozen=True)
class DecodedFrame:
    """The 49 voice bits of a received frame and the bit errors corrected."""

    bits: tuple[int, ...]
    c0_errors: int
    total_errors: int


def _bit(value: int) -> int:
    return 1 if value else 0


def _check_frame(frame: Sequence[Sequence[int]]) -> None:
    if len(frame) != FRAME_ROWS or any(len(row) != FRAME_COLUMNS for row in frame):
        raise ValueError("an AMBE frame has four rows of 24 bits")


def _copy_frame(frame: Sequence[Sequence[int]]) -> Frame:
    return [list(row) for row in frame]


def golay_correct_block(block: int) -> int:
    """Correct a 23-bit Golay block (data in bits 22..11) and return its 12 data bits."""
    if not 0 <= block < _BLOCK_LIMIT:
        raise ValueError(f"not a 23-bit Golay block: {block}")
    return (block >> 11) ^ GOLAY_MATRIX[_syndrome(block)]


def golay2312(bits: Sequence[int]) -> tuple[list[int], int]:
    """Correct 23 bits, bit ``i`` being block bit ``i``.

    Returns the corrected bits and the number of data bits that changed.
    """
    if len(bits) != 23:
        raise ValueError(f"expected 23 bits, got {len(bits)}")
    received = [_bit(bit) for bit in bits]
    block = sum(bit << index for index, bit in enumerate(received))
    data = golay_correct_block(block)
    corrected = received[:11] + [(data >> shift) & 1 for shift in range(12)]
    errors = sum(a != b for a, b in zip(corrected[11:], received[11:]))
    return corrected, errors


def ecc_c0(frame: Sequence[Sequence[int]]) -> tuple[Frame, int]:
    """Correct the C0 row of a frame; return the new frame and the errors corrected."""
    _check_frame(frame)
    corrected = _copy_frame(frame)
    row, errors = golay2312(frame[0][1:24])
    corrected[0][1:24] = row
    return corrected, errors


def demodulate(frame: Sequence[Sequence[int]]) -> Frame:
    """Apply the C0-seeded pseudo-random sequence to C1; applying it twice restores C1."""
    _check_frame(frame)
    result = _copy_frame(frame)
    seed = 0
    for column in range(23, 11, -1):
        seed = (seed << 1) | _bit(frame[0][column])
    state = 16 * seed
    for column in range(22, -1, -1):
        state = (173 * state + 13849) % 65536
        result[1][column] ^= state // 32768
    return result


def ecc_data(frame: Sequence[Sequence[int]]) -> tuple[list[int], int]:
    """Extract the 49 voice bits, correcting C1; return the bits and the C1 errors."""
    _check_frame(frame)
    c0 = [_bit(frame[0][column]) for column in range(23, 11, -1)]
    c1_row, errors = golay2312(frame[1][:23])
    c1 = [c1_row[column] for column in range(22, 10, -1)]
    c2 = [_bit(frame[2][column]) for column in range(10, -1, -1)]
    c3 = [_bit(frame[3][column]) for column in range(13, -1, -1)]
    return c0 + c1 + c2 + c3, errors


def deinterleave(data: Sequence[int]) -> Frame:
    """Spread nine interleaved bytes over the four frame rows."""
    if len(data) != AMBE72_BYTES:
        raise ValueError(f"an interleaved AMBE frame is {AMBE72_BYTES} bytes")
    frame = [[0] * FRAME_COLUMNS for _ in range(FRAME_ROWS)]
    for index, (w, x, y, z) in enumerate(_SCHEDULE):
        byte = data[index // 4]
        pair = index % 4
        frame[w][x] = (byte >> (7 - 2 * pair)) & 1
        frame[y][z] = (byte >> (6 - 2 * pair)) & 1
    return frame


def decode_frame(data: Sequence[int]) -> DecodedFrame:
    """Decode nine interleaved bytes into the 49 voice bits."""
    frame, c0_errors = ecc_c0(deinterleave(data))
    bits, data_errors = ecc_data(demodulate(frame))
    return DecodedFrame(tuple(bits), c0_errors, c0_errors + data_errors)


def interleave(frame: Sequence[Sequence[int]]) -> bytes:
    """Pack the four frame rows into nine interleaved bytes."""
    _check_frame(frame)
    value = 0
    for w, x, y, z in _SCHEDULE:
        value = (value << 1) | _bit(frame[w][x])
        value = (value << 1) | _bit(frame[y][z])
    return value.to_bytes(AMBE72_BYTES, "big")


def parity(codeword: int) -> int:
    """Return 1 if the low 24 bits of ``codeword`` hold an odd number of ones, else 0."""
    return bin(codeword & 0xFFFFFF).count("1") & 1


def golay2312_word(codeword: int) -> int:
    """Build a (23,12) Golay codeword: check bits in bits 22..12, data in bits 11..0."""
    data = codeword & 0x0FFF
    remainder = data
    for _ in range(12):
        if remainder & 1:
            remainder ^= _GOLAY_POLY
        remainder >>= 1
    return (remainder << 12) | data


def encode_49_to_72(bits: Sequence[int]) -> Frame:
    """Place 49 voice bits into the four frame rows, adding the C0 and C1 Golay checks.

    C1 is not scrambled; pass the result through :func:`demodulate` before
    interleaving it for transmission.
    """
    if len(bits) != AMBE_BITS:
        raise ValueError(f"expected {AMBE_BITS} bits, got {len(bits)}")
    values = [_bit(bit) for bit in bits]
    frame = [[0] * FRAME_COLUMNS for _ in range(FRAME_ROWS)]

    c0 = sum(bit << shift for shift, bit in enumerate(values[:12]))
    c0 = golay2312_word(c0)
    c0 |= parity(c0) << 23
    frame[0] = [(c0 >> (23 - column)) & 1 for column in range(24)]

    c1 = sum(bit << shift for shift, bit in enumerate(values[12:24]))
    c1 = golay2312_word(c1)
    for column in range(23):
        frame[1][column] = (c1 >> (22 - column)) & 1

    for column in range(11):
        frame[2][column] = values[34 - column]
    for column in range(14):
        frame[3][column] = values[48 - column]
    return frame