"""Reed-Solomon (12,9) code over GF(256) protecting DMR full link control."""

from collections.abc import Sequence

_NPAR = 3
_POLY = (64, 56, 14, 1)
_PRIMITIVE = 0x11D


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * 512
    log = [0] * 256
    value = 1
    for power in range(255):
        exp[power] = value
        log[value] = power
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    for power in range(255, 510):
        exp[power] = exp[power - 255]
    return tuple(exp), tuple(log)


_EXP_TABLE, _LOG_TABLE = _build_tables()


def _gmult(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP_TABLE[_LOG_TABLE[a] + _LOG_TABLE[b]]


def encode(message: Sequence[int]) -> bytes:
    """Return the three parity bytes of ``message`` in the order they are transmitted."""
    parity = [0] * _NPAR
    for byte in message:
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte}")
        feedback = byte ^ parity[_NPAR - 1]
        for j in range(_NPAR - 1, 0, -1):
            parity[j] = parity[j - 1] ^ _gmult(_POLY[j], feedback)
        parity[0] = _gmult(_POLY[0], feedback)
    return bytes(reversed(parity))


def check(data: Sequence[int]) -> bool:
    """Tell whether the twelve-byte block carries correct parity for its nine data bytes."""
    if len(data) < 12:
        raise ValueError("a Reed-Solomon (12,9) block needs twelve bytes")
    return bytes(data[9:12]) == encode(data[:9])