import pytest

from dmrstation import bits
from dmrstation.defines import BS_SOURCED_AUDIO_SYNC, MS_SOURCED_AUDIO_SYNC


def test_be_most_significant_first():
    assert bits.byte_to_bits_be(0x80) == [True] + [False] * 7


def test_le_least_significant_first():
    assert bits.byte_to_bits_le(0x01) == [True] + [False] * 7


@pytest.mark.parametrize("value", range(256))
def test_be_round_trip(value):
    assert bits.bits_to_byte_be(bits.byte_to_bits_be(value)) == value


@pytest.mark.parametrize("value", range(256))
def test_le_round_trip(value):
    assert bits.bits_to_byte_le(bits.byte_to_bits_le(value)) == value


@pytest.mark.parametrize("value", [0x00, 0x5A, 0xC3, 0xFF, 0x12])
def test_le_is_reverse_of_be(value):
    assert bits.byte_to_bits_le(value) == list(reversed(bits.byte_to_bits_be(value)))


def test_bits_to_byte_accepts_truthy_ints():
    assert bits.bits_to_byte_be([1, 0, 0, 0, 0, 0, 0, 0]) == bits.bits_to_byte_le(
        [0, 0, 0, 0, 0, 0, 0, 1]
    )


@pytest.mark.parametrize("value", [-1, 256])
def test_byte_out_of_range(value):
    with pytest.raises(ValueError):
        bits.byte_to_bits_be(value)
    with pytest.raises(ValueError):
        bits.byte_to_bits_le(value)


@pytest.mark.parametrize("length", [0, 7, 9])
def test_wrong_bit_count(length):
    with pytest.raises(ValueError):
        bits.bits_to_byte_be([False] * length)
    with pytest.raises(ValueError):
        bits.bits_to_byte_le([False] * length)


def test_identical_sync_has_no_differences():
    assert bits.bit_differences(BS_SOURCED_AUDIO_SYNC, BS_SOURCED_AUDIO_SYNC) == 0


def test_all_bits_differ():
    assert bits.bit_differences(b"\xff\xff", b"\x00\x00") == 16


@pytest.mark.parametrize("value", [0x00, 0x01, 0x7E, 0xA5, 0xFF])
def test_difference_from_zero_is_set_bit_count(value):
    assert bits.bit_differences(bytes([value]), b"\x00") == sum(
        bits.byte_to_bits_be(value)
    )


def test_differences_are_symmetric():
    assert bits.bit_differences(
        BS_SOURCED_AUDIO_SYNC, MS_SOURCED_AUDIO_SYNC
    ) == bits.bit_differences(MS_SOURCED_AUDIO_SYNC, BS_SOURCED_AUDIO_SYNC)


def test_differences_add_over_concatenation():
    a1, b1 = b"\x12\x34", b"\x56\x78"
    a2, b2 = b"\x9a", b"\xbc"
    assert bits.bit_differences(a1 + a2, b1 + b2) == bits.bit_differences(
        a1, b1
    ) + bits.bit_differences(a2, b2)


def test_differences_length_mismatch():
    with pytest.raises(ValueError):
        bits.bit_differences(b"\x00", b"\x00\x00")