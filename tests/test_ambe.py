import random

import pytest

from dmrstation import ambe

SILENCE = bytes((0xB9, 0xE8, 0x81, 0x52, 0x61, 0x73, 0x00, 0x2A, 0x6B))


def _random_bits(seed, count=49):
    rng = random.Random(seed)
    return [rng.randint(0, 1) for _ in range(count)]


def _transmit(bits):
    return ambe.interleave(ambe.demodulate(ambe.encode_49_to_72(bits)))


def _codeword_bits(data):
    word = ambe.golay2312_word(data)
    return [(word >> (22 - index)) & 1 for index in range(23)]


def test_golay_correct_block_zero():
    assert ambe.golay_correct_block(0) == 0


@pytest.mark.parametrize("error_bit", [None, *range(23)])
def test_golay_correct_block_generator_codeword(error_bit):
    block = (1 << 22) | ambe.GOLAY_GENERATOR[0]
    if error_bit is not None:
        block ^= 1 << error_bit
    assert ambe.golay_correct_block(block) == 0x800


def test_golay_correct_block_three_errors():
    block = (1 << 22) | ambe.GOLAY_GENERATOR[0]
    block ^= (1 << 3) | (1 << 14) | (1 << 20)
    assert ambe.golay_correct_block(block) == 0x800


@pytest.mark.parametrize("block", [-1, 1 << 23])
def test_golay_correct_block_rejects_out_of_range(block):
    with pytest.raises(ValueError):
        ambe.golay_correct_block(block)


@pytest.mark.parametrize("error_bit", range(23))
def test_golay_correct_block_single_error_on_zero_codeword(error_bit):
    assert ambe.golay_correct_block(1 << error_bit) == 0


@pytest.mark.parametrize("data", [0, 1, 0x800, 0xABC, 0xFFF, 0x123])
def test_golay2312_accepts_encoder_codewords(data):
    bits = _codeword_bits(data)
    corrected, errors = ambe.golay2312(bits)
    assert errors == 0
    assert corrected == bits


@pytest.mark.parametrize("position", [11, 15, 22])
def test_golay2312_corrects_data_bit(position):
    bits = _codeword_bits(0x5A3)
    damaged = list(bits)
    damaged[position] ^= 1
    corrected, errors = ambe.golay2312(damaged)
    assert errors == 1
    assert corrected == bits


def test_golay2312_check_bit_error_keeps_check_bits_and_counts_nothing():
    bits = _codeword_bits(0x5A3)
    damaged = list(bits)
    damaged[4] ^= 1
    corrected, errors = ambe.golay2312(damaged)
    assert errors == 0
    assert corrected[11:] == bits[11:]
    assert corrected[:11] == damaged[:11]


def test_golay2312_rejects_wrong_length():
    with pytest.raises(ValueError):
        ambe.golay2312([0] * 22)


@pytest.mark.parametrize(
    "codeword, expected",
    [(0, 0), (1, 1), (0b11, 0), (1 << 23, 1), (1 << 24, 0), (0xFFFFFF, 0)],
)
def test_parity(codeword, expected):
    assert ambe.parity(codeword) == expected


def test_golay2312_word_keeps_data_and_ignores_high_bits():
    assert ambe.golay2312_word(0) == 0
    assert ambe.golay2312_word(0x1ABC) == ambe.golay2312_word(0xABC)
    assert ambe.golay2312_word(0xABC) & 0xFFF == 0xABC
    assert ambe.golay2312_word(0xABC) < 1 << 23


def test_encode_zero_bits_gives_zero_frame():
    frame = ambe.encode_49_to_72([0] * 49)
    assert frame == [[0] * 24 for _ in range(4)]


def test_encode_places_unprotected_bits():
    bits = [0] * 49
    bits[34] = 1
    bits[48] = 1
    frame = ambe.encode_49_to_72(bits)
    assert frame[2][0] == 1
    assert frame[3][0] == 1
    assert sum(frame[2]) == 1
    assert sum(frame[3]) == 1


def test_encode_c0_has_even_parity():
    for seed in range(5):
        frame = ambe.encode_49_to_72(_random_bits(seed))
        assert sum(frame[0]) % 2 == 0


def test_encode_rejects_wrong_length():
    with pytest.raises(ValueError):
        ambe.encode_49_to_72([0] * 48)


@pytest.mark.parametrize("seed", range(6))
def test_ecc_data_recovers_encoded_bits(seed):
    bits = _random_bits(seed)
    recovered, errors = ambe.ecc_data(ambe.encode_49_to_72(bits))
    assert recovered == bits
    assert errors == 0


def test_ecc_c0_corrects_data_bit():
    frame = ambe.encode_49_to_72(_random_bits(42))
    damaged = [list(row) for row in frame]
    damaged[0][23] ^= 1
    corrected, errors = ambe.ecc_c0(damaged)
    assert errors == 1
    assert corrected == frame
    assert damaged[0][23] != frame[0][23]


def test_ecc_c0_rejects_bad_shape():
    with pytest.raises(ValueError):
        ambe.ecc_c0([[0] * 24 for _ in range(3)])


def test_demodulate_is_an_involution_and_touches_only_c1():
    frame = ambe.encode_49_to_72(_random_bits(7))
    scrambled = ambe.demodulate(frame)
    assert ambe.demodulate(scrambled) == frame
    assert scrambled[0] == frame[0]
    assert scrambled[2] == frame[2]
    assert scrambled[3] == frame[3]
    assert scrambled[1][23] == frame[1][23]


@pytest.mark.parametrize("data", [bytes(9), bytes(range(9)), b"\xff" * 9, SILENCE])
def test_interleave_round_trip(data):
    assert ambe.interleave(ambe.deinterleave(data)) == data


def test_deinterleave_rejects_wrong_length():
    with pytest.raises(ValueError):
        ambe.deinterleave(bytes(8))


@pytest.mark.parametrize("seed", range(6))
def test_decode_frame_round_trip(seed):
    bits = _random_bits(seed)
    decoded = ambe.decode_frame(_transmit(bits))
    assert list(decoded.bits) == bits
    assert decoded.c0_errors == 0
    assert decoded.total_errors == 0


def test_decode_frame_corrects_c1_error():
    bits = _random_bits(99)
    frame = ambe.demodulate(ambe.encode_49_to_72(bits))
    frame[1][22] ^= 1
    decoded = ambe.decode_frame(ambe.interleave(frame))
    assert list(decoded.bits) == bits
    assert decoded.c0_errors == 0
    assert decoded.total_errors == 1


def test_decode_frame_corrects_c0_error():
    bits = _random_bits(5)
    frame = ambe.demodulate(ambe.encode_49_to_72(bits))
    frame[0][20] ^= 1
    decoded = ambe.decode_frame(ambe.interleave(frame))
    assert list(decoded.bits) == bits
    assert decoded.c0_errors == 1
    assert decoded.total_errors == 1


def test_silence_frame_decodes_cleanly_and_reencodes():
    decoded = ambe.decode_frame(SILENCE)
    assert decoded.total_errors == 0
    assert len(decoded.bits) == 49
    assert _transmit(list(decoded.bits)) == SILENCE