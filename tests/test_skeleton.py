import struct

import pytest

from celtkit.skeleton import (
    FISBONE_IDENTIFIER,
    FISBONE_MESSAGE_HEADER_OFFSET,
    FISBONE_SIZE,
    FISHEAD_IDENTIFIER,
    FISHEAD_SIZE,
    FisbonePacket,
    FisheadPacket,
    make_fisbone,
    make_fishead,
)


def test_fishead_wire_layout():
    data = make_fishead().to_bytes()
    assert len(data) == 64
    assert data[:8] == b"fishead\0"
    assert struct.unpack_from("<HH", data, 8) == (3, 0)
    assert struct.unpack_from("<qqqq", data, 12) == (0, 1000, 0, 1000)
    assert data[44:] == bytes(20)


def test_fishead_custom_times_round_trip():
    head = FisheadPacket(ptime_n=7, ptime_d=11, btime_n=-5, btime_d=13)
    data = head.to_bytes()
    assert len(data) == FISHEAD_SIZE
    assert struct.unpack_from("<qqqq", data, 12) == (7, 11, -5, 13)


def test_fishead_utc_is_padded_and_bounded():
    data = FisheadPacket(utc=b"abc").to_bytes()
    assert data[44:47] == b"abc"
    assert data[47:] == bytes(17)
    with pytest.raises(ValueError):
        FisheadPacket(utc=bytes(21)).to_bytes()


def test_fisbone_for_celt_stream():
    data = make_fisbone(1234, 48000, 0).to_bytes()
    assert data[:8] == b"fisbone\0"
    assert struct.unpack_from("<III", data, 8) == (44, 1234, 2)
    assert struct.unpack_from("<qqq", data, 20) == (48000, 1, 0)
    assert struct.unpack_from("<I", data, 44) == (3,)
    assert data[48] == 0
    assert data[49:52] == bytes(3)
    assert data[52:] == b"Content-Type: audio/x-celt\r\n"


def test_fisbone_header_count_includes_extra_headers():
    bone = make_fisbone(1, 44100, 3)
    assert bone.nr_header_packet == 5
    data = bone.to_bytes()
    assert struct.unpack_from("<I", data, 16) == (5,)


def test_fisbone_message_fields_in_order():
    bone = FisbonePacket(serial_no=9)
    bone.add_message_header_field("A", "1")
    bone.add_message_header_field("B", "two")
    data = bone.to_bytes()
    assert data[FISBONE_SIZE:] == b"A: 1\r\nB: two\r\n"
    assert len(data) == FISBONE_SIZE + len(b"A: 1\r\nB: two\r\n")


def test_fisbone_without_fields_is_fixed_size():
    data = FisbonePacket().to_bytes()
    assert len(data) == FISBONE_SIZE
    assert data.startswith(FISBONE_IDENTIFIER)
    assert struct.unpack_from("<I", data, 8) == (FISBONE_MESSAGE_HEADER_OFFSET,)


def test_fisbone_serial_wraps_to_32_bits():
    data = FisbonePacket(serial_no=-1).to_bytes()
    assert struct.unpack_from("<I", data, 12) == (0xFFFFFFFF,)


def test_fisbone_granule_shift_must_fit_a_byte():
    with pytest.raises(ValueError):
        FisbonePacket(granule_shift=256).to_bytes()


def test_fishead_identifier_constant_matches_packet():
    assert make_fishead().to_bytes()[:8] == FISHEAD_IDENTIFIER