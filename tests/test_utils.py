import pytest
from keybridge_core.utils import strip_sign_byte, to_big_integer, to_fixed_bytes, to_signed_bytes


def test_high_bit_byte_is_unsigned():
    assert to_big_integer(b"\xff") == 255
    assert to_fixed_bytes(to_big_integer(b"\xff")) == b"\xff"


def test_empty_is_zero():
    assert to_big_integer(b"") == 0
    assert to_big_integer(None) == 0
    assert to_fixed_bytes(0) == b""
    assert to_fixed_bytes(to_big_integer(b"")) == b""


def test_leading_zeros_are_insignificant():
    assert to_big_integer(b"\x00\x00\x01\x00") == 256
    assert to_fixed_bytes(256) == b"\x01\x00"


def test_fixed_width_padding():
    assert to_fixed_bytes(1, 4) == b"\x00\x00\x00\x01"
    assert to_fixed_bytes(0, 2) == b"\x00\x00"
    with pytest.raises(ValueError):
        to_fixed_bytes(0x10000, 2)


def test_negative_rejected():
    with pytest.raises(ValueError):
        to_fixed_bytes(-1)


def test_signed_export_adds_sign_byte_only_when_needed():
    assert to_signed_bytes(0) == b"\x00"
    assert to_signed_bytes(0x7F) == b"\x7f"
    assert to_signed_bytes(0xFF) == b"\x00\xff"
    assert to_signed_bytes(0xC401) == b"\x00\xc4\x01"


def test_strip_sign_byte():
    assert strip_sign_byte(b"\x00\xc4\x01") == b"\xc4\x01"
    # 0x00 before a low byte is a real leading zero, not a sign byte
    assert strip_sign_byte(b"\x00\x44") == b"\x00\x44"
    assert strip_sign_byte(b"\x00") == b"\x00"
    assert strip_sign_byte(b"") == b""


def test_fixed_bytes_match_stripped_signed_export():
    for value in (1, 0x7F, 0x80, 0xFF, 0xC4FF, 2**1023 + 12345):
        assert to_fixed_bytes(value) == strip_sign_byte(to_signed_bytes(value))


def test_fixed_bytes_drop_sign_byte_of_signed_export():
    assert to_signed_bytes(0xC401) == b"\x00\xc4\x01"
    assert to_fixed_bytes(0xC401) == b"\xc4\x01"
    assert to_fixed_bytes(0x44) == b"\x44"
