"""Tests for code derivation."""

from identicon.engine.code import derive_code
from tests.conftest import EMPTY_STRING_CODE


def test_empty_string_code():
    assert derive_code("") == EMPTY_STRING_CODE


def test_code_is_deterministic():
    for text in ("alice", "bob", "", "ünïcødé", "a" * 1000):
        assert derive_code(text) == derive_code(text)


def test_code_fits_64_bits():
    for text in ("alice", "bob", "carol"):
        code = derive_code(text)
        assert 0 <= code < 2**64


def test_str_and_utf8_bytes_agree():
    assert derive_code("ünïcødé") == derive_code("ünïcødé".encode("utf-8"))


def test_distinct_inputs_give_distinct_codes():
    codes = {derive_code(f"user-{i}") for i in range(100)}
    assert len(codes) == 100
