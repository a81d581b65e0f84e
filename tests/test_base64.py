import base64 as stdlib_base64
import os

import pytest

from kbase.base64 import base64_decode, base64_encode


def test_encode_known_value():
    assert base64_encode("foobar") == "Zm9vYmFy"


def test_encode_empty():
    assert base64_encode(b"") == ""


@pytest.mark.parametrize("length", range(0, 20))
def test_encode_matches_standard(length):
    data = os.urandom(length)
    assert base64_encode(data) == stdlib_base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize("length", range(1, 20))
def test_round_trip(length):
    data = os.urandom(length)
    assert base64_decode(base64_encode(data)) == data


def test_round_trip_text():
    text = "hello, wörld"
    assert base64_decode(base64_encode(text)).decode("utf-8") == text


def test_encoded_length_is_padded():
    for length in range(0, 12):
        assert len(base64_encode(b"a" * length)) % 4 == 0


def test_decode_bytes_input():
    assert base64_decode(b"Zm9vYmFy") == b"foobar"


@pytest.mark.parametrize("bad", ["", "abc", "ab!d", "A===", "Zm9v YmFy", "Zm=v"])
def test_decode_invalid_returns_empty(bad):
    assert base64_decode(bad) == b""


def test_decode_non_ascii_is_invalid():
    assert base64_decode("Zm9é") == b""