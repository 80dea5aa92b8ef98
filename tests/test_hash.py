import string

import pytest

from prosys7800.hash import DIGEST_LENGTH, compute_digest


def test_empty_input_digest():
    assert compute_digest(b"") == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc_digest():
    assert compute_digest(b"abc") == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("length", [1, 55, 56, 63, 64, 65, 128, 16384, 49152])
def test_digest_is_lowercase_hex_of_fixed_length(length):
    data = bytes(index & 0xFF for index in range(length))
    digest = compute_digest(data)
    assert len(digest) == DIGEST_LENGTH
    assert set(digest) <= set(string.hexdigits.lower()) - set("ABCDEF")


def test_bytes_like_inputs_agree():
    data = bytes(range(200))
    expected = compute_digest(data)
    assert compute_digest(bytearray(data)) == expected
    assert compute_digest(memoryview(data)) == expected


def test_digest_is_deterministic_and_sensitive_to_content():
    data = bytearray(1000)
    first = compute_digest(data)
    assert compute_digest(bytes(data)) == first
    data[999] = 1
    changed = compute_digest(data)
    assert changed != first
    assert len(changed) == DIGEST_LENGTH


def test_str_input_is_rejected():
    with pytest.raises(TypeError):
        compute_digest("abc")