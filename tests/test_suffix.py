from hypothesis import given
from hypothesis import strategies as st

from bsdelta.suffix import longest_match, suffix_array

SMALL_ALPHABET = st.binary(max_size=60).map(lambda b: bytes(x % 3 for x in b))
DATA = st.one_of(st.binary(max_size=60), SMALL_ALPHABET)


def test_banana():
    assert suffix_array(b"banana") == [6, 5, 3, 1, 0, 4, 2]


def test_empty():
    assert suffix_array(b"") == [0]


def test_repeated_byte():
    assert suffix_array(b"a" * 50) == list(range(50, -1, -1))


@given(DATA)
def test_is_permutation_starting_with_empty_suffix(data):
    order = suffix_array(data)
    assert sorted(order) == list(range(len(data) + 1))
    assert order[0] == len(data)


@given(DATA)
def test_suffixes_are_sorted(data):
    order = suffix_array(data)
    suffixes = [data[start:] for start in order]
    assert all(a < b for a, b in zip(suffixes, suffixes[1:]))


def test_accepts_bytearray():
    assert suffix_array(bytearray(b"banana")) == suffix_array(b"banana")


def test_match_found_in_middle():
    old = b"hello world"
    new = b"world peace"
    pos, length = longest_match(suffix_array(old), old, new)
    assert pos == old.index(b"world")
    assert length == len(b"world")


def test_match_whole_distinct_data():
    old = b"abc"
    pos, length = longest_match(suffix_array(old), old, old)
    assert old[pos:] == old
    assert length == len(old)


def test_match_with_empty_old():
    old = b""
    _, length = longest_match(suffix_array(old), old, b"xyz")
    assert length == len(old)


def test_match_with_empty_new():
    old = b"abcdef"
    pos, length = longest_match(suffix_array(old), old, b"")
    assert length == len(b"")
    assert 0 <= pos <= len(old)


@given(DATA, DATA)
def test_match_is_genuine(old, new):
    pos, length = longest_match(suffix_array(old), old, new)
    assert 0 <= length <= min(len(new), len(old))
    assert 0 <= pos <= len(old)
    assert old[pos : pos + length] == new[:length]


@given(DATA, st.integers(min_value=0, max_value=59))
def test_match_of_single_present_byte_is_nonempty(old, cut):
    if old:
        new = old[cut % len(old) :]
        _, length = longest_match(suffix_array(old), old, new)
        assert length >= 1
    else:
        _, length = longest_match(suffix_array(old), old, b"x")
        assert length == 0