"""Tests for bytefilter.filters module."""

import pytest

from bytefilter.filters import FILTER_NAMES, ByteFilter, resolve_filter

ALL_BYTES = bytes(range(256))


class TestResolveFilter:
    """Tests for resolve_filter function."""

    @pytest.mark.parametrize(
        "name, expected",
        [("upper", ByteFilter.UPPER), ("lower", ByteFilter.LOWER), ("null", ByteFilter.NULL)],
    )
    def test_known_names_resolve(self, name: str, expected: ByteFilter) -> None:
        """Test that each filter name resolves to its variant."""
        assert resolve_filter(name) is expected

    def test_match_is_case_sensitive(self) -> None:
        """Test that names differing only in case are rejected."""
        assert resolve_filter("Upper") is None
        assert resolve_filter("NULL") is None

    def test_unknown_names_return_none(self) -> None:
        """Test that unknown or partial names are rejected."""
        assert resolve_filter("reverse") is None
        assert resolve_filter("") is None
        assert resolve_filter("up") is None
        assert resolve_filter(" upper") is None

    def test_filter_names_in_order(self) -> None:
        """Test the advertised filter names."""
        assert FILTER_NAMES == ("upper", "lower", "null")


class TestByteFilter:
    """Tests for ByteFilter transformations."""

    @pytest.mark.parametrize("byte_filter", list(ByteFilter))
    def test_length_is_preserved(self, byte_filter: ByteFilter) -> None:
        """Test that every filter maps n bytes to n bytes."""
        assert len(byte_filter.apply(ALL_BYTES)) == len(ALL_BYTES)
        assert len(byte_filter.apply(b"")) == 0

    def test_null_is_identity(self) -> None:
        """Test that the null filter leaves all bytes unchanged."""
        assert ByteFilter.NULL.apply(ALL_BYTES) == ALL_BYTES

    @pytest.mark.parametrize("byte_filter", [ByteFilter.UPPER, ByteFilter.LOWER])
    def test_case_filters_are_idempotent(self, byte_filter: ByteFilter) -> None:
        """Test that applying a case filter twice equals applying it once."""
        once = byte_filter.apply(ALL_BYTES)
        assert byte_filter.apply(once) == once

    def test_upper_maps_ascii_letters(self) -> None:
        """Test uppercasing of a mixed string."""
        assert ByteFilter.UPPER.apply(b"Hello, World!\n") == b"HELLO, WORLD!\n"

    def test_lower_maps_ascii_letters(self) -> None:
        """Test lowercasing of a mixed string."""
        assert ByteFilter.LOWER.apply(b"Hello, World!\n") == b"hello, world!\n"

    def test_non_ascii_bytes_unchanged(self) -> None:
        """Test that bytes outside ASCII letters pass through."""
        data = bytes(range(128, 256)) + b"0123456789@[`{"
        assert ByteFilter.UPPER.apply(data) == data
        assert ByteFilter.LOWER.apply(data) == data

    def test_upper_not_inverted_by_lower(self) -> None:
        """Test that upper then lower loses the original case."""
        original = b"MiXeD"
        assert ByteFilter.LOWER.apply(ByteFilter.UPPER.apply(original)) == b"mixed"

    def test_apply_byte(self) -> None:
        """Test single-byte application."""
        assert ByteFilter.UPPER.apply_byte(ord("a")) == ord("A")
        assert ByteFilter.LOWER.apply_byte(ord("Z")) == ord("z")
        assert ByteFilter.NULL.apply_byte(0xFF) == 0xFF

    def test_apply_byte_agrees_with_apply(self) -> None:
        """Test that single-byte and buffer application agree."""
        for byte_filter in ByteFilter:
            expected = bytes(byte_filter.apply_byte(b) for b in ALL_BYTES)
            assert byte_filter.apply(ALL_BYTES) == expected

    def test_apply_in_place(self) -> None:
        """Test that apply_in_place modifies the buffer itself."""
        buffer = bytearray(b"abc XYZ")
        ByteFilter.UPPER.apply_in_place(buffer)
        assert buffer == bytearray(b"ABC XYZ")

    def test_apply_accepts_bytearray(self) -> None:
        """Test that apply returns bytes for bytearray input."""
        result = ByteFilter.LOWER.apply(bytearray(b"ABC"))
        assert result == b"abc"
        assert isinstance(result, bytes)

    def test_apply_to_bytes_returns_bytes(self) -> None:
        """Test that bytes input yields a bytes result of the filtered data."""
        result = ByteFilter.UPPER.apply(b"abc")
        assert result == b"ABC"
        assert type(result) is bytes
