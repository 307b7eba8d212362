"""Tests for the chardet heuristic."""

import pytest

from unicodec import chardet

UTF16LE_SAMPLE = b"\x08\xd8\x45\xdf=\x00R\x00a\x00"
UTF16BE_SAMPLE = b"\xd8\x08\xdf\x45\x00=\x00R\x00a"


class TestChardet:
    """Tests for chardet."""

    @pytest.mark.parametrize(
        ("buf", "expected"),
        [
            (UTF16LE_SAMPLE, "utf-16le"),
            (UTF16BE_SAMPLE, "utf-16be"),
            (b"...\xf0\x92\x8d\x85=Ra", "utf-8"),
            (b"This sentence is completely normal.", "ascii"),
            (b"Comme ci, comme \xe7a", "other"),
        ],
    )
    def test_reference_samples(self, buf: bytes, expected: str) -> None:
        assert chardet(buf) == expected

    @pytest.mark.parametrize(
        ("buf", "expected"),
        [
            (b"\xff\xfeabc", "utf-16le"),
            (b"\xfe\xff\x00a", "utf-16be"),
            (b"\xef\xbb\xbf\xff\xff", "utf-8"),
        ],
    )
    def test_bom(self, buf: bytes, expected: str) -> None:
        assert chardet(buf) == expected

    def test_bom_outside_limit_ignored(self) -> None:
        assert chardet(b"\xff\xfe", 1) == "ascii"

    def test_first_nul_decides(self) -> None:
        # High bytes before the NUL do not matter
        assert chardet(b"\xe7a\x00b") == "utf-16be"
        assert chardet(b"\xc3\xa9b\x00c") == "utf-16le"

    def test_last_byte_of_prefix_not_scanned(self) -> None:
        assert chardet(b"a\x00") == "ascii"
        assert chardet(b"ab\xff") == "ascii"

    def test_length_caps_scan(self) -> None:
        buf = b"plain ascii text " + b"\xe7"
        assert chardet(buf, 10) == "ascii"
        assert chardet(buf + b"a") == "other"

    def test_utf8_sequence_may_cross_limit(self) -> None:
        assert chardet(b"ab\xe6\x97\xa5", 4) == "utf-8"

    def test_invalid_utf8_is_not_reconsidered(self) -> None:
        assert chardet(b"\xff \xc3\xa9 ok") == "other"

    @pytest.mark.parametrize("buf", [b"", b"a", b"\x00", b"\xff"])
    def test_short_buffers(self, buf: bytes) -> None:
        assert chardet(buf) == "ascii"
