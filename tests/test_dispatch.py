"""Tests for decode, encode and transcode."""

import pytest

from unicodec import (
    Codec,
    MalformedSequenceError,
    UnencodableValueError,
    UnknownCodecError,
    decode,
    encode,
    transcode,
    utf8to16,
    utf16to8,
)

UTF16LE_SAMPLE = b"\x08\xd8\x45\xdf=\x00R\x00a\x00"
UTF16BE_SAMPLE = b"\xd8\x08\xdf\x45\x00=\x00R\x00a"
UTF8_SAMPLE = b"\xf0\x92\x8d\x85=Ra"
NIHONGO = [0x65E5, 0x672C, 0x8A9E]
NIHONGO_UTF8 = b"\xe6\x97\xa5\xe6\x9c\xac\xe8\xaa\x9e"


class TestDecode:
    """Tests for decode."""

    def test_utf8(self) -> None:
        assert decode(NIHONGO_UTF8, Codec.UTF8) == NIHONGO

    def test_utf16_little_endian(self) -> None:
        assert decode(UTF16LE_SAMPLE, Codec.UTF16) == [0x12345, 0x3D, 0x52, 0x61]

    def test_utf16_big_endian(self) -> None:
        assert decode(UTF16BE_SAMPLE, Codec.UTF16, True) == [0x12345, 0x3D, 0x52, 0x61]

    def test_cp437(self) -> None:
        assert decode(b"\x81ber", Codec.CP437) == [0xFC, 0x62, 0x65, 0x72]

    def test_empty(self) -> None:
        assert decode(b"", Codec.UTF8) == []
        assert decode(b"", Codec.UTF16) == []

    def test_utf8_surrogates_pass(self) -> None:
        assert decode(b"\xed\xa0\x80", Codec.UTF8) == [0xD800]

    def test_malformed_utf8_raises(self) -> None:
        with pytest.raises(MalformedSequenceError) as err:
            decode(b"abc\xff", Codec.UTF8)
        assert err.value.position == 3

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode(b"\xe7a", "utf-8")

    def test_truncated_utf16_raises(self) -> None:
        with pytest.raises(MalformedSequenceError) as err:
            decode(b"A\x00B", Codec.UTF16)
        assert err.value.position == 2

    def test_codec_by_name(self) -> None:
        assert decode(b"\x00A", "UTF-16BE") == [0x41]
        assert decode(b"A\x00", "utf-16le", bigendian=True) == [0x41]
        assert decode(b"\x81", "IBM437") == [0xFC]

    def test_unknown_codec(self) -> None:
        with pytest.raises(UnknownCodecError):
            decode(b"abc", "ebcdic")


class TestEncode:
    """Tests for encode."""

    def test_utf8(self) -> None:
        assert encode(NIHONGO, Codec.UTF8) == NIHONGO_UTF8

    def test_utf16(self) -> None:
        assert encode([0x12345, 61, 82, 97], Codec.UTF16) == UTF16LE_SAMPLE

    def test_utf16_big_endian(self) -> None:
        assert encode([0x12345, 61, 82, 97], Codec.UTF16, True) == UTF16BE_SAMPLE

    def test_cp437(self) -> None:
        assert encode([0x221E, 0x2248, 0x30], Codec.CP437) == b"\xec\xf70"

    def test_accepts_iterables(self) -> None:
        assert encode(iter([0x41, 0x42]), Codec.UTF8) == b"AB"

    def test_utf8_bulk_matches_per_character(self) -> None:
        codepoints = [0x41, 0xE9, 0xD800, 0x12345]
        per_char = b"".join(Codec.UTF8.enc(cp) or b"" for cp in codepoints)
        assert encode(codepoints, Codec.UTF8) == per_char

    @pytest.mark.parametrize("codec", list(Codec))
    def test_out_of_range_raises(self, codec: Codec) -> None:
        with pytest.raises(UnencodableValueError) as err:
            encode([0x41, 0x110000], codec)
        assert err.value.codepoint == 0x110000
        assert err.value.index == 1

    def test_utf8_non_int_raises(self) -> None:
        with pytest.raises(UnencodableValueError) as err:
            encode([0x41, 0x42, 1.5], Codec.UTF8)  # type: ignore[list-item]
        assert err.value.index == 2

    def test_cp437_unrepresentable_raises(self) -> None:
        with pytest.raises(UnencodableValueError) as err:
            encode([0x41, 0x20AC], "cp437")
        assert err.value.codepoint == 0x20AC
        assert err.value.codec == "cp437"


class TestTranscode:
    """Tests for transcode and its named shortcuts."""

    def test_utf16to8(self) -> None:
        assert utf16to8(UTF16LE_SAMPLE) == UTF8_SAMPLE

    def test_utf8to16_is_inverse(self) -> None:
        assert utf8to16(utf16to8(UTF16LE_SAMPLE)) == UTF16LE_SAMPLE

    def test_utf16_byte_swap(self) -> None:
        assert (
            transcode(UTF16LE_SAMPLE, Codec.UTF16, Codec.UTF16, False, True)
            == UTF16BE_SAMPLE
        )

    def test_cp437_to_utf8(self) -> None:
        assert transcode(b"\x81ber", Codec.CP437, Codec.UTF8) == "über".encode()

    def test_utf8_to_cp437(self) -> None:
        assert transcode("über".encode(), Codec.UTF8, Codec.CP437) == b"\x81ber"

    def test_utf8_to_utf8_validates(self) -> None:
        assert transcode(NIHONGO_UTF8, Codec.UTF8, Codec.UTF8) == NIHONGO_UTF8
        with pytest.raises(MalformedSequenceError):
            transcode(b"\xc3", Codec.UTF8, Codec.UTF8)

    @pytest.mark.parametrize(
        ("buf", "decoder", "encoder", "bigendian_dec", "bigendian_enc"),
        [
            (UTF16BE_SAMPLE, Codec.UTF16, Codec.UTF8, True, False),
            (UTF8_SAMPLE, Codec.UTF8, Codec.UTF16, False, True),
            (b"\xc9\xcd\xbb", Codec.CP437, Codec.UTF16, False, False),
        ],
    )
    def test_matches_encode_of_decode(
        self,
        buf: bytes,
        decoder: Codec,
        encoder: Codec,
        bigendian_dec: bool,
        bigendian_enc: bool,
    ) -> None:
        expected = encode(decode(buf, decoder, bigendian_dec), encoder, bigendian_enc)
        assert transcode(buf, decoder, encoder, bigendian_dec, bigendian_enc) == expected

    def test_malformed_input_raises(self) -> None:
        with pytest.raises(MalformedSequenceError):
            transcode(b"Comme \xe7a", Codec.UTF8, Codec.UTF16)

    def test_truncated_utf16_raises(self) -> None:
        with pytest.raises(MalformedSequenceError):
            utf16to8(b"\x08\xd8\x45")

    def test_unencodable_raises(self) -> None:
        with pytest.raises(UnencodableValueError):
            transcode("日本".encode(), Codec.UTF8, Codec.CP437)

    def test_bogus_surrogate_pair_above_max(self) -> None:
        # 0xDBFF followed by 0xFFFF decodes past U+10FFFF
        with pytest.raises(UnencodableValueError) as err:
            utf16to8(b"\xff\xdb\xff\xff")
        assert err.value.codepoint == 0x111FFF
