# ABOUTME: Unit tests for JsonContentCodec
# ABOUTME: Tests JSON capture from str and bytes and the mapping of malformed input to ParseError

import pytest

from field_versions.exceptions.resolution import ParseError
from field_versions.implementations.content.content_buffer import ContentBuffer
from field_versions.models.content import ContentKind


class TestJsonContentCodec:
    """Test cases for JsonContentCodec."""

    @pytest.mark.unit
    def test_name(self, json_codec):
        """Test codec name."""
        assert json_codec.name == "json"

    @pytest.mark.unit
    def test_capture_string(self, json_codec):
        """Test capturing a JSON string literal."""
        buffer = json_codec.capture('"100"')

        assert isinstance(buffer, ContentBuffer)
        assert buffer.kind is ContentKind.STR
        assert buffer.source == "json"
        assert buffer.to_python() == "100"

    @pytest.mark.unit
    def test_capture_bytes(self, json_codec):
        """Test capturing UTF-8 bytes."""
        buffer = json_codec.capture('{"name": "café"}'.encode("utf-8"))

        assert buffer.to_python() == {"name": "café"}

    @pytest.mark.unit
    def test_capture_bytearray(self, json_codec):
        """Test capturing a bytearray."""
        assert json_codec.capture(bytearray(b"[1, 2]")).to_python() == [1, 2]

    @pytest.mark.unit
    def test_number_stays_number(self, json_codec):
        """Test that JSON numbers and strings keep their kinds."""
        assert json_codec.capture("100").kind is ContentKind.INT
        assert json_codec.capture("1.5").kind is ContentKind.FLOAT
        assert json_codec.capture("true").kind is ContentKind.BOOL
        assert json_codec.capture("null").kind is ContentKind.NULL

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["", "{", '{"a": }', "[1, 2", "'single'"])
    def test_malformed_json(self, json_codec, raw):
        """Test that malformed JSON raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            json_codec.capture(raw)

        assert exc_info.value.code == "INVALID_JSON"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_non_finite_constants_rejected(self, json_codec, raw):
        """Test that non-standard numeric constants are not accepted."""
        with pytest.raises(ParseError) as exc_info:
            json_codec.capture(raw)

        assert exc_info.value.code == "INVALID_JSON"

    @pytest.mark.unit
    def test_invalid_encoding(self, json_codec):
        """Test that undecodable bytes raise ParseError."""
        with pytest.raises(ParseError) as exc_info:
            json_codec.capture(b"\xff\xfe\x00")

        assert exc_info.value.code == "INVALID_ENCODING"

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [100, None, {"a": 1}])
    def test_non_text_input(self, json_codec, raw):
        """Test that non-text input is rejected before parsing."""
        with pytest.raises(ParseError) as exc_info:
            json_codec.capture(raw)

        assert exc_info.value.code == "INVALID_INPUT_TYPE"

    @pytest.mark.unit
    def test_repr(self, json_codec):
        """Test string representation."""
        assert repr(json_codec) == "JsonContentCodec(encoding='utf-8')"
