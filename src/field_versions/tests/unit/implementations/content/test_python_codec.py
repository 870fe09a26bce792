# ABOUTME: Unit tests for PythonContentCodec
# ABOUTME: Tests capture of decoded values, pydantic model instances and non-JSON scalars

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

import pytest
from pydantic import BaseModel

from field_versions.exceptions.resolution import ParseError
from field_versions.models.content import ContentKind


class Point(BaseModel):
    x: int
    y: int


class Priority(Enum):
    LOW = 1
    HIGH = 2


class TestPythonContentCodec:
    """Test cases for PythonContentCodec."""

    @pytest.mark.unit
    def test_name(self, python_codec):
        """Test codec name."""
        assert python_codec.name == "python"

    @pytest.mark.unit
    def test_capture_plain_value(self, python_codec):
        """Test capturing an already-decoded tree."""
        buffer = python_codec.capture({"a": [1, "b", None]})

        assert buffer.kind is ContentKind.MAP
        assert buffer.source == "python"
        assert buffer.to_python() == {"a": [1, "b", None]}

    @pytest.mark.unit
    def test_capture_model_instance(self, python_codec):
        """Test that model instances are captured through their JSON dump."""
        buffer = python_codec.capture(Point(x=1, y=2))

        assert buffer.kind is ContentKind.MAP
        assert buffer.reinterpret(Point) == Point(x=1, y=2)

    @pytest.mark.unit
    def test_capture_non_json_scalars(self, python_codec):
        """Test that datetimes, UUIDs, decimals, bytes and enums are captured in JSON form."""
        buffer = python_codec.capture(
            {
                "when": datetime(2024, 1, 1),
                "id": UUID("12345678-1234-5678-1234-567812345678"),
                "amount": Decimal("1.50"),
                "raw": b"abc",
                "priority": Priority.HIGH,
            }
        )

        assert buffer.to_python() == {
            "when": "2024-01-01T00:00:00",
            "id": "12345678-1234-5678-1234-567812345678",
            "amount": "1.50",
            "raw": "abc",
            "priority": 2,
        }

    @pytest.mark.unit
    def test_datetime_reinterprets_as_itself(self, python_codec):
        """Test that a captured datetime decodes back into an equal datetime."""
        buffer = python_codec.capture(datetime(2024, 1, 1, 12, 30))

        assert buffer.kind is ContentKind.STR
        assert buffer.reinterpret(datetime) == datetime(2024, 1, 1, 12, 30)

    @pytest.mark.unit
    def test_unsupported_value(self, python_codec):
        """Test that values without a structural form raise ParseError."""
        with pytest.raises(ParseError):
            python_codec.capture({"when": object()})

    @pytest.mark.unit
    def test_unsupported_value_details(self, python_codec):
        """Test the error code and input type reported for an unsupported value."""
        with pytest.raises(ParseError) as exc_info:
            python_codec.capture(object())

        assert exc_info.value.code == "UNSUPPORTED_NODE"
        assert exc_info.value.details["input_type"] == "object"
