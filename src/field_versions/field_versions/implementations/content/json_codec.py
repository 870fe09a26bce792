# ABOUTME: JSON implementation of AbstractContentCodec
# ABOUTME: Parses JSON text once into a ContentBuffer using the standard json module

import json
from typing import Any, NoReturn

from field_versions.exceptions.resolution import ParseError
from field_versions.implementations.content.content_buffer import ContentBuffer
from field_versions.interfaces.content.content_buffer import AbstractContentCodec


def _reject_constant(constant: str) -> NoReturn:
    raise ValueError(f"Non-finite constant {constant} is not valid JSON content")


class JsonContentCodec(AbstractContentCodec):
    """
    Captures JSON text (``str`` or UTF-8 ``bytes``) into a `ContentBuffer`.

    Payloads carry no version marker; the codec only reproduces their
    structure. Non-finite constants (``NaN``, ``Infinity``) are rejected so
    every captured tree is plain JSON.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the JSON codec.

        Args:
            encoding: Text encoding used to decode bytes input
        """
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "json"

    def capture(self, raw: Any) -> ContentBuffer:
        """
        Parse JSON text into a content buffer.

        Args:
            raw: JSON document as str, bytes or bytearray

        Returns:
            The captured ContentBuffer

        Raises:
            ParseError: If the input is not text, not decodable, or not valid JSON
        """
        try:
            if isinstance(raw, (bytes, bytearray)):
                text = bytes(raw).decode(self._encoding)
            elif isinstance(raw, str):
                text = raw
            else:
                raise ParseError(
                    f"Expected JSON text as str or bytes, got {type(raw).__name__}",
                    code="INVALID_INPUT_TYPE",
                    details={"input_type": type(raw).__name__},
                )

            value = json.loads(text, parse_constant=_reject_constant)
            return ContentBuffer(value, source=self.name)

        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON data: {e}",
                code="INVALID_JSON",
                details={"error": str(e), "position": getattr(e, "pos", None)},
            ) from e
        except UnicodeDecodeError as e:
            raise ParseError(
                f"Invalid {self._encoding} encoding: {e}", code="INVALID_ENCODING", details={"error": str(e)}
            ) from e
        except ValueError as e:
            raise ParseError(
                f"Invalid JSON content: {e}",
                code="INVALID_JSON",
                details={"error": str(e)},
            ) from e

    def __repr__(self) -> str:
        return f"JsonContentCodec(encoding='{self._encoding}')"
