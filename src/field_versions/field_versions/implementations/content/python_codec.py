# ABOUTME: Python-object implementation of AbstractContentCodec
# ABOUTME: Captures already-decoded values, such as the raw input pydantic hands to a field validator

from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from field_versions.exceptions.resolution import ParseError
from field_versions.implementations.content.content_buffer import ContentBuffer
from field_versions.interfaces.content.content_buffer import AbstractContentCodec


class PythonContentCodec(AbstractContentCodec):
    """
    Captures plain-Python values into a `ContentBuffer`.

    Values are first reduced to their JSON form with pydantic's own
    encoder, so model instances, datetimes, UUIDs, decimals, bytes and
    enums that are already of the current type (e.g. assigned directly in
    Python) resolve on the current fast path.
    """

    @property
    def name(self) -> str:
        return "python"

    def capture(self, raw: Any) -> ContentBuffer:
        """
        Capture a decoded value.

        Raises:
            ParseError: If the value contains nodes with no JSON representation
        """
        try:
            value = to_jsonable_python(raw)
        except PydanticSerializationError as e:
            raise ParseError(
                f"Unsupported content value: {e}",
                code="UNSUPPORTED_NODE",
                details={"input_type": type(raw).__name__, "error": str(e)},
            ) from e
        return ContentBuffer(value, source=self.name)
