# ABOUTME: Abstract content buffer and content codec interfaces
# ABOUTME: Defines capture-once, reinterpret-many access to one serialized value

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from field_versions.models.content import ContentKind

T = TypeVar("T")


class AbstractContentBuffer(ABC):
    """
    [L0] Abstract base class for a captured, type-erased serialized value.

    A content buffer holds the structure of one value (scalars, sequences and
    string-keyed maps) after the raw input has been consumed exactly once.
    It can then be reinterpreted as any number of target types, in any
    order, without re-reading the input. Buffers are read-only after capture:
    a reinterpretation attempt can never change what a later attempt sees.
    """

    @property
    @abstractmethod
    def kind(self) -> ContentKind:
        """
        The node kind at the root of the captured value.

        Returns:
            ContentKind: One of null, bool, int, float, str, seq or map.
        """
        pass

    @abstractmethod
    def reinterpret(self, target: Any, *, strict: bool = True) -> Any:
        """
        Decodes the captured structure as `target`.

        Args:
            target (Any): A type pydantic can validate (builtins, `Annotated`
                          aliases, models, TypedDicts, ...).
            strict (bool): Whether to refuse lossy coercions, e.g. a string
                           becoming an integer.

        Returns:
            Any: A new instance of the target type built from the buffer.

        Raises:
            StructuralMismatch: If the buffer's shape is incompatible with `target`.
        """
        pass

    @abstractmethod
    def to_python(self) -> Any:
        """
        Returns a fresh, mutable plain-Python copy of the captured value.

        Every call returns new containers, so callers may mutate the result freely.
        """
        pass


class AbstractContentCodec(ABC):
    """
    [L0] Abstract base class for capturing raw input into a content buffer.

    Implementations bind a concrete serialization format (JSON text, already
    decoded Python values, ...) to the format-agnostic buffer that the
    version resolver works against.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the captured format, e.g. ``"json"``."""
        pass

    @abstractmethod
    def capture(self, raw: Any) -> AbstractContentBuffer:
        """
        Fully consumes `raw` into a reusable content buffer.

        Args:
            raw (Any): The serialized input in this codec's format.

        Returns:
            AbstractContentBuffer: The captured structure.

        Raises:
            ParseError: If the input cannot be captured at all.
        """
        pass
