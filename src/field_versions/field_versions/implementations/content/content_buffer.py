# ABOUTME: Immutable in-memory content buffer backed by pydantic TypeAdapters
# ABOUTME: Freezes a plain-Python tree once and validates every reinterpretation from its canonical JSON

import json
import math
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter, ValidationError

from field_versions.exceptions.resolution import ParseError, StructuralMismatch
from field_versions.interfaces.content.content_buffer import AbstractContentBuffer
from field_versions.models.content import ContentKind
from field_versions.models.types import type_name


@lru_cache(maxsize=512)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def adapter_for(target: Any) -> TypeAdapter:
    """
    Get a TypeAdapter for a target type, reusing adapters for hashable targets.

    Args:
        target: Any type pydantic can validate

    Returns:
        TypeAdapter for the target
    """
    try:
        return _cached_adapter(target)
    except TypeError:
        # Unhashable annotation metadata
        return TypeAdapter(target)


def freeze(node: Any, path: str = "$") -> Any:
    """
    Convert a plain-Python tree into its immutable stored form.

    Sequences become tuples and maps become read-only mapping proxies.

    Raises:
        ParseError: If a node has no structural kind, a float is not finite,
            or a map key is not a string.
    """
    kind = ContentKind.of(node)
    if kind is None:
        raise ParseError(
            f"Unsupported content node at {path}: {type(node).__name__}",
            code="UNSUPPORTED_NODE",
            details={"path": path, "node_type": type(node).__name__},
        )
    if kind is ContentKind.FLOAT and not math.isfinite(node):
        raise ParseError(
            f"Non-finite number at {path}: {node!r}",
            code="NON_FINITE_NUMBER",
            details={"path": path},
        )
    if kind is ContentKind.SEQ:
        return tuple(freeze(item, f"{path}[{index}]") for index, item in enumerate(node))
    if kind is ContentKind.MAP:
        frozen: dict[str, Any] = {}
        for key, value in node.items():
            if not isinstance(key, str):
                raise ParseError(
                    f"Non-string map key at {path}: {key!r}",
                    code="INVALID_MAP_KEY",
                    details={"path": path, "key_type": type(key).__name__},
                )
            frozen[key] = freeze(value, f"{path}.{key}")
        return MappingProxyType(frozen)
    return node


def thaw(node: Any) -> Any:
    """Build a fresh mutable copy of a frozen tree."""
    if isinstance(node, tuple):
        return [thaw(item) for item in node]
    if isinstance(node, MappingProxyType):
        return {key: thaw(value) for key, value in node.items()}
    return node


class ContentBuffer(AbstractContentBuffer):
    """
    Read-only structural snapshot of one deserialized value.

    The tree is frozen and rendered to canonical JSON once, on construction.
    Each call to `reinterpret` validates that JSON with pydantic, so every
    attempt builds brand new objects and nothing an attempt does (validators,
    converters mutating their input) can reach a later attempt.

    Strict reinterpretation uses pydantic's strict JSON rules: objects may
    become models or typed dicts and arrays may become lists or tuples, but a
    string never becomes a number and a number never becomes a string.
    """

    __slots__ = ("_root", "_kind", "_source", "_json")

    def __init__(self, value: Any, source: str = "python"):
        """
        Capture a plain-Python value.

        Args:
            value: JSON-like tree (None, bool, int, float, str, list/tuple, dict with str keys)
            source: Name of the codec that produced the value, kept for diagnostics

        Raises:
            ParseError: If the value contains unsupported nodes
        """
        self._root = freeze(value)
        self._kind = ContentKind.of(self._root)
        self._source = source
        self._json = json.dumps(thaw(self._root), ensure_ascii=False, separators=(",", ":")).encode("utf-8")

    @property
    def kind(self) -> ContentKind:
        return self._kind

    @property
    def source(self) -> str:
        return self._source

    def to_python(self) -> Any:
        return thaw(self._root)

    def to_json(self) -> bytes:
        """Canonical compact JSON rendering of the captured value."""
        return self._json

    def reinterpret(self, target: Any, *, strict: bool = True) -> Any:
        adapter = adapter_for(target)
        try:
            return adapter.validate_json(self._json, strict=strict)
        except ValidationError as e:
            name = type_name(target)
            raise StructuralMismatch(
                f"Content of kind '{self._kind}' does not match {name}",
                code="STRUCTURAL_MISMATCH",
                details={
                    "target_type": name,
                    "content_kind": str(self._kind),
                    "error_count": e.error_count(),
                    "errors": [error["msg"] for error in e.errors()[:5]],
                },
            ) from e

    def __repr__(self) -> str:
        return f"ContentBuffer(kind={self._kind}, source='{self._source}')"
