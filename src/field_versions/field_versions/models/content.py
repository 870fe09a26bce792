# ABOUTME: Node kinds of a captured content tree
# ABOUTME: Classifies plain-Python values into the structural kinds a content buffer stores

from enum import Enum
from types import MappingProxyType
from typing import Any


class ContentKind(str, Enum):
    """
    Structural kind of a content node.

    Attributes:
        NULL (str): Absent value (JSON null / Python None).
        BOOL (str): Boolean.
        INT (str): Integer of arbitrary width.
        FLOAT (str): Finite floating point number.
        STR (str): Text.
        SEQ (str): Ordered sequence of nodes.
        MAP (str): String-keyed mapping of nodes.
    """

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    SEQ = "seq"
    MAP = "map"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, node: Any) -> "ContentKind | None":
        """
        Classify a node, or return None when it has no structural kind.

        ``bool`` is checked before ``int`` since it is an ``int`` subclass.
        """
        if node is None:
            return cls.NULL
        if isinstance(node, bool):
            return cls.BOOL
        if isinstance(node, int):
            return cls.INT
        if isinstance(node, float):
            return cls.FLOAT
        if isinstance(node, str):
            return cls.STR
        if isinstance(node, (list, tuple)):
            return cls.SEQ
        if isinstance(node, (dict, MappingProxyType)):
            return cls.MAP
        return None

    def is_scalar(self) -> bool:
        return self not in (ContentKind.SEQ, ContentKind.MAP)
