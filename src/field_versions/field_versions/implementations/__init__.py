# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the content interfaces

"""
Implementations

This module contains the concrete content buffer and its codecs.
"""

from .content import ContentBuffer, JsonContentCodec, PythonContentCodec

__all__ = [
    "ContentBuffer",
    "JsonContentCodec",
    "PythonContentCodec",
]
