# ABOUTME: Content implementations package exports
# ABOUTME: Exports the in-memory content buffer and its JSON and Python codecs

from .content_buffer import ContentBuffer, adapter_for
from .json_codec import JsonContentCodec
from .python_codec import PythonContentCodec

__all__ = [
    "ContentBuffer",
    "adapter_for",
    "JsonContentCodec",
    "PythonContentCodec",
]
