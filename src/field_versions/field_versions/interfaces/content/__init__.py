# ABOUTME: Content interfaces package exports
# ABOUTME: Exports abstract classes for content buffers and content codecs

from .content_buffer import AbstractContentBuffer, AbstractContentCodec

__all__ = [
    "AbstractContentBuffer",
    "AbstractContentCodec",
]
