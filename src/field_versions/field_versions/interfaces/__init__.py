# ABOUTME: Interfaces package exports
# ABOUTME: Exports all abstract interfaces the version resolver depends on

# Content interfaces
from .content import AbstractContentBuffer, AbstractContentCodec

__all__ = [
    # Content
    "AbstractContentBuffer",
    "AbstractContentCodec",
]
