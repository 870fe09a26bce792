# ABOUTME: Models package initialization
# ABOUTME: Exports version tags, content kinds, attempt records and fixed-width type aliases

# Version tags
from .version_tag import VersionTag, Uuid, Num, Sem, Ver, Current, CURRENT

# Content
from .content import ContentKind

# Resolution diagnostics
from .attempt import AttemptStage, ResolutionAttempt

# Type definitions
from .types import U32, U64, U128, type_name

__all__ = [
    # Version tags
    "VersionTag",
    "Uuid",
    "Num",
    "Sem",
    "Ver",
    "Current",
    "CURRENT",
    # Content
    "ContentKind",
    # Resolution diagnostics
    "AttemptStage",
    "ResolutionAttempt",
    # Types
    "U32",
    "U64",
    "U128",
    "type_name",
]
