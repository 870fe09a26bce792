# ABOUTME: Field components package exports
# ABOUTME: Exports the pydantic annotation that resolves versioned fields

from .versioned_field import Versioned

__all__ = [
    "Versioned",
]
