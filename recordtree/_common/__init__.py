"""Shared configuration components.

This internal package holds the option dataclasses used by the core and the
functional API. Import them from ``recordtree`` instead.
"""

from .config import (
    TraversalStrategy,
    FieldConfig,
    DepthConfig,
    ShakeConfig,
)

__all__ = [
    'TraversalStrategy',
    'FieldConfig',
    'DepthConfig',
    'ShakeConfig',
]
