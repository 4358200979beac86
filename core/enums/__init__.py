"""
Core enumerations package for the frame metadata converter.
"""

from .tensor_types import Precision, Layout

__all__ = [
    # Tensor types
    'Precision',
    'Layout',
]
