"""
Pydantic Models for the Pattern Catalogue

    from src.core.models import PatternInfo, PatternCategory
"""

from .pattern_model import (
    PatternCategory,
    PatternInfo
)

__all__ = [
    "PatternCategory",
    "PatternInfo",
]
