"""
Infrastructure Patterns Module
Provides Singleton metaclass and Base models
"""

from src.core.patterns.singleton import Singleton
from src.core.patterns.base_model import BaseModel, ImmutableModel, Field, field_validator

__all__ = [
    "Singleton",
    "BaseModel",
    "ImmutableModel",
    "Field",
    "field_validator",
]
