"""Data models for grid verification."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single broken grid invariant."""
    code: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of grid verification."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
