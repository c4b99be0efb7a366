"""Base model class and prefixcode-specific Pydantic configuration.

This module provides the BaseCodebookModel class that all codebook models inherit from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseCodebookModel(BaseModel):
    """Base class for prefixcode data models.

    Models reject unknown fields and are re-validated when an attribute is
    assigned.
    """

    model_config = ConfigDict(
        # Standard (lax) type validation
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
