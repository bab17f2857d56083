"""
Validation models for the palace engine.

ValidationResult is the outcome of checking an ActionIntent against the
movement and interaction rules. It says whether the action is allowed
and, if not, why.

Example:
    >>> # Successful validation
    >>> result = valid_result(destination=Location.LIBRARY)

    >>> # Failed validation
    >>> result = invalid_result(
    ...     RejectionCode.NO_EXIT,
    ...     "You cannot go that way. 🚫",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RejectionCode(str, Enum):
    """Why an action was refused.

    These codes are logged and asserted on in tests. The player only
    sees the rejection reason.
    """

    # Movement
    NO_EXIT = "no_exit"  # No route in that direction
    MISSING_ITEM = "missing_item"  # Route needs an item the player lacks
    NOT_BLESSED = "not_blessed"  # Route needs a sacred place blessed first

    # Items
    UNKNOWN_ITEM = "unknown_item"  # Name is not an item at all
    ITEM_NOT_HERE = "item_not_here"  # Nothing of that kind to take here
    ALREADY_HAVE = "already_have"  # Item already in inventory
    NOT_HELD = "not_held"  # Using an item the player doesn't have

    # Sacred places
    ALREADY_BLESSED = "already_blessed"  # Offering to a blessed place
    NOTHING_HAPPENS = "nothing_happens"  # Item has no effect here


class ValidationResult(BaseModel):
    """Result of validating an ActionIntent against the rules.

    Attributes:
        valid: Whether the action is allowed
        rejection_code: Code indicating why validation failed (if invalid)
        rejection_reason: Player-facing message for the failure (if invalid)
        context: Resolved values for execution (destination, item, etc.)
    """

    valid: bool

    # Rejection details (required if valid=False)
    rejection_code: RejectionCode | None = None
    rejection_reason: str | None = None

    context: dict[str, object] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_rejection_fields(self) -> "ValidationResult":
        """Ensure rejection fields are present when valid=False."""
        if not self.valid:
            if self.rejection_code is None:
                raise ValueError("rejection_code is required when valid=False")
            if self.rejection_reason is None:
                raise ValueError("rejection_reason is required when valid=False")
        return self


def valid_result(**context: object) -> ValidationResult:
    """Create a successful ValidationResult.

    Example:
        >>> result = valid_result(item=Item.SCROLL)
        >>> assert result.valid
    """
    return ValidationResult(valid=True, context=dict(context))


def invalid_result(
    code: RejectionCode,
    reason: str,
    **context: object,
) -> ValidationResult:
    """Create a failed ValidationResult.

    Args:
        code: The rejection code
        reason: Player-facing message
        **context: Additional context to include

    Returns:
        ValidationResult with valid=False
    """
    return ValidationResult(
        valid=False,
        rejection_code=code,
        rejection_reason=reason,
        context=dict(context),
    )
