"""
Sacred place models - blessing state for special locations

A sacred place starts unblessed and becomes blessed exactly once, when
offered its required item. Blessing never reverts.

Example:
    >>> place = SacredPlace(required_item=Item.INCENSE)
    >>> place.bless(Item.BINYEO)
    False
    >>> place.bless(Item.INCENSE)
    True
    >>> place.bless(Item.INCENSE)  # already blessed
    False
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from gyeongbokgung.models.world import Item


@runtime_checkable
class Sacred(Protocol):
    """Protocol for places that can be blessed with an item."""

    is_blessed: bool

    def bless(self, item: Item) -> bool:
        """Attempt to bless the place with an item.

        Returns:
            True if the blessing took effect, False otherwise
        """
        ...


class SacredPlace(BaseModel):
    """Blessing state of a single location.

    Attributes:
        is_blessed: Whether the place has accepted its offering
        required_item: The item the place accepts. None means it can
            never be blessed.
    """

    is_blessed: bool = False
    required_item: Item | None = None

    def bless(self, item: Item) -> bool:
        """Bless the place if `item` is the required one.

        Args:
            item: The item being offered

        Returns:
            True if the place went from unblessed to blessed, False if the
            item is wrong, no item is accepted, or it was already blessed
        """
        if self.is_blessed:
            return False
        if self.required_item is not None and self.required_item == item:
            self.is_blessed = True
            return True
        return False
