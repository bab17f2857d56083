"""Validators for player actions.

Validators check an intent against the rule tables and the current
state. They never mutate state.
"""

from gyeongbokgung.engine.validators.movement import MovementValidator
from gyeongbokgung.engine.validators.take import TakeValidator
from gyeongbokgung.engine.validators.use import UseEffect, UseValidator

__all__ = ["MovementValidator", "TakeValidator", "UseEffect", "UseValidator"]
