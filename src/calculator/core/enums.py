"""
This module defines the closed classification tags used by cards and skills.
"""

from enum import Enum
from typing import Any

from src.calculator.core.exceptions import InvalidKindError


class SkillKind(Enum):
    """
    The combat role of a skill.

    ATTACK raises the card's own combat value, BOOST raises the combat value
    of other cards matching a condition. GUARD and ASSIST carry their own
    effects but share the self-increase calculation with ATTACK.
    """

    ATTACK = "ATTACK"
    BOOST = "BOOST"
    GUARD = "GUARD"
    ASSIST = "ASSIST"

    @classmethod
    def from_label(cls, label: Any) -> "SkillKind":
        """Converts a raw data label into a SkillKind, raising InvalidKindError."""
        try:
            return cls(label)
        except ValueError as e:
            raise InvalidKindError(label) from e


class Attribute(Enum):
    """Elemental attribute printed on a card."""

    FIRE = "FIRE"
    LEAF = "LEAF"
    AQUA = "AQUA"

    @classmethod
    def from_label(cls, label: Any) -> "Attribute":
        try:
            return cls(label)
        except ValueError as e:
            raise ValueError(f"Invalid attribute: {label}") from e
