from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from src.calculator.core.enums import Attribute, SkillKind

if TYPE_CHECKING:
    from src.calculator.card.card import Card


@dataclass(frozen=True, eq=False)
class CardMatcher:
    """
    A predicate over the classifiable facets of a card.

    Every field is optional and an absent field imposes no constraint, so a
    matcher with no fields set matches every card. When several fields are
    set, all of them must hold.

    Attributes:
        skill_kind (Optional[SkillKind]): Kind the card's own skill must have.
        attribute (Optional[Attribute]): Attribute the card must have.
        character_names (Optional[Tuple[str, ...]]): Names, one of which must
            be the card's character. Kept in declaration order, compared as a
            set.
    """

    skill_kind: Optional[SkillKind] = None
    attribute: Optional[Attribute] = None
    character_names: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.character_names is not None:
            names = tuple(self.character_names)
            if not names:
                raise ValueError("character_names must not be empty.")
            object.__setattr__(self, "character_names", names)

    def match(self, card: "Card") -> bool:
        """Returns whether the card satisfies every constraint of this matcher."""
        return (
            self._match_skill_kind(card)
            and self._match_attribute(card)
            and self._match_character(card)
        )

    def _match_skill_kind(self, card: "Card") -> bool:
        if self.skill_kind is None:
            return True
        return card.skill is not None and card.skill.kind == self.skill_kind

    def _match_attribute(self, card: "Card") -> bool:
        if self.attribute is None:
            return True
        return card.attribute == self.attribute

    def _match_character(self, card: "Card") -> bool:
        if self.character_names is None:
            return True
        return card.character_name in self.character_names

    def _key(self) -> Tuple:
        names = (
            frozenset(self.character_names)
            if self.character_names is not None
            else None
        )
        return (self.skill_kind, self.attribute, names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardMatcher):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = [
            f"kind={self.skill_kind.value}" if self.skill_kind else "",
            f"attribute={self.attribute.value}" if self.attribute else "",
            (
                f"characters={list(self.character_names)}"
                if self.character_names
                else ""
            ),
        ]
        return f"<CardMatcher {', '.join(filter(None, parts)) or 'any'}>"
