from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from src.calculator.core.card_matcher import CardMatcher
from src.calculator.core.enums import SkillKind

if TYPE_CHECKING:
    from src.calculator.card.card import Card
    from src.calculator.card.deck import Deck


@dataclass
class Skill:
    """
    Represents one decoded skill of a card and how much it raises combat value.

    The text-derived fields (kind, percentage_base, boss, condition) are set
    once at construction. `choukaika` and `percentage_choukaika` reflect the
    card's live strengthened state and may be changed by the caller between
    calculations.

    Attributes:
        kind (SkillKind): The skill's combat role.
        percentage_base (int): The magnitude printed in the skill text.
        boss (bool): Whether the skill only works in the second half of the
                     battle.
        condition (Optional[CardMatcher]): For self-increase skills, the
                     cards counted in the deck. For boost skills, the cards
                     that receive the boost.
        choukaika (bool): Whether the card is in the strengthened state.
        percentage_choukaika (Optional[int]): Magnitude replacing the base
                     while strengthened. When unset, the base is raised by
                     CHOUKAIKA_BONUS instead.
    """

    CHOUKAIKA_BONUS = 2

    kind: SkillKind
    percentage_base: int = 0
    boss: bool = False
    condition: Optional[CardMatcher] = None
    choukaika: bool = False
    percentage_choukaika: Optional[int] = None

    @property
    def effective_percentage(self) -> int:
        """The magnitude after applying the strengthened state."""
        if not self.choukaika:
            return self.percentage_base
        if self.percentage_choukaika is not None:
            return self.percentage_choukaika
        return self.percentage_base + self.CHOUKAIKA_BONUS

    def _inactive(self, in_boss_phase: bool) -> bool:
        return self.boss and not in_boss_phase

    def calculate_self_increase_percent(
        self, in_boss_phase: bool, deck: Optional["Deck"] = None
    ) -> int:
        """
        Calculates how much this skill raises its own card's combat value.

        With a condition and a deck, the magnitude is multiplied by the
        number of cards in the deck matching the condition. Without a deck
        the condition cannot be counted and the plain magnitude is returned.
        """
        if self.kind == SkillKind.BOOST or self._inactive(in_boss_phase):
            return 0

        percentage = self.effective_percentage
        if self.condition is None or deck is None:
            return percentage

        return percentage * deck.count_matching(self.condition)

    def calculate_boost_percent(self, in_boss_phase: bool, card: "Card") -> int:
        """Calculates how much this skill raises another card's combat value."""
        if self.kind != SkillKind.BOOST or self._inactive(in_boss_phase):
            return 0
        if self.condition is not None and not self.condition.match(card):
            return 0
        return self.effective_percentage

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> List["Skill"]:
        """
        Decodes a skill record of the card data source.

        The record holds "kind" (or the data source's "type"), "name" and
        "details". Returns the primary skill, followed by the secondary
        skill when the text declares one.
        """
        # Imported here, the parser builds Skill instances.
        from src.calculator.core.skill_parser import SkillParser

        kind_label = data.get("kind", data.get("type"))
        return SkillParser().parse(
            kind_label, data.get("name", ""), data.get("details", "")
        )

    def __repr__(self) -> str:
        parts = [
            f"kind={self.kind.value}",
            f"percentage={self.percentage_base}",
            "boss" if self.boss else "",
            f"condition={self.condition!r}" if self.condition else "",
            (
                f"choukaika={self.effective_percentage}"
                if self.choukaika
                else ""
            ),
        ]
        return f"<Skill {', '.join(filter(None, parts))}>"
