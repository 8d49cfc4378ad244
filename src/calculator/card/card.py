from dataclasses import dataclass
from typing import List, Optional

from src.calculator.core.enums import Attribute
from src.calculator.core.skill import Skill


@dataclass
class Card:
    """
    Represents a playable card as seen by the skill calculations.

    A card owns a primary skill and, when its printed text declares one, a
    secondary skill. Matchers read `skill`, `attribute` and `character_name`.
    """

    character_name: str = ""
    attribute: Optional[Attribute] = None
    skill: Optional[Skill] = None
    secondary_skill: Optional[Skill] = None
    card_id: Optional[int] = None
    name: str = ""
    rarity: Optional[str] = None

    @property
    def skills(self) -> List[Skill]:
        """The card's skills in printed order."""
        return [s for s in (self.skill, self.secondary_skill) if s is not None]

    @property
    def choukaika(self) -> bool:
        """Whether the card is in the strengthened state."""
        return any(s.choukaika for s in self.skills)

    @choukaika.setter
    def choukaika(self, value: bool) -> None:
        for skill in self.skills:
            skill.choukaika = value

    def __repr__(self) -> str:
        header = f"<Card id={self.card_id} name='{self.name}' rarity='{self.rarity}'>"
        attribute = self.attribute.value if self.attribute else None
        info = f"  - Info: Character='{self.character_name}', Attribute='{attribute}'"
        skill_lines = [f"  - Skill: {skill!r}" for skill in self.skills]
        return "\n".join([header, info, *skill_lines])
