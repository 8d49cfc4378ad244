from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CardData:
    """
    Represents the static, immutable data for a single card, loaded from the
    cards.json file.
    """

    card_id: int
    name: str
    character: str
    attribute: str
    rarity: Optional[str] = None
    skill: Dict[str, Any] = field(default_factory=dict)
    choukaika_percentage: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CardData":
        """Creates a CardData instance from a raw cards.json record."""
        choukaika_percentage = data.get("choukaika_percentage")
        return cls(
            card_id=int(data["id"]),
            name=data.get("name", "Unknown Card"),
            character=data["character"],
            attribute=data["attribute"],
            rarity=data.get("rarity"),
            skill=data.get("skill", {}),
            choukaika_percentage=(
                int(choukaika_percentage) if choukaika_percentage is not None else None
            ),
        )
