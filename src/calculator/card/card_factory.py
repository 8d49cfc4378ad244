import json
import warnings
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from src.calculator.card.card import Card
from src.calculator.card.card_data import CardData
from src.calculator.core.enums import Attribute
from src.calculator.core.exceptions import SkillParseError
from src.calculator.core.skill import Skill


class CardFactory:
    """
    Handles loading card data from JSON and creating Card instances.

    Skill texts are decoded once while indexing, so a card whose text cannot
    be parsed is reported and skipped at load time rather than on creation.
    Each created card receives its own copies of the decoded skills.
    """

    def __init__(self, cards_json_path: str):
        raw_data = self._load_json(cards_json_path)
        if not isinstance(raw_data, list):
            raise TypeError("Cards data file must be a list of objects.")
        self._skills_map: Dict[int, List[Skill]] = {}
        self._card_data_map: Dict[int, CardData] = self._index_card_data(raw_data)

    def _load_json(self, json_path: str) -> List[Dict[str, Any]]:
        """Helper to load and parse a JSON file."""
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            raise RuntimeError(
                f"Failed to load or parse JSON from {json_path}: {e}"
            ) from e

    def _index_card_data(self, raw_data: List[Dict[str, Any]]) -> Dict[int, CardData]:
        """Converts the raw list of data into a dictionary of CardData objects."""
        indexed_map = {}
        for record in raw_data:
            try:
                card_data = CardData.from_dict(record)
                Attribute.from_label(card_data.attribute)
                skills = Skill.from_json(card_data.skill)
            except SkillParseError as e:
                warnings.warn(
                    f"Skipping card record {record.get('id')} with unparseable skill: {e}"
                )
                continue
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                warnings.warn(f"Skipping invalid card record: {record}. Error: {e}")
                continue
            skills[0].percentage_choukaika = card_data.choukaika_percentage
            indexed_map[card_data.card_id] = card_data
            self._skills_map[card_data.card_id] = skills
        return indexed_map

    @property
    def card_ids(self) -> List[int]:
        return list(self._card_data_map.keys())

    def get_card_data(self, card_id: int) -> Optional[CardData]:
        return self._card_data_map.get(card_id)

    def create_card(self, card_id: int, choukaika: bool = False) -> Optional[Card]:
        """
        Creates a fresh Card instance by its ID.

        Args:
            card_id: The static ID of the card.
            choukaika: Whether the card starts in the strengthened state.

        Returns:
            A Card object or None if the ID is unknown.
        """
        card_data = self._card_data_map.get(card_id)
        if not card_data:
            warnings.warn(f"Error: Card with ID {card_id} not found.")
            return None

        primary, secondary = self._build_skills(card_id)
        card = Card(
            character_name=card_data.character,
            attribute=Attribute.from_label(card_data.attribute),
            skill=primary,
            secondary_skill=secondary,
            card_id=card_data.card_id,
            name=card_data.name,
            rarity=card_data.rarity,
        )
        card.choukaika = choukaika
        return card

    def _build_skills(self, card_id: int) -> Tuple[Skill, Optional[Skill]]:
        skills = [replace(skill) for skill in self._skills_map[card_id]]
        secondary = skills[1] if len(skills) > 1 else None
        return skills[0], secondary
