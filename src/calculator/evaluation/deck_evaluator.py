"""
This module defines the DeckEvaluator class, which combines the skills of
every card of a deck into the combat bonus each card receives.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from src.calculator.card.card import Card
from src.calculator.card.deck import Deck
from src.calculator.evaluation.evaluation_config import EvaluationConfig


@dataclass(frozen=True)
class CardEvaluation:
    """
    The combat bonus one card of a deck receives in a battle phase.

    Attributes:
        slot (int): 1-based position of the card in the deck.
        card (Card): The evaluated card.
        in_boss_phase (bool): Whether the second half of the battle was
                              evaluated.
        self_percent (int): Bonus from the card's own skills.
        boost_percent (int): Bonus received from boost skills in the deck.
    """

    slot: int
    card: Card
    in_boss_phase: bool
    self_percent: int
    boost_percent: int

    @property
    def total_percent(self) -> int:
        return self.self_percent + self.boost_percent


class DeckEvaluator:
    """
    Evaluates the combat bonus of every card of a deck.

    A card's own skills are counted against the whole deck. Boost skills of
    every card in the deck, the receiving card included, are applied to the
    card when their condition matches it.
    """

    PHASES: Dict[str, bool] = {"normal": False, "boss": True}

    def __init__(self, deck: Deck, config: Optional[EvaluationConfig] = None):
        self.deck = deck
        self.config = config or EvaluationConfig()
        self.logger: logging.Logger = self._setup_logger(self.config.log_level)

    def self_increase_percent(self, card: Card, in_boss_phase: bool) -> int:
        """Sum of the self-increase of all skills of a card."""
        return sum(
            skill.calculate_self_increase_percent(in_boss_phase, self.deck)
            for skill in card.skills
        )

    def boost_percent(self, card: Card, in_boss_phase: bool) -> int:
        """Sum of the boosts every card of the deck gives to a card."""
        return sum(
            skill.calculate_boost_percent(in_boss_phase, card)
            for source in self.deck
            for skill in source.skills
        )

    def evaluate(self, in_boss_phase: bool) -> List[CardEvaluation]:
        """
        Evaluates every card of the deck for one battle phase.

        Args:
            in_boss_phase: Whether to evaluate the second half of the battle.

        Returns:
            One CardEvaluation per card, in deck order.
        """
        phase_name = "boss" if in_boss_phase else "normal"
        self.logger.debug("--- Evaluating %s phase for %s ---", phase_name, self)

        evaluations = []
        for slot, card in enumerate(self.deck, start=1):
            evaluation = CardEvaluation(
                slot=slot,
                card=card,
                in_boss_phase=in_boss_phase,
                self_percent=self.self_increase_percent(card, in_boss_phase),
                boost_percent=self.boost_percent(card, in_boss_phase),
            )
            self.logger.info(
                "Slot %d (%s) [%s]: self +%d%%, boost +%d%%, total +%d%%",
                slot,
                card.name or card.character_name,
                phase_name,
                evaluation.self_percent,
                evaluation.boost_percent,
                evaluation.total_percent,
            )
            evaluations.append(evaluation)
        return evaluations

    def evaluate_all_phases(self) -> Dict[str, List[CardEvaluation]]:
        """Evaluates the deck in both the normal and the boss phase."""
        return {
            phase_name: self.evaluate(in_boss_phase)
            for phase_name, in_boss_phase in self.PHASES.items()
        }

    # --- Logging ---

    def _setup_logger(self, log_level: int) -> logging.Logger:
        """Configures a logger to write evaluation results to a file."""
        logger = logging.getLogger("evaluation_logger")

        if not self.config.enable_logging:
            if logger.hasHandlers():
                logger.handlers.clear()
            logger.addHandler(logging.NullHandler())
            logger.setLevel(logging.CRITICAL + 1)
            return logger

        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filepath = log_dir / f"deck_evaluation_{int(time.time())}.log"

        logger.setLevel(log_level)
        logger.propagate = False

        if logger.hasHandlers():
            logger.handlers.clear()

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(file_handler)

        return logger

    def __repr__(self) -> str:
        names = ", ".join(card.name or card.character_name for card in self.deck)
        return f"<DeckEvaluator(Cards=[{names}])>"
