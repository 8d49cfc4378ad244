from pathlib import Path
from typing import Dict, List

import pandas as pd

from src.calculator.evaluation.deck_evaluator import CardEvaluation, DeckEvaluator


class DeckReport:
    """Tabulates the evaluation of a deck across both battle phases."""

    COLUMNS = [
        "Slot",
        "Card",
        "Character",
        "Normal Self %",
        "Normal Boost %",
        "Normal Total %",
        "Boss Self %",
        "Boss Boost %",
        "Boss Total %",
    ]

    def __init__(self, evaluator: DeckEvaluator):
        self.evaluator = evaluator

    def to_dataframe(self) -> pd.DataFrame:
        """Returns one row per deck slot with the bonus of each phase."""
        phases: Dict[str, List[CardEvaluation]] = self.evaluator.evaluate_all_phases()

        rows = []
        for normal, boss in zip(phases["normal"], phases["boss"]):
            rows.append(
                {
                    "Slot": normal.slot,
                    "Card": normal.card.name,
                    "Character": normal.card.character_name,
                    "Normal Self %": normal.self_percent,
                    "Normal Boost %": normal.boost_percent,
                    "Normal Total %": normal.total_percent,
                    "Boss Self %": boss.self_percent,
                    "Boss Boost %": boss.boost_percent,
                    "Boss Total %": boss.total_percent,
                }
            )

        return pd.DataFrame(rows, columns=self.COLUMNS).set_index("Slot")

    def save_csv(self, filepath: str) -> Path:
        """Writes the report table to a CSV file."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(path, encoding="utf-8")
        return path

    def __str__(self) -> str:
        return self.to_dataframe().to_string()
