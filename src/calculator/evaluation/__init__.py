from .evaluation_config import EvaluationConfig
from .deck_evaluator import CardEvaluation, DeckEvaluator
from .report import DeckReport

__all__ = [
    "EvaluationConfig",
    "CardEvaluation",
    "DeckEvaluator",
    "DeckReport",
]
