from .core.enums import Attribute, SkillKind
from .core.exceptions import InvalidKindError, SkillParseError, UnparseableDetailsError
from .core.card_matcher import CardMatcher
from .core.skill import Skill
from .core.skill_parser import SkillParser
from .card.card import Card
from .card.card_factory import CardFactory
from .card.deck import Deck
from .evaluation.evaluation_config import EvaluationConfig
from .evaluation.deck_evaluator import CardEvaluation, DeckEvaluator
from .evaluation.report import DeckReport

__all__ = [
    "Attribute",
    "SkillKind",
    "InvalidKindError",
    "SkillParseError",
    "UnparseableDetailsError",
    "CardMatcher",
    "Skill",
    "SkillParser",
    "Card",
    "CardFactory",
    "Deck",
    "EvaluationConfig",
    "CardEvaluation",
    "DeckEvaluator",
    "DeckReport",
]
