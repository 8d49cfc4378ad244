from .enums import Attribute, SkillKind
from .exceptions import InvalidKindError, SkillParseError, UnparseableDetailsError
from .card_matcher import CardMatcher
from .skill import Skill
from .skill_parser import SkillParser

__all__ = [
    "Attribute",
    "SkillKind",
    "InvalidKindError",
    "SkillParseError",
    "UnparseableDetailsError",
    "CardMatcher",
    "Skill",
    "SkillParser",
]
