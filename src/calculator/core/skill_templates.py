"""
This module defines the closed vocabulary of phrase templates used to decode
skill details text.

Each template declares which skill fields it can populate and which skill
kinds it applies to. The order of MAGNITUDE_TEMPLATES and
CONDITION_TEMPLATES is their priority: the first applicable match wins.
New in-game phrasings are supported by adding a template here.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from src.calculator.core.enums import SkillKind

PERCENTAGE = "percentage"
BOSS = "boss"
SKILL_KIND = "skill_kind"
ATTRIBUTE = "attribute"
CHARACTER_NAMES = "character_names"


@dataclass(frozen=True)
class PhraseTemplate:
    """
    A named phrase of the skill text vocabulary.

    Attributes:
        name (str): Identifier used in logs.
        pattern (re.Pattern): Compiled expression matching the phrase.
        populates (FrozenSet[str]): Skill fields the phrase sets. An empty
            set marks a recognised phrase that has no effect on the
            calculation (e.g. a life or miss-count condition).
        kinds (Optional[FrozenSet[SkillKind]]): Skill kinds the phrase
            applies to, or None for every kind.
    """

    name: str
    pattern: "re.Pattern[str]"
    populates: FrozenSet[str] = frozenset()
    kinds: Optional[FrozenSet[SkillKind]] = None

    def applies_to(self, kind: SkillKind) -> bool:
        return self.kinds is None or kind in self.kinds

    def search(self, text: str) -> Optional["re.Match[str]"]:
        return self.pattern.search(text)


# 【X】, optionally prefixed with 属性 when X is an attribute
_TOKEN = r"(?:属性)?【[^】]+】"
_TARGETS = rf"{_TOKEN}(?:(?:かつ|と|か){_TOKEN})*"
_PERCENT = r"(?P<percentage>\d+)[％%]"

TARGET_TOKEN = re.compile(r"(?P<attribute_prefix>属性)?【(?P<value>[^】]+)】")

BOSS_PHASE = PhraseTemplate(
    name="boss_phase",
    pattern=re.compile(r"バトル後半で、?"),
    populates=frozenset({BOSS}),
)

TARGET_INCREASE = PhraseTemplate(
    name="target_increase",
    pattern=re.compile(rf"(?P<targets>{_TARGETS})の攻撃力?{_PERCENT}アップ"),
    populates=frozenset({PERCENTAGE, SKILL_KIND, ATTRIBUTE, CHARACTER_NAMES}),
    kinds=frozenset({SkillKind.BOOST}),
)

SELF_INCREASE = PhraseTemplate(
    name="self_increase",
    pattern=re.compile(rf"(?:追加で)?自身の攻撃力?{_PERCENT}アップ"),
    populates=frozenset({PERCENTAGE}),
    kinds=frozenset({SkillKind.ATTACK, SkillKind.GUARD, SkillKind.ASSIST}),
)

CHARACTER_COUNT = PhraseTemplate(
    name="character_count",
    pattern=re.compile(r"(?P<targets>【[^】]+】(?:(?:か|と)【[^】]+】)*)のカード1枚につき"),
    populates=frozenset({CHARACTER_NAMES}),
    kinds=frozenset({SkillKind.ATTACK, SkillKind.GUARD, SkillKind.ASSIST}),
)

NO_DAMAGE = PhraseTemplate(name="no_damage", pattern=re.compile(r"ダメージカウント0の時"))
FULL_LIFE = PhraseTemplate(name="full_life", pattern=re.compile(r"ライフ100[％%]時"))
LOW_MISS = PhraseTemplate(name="low_miss", pattern=re.compile(r"MISS数\d+以下の時"))
DANGER = PhraseTemplate(name="danger", pattern=re.compile(r"被弾時のダメージが2倍になる"))
DAMAGE_REDUCTION = PhraseTemplate(
    name="damage_reduction",
    pattern=re.compile(rf"属性【[^】]+】からのダメージ\d+[％%]軽減"),
    kinds=frozenset({SkillKind.GUARD}),
)
AUTO_ATTACK = PhraseTemplate(
    name="auto_attack",
    pattern=re.compile(r"ノーツ【[^】]+】を自動で攻撃する"),
    kinds=frozenset({SkillKind.ASSIST}),
)

MAGNITUDE_TEMPLATES: Tuple[PhraseTemplate, ...] = (TARGET_INCREASE, SELF_INCREASE)

CONDITION_TEMPLATES: Tuple[PhraseTemplate, ...] = (
    CHARACTER_COUNT,
    NO_DAMAGE,
    FULL_LIFE,
    LOW_MISS,
)

EFFECT_TEMPLATES: Tuple[PhraseTemplate, ...] = (DAMAGE_REDUCTION, AUTO_ATTACK, DANGER)

# Parenthesized secondary label in a skill name, e.g. "（ノーダメボスアタック +3）".
# A label without a magnitude, such as the danger marker "（危）", is not a
# secondary skill.
SECONDARY_LABEL = re.compile(r"[（(](?P<label>[^（）()]*?)\s*[+＋](?P<percentage>\d+)[）)]")

BOSS_LABEL_MARKER = "ボス"

# Checked in order; a label with none of these markers is an attack skill.
SECONDARY_KIND_MARKERS: Tuple[Tuple[str, SkillKind], ...] = (
    ("ブースト", SkillKind.BOOST),
    ("ガード", SkillKind.GUARD),
    ("アシスト", SkillKind.ASSIST),
)
