"""
This module decodes the printed skill text of a card into Skill objects.

A card's skill is stored as a declared kind label, a display name and a
details text. The details text is made of effect clauses written from a
closed vocabulary of phrases (see skill_templates). A name carrying a
parenthesized secondary label, e.g. "ボスアタック +14（ノーダメボスアタック +3）",
means a later line of the details describes a second, independent skill.
"""

import logging
import re
import warnings
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.calculator.core import skill_templates as templates
from src.calculator.core.card_matcher import CardMatcher
from src.calculator.core.enums import Attribute, SkillKind
from src.calculator.core.exceptions import UnparseableDetailsError
from src.calculator.core.skill import Skill

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecondaryLabel:
    """The parenthesized secondary skill label found in a skill name."""

    label: str
    percentage: int

    @property
    def kind(self) -> SkillKind:
        for marker, kind in templates.SECONDARY_KIND_MARKERS:
            if marker in self.label:
                return kind
        return SkillKind.ATTACK

    @property
    def boss(self) -> bool:
        return templates.BOSS_LABEL_MARKER in self.label


class SkillParser:
    """
    Decodes a {kind, name, details} skill record into one or two Skills.

    Parsing is all-or-nothing: either every required clause is understood
    or an error is raised and no Skill is returned.
    """

    def parse(self, kind_label: str, name: str, details: str) -> List[Skill]:
        """
        Parses a skill record.

        Args:
            kind_label: The declared kind, e.g. "ATTACK".
            name: The skill's display name.
            details: The skill's details text.

        Returns:
            [primary] or [primary, secondary].

        Raises:
            InvalidKindError: If kind_label is not a known skill kind.
            UnparseableDetailsError: If a clause has no recognised magnitude.
        """
        kind = SkillKind.from_label(kind_label)
        details = details or ""

        secondary_label = self.find_secondary_label(name or "")
        primary_text, secondary_text = self.split_clauses(details, secondary_label)

        primary = self._parse_clause(kind, primary_text, details)
        if secondary_label is None or secondary_text is None:
            return [primary]

        secondary = self._parse_clause(
            secondary_label.kind,
            secondary_text,
            details,
            boss=secondary_label.boss,
        )
        if secondary.percentage_base != secondary_label.percentage:
            warnings.warn(
                f"Secondary label '{secondary_label.label} +{secondary_label.percentage}' "
                f"disagrees with details value {secondary.percentage_base}. "
                f"Using the details value."
            )
        return [primary, secondary]

    @staticmethod
    def find_secondary_label(name: str) -> Optional[SecondaryLabel]:
        """Returns the parenthesized secondary label of a skill name, if any."""
        match = templates.SECONDARY_LABEL.search(name)
        if not match:
            return None
        return SecondaryLabel(
            label=match.group("label").strip(),
            percentage=int(match.group("percentage")),
        )

    @staticmethod
    def split_clauses(
        details: str, secondary_label: Optional[SecondaryLabel]
    ) -> Tuple[str, Optional[str]]:
        """
        Splits the details into the primary and secondary clause texts.

        The secondary clause only exists when the name declares a secondary
        label and the details span several lines. It is the last line, past
        the first, stating a magnitude for the label's kind. Trailing
        effect-only lines such as the danger drawback stay with the primary.
        Without such a line the last line is taken.
        """
        if secondary_label is None:
            return details, None

        lines = details.split("\n")
        if len(lines) < 2:
            logger.warning(
                "Secondary label '%s' found but details has a single line: %r",
                secondary_label.label,
                details,
            )
            return details, None

        index = len(lines) - 1
        for i in range(len(lines) - 1, 0, -1):
            if SkillParser._find_magnitude(secondary_label.kind, lines[i])[1]:
                index = i
                break
        primary = "\n".join(lines[:index] + lines[index + 1 :])
        return primary, lines[index]

    def _parse_clause(
        self, kind: SkillKind, text: str, details: str, boss: bool = False
    ) -> Skill:
        """Parses one clause. `details` is the full text, reported on failure."""
        if templates.BOSS_PHASE.search(text):
            boss = True
            text = templates.BOSS_PHASE.pattern.sub("", text)

        template, match = self._find_magnitude(kind, text)
        if match is None:
            raise UnparseableDetailsError(details)

        skill = Skill(
            kind=kind,
            percentage_base=int(match.group(templates.PERCENTAGE)),
            boss=boss,
            condition=self._extract_condition(kind, text, match, details),
        )
        logger.debug(
            "Parsed %r with template '%s' and conditions %s: %r",
            text,
            template.name,
            self._recognised_conditions(kind, text),
            skill,
        )
        return skill

    @staticmethod
    def _find_magnitude(
        kind: SkillKind, text: str
    ) -> Tuple[Optional[templates.PhraseTemplate], Optional["re.Match[str]"]]:
        for template in templates.MAGNITUDE_TEMPLATES:
            if not template.applies_to(kind):
                continue
            match = template.search(text)
            if match:
                return template, match
        return None, None

    def _extract_condition(
        self,
        kind: SkillKind,
        text: str,
        magnitude_match: "re.Match[str]",
        details: str,
    ) -> Optional[CardMatcher]:
        if kind == SkillKind.BOOST:
            targets = magnitude_match.groupdict().get("targets")
            return self._targets_to_matcher(targets, details) if targets else None

        match = templates.CHARACTER_COUNT.search(text)
        if match is None:
            return None
        return self._targets_to_matcher(match.group("targets"), details)

    def _targets_to_matcher(self, targets: str, details: str) -> CardMatcher:
        """
        Combines bracketed target tokens into a single CardMatcher.

        "属性【FIRE】" is an attribute, "【ATTACK】" a skill kind and any
        other token a character name.
        """
        skill_kind: Optional[SkillKind] = None
        attribute: Optional[Attribute] = None
        names: List[str] = []

        for token in templates.TARGET_TOKEN.finditer(targets):
            value = token.group("value")
            if token.group("attribute_prefix"):
                try:
                    attribute = Attribute.from_label(value)
                except ValueError as e:
                    raise UnparseableDetailsError(details) from e
            elif value in SkillKind.__members__:
                if skill_kind is not None:
                    # only one target kind is ever printed
                    raise UnparseableDetailsError(details)
                skill_kind = SkillKind(value)
            else:
                names.append(value)

        return CardMatcher(
            skill_kind=skill_kind,
            attribute=attribute,
            character_names=tuple(names) if names else None,
        )

    @staticmethod
    def _recognised_conditions(kind: SkillKind, text: str) -> List[str]:
        return [
            template.name
            for template in templates.CONDITION_TEMPLATES + templates.EFFECT_TEMPLATES
            if template.applies_to(kind) and template.search(text)
        ]
