"""
Errors raised while decoding skill text.

Both errors point at a data-quality problem in the source text (usually a
phrasing introduced by a content update) rather than a runtime fault.
"""

from typing import Any, Dict, Optional


class SkillParseError(ValueError):
    """Base class for every skill text decoding failure."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidKindError(SkillParseError):
    """The declared kind label is not one of the known skill kinds."""

    def __init__(self, label: Any):
        super().__init__(f"Invalid kind: {label}", {"label": label})
        self.label = label


class UnparseableDetailsError(SkillParseError):
    """No magnitude phrase template matched the skill details text."""

    def __init__(self, details_text: str):
        super().__init__(
            f"Could not parse card skill: {details_text}",
            {"details_text": details_text},
        )
        self.details_text = details_text
