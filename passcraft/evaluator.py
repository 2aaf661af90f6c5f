"""
passcraft.evaluator

Point-based password strength heuristic:
- length tiers (25 / 15 / 5) plus a bonus of 10 at 16+ characters
- 15 points each for lowercase, uppercase and digits, 20 for symbols
- score_password(password): returns a StrengthResult with score (0-100),
  label and feedback (suggestions for whatever was missing)
"""

from dataclasses import dataclass, field
import re
from typing import Any, Dict, List, Optional

from .policy import SYMBOLS

NO_PASSWORD_LABEL = "No password"
NO_PASSWORD_FEEDBACK = "Generate a password to see strength analysis"

# (minimum score, label), checked top-down
LABELS = (
    (85, "Very Strong"),
    (70, "Strong"),
    (50, "Fair"),
)
DEFAULT_LABEL = "Weak"

_SYMBOL_RE = re.compile("[" + re.escape(SYMBOLS) + "]")


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    feedback: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "label": self.label, "feedback": list(self.feedback)}


def label_for(score: int) -> str:
    for threshold, label in LABELS:
        if score >= threshold:
            return label
    return DEFAULT_LABEL


def score_password(password: Optional[str]) -> StrengthResult:
    """
    Score a password on a 0-100 scale.

    An empty (or missing) password is not scored at all and gets the
    "No password" result.
    """
    if not password:
        return StrengthResult(0, NO_PASSWORD_LABEL, [NO_PASSWORD_FEEDBACK])

    score = 0
    feedback: List[str] = []

    # --- Length ---
    length = len(password)
    if length >= 12:
        score += 25
    elif length >= 8:
        score += 15
    elif length >= 6:
        score += 5
    else:
        feedback.append("Use at least 8 characters")

    # --- Character variety ---
    if re.search(r"[a-z]", password):
        score += 15
    else:
        feedback.append("Include lowercase letters")

    if re.search(r"[A-Z]", password):
        score += 15
    else:
        feedback.append("Include uppercase letters")

    if re.search(r"[0-9]", password):
        score += 15
    else:
        feedback.append("Include numbers")

    if _SYMBOL_RE.search(password):
        score += 20
    else:
        feedback.append("Include symbols for maximum security")

    # long password bonus
    if length >= 16:
        score += 10

    score = min(score, 100)
    return StrengthResult(score, label_for(score), feedback)
