"""passcraft: policy-driven password generator and strength scorer."""

from .evaluator import StrengthResult, score_password
from .generator import generate
from .policy import DEFAULT_POLICY, Policy, normalize

__all__ = [
    "DEFAULT_POLICY",
    "Policy",
    "StrengthResult",
    "generate",
    "normalize",
    "score_password",
]
