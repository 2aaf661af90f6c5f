"""
passcraft.suggestions

Turn evaluator output into a recommended policy and produce example
replacement passwords (using generator) to demonstrate stronger choices.
"""

from typing import Dict, Optional

from .evaluator import score_password
from .generator import generate
from .policy import Policy

RECOMMENDED_LENGTH = 16


def recommended_policy(password: Optional[str], length: Optional[int] = None) -> Policy:
    """All classes enabled, at least RECOMMENDED_LENGTH characters long."""
    if length is None:
        length = max(RECOMMENDED_LENGTH, len(password or ""))
    return Policy(
        length=length,
        include_uppercase=True,
        include_lowercase=True,
        include_numbers=True,
        include_symbols=True,
    )


def suggest_improvements(password: Optional[str], examples: int = 1, length: Optional[int] = None) -> Dict:
    """
    Return a suggestion object derived from the evaluator.
    {
        "score": int,
        "label": str,
        "suggestions": [str],   # evaluator feedback, in table order
        "policy": Policy,       # policy that would score at the top tier
        "examples": [str]       # passwords generated with that policy
    }
    The password itself is never copied into the result.
    """
    result = score_password(password)
    policy = recommended_policy(password, length)
    return {
        "score": result.score,
        "label": result.label,
        "suggestions": list(result.feedback),
        "policy": policy,
        "examples": [generate(policy) for _ in range(max(examples, 0))],
    }
