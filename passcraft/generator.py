"""
passcraft.generator
Secure password generator using Python's secrets module.

Bytes are mapped onto the charset with ``byte % len(charset)``. When the
charset size does not divide 256 the lower indices are very slightly more
likely; this bias is known and accepted.
"""

import logging
from secrets import choice, randbelow, token_bytes
from typing import List, MutableSequence, Tuple

from .policy import LOWERCASE, Policy, enabled_classes

log = logging.getLogger(__name__)


def build_charset(policy: Policy) -> str:
    """Concatenate the enabled classes in fixed order (lowercase if none)."""
    charset = "".join(chars for _, chars in enabled_classes(policy))
    return charset or LOWERCASE


def missing_classes(password: str, policy: Policy) -> List[Tuple[str, str]]:
    """Enabled classes with no character present in ``password``."""
    present = set(password)
    return [
        (name, chars)
        for name, chars in enabled_classes(policy)
        if present.isdisjoint(chars)
    ]


def shuffle(chars: MutableSequence[str]) -> MutableSequence[str]:
    """
    Fisher-Yates shuffle in place, driven by the secure source.
    """
    for i in range(len(chars) - 1, 0, -1):
        j = randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return chars


def generate(policy: Policy) -> str:
    """
    Generate a password for ``policy``.

    For length >= 4 every enabled class is guaranteed to appear. Shorter
    passwords are returned as drawn. A non-positive length yields "".
    """
    length = policy.length
    if length <= 0:
        return ""

    charset = build_charset(policy)
    candidate = [charset[b % len(charset)] for b in token_bytes(length)]

    missing = missing_classes("".join(candidate), policy)
    if missing and length >= 4:
        log.debug("repairing candidate, missing classes: %s",
                  ", ".join(name for name, _ in missing))
        # one required char per enabled class, not only the missing ones
        for i, (_, chars) in enumerate(enabled_classes(policy)):
            candidate[i] = choice(chars)
        shuffle(candidate)

    return "".join(candidate)
