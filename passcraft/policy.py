"""
passcraft.policy
Character classes and the immutable generation policy.
"""

from dataclasses import dataclass, replace
import string
from typing import Any, Dict, List, Mapping, Tuple


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# fixed order used for charset assembly and repair
CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("uppercase", UPPERCASE),
    ("lowercase", LOWERCASE),
    ("numbers", NUMBERS),
    ("symbols", SYMBOLS),
)

# camelCase keys used in the persisted settings
_FIELD_KEYS = {
    "length": "length",
    "include_uppercase": "includeUppercase",
    "include_lowercase": "includeLowercase",
    "include_numbers": "includeNumbers",
    "include_symbols": "includeSymbols",
}


@dataclass(frozen=True)
class Policy:
    length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False

    def flags(self) -> Dict[str, bool]:
        """Map each class name to whether it is enabled."""
        return {
            "uppercase": self.include_uppercase,
            "lowercase": self.include_lowercase,
            "numbers": self.include_numbers,
            "symbols": self.include_symbols,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in _FIELD_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Policy":
        """
        Build a policy from a settings mapping. Unknown keys are ignored and
        missing ones fall back to the defaults. Raises TypeError when a value
        has the wrong type ("false" is not a bool, True is not a length).
        """
        kwargs: Dict[str, Any] = {}
        for attr, key in _FIELD_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if attr == "length":
                if isinstance(value, bool) or not isinstance(value, int):
                    raise TypeError(f"{key} must be an integer, got {value!r}")
            elif not isinstance(value, bool):
                raise TypeError(f"{key} must be true or false, got {value!r}")
            kwargs[attr] = value
        return cls(**kwargs)


DEFAULT_POLICY = Policy()


def enabled_classes(policy: Policy) -> List[Tuple[str, str]]:
    """Return (name, characters) for every enabled class, in fixed order."""
    flags = policy.flags()
    return [(name, chars) for name, chars in CHARACTER_CLASSES if flags[name]]


def normalize(policy: Policy) -> Policy:
    """
    Guarantee at least one enabled class. Lowercase is the fallback.
    Length is left alone.
    """
    if any(policy.flags().values()):
        return policy
    return replace(policy, include_lowercase=True)
