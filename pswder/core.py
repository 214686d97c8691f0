# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


# -------------------- Rules --------------------
MIN_LENGTH = 8
SPECIAL_CHARS = '!@#$%^&*(),.?":{}|<>'

STRONG_MESSAGE = "Your password is strong! No changes needed."

SUGGESTION_LENGTH = f"Password should be at least {MIN_LENGTH} characters long."
SUGGESTION_SPECIAL = "Add at least one special character (e.g., !, @, #, $)."
SUGGESTION_DIGIT = "Add at least one numeric digit (e.g., 1, 2, 3)."
SUGGESTION_UPPER = "Add at least one uppercase letter (e.g., A, B, C)."
SUGGESTION_LOWER = "Add at least one lowercase letter (e.g., a, b, c)."


class Strength(str, Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


@dataclass
class PasswordStrengthResult:
    strength: Strength
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"strength": self.strength.value, "suggestions": list(self.suggestions)}


# -------------------- Helpers --------------------
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARS) + "]")

# length in UTF-16 code units, so astral characters count twice
def _has_length(s: str) -> bool: return len(s.encode("utf-16-le", "surrogatepass")) // 2 >= MIN_LENGTH
def _has_special(s: str) -> bool: return bool(_SPECIAL_RE.search(s))
def _has_digit(s: str) -> bool: return bool(re.search(r"[0-9]", s))
def _has_upper(s: str) -> bool: return bool(re.search(r"[A-Z]", s))
def _has_lower(s: str) -> bool: return bool(re.search(r"[a-z]", s))

# order matters: suggestions are reported in this order
RULES = [
    (_has_length, SUGGESTION_LENGTH),
    (_has_special, SUGGESTION_SPECIAL),
    (_has_digit, SUGGESTION_DIGIT),
    (_has_upper, SUGGESTION_UPPER),
    (_has_lower, SUGGESTION_LOWER),
]


def _classify(score: int) -> Strength:
    if score <= 2:
        return Strength.WEAK
    if score <= 4:
        return Strength.MODERATE
    return Strength.STRONG


# -------------------- Strength checker --------------------
def validate_password(password: str) -> PasswordStrengthResult:
    """
    Score a password 0..5 on length and character classes.

    0-2 => Weak, 3-4 => Moderate, 5 => Strong.
    Every failed rule adds its suggestion; a password passing all rules
    gets the single success message instead.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")

    suggestions: List[str] = []
    score = 0
    for check, suggestion in RULES:
        if check(password):
            score += 1
        else:
            suggestions.append(suggestion)

    return PasswordStrengthResult(
        strength=_classify(score),
        suggestions=suggestions or [STRONG_MESSAGE],
    )


# -------------------- Reporting --------------------
def print_report(result: PasswordStrengthResult) -> None:
    print("Password Report:")
    print(f"  - Strength: {result.strength.value}")

    print("\nRecommendations:")
    for s in result.suggestions:
        print(f"  * {s}")
