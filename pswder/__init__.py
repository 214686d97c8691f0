from __future__ import annotations

__version__ = "1.0.0"

from .core import PasswordStrengthResult, Strength, validate_password
from .breach import BreachCheckResult, check_password_breach, check_password_breach_sync

__all__ = [
    "__version__",
    "validate_password",
    "check_password_breach",
    "check_password_breach_sync",
    "Strength",
    "PasswordStrengthResult",
    "BreachCheckResult",
]
