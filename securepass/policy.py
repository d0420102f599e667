"""
securepass.policy

Check a password against a simple composition policy (minimum length and
required character classes) and report every rule it breaks.
"""

from typing import List, NamedTuple

from .score import classes_present


class PolicyResult(NamedTuple):
    is_valid: bool
    errors: List[str]


def check_policy(
    password: str,
    min_length: int = 8,
    require_lowercase: bool = True,
    require_uppercase: bool = True,
    require_numbers: bool = True,
    require_symbols: bool = False,
) -> PolicyResult:
    """
    Return a PolicyResult whose ``errors`` lists one message per violated rule,
    in the order: length, lowercase, uppercase, number, symbol.
    """
    errors: List[str] = []
    present = classes_present(password)

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters long")
    if require_lowercase and "lowercase" not in present:
        errors.append("Password must contain at least one lowercase letter")
    if require_uppercase and "uppercase" not in present:
        errors.append("Password must contain at least one uppercase letter")
    if require_numbers and "numbers" not in present:
        errors.append("Password must contain at least one number")
    if require_symbols and "symbols" not in present:
        errors.append("Password must contain at least one symbol")

    return PolicyResult(not errors, errors)
