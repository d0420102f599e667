import re
from typing import FrozenSet, NamedTuple

MAX_SCORE = 100
LENGTH_POINTS_PER_CHAR = 2
LENGTH_CAP = 40
CLASS_BONUS = 15

TIERS = ("Very Weak", "Weak", "Good", "Strong", "Very Strong")
# inclusive lower bound of each tier, aligned with TIERS
TIER_THRESHOLDS = (0, 20, 40, 60, 80)

# class name -> detection pattern; symbol means anything non-alphanumeric
CLASS_PATTERNS = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "numbers": re.compile(r"[0-9]"),
    "symbols": re.compile(r"[^a-zA-Z0-9]"),
}


class StrengthScore(NamedTuple):
    score: int
    label: str


def classes_present(password: str) -> FrozenSet[str]:
    """Names of the character classes that appear at least once in ``password``."""
    return frozenset(name for name, pattern in CLASS_PATTERNS.items() if pattern.search(password))


def describe_strength(score: int) -> str:
    label = TIERS[0]
    for threshold, tier in zip(TIER_THRESHOLDS, TIERS):
        if score >= threshold:
            label = tier
    return label


def score_password(password: str) -> StrengthScore:
    """
    Scores the strength of a password on a scale of 0–100 and returns both score and label.

    Length is worth 2 points per character up to 40; each character class
    present adds 15. This is a heuristic, not an entropy estimate.
    """
    if not password:
        return StrengthScore(0, describe_strength(0))

    # --- Length ---
    score = min(len(password) * LENGTH_POINTS_PER_CHAR, LENGTH_CAP)

    # --- Character variety ---
    score += CLASS_BONUS * len(classes_present(password))

    score = max(0, min(score, MAX_SCORE))
    return StrengthScore(score, describe_strength(score))


if __name__ == "__main__":
    # For quick testing
    pwd = input("Enter password to test: ")
    result = score_password(pwd)
    print(f"Password Strength: {result.label} (Score: {result.score}/{MAX_SCORE})")
