"""
securepass
Generate cryptographically secure passwords and rate their strength.
"""

from .errors import InvalidRequest, RandomSourceUnavailable, SecurePassError
from .generator import CharacterClass, GenerationRequest, generate, generate_many
from .policy import PolicyResult, check_policy
from .score import StrengthScore, describe_strength, score_password

__version__ = "0.1.0"

__all__ = [
    "CharacterClass",
    "GenerationRequest",
    "InvalidRequest",
    "PolicyResult",
    "RandomSourceUnavailable",
    "SecurePassError",
    "StrengthScore",
    "check_policy",
    "describe_strength",
    "generate",
    "generate_many",
    "score_password",
]
