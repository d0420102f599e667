"""
securepass.generator
Secure password generator using Python's secrets module.

Every random decision (per-class draws, fill draws and the final shuffle)
goes through ``_randbelow``; there is no non-secure fallback.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidRequest, RandomSourceUnavailable

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 16

MIN_COUNT = 1
MAX_COUNT = 50

DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class CharacterClass(Enum):
    """A character class tag; the member value is its fixed alphabet."""

    LOWERCASE = string.ascii_lowercase
    UPPERCASE = string.ascii_uppercase
    NUMBERS = string.digits
    SYMBOLS = DEFAULT_SYMBOLS

    @property
    def alphabet(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenerationRequest:
    """
    Options for a single password.

    length     -- number of characters (MIN_LENGTH..MAX_LENGTH, default 16)
    lowercase  -- include a-z (default True)
    uppercase  -- include A-Z (default True)
    numbers    -- include 0-9 (default True)
    symbols    -- include DEFAULT_SYMBOLS (default True)
    """

    length: int = DEFAULT_LENGTH
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    symbols: bool = True

    @property
    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        flags = (
            (CharacterClass.LOWERCASE, self.lowercase),
            (CharacterClass.UPPERCASE, self.uppercase),
            (CharacterClass.NUMBERS, self.numbers),
            (CharacterClass.SYMBOLS, self.symbols),
        )
        return tuple(cls for cls, enabled in flags if enabled)

    def validate(self) -> None:
        """Raise InvalidRequest if this request cannot be satisfied."""
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidRequest("Password length must be an integer")
        if self.length < MIN_LENGTH:
            raise InvalidRequest(f"Password length must be at least {MIN_LENGTH} characters")
        if self.length > MAX_LENGTH:
            raise InvalidRequest(f"Password length cannot exceed {MAX_LENGTH} characters")
        classes = self.enabled_classes
        if not classes:
            raise InvalidRequest("At least one character type must be enabled")
        if self.length < len(classes):
            raise InvalidRequest(
                f"Password length must be at least {len(classes)} "
                "to include all selected character types"
            )


def _randbelow(n: int) -> int:
    try:
        return secrets.randbelow(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailable(f"secure random source failed: {exc}") from exc


def _choice(seq: Sequence[str]) -> str:
    return seq[_randbelow(len(seq))]


def _shuffle(items: List[str]) -> None:
    # Fisher-Yates, in place
    for i in range(len(items) - 1, 0, -1):
        j = _randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def build_pool(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of the given classes."""
    return "".join(cls.alphabet for cls in classes)


def generate(request: Optional[GenerationRequest] = None) -> str:
    """
    Generate a cryptographically secure password.

    One character is reserved for each enabled class, the rest are drawn
    from the full pool, then the whole sequence is shuffled so a class's
    position carries no information.
    """
    request = request or GenerationRequest()
    request.validate()
    return _generate(request)


def _generate(request: GenerationRequest) -> str:
    classes = request.enabled_classes
    pool = build_pool(classes)

    password_chars = [_choice(cls.alphabet) for cls in classes]
    for _ in range(request.length - len(password_chars)):
        password_chars.append(_choice(pool))

    _shuffle(password_chars)
    return "".join(password_chars)


def generate_many(count: int, request: Optional[GenerationRequest] = None) -> List[str]:
    """
    Generate ``count`` independent passwords.

    Both ``count`` and the request are validated before anything is
    generated, so a failure never leaves a partial batch.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidRequest("Count must be an integer")
    if not MIN_COUNT <= count <= MAX_COUNT:
        raise InvalidRequest(f"Count must be between {MIN_COUNT} and {MAX_COUNT}")
    request = request or GenerationRequest()
    request.validate()

    logger.debug(
        "generating %d password(s): length=%d classes=%s",
        count,
        request.length,
        ",".join(cls.name.lower() for cls in request.enabled_classes),
    )
    return [_generate(request) for _ in range(count)]
