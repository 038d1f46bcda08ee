"""Random string generation from configurable character classes."""
from __future__ import annotations
import logging
import random

from toolshed.common.errors import ValidationError
from toolshed.common.schema import GenerationConfig

LOGGER = logging.getLogger("toolshed.generator")

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

def build_alphabet(config: GenerationConfig) -> str:
    """
    Concatenate the enabled character classes.

    Order is fixed (lowercase, uppercase, numbers, symbols) so seeded
    generators produce stable output.

    Args:
        config: Generation settings.

    Returns:
        The effective alphabet.
    """
    alphabet = LOWERCASE
    if config.include_uppercase:
        alphabet += UPPERCASE
    if config.include_numbers:
        alphabet += NUMBERS
    if config.include_symbols:
        alphabet += SYMBOLS
    return alphabet

def generate(config: GenerationConfig, rng: random.Random | None = None) -> str:
    """
    Generate a random string for the given configuration.

    Each character is drawn independently and uniformly from the effective
    alphabet, with replacement.

    Args:
        config: Generation settings.
        rng: Random source. Pass a seeded ``random.Random`` for reproducible output;
            a fresh unseeded one is used otherwise.
    """
    alphabet = build_alphabet(config)
    if not alphabet:
        raise ValidationError("no characters available for generation")

    if rng is None:
        rng = random.Random()
    value = "".join(rng.choice(alphabet) for _ in range(config.length))
    LOGGER.debug("Generated string of length %d from %d-character alphabet", config.length, len(alphabet))
    return value

def generate_string(
    length: int = 16,
    include_uppercase: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = False,
    rng: random.Random | None = None,
) -> str:
    """Keyword shortcut for ``generate(GenerationConfig(...))``."""
    config = GenerationConfig(
        length=length,
        include_uppercase=include_uppercase,
        include_numbers=include_numbers,
        include_symbols=include_symbols,
    )
    return generate(config, rng)
