"""
Sanitizer configuration.

The sensitive pattern and the mask token are read once at process start,
from the environment or a .env file:

    SENTINEL_SENSITIVE_PATTERN='password'[ \\t]*=[ \\t]*'[^\\r\\n]+?'
    SENTINEL_MASK='password'='******'

A pattern that does not compile is rejected immediately so a bad deployment
fails at startup rather than silently leaking credentials.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional, Pattern

from dotenv import load_dotenv

from .masking import DEFAULT_MASK, DEFAULT_SENSITIVE_PATTERN

logger = logging.getLogger(__name__)

PATTERN_ENV_VAR = "SENTINEL_SENSITIVE_PATTERN"
MASK_ENV_VAR = "SENTINEL_MASK"


@dataclass(frozen=True)
class SanitizerConfig:
    """Pattern and mask token shared by every masking call."""
    sensitive_pattern: Optional[str] = DEFAULT_SENSITIVE_PATTERN
    mask: Optional[str] = DEFAULT_MASK

    def __post_init__(self):
        # Fail fast on a malformed pattern
        self.compile()

    def compile(self) -> Optional[Pattern[str]]:
        """Return the compiled sensitive pattern, or None if masking is disabled."""
        if self.sensitive_pattern is None:
            return None
        try:
            return re.compile(self.sensitive_pattern)
        except re.error as e:
            raise ValueError(
                f"Invalid sensitive pattern {self.sensitive_pattern!r}: {e}"
            ) from e


def load_config(env_file: Optional[str] = None) -> SanitizerConfig:
    """
    Build a SanitizerConfig from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, python-dotenv
                  searches for one starting from the working directory.
                  Variables already set in the environment take precedence.

    Returns:
        A validated SanitizerConfig.

    Raises:
        ValueError: If the configured pattern is not a valid regex.
    """
    load_dotenv(env_file)

    pattern = os.getenv(PATTERN_ENV_VAR, DEFAULT_SENSITIVE_PATTERN)
    mask = os.getenv(MASK_ENV_VAR, DEFAULT_MASK)

    if pattern != DEFAULT_SENSITIVE_PATTERN or mask != DEFAULT_MASK:
        logger.info("Using custom sensitive pattern/mask from environment")

    return SanitizerConfig(sensitive_pattern=pattern, mask=mask)
