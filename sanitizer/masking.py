"""
Masking primitives - the two ways a sensitive string gets obscured.

Full masking:
    Every match of the sensitive pattern is replaced with a fixed mask token.
    Used for free text (SQL statements, Flink configuration) where a
    credential assignment can appear anywhere.

Partial masking:
    A positional character range is replaced with '*'. Used for the stored
    connection password so operators can still tell credentials apart.

Both functions are total: malformed input is returned unchanged.
"""

import re
from typing import Optional, Pattern, Union

# Sensitive pattern, e.g.  'password' = 'wwz@test'
# Whitespace is ASCII only and values never span a line terminator
# (\n, \r, \u0085, \u2028, \u2029)
DEFAULT_SENSITIVE_PATTERN = (
    r"'password'[ \t\n\x0B\f\r]*=[ \t\n\x0B\f\r]*'[^\n\r\u0085\u2028\u2029]+?'"
)

# Replacement for every sensitive match
DEFAULT_MASK = "'password'='******'"

MASK_CHAR = "*"


def mask_full(
    text: Optional[str],
    pattern: Union[str, Pattern[str], None] = DEFAULT_SENSITIVE_PATTERN,
    mask: Optional[str] = DEFAULT_MASK,
) -> Optional[str]:
    """
    Replace every sensitive match in ``text`` with ``mask``.

    Args:
        text: The text to mask. ``None`` is returned as-is.
        pattern: Regex (string or compiled) matching one credential assignment.
        mask: Literal replacement token. Backslashes and group references
              are not expanded.

    Returns:
        The masked text, or the input unchanged if any argument is None.

    Example:
        mask_full("with ('password'='s3cret', 'user'='me')")
        # "with ('password'='******', 'user'='me')"
    """
    if text is None or pattern is None or mask is None:
        return text

    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    return pattern.sub(lambda _match: mask, text)


def mask_partial(
    text: Optional[str],
    start: int,
    end: int,
    mask_char: str = MASK_CHAR,
) -> Optional[str]:
    """
    Mask the characters of ``text`` in the half-open range ``[start, end)``.

    The input is returned unchanged when it is None, when ``start <= 0``,
    when ``end < start`` or when ``end`` runs past the end of the string.
    """
    if text is None or start <= 0 or end < start or end > len(text):
        return text

    return text[:start] + mask_char * (end - start) + text[end:]


def partial_mask_bounds(text: Optional[str]) -> tuple[int, int]:
    """
    Range used to mask a stored password: from index 2 up to two thirds of it.

    This is a readability heuristic, not a security control.
    """
    length = 0 if text is None else len(text)
    return 2, 2 * length // 3
