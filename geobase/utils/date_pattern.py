"""
Date pattern translation.

Dates are described with the usual letter patterns found in travel data
feeds (``yyyyMMdd_HHmm``, ``yyyy-MM-dd'T'HH:mm``). This module turns such a
pattern into the equivalent ``strftime``/``strptime`` directive string.

Supported letters: y, M, d, H, h, m, s, a, E. Text between single quotes
is copied as is and ``''`` stands for a single quote. Zone letters are
not supported: the offset of a date always comes from its location.
"""

import logging
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_DATETIME_PATTERN = 'yyyyMMdd_HHmm'
DEFAULT_DATE_PATTERN = 'yyyyMMdd'

# letter -> {repeat count: directive}; the entry under 0 applies to any other count
_DIRECTIVES = {
    'y': {2: '%y', 0: '%Y'},
    'M': {3: '%b', 4: '%B', 0: '%m'},
    'd': {0: '%d'},
    'H': {0: '%H'},
    'h': {0: '%I'},
    'm': {0: '%M'},
    's': {0: '%S'},
    'a': {0: '%p'},
    'E': {4: '%A', 0: '%a'},
}


def _directive(letter: str, count: int) -> str:
    table = _DIRECTIVES.get(letter)
    if table is None:
        raise ValueError(f"Unsupported pattern letter '{letter}'")
    if letter == 'M' and count > 4:
        count = 4
    return table.get(count, table[0])


@lru_cache(maxsize=64)
def to_strftime(pattern: str) -> str:
    """
    Translate a letter date pattern into a strftime directive string.

    Args:
        pattern: Pattern such as "yyyyMMdd_HHmm"

    Returns:
        Directive string such as "%Y%m%d_%H%M"

    Raises:
        ValueError: On unsupported letters or an unterminated quote
    """
    result = []
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "'":
            if i + 1 < length and pattern[i + 1] == "'":
                result.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            if end == -1:
                raise ValueError(f"Unterminated quote in pattern {pattern!r}")
            result.append(pattern[i + 1:end].replace('%', '%%'))
            i = end + 1
        elif char.isalpha():
            j = i
            while j < length and pattern[j] == char:
                j += 1
            result.append(_directive(char, j - i))
            i = j
        elif char == '%':
            result.append('%%')
            i += 1
        else:
            result.append(char)
            i += 1
    directive = ''.join(result)
    logger.debug(f"Date pattern {pattern!r} translated to {directive!r}")
    return directive
