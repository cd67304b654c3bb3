"""Line matching predicates

A predicate is built once per stream by compile_matcher() and then called
for every input line. Regex mode uses Python's ``re`` search semantics
(the pattern may match anywhere in the line); literal mode is plain
substring containment.
"""

import logging
import re
from collections.abc import Callable

from linegrep.models import FilterOptions


logger = logging.getLogger(__name__)


class InvalidPatternError(ValueError):
    """Raised when a pattern cannot be compiled as a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f'invalid regular expression {pattern!r}: {reason}')


def compile_regex(pattern: str, ignore_case: bool = False) -> re.Pattern:
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def compile_matcher(pattern: str, options: FilterOptions) -> Callable[[str], bool]:
    """
    Build the hit predicate for a pattern.

    Args:
        pattern: Regular expression, or fixed string in literal mode
        options: Filter options (literal, ignore_case and invert are used)

    Returns:
        Callable taking a normalized line and returning True for a hit

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression
    """
    invert = options.invert

    if options.literal:
        if options.ignore_case:
            needle = pattern.lower()

            def matches(line: str) -> bool:
                return (needle in line.lower()) != invert

        else:

            def matches(line: str) -> bool:
                return (pattern in line) != invert

        logger.debug(f'Using fixed-string matcher for {pattern!r} (ignore_case={options.ignore_case})')
        return matches

    regex = compile_regex(pattern, options.ignore_case)
    search = regex.search
    logger.debug(f'Compiled regex {pattern!r} (ignore_case={options.ignore_case})')

    def matches(line: str) -> bool:
        return (search(line) is not None) != invert

    return matches
