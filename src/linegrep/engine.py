"""Streaming match-and-context engine

filter_lines() turns an iterable of input lines into a lazy iterator of
output lines, the way grep does with -A/-B/-C/-c/-n. The input is read
exactly once; only the before-context ring buffer and a few counters are
kept in memory.

Duplicate suppression relies on a single watermark, the number of the last
emitted line. Every emission checks ``line_number > last_emitted`` so
overlapping windows of nearby hits never repeat a line.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from linegrep.matcher import compile_matcher
from linegrep.models import FilterOptions
from linegrep.ring import RingBuffer


logger = logging.getLogger(__name__)


@dataclass
class FilterStats:
    """Summary of a scan, filled in when the output iterator finishes or is closed.

    Attributes:
        lines_scanned: Input lines read
        hits: Lines for which the predicate (after inversion) was true
        lines_emitted: Output lines produced, not counting the count-mode total
    """

    lines_scanned: int = 0
    hits: int = 0
    lines_emitted: int = 0


def normalize_line(line: str) -> str:
    """Drop one trailing newline, then any trailing carriage returns."""
    if line.endswith('\n'):
        line = line[:-1]
    return line.rstrip('\r')


def format_line(line_number: int, line: str, options: FilterOptions) -> str:
    if options.number_lines:
        return f'{line_number} {line}'
    return line


def filter_lines(
    pattern: str, options: FilterOptions, lines: Iterable[str], stats: FilterStats | None = None
) -> Iterator[str]:
    """
    Filter lines against a pattern.

    The pattern is compiled before this function returns, so an invalid
    pattern fails here and no input is consumed. Lines are pulled from
    ``lines`` only as the returned iterator is advanced; closing the
    iterator stops reading.

    Args:
        pattern: Regular expression, or fixed string when options.literal is set
        options: Filter options
        lines: Input lines, with or without trailing newlines
        stats: Optional FilterStats updated once the scan ends, including
            when it ends early through close() or an input error

    Returns:
        Iterator over output lines, or over a single hit count string in
        count mode

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression
    """
    is_hit = compile_matcher(pattern, options)
    return _scan(is_hit, options, lines, stats if stats is not None else FilterStats())


def _scan(
    is_hit: Callable[[str], bool], options: FilterOptions, lines: Iterable[str], stats: FilterStats
) -> Iterator[str]:
    after = options.after_window
    ring = RingBuffer(options.before_window)

    line_number = 0
    pending_after_until = 0
    last_emitted = 0
    hit_count = 0
    emitted = 0

    try:
        for raw in lines:
            line_number += 1
            line = normalize_line(raw)
            hit = is_hit(line)

            if options.count_only:
                if hit:
                    hit_count += 1
                else:
                    ring.push(line)
                continue

            if hit:
                hit_count += 1
                pending_after_until = max(pending_after_until, line_number + after)

                buffered = ring.contents()
                first = line_number - len(buffered)
                for offset, text in enumerate(buffered):
                    number = first + offset
                    if number > last_emitted:
                        last_emitted = number
                        emitted += 1
                        yield format_line(number, text, options)

                if line_number > last_emitted:
                    last_emitted = line_number
                    emitted += 1
                    yield format_line(line_number, line, options)
            elif line_number <= pending_after_until:
                if line_number > last_emitted:
                    last_emitted = line_number
                    emitted += 1
                    yield format_line(line_number, line, options)
            else:
                ring.push(line)
    finally:
        stats.lines_scanned = line_number
        stats.hits = hit_count
        stats.lines_emitted = emitted

    logger.debug(f'Scanned {line_number} lines: {hit_count} hits, {emitted} lines emitted')

    if options.count_only:
        yield str(hit_count)
