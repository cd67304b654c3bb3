"""CLI grep command for linegrep"""

import io
import logging
import sys
from contextlib import contextmanager

import click

from linegrep.engine import filter_lines
from linegrep.matcher import InvalidPatternError
from linegrep.models import FilterOptions


logger = logging.getLogger(__name__)


@contextmanager
def open_input_lines(path: str):
    """
    Open INPUT as UTF-8 text split on \\n only.

    Universal newlines are disabled so a lone \\r stays inside its line,
    the same way the HTTP API splits request text.
    """
    if path == '-':
        stream = io.TextIOWrapper(click.get_binary_stream('stdin'), encoding='utf-8', newline='\n')
        try:
            yield stream
        finally:
            # Leave the process stdin open
            stream.detach()
    else:
        with open(path, encoding='utf-8', newline='\n') as f:
            yield f


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('pattern', type=str)
@click.argument(
    'input_path', type=click.Path(exists=True, dir_okay=False, allow_dash=True), default='-', required=False,
    metavar='[INPUT]',
)
@click.option('--after-context', '-A', 'after_context', type=click.IntRange(min=0), default=0, metavar='N',
              help="Print N lines of trailing context after each match")
@click.option('--before-context', '-B', 'before_context', type=click.IntRange(min=0), default=0, metavar='N',
              help="Print N lines of leading context before each match")
@click.option('--context', '-C', 'context', type=click.IntRange(min=0), default=0, metavar='N',
              help="Print N lines of context before and after each match (added to -A/-B)")
@click.option('--count', '-c', 'count_only', is_flag=True, help="Print only the number of matching lines")
@click.option('--ignore-case', '-i', is_flag=True, help="Ignore case distinctions")
@click.option('--invert-match', '-v', 'invert', is_flag=True, help="Select non-matching lines")
@click.option('--fixed-strings', '-F', 'literal', is_flag=True, help="Treat PATTERN as a fixed string, not a regex")
@click.option('--line-number', '-n', 'number_lines', is_flag=True, help="Prefix each output line with its line number")
def grep_command(
    pattern, input_path, after_context, before_context, context, count_only, ignore_case, invert, literal, number_lines
):
    """
    Print lines of INPUT (default: stdin) that match PATTERN.

    PATTERN is a Python regular expression unless -F is given.

    \b
    Examples:
        cat app.log | linegrep "error.*failed"
        linegrep -i -C 2 timeout app.log
        linegrep -F -c "[WARN]" app.log
        linegrep -v -n "^#" config.ini

    \b
    Exit status:
        0  input processed
        2  invalid pattern or read error
    """
    options = FilterOptions(
        before_context=before_context,
        after_context=after_context,
        context=context,
        count_only=count_only,
        ignore_case=ignore_case,
        invert=invert,
        literal=literal,
        number_lines=number_lines,
    )

    with open_input_lines(input_path) as input_lines:
        try:
            output = filter_lines(pattern, options, input_lines)
        except InvalidPatternError as e:
            logger.warning(str(e))
            click.echo(f"❌ Error: {e}", err=True)
            sys.exit(2)

        try:
            for line in output:
                click.echo(line)
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"❌ Error reading input: {e}", err=True)
            sys.exit(2)


if __name__ == '__main__':
    grep_command()
