"""Main CLI entry point with command groups"""

import click

from linegrep.__version__ import __version__
from linegrep.cli.grep import grep_command
from linegrep.cli.serve import serve_command
from linegrep.utils import configure_logging


class DefaultCommandGroup(click.Group):
    """Custom Click Group that allows a default command"""

    def parse_args(self, ctx, args):
        if ctx.resilient_parsing:
            return super().parse_args(ctx, args)

        # Group help/version, or no arguments at all
        if not args or args[0] in ('--help', '-h', '--version'):
            return super().parse_args(ctx, args)

        if args[0] in self.commands:
            return super().parse_args(ctx, args)

        # Anything else is a grep invocation
        return super().parse_args(ctx, ['grep'] + args)


@click.group(
    cls=DefaultCommandGroup, invoke_without_command=True, context_settings={'help_option_names': ['-h', '--help']}
)
@click.version_option(version=__version__, prog_name='linegrep')
@click.pass_context
def cli(ctx):
    """
    linegrep - filter lines of text by pattern, with grep-style context.

    \b
    Commands:
      linegrep [OPTIONS] PATTERN [INPUT]   Filter lines (default command)
      linegrep serve                       Start the HTTP API

    \b
    Examples:
      linegrep "error" app.log
      tail -f app.log | linegrep -i -A 3 "exception"
      linegrep -c -v "^$" notes.txt

    To search for the literal word "serve" or "grep", spell the
    command out: linegrep grep serve app.log

    \b
    For more help:
      linegrep grep --help
      linegrep serve --help
    """
    configure_logging('WARNING')
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


cli.add_command(grep_command, name='grep')
cli.add_command(serve_command, name='serve')


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
