"""CLI serve command for linegrep"""

import click

from linegrep.utils import get_int_env


@click.command()
@click.option('--host', envvar='LINEGREP_HOST', default='127.0.0.1', show_default=True, help="Interface to bind")
@click.option('--port', type=int, default=lambda: get_int_env('LINEGREP_PORT', 7777), show_default='7777',
              help="Port to listen on")
@click.option('--reload', is_flag=True, help="Reload on code changes (development only)")
def serve_command(host, port, reload):
    """
    Start the linegrep HTTP API.

    \b
    Endpoints:
      POST /v1/filter   Filter text, streaming matching lines
      GET  /metrics     Prometheus metrics
      GET  /            Health check

    \b
    Examples:
      linegrep serve
      linegrep serve --host 0.0.0.0 --port 8000
    """
    import uvicorn

    click.echo(f"Starting linegrep server on http://{host}:{port}")
    uvicorn.run('linegrep.web:app', host=host, port=port, reload=reload)
