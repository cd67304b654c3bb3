import io
import logging
import os
import platform
from collections.abc import Iterator
from contextlib import asynccontextmanager
from time import time

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response, StreamingResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from linegrep import prometheus as prom
from linegrep.__version__ import __version__
from linegrep.engine import FilterStats, filter_lines
from linegrep.matcher import InvalidPatternError
from linegrep.models import FilterRequest, HealthResponse
from linegrep.utils import configure_logging, get_int_env, get_log_level_name


configure_logging('INFO')
log_level_name = get_log_level_name('INFO')

logger = logging.getLogger(__name__)

MAX_TEXT_BYTES = get_int_env('LINEGREP_MAX_TEXT_BYTES', 64 * 1024 * 1024)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f'linegrep {__version__} starting, max request text {MAX_TEXT_BYTES} bytes')
    yield
    logger.info('Shutting down linegrep')


app = FastAPI(
    title='linegrep',
    version=__version__,
    description="""
    Streaming line filter with grep-style context handling.

    ## Endpoints

    * `/v1/filter` - Filter text against a regex or fixed string, streaming matching lines
    * `/metrics` - Prometheus metrics
    * `/` - Service health
    """,
    license_info={'name': 'MIT'},
    lifespan=lifespan,
    docs_url='/docs',
    redoc_url='/redoc',
)


def get_constants() -> dict:
    return {
        'LOG_LEVEL': log_level_name,
        'MAX_TEXT_BYTES': MAX_TEXT_BYTES,
    }


def get_app_env_variables() -> dict:
    return {key: value for key, value in os.environ.items() if key.startswith(('LINEGREP_', 'UVICORN_'))}


@app.get('/', tags=['General'], response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check and basic introspection."""
    prom.record_http_response('GET', '/', 200)
    return HealthResponse(
        status='ok',
        app_version=__version__,
        python_version=platform.python_version(),
        constants=get_constants(),
        environment=get_app_env_variables(),
    )


@app.get('/metrics', tags=['Monitoring'])
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def stream_output(output: Iterator[str], stats: FilterStats) -> Iterator[str]:
    """
    Yield output lines terminated by newlines and record metrics when done.

    If the client goes away the generator is closed, which closes the
    engine iterator and stops reading input.
    """
    started = time()
    status = 'success'
    try:
        for line in output:
            yield line + '\n'
    except GeneratorExit:
        status = 'cancelled'
        raise
    except Exception as e:
        status = 'error'
        logger.error(f'Filter stream failed: {e}')
        prom.record_error('stream_error')
        raise
    finally:
        # Closing the engine iterator finalizes stats when the scan stopped early
        output.close()
        prom.record_filter_request(status, time() - started, stats.lines_scanned, stats.hits, stats.lines_emitted)
        logger.debug(
            f'Filter stream {status}: {stats.lines_scanned} lines read, {stats.hits} hits, '
            f'{stats.lines_emitted} lines emitted'
        )


@app.post(
    '/v1/filter',
    tags=['Filter'],
    summary='Filter text lines against a pattern',
    response_class=StreamingResponse,
    responses={
        200: {'description': 'Matching lines (or the hit count), one per line', 'content': {'text/plain': {}}},
        400: {'description': 'Invalid regex pattern'},
        413: {'description': 'Request text too large'},
    },
)
def filter_text(request: FilterRequest):
    """
    Filter the request text line by line.

    - **pattern**: Regular expression (Python syntax), or a fixed string when `options.literal` is set
    - **text**: Input text, split on `\\n`; trailing `\\r` is stripped from each line
    - **options**: Context sizes, count mode, case folding, inversion and line numbering

    The response is streamed as `text/plain`, one output line per line.
    """
    size = len(request.text.encode('utf-8'))
    if size > MAX_TEXT_BYTES:
        prom.record_error('payload_too_large')
        prom.record_http_response('POST', '/v1/filter', 413)
        raise HTTPException(status_code=413, detail=f'Text is {size} bytes, limit is {MAX_TEXT_BYTES}')

    stats = FilterStats()
    try:
        output = filter_lines(request.pattern, request.options, io.StringIO(request.text), stats)
    except InvalidPatternError as e:
        logger.warning(str(e))
        prom.record_error('invalid_regex')
        prom.record_filter_request('error', 0, 0, 0, 0)
        prom.record_http_response('POST', '/v1/filter', 400)
        raise HTTPException(status_code=400, detail=str(e))

    prom.record_http_response('POST', '/v1/filter', 200)
    return StreamingResponse(stream_output(output, stats), media_type='text/plain')
