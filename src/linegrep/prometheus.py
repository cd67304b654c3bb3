"""Prometheus metrics for the linegrep web service"""

from prometheus_client import Counter, Histogram


filter_requests_total = Counter(
    'linegrep_filter_requests_total',
    'Total number of filter requests',
    ['status'],
)

filter_duration_seconds = Histogram(
    'linegrep_filter_duration_seconds',
    'Time spent streaming a filter response',
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0),
)

lines_scanned_total = Counter('linegrep_lines_scanned_total', 'Total input lines read by the engine')

lines_emitted_total = Counter('linegrep_lines_emitted_total', 'Total output lines produced by the engine')

hits_total = Counter('linegrep_hits_total', 'Total input lines selected by the pattern (after inversion)')

errors_total = Counter('linegrep_errors_total', 'Total errors by type', ['error_type'])

http_responses_total = Counter(
    'linegrep_http_responses_total',
    'HTTP responses by method, endpoint and status code',
    ['method', 'endpoint', 'status_code'],
)


def record_filter_request(status: str, duration: float, lines_scanned: int, hits: int, lines_emitted: int) -> None:
    filter_requests_total.labels(status=status).inc()
    filter_duration_seconds.observe(duration)
    lines_scanned_total.inc(lines_scanned)
    hits_total.inc(hits)
    lines_emitted_total.inc(lines_emitted)


def record_error(error_type: str) -> None:
    errors_total.labels(error_type=error_type).inc()


def record_http_response(method: str, endpoint: str, status_code: int) -> None:
    http_responses_total.labels(method=method, endpoint=endpoint, status_code=str(status_code)).inc()
