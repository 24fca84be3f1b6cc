"""Request timing recorder built on the httpcore ``trace`` extension."""

import time
from datetime import timedelta
from typing import Any

import httpx

from tonicpow.models.response import TraceInfo


class RequestTracer:
    """Records when each transport phase of one request starts and completes.

    An instance is passed as the ``trace`` request extension; httpcore calls it
    with event names such as ``connection.connect_tcp.started`` or
    ``http11.receive_response_headers.complete``. Create one per request.
    """

    def __init__(self) -> None:
        self._events: dict[str, float] = {}

    def __call__(self, event_name: str, info: dict[str, Any]) -> None:
        # Keep the first occurrence; retried connects fire the same events again.
        self._events.setdefault(event_name, time.perf_counter())

    @property
    def events(self) -> dict[str, float]:
        return dict(self._events)

    def _find(self, suffix: str) -> float | None:
        for name, timestamp in self._events.items():
            if name.endswith(suffix):
                return timestamp
        return None

    def _span(self, start_suffix: str, end_suffix: str) -> timedelta | None:
        start = self._find(start_suffix)
        end = self._find(end_suffix)
        if start is None or end is None:
            return None
        return timedelta(seconds=end - start)

    def trace_info(self, response: httpx.Response) -> TraceInfo:
        """Summarize recorded events for a completed (read) response."""
        remote_addr = None
        network_stream = response.extensions.get("network_stream")
        if network_stream is not None:
            server_addr = network_stream.get_extra_info("server_addr")
            if server_addr:
                remote_addr = ":".join(str(part) for part in server_addr)

        return TraceInfo(
            tcp_conn_time=self._span(".connect_tcp.started", ".connect_tcp.complete"),
            tls_handshake=self._span(".start_tls.started", ".start_tls.complete"),
            server_time=self._span(
                ".send_request_headers.started", ".receive_response_headers.complete"
            ),
            response_time=self._span(
                ".receive_response_headers.complete", ".receive_response_body.complete"
            ),
            total_time=response.elapsed,
            is_conn_reused=bool(self._events) and self._find(".connect_tcp.started") is None,
            http_version=response.http_version,
            remote_addr=remote_addr,
        )
