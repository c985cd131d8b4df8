"""
Middleware de Correlação
========================
Atribui um correlation-id a cada requisição e registra uma linha de log
com método, rota, status e duração.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cid = request.headers.get(CORRELATION_HEADER) or f"ca-{uuid.uuid4()}"
        request.state.correlation_id = cid

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {status_code} "
                f"({duration_ms:.2f}ms) cid={cid}"
            )

        response.headers[CORRELATION_HEADER] = cid
        return response
