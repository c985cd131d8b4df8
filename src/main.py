# src/main.py
"""
Aplicação Principal - Customer API
==================================
Cadastro de clientes e emissão de tokens de acesso.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes import customers
from src.core.config import config, validate_config
from src.core.database import check_database_health, engine, init_db
from src.core.middleware.correlation import CorrelationIdMiddleware

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia ciclo de vida da aplicação"""

    logger.info("=" * 60)
    logger.info("🚀 INICIANDO CUSTOMER API")
    logger.info(f"🌍 Ambiente: {config.ENVIRONMENT}")
    logger.info("=" * 60)

    validate_config()
    init_db(engine)

    logger.info("✅ APLICAÇÃO PRONTA!")

    yield

    engine.dispose()
    logger.info("🛑 APLICAÇÃO DESLIGADA")


# ═══════════════════════════════════════════════════════════
# TRATAMENTO DE ERROS
# ═══════════════════════════════════════════════════════════

def format_validation_errors(exc: RequestValidationError) -> str:
    """Resume os erros de validação do FastAPI em uma única mensagem."""
    errors = exc.errors()

    for err in errors:
        if err.get("type") == "json_invalid":
            detail = (err.get("ctx") or {}).get("error") or err.get("msg")
            return f"JSON inválido: {detail}"

    messages = []
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query"))
        messages.append(f"{field or 'body'}: {err.get('msg')}")

    return "; ".join(messages)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Erros de formato de entrada respondem 400 com {"error": ...}"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_validation_errors(exc)},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Demais erros HTTP (corpo ilegível, rota inexistente...) no mesmo formato {"error": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ═══════════════════════════════════════════════════════════
# APLICAÇÃO
# ═══════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    fast_app = FastAPI(
        title="Customer API",
        version="1.0.0",
        lifespan=lifespan
    )

    fast_app.add_middleware(CorrelationIdMiddleware)
    fast_app.add_exception_handler(RequestValidationError, validation_error_handler)
    fast_app.add_exception_handler(StarletteHTTPException, http_error_handler)

    fast_app.include_router(customers.router)

    @fast_app.get("/health", tags=["Health"])
    def health_check() -> JSONResponse:
        database = check_database_health()
        healthy = database["status"] == "healthy"

        return JSONResponse(
            status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "healthy" if healthy else "degraded",
                "services": {"database": database},
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    return fast_app


app = create_app()

__all__ = ["app", "create_app"]
