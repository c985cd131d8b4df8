"""
Camada de Banco de Dados
========================
Engine, sessões por requisição e o gateway de persistência usado
pelos repositórios.

O gateway expõe apenas duas operações (criar um registro e buscar o
primeiro registro por um campo). Erros do driver são convertidos em
StoreError / UniqueViolationError em um único ponto
(`classify_store_error`).
"""

import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, select, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.core.config import config
from src.core.models import Base

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════
# ERROS DE ARMAZENAMENTO
# ═══════════════════════════════════════════════════════════

class StoreError(Exception):
    """Falha genérica do banco de dados."""


class UniqueViolationError(StoreError):
    """Violação de restrição de unicidade."""


class RecordNotFoundError(LookupError):
    """Nenhum registro corresponde ao filtro."""


# SQLSTATE do PostgreSQL para unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"

UNIQUE_VIOLATION_MESSAGES = (
    "duplicate key value violates unique constraint",  # PostgreSQL
    "UNIQUE constraint failed",  # SQLite
)


def classify_store_error(exc: Exception) -> StoreError:
    """
    Converte uma exceção do SQLAlchemy/driver em um erro de armazenamento.

    Usa o SQLSTATE quando o driver o expõe (psycopg2 `pgcode`,
    psycopg 3 `sqlstate`) e cai para a comparação de mensagem nos demais
    casos.
    """
    if isinstance(exc, StoreError):
        return exc

    if isinstance(exc, IntegrityError):
        orig = exc.orig
        sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
        if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
            return UniqueViolationError(str(exc))

    message = str(exc)
    if any(fragment in message for fragment in UNIQUE_VIOLATION_MESSAGES):
        return UniqueViolationError(message)

    return StoreError(message)


# ═══════════════════════════════════════════════════════════
# GATEWAY DE PERSISTÊNCIA
# ═══════════════════════════════════════════════════════════

class Database(ABC):
    """Contrato mínimo de persistência consumido pelos repositórios."""

    @abstractmethod
    def create(self, record: Any) -> None:
        """Insere um registro. Campos gerados pelo banco ficam preenchidos em `record`."""

    @abstractmethod
    def find_first(self, model: type, field: str, value: Any) -> Any:
        """Retorna o primeiro registro com `field == value`."""


class SessionDatabase(Database):
    """Implementação do gateway sobre uma Session do SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, record: Any) -> None:
        self.session.add(record)
        try:
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise classify_store_error(e) from e

    def find_first(self, model: type, field: str, value: Any) -> Any:
        column = getattr(model, field)
        query = select(model).where(column == value).limit(1)

        try:
            record = self.session.scalars(query).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise classify_store_error(e) from e

        if record is None:
            raise RecordNotFoundError(f"{model.__name__} com {field}={value!r} não encontrado")

        return record


# ═══════════════════════════════════════════════════════════
# ENGINE CONFIGURATION
# ═══════════════════════════════════════════════════════════

class DatabaseConfig:
    """Configurações do pool de conexões"""

    POOL_SIZE = 10
    MAX_OVERFLOW = 20
    POOL_TIMEOUT = 30
    POOL_RECYCLE = 1800


def get_engine_config(url: str) -> dict:
    """
    Retorna configuração do engine baseada no banco escolhido

    Returns:
        dict: Configuração do SQLAlchemy engine
    """
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        engine_config = {
            "connect_args": {"check_same_thread": False},
            "echo": config.DEBUG,
        }
        # Banco em memória precisa de uma única conexão compartilhada
        if parsed.database in (None, "", ":memory:"):
            engine_config["poolclass"] = StaticPool
        return engine_config

    return {
        "pool_size": DatabaseConfig.POOL_SIZE,
        "max_overflow": DatabaseConfig.MAX_OVERFLOW,
        "pool_timeout": DatabaseConfig.POOL_TIMEOUT,
        "pool_recycle": DatabaseConfig.POOL_RECYCLE,
        "pool_pre_ping": True,
        "echo": config.DEBUG,
        "connect_args": {"application_name": "customer_api"},
    }


def build_engine(url: str) -> Engine:
    """Cria o engine, garantindo o diretório do arquivo SQLite quando necessário."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(url, **get_engine_config(url))


engine = build_engine(config.database_url)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)


def init_db(bind: Engine = engine) -> None:
    """Cria as tabelas que ainda não existem (equivalente a um auto migrate)."""
    Base.metadata.create_all(bind=bind)
    logger.info("✅ Schema do banco verificado")


# ═══════════════════════════════════════════════════════════
# DATABASE DEPENDENCIES
# ═══════════════════════════════════════════════════════════

def get_db():
    """Dependency que abre uma sessão por requisição e sempre a fecha."""
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"❌ Erro na sessão: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


get_db_manager = contextmanager(get_db)

GetDBDep = Annotated[Session, Depends(get_db)]


def check_database_health() -> dict:
    """Executa `SELECT 1` e retorna status e latência."""
    started = time.perf_counter()
    try:
        with get_db_manager() as db:
            db.execute(text("SELECT 1")).scalar()
    except SQLAlchemyError as e:
        logger.error(f"❌ Banco indisponível: {e}")
        return {"status": "unhealthy", "error": str(e)}

    return {
        "status": "healthy",
        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
    }
