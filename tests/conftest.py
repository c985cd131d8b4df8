"""
Fixtures compartilhadas
=======================
O ambiente de teste usa SQLite em memória e uma chave JWT fixa.
As variáveis precisam existir antes do primeiro import de `src`.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes"
os.environ["JWT_ISSUER"] = "customer-api-test"

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from src.core.database import build_engine, get_db, init_db
from src.core.security.token_service import TokenService, get_token_service
from src.main import create_app

TEST_SECRET = os.environ["JWT_SECRET"]
TEST_ISSUER = os.environ["JWT_ISSUER"]


# ═══════════════════════════════════════════════════════════
# BANCO DE DADOS
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def test_engine():
    """Banco SQLite em memória, novo a cada teste"""
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine, expire_on_commit=False)


@pytest.fixture
def test_db(session_factory):
    """Sessão de teste"""
    db = session_factory()
    yield db
    db.close()


# ═══════════════════════════════════════════════════════════
# TOKENS
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def token_service():
    return TokenService(secret=TEST_SECRET, issuer=TEST_ISSUER)


@pytest.fixture
def decode_token():
    """Decodifica e valida (assinatura, emissor, validade) um token emitido nos testes"""

    def decode(token: str) -> dict:
        return jwt.decode(token, TEST_SECRET, algorithms=["HS256"], issuer=TEST_ISSUER)

    return decode


# ═══════════════════════════════════════════════════════════
# APLICAÇÃO
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def app(token_service):
    fast_app = create_app()
    fast_app.dependency_overrides[get_token_service] = lambda: token_service
    yield fast_app
    fast_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_client(app, session_factory):
    """Cliente HTTP ligado ao banco SQLite de teste"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
