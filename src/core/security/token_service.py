# src/core/security/token_service.py
"""
Emissão de Tokens JWT
=====================
Tokens assinados com HS256, válidos por 24 horas, opcionalmente
vinculados a um cliente através da claim `customerId`.

Sem `customerId` o token representa uma sessão anônima.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from jwt import PyJWTError

from src.core.config import config
from src.core.exceptions import SigningError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
CUSTOMER_ID_CLAIM = "customerId"


class TokenService:
    """Gera tokens de acesso de clientes"""

    def __init__(
            self,
            secret: str,
            issuer: str,
            expires_in: timedelta = timedelta(hours=24),
    ):
        self.secret = secret
        self.issuer = issuer
        self.expires_in = expires_in

    def generate_token(self, customer_id: Optional[Any] = None) -> str:
        """
        Gera um token assinado.

        Args:
            customer_id: ID do cliente. Quando None a claim `customerId`
                é omitida e o token é anônimo.

        Raises:
            SigningError: chave ausente ou falha do PyJWT ao assinar.
        """
        if not self.secret:
            raise SigningError("chave de assinatura JWT não configurada")

        claims: dict[str, Any] = {
            "iss": self.issuer,
            "exp": datetime.now(timezone.utc) + self.expires_in,
        }
        if customer_id is not None:
            claims[CUSTOMER_ID_CLAIM] = str(customer_id)

        try:
            return jwt.encode(claims, self.secret, algorithm=ALGORITHM)
        except (PyJWTError, TypeError, ValueError) as e:
            logger.error(f"❌ Falha ao assinar token: {e}")
            raise SigningError(str(e)) from e


def get_token_service() -> TokenService:
    """Dependency com a chave e o emissor da configuração."""
    return TokenService(
        secret=config.JWT_SECRET,
        issuer=config.JWT_ISSUER,
        expires_in=timedelta(hours=config.TOKEN_EXPIRE_HOURS),
    )
