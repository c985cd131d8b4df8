# src/core/config.py
"""
Configurações da Aplicação - Customer API
=========================================

Gerencia variáveis de ambiente de forma centralizada e tipada.
Lidas uma única vez na inicialização do processo.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# Carrega .env do diretório raiz
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent.parent / ".env")


class Config(BaseSettings):
    """Configurações centralizadas da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════
    # 🌍 AMBIENTE
    # ═══════════════════════════════════════════════════════════

    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ═══════════════════════════════════════════════════════════
    # 🗄️ BANCO DE DADOS
    # ═══════════════════════════════════════════════════════════

    # Quando informada, tem precedência sobre as variáveis POSTGRES_*
    DATABASE_URL: Optional[str] = None

    POSTGRES_HOST: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_PORT: int = 5432
    POSTGRES_SSLMODE: str = "require"

    SQLITE_PATH: str = "./data/customers.db"

    # ═══════════════════════════════════════════════════════════
    # 🔐 JWT
    # ═══════════════════════════════════════════════════════════

    JWT_SECRET: str = ""
    JWT_ISSUER: str = ""
    TOKEN_EXPIRE_HOURS: int = 24

    # ═══════════════════════════════════════════════════════════
    # 🖥️ SERVIDOR
    # ═══════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════
    # 🔧 PROPRIEDADES ÚTEIS
    # ═══════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT.lower() == "test"

    @property
    def database_url(self) -> str:
        """
        Monta a URL de conexão do banco.

        Prioridade: DATABASE_URL > POSTGRES_* > SQLite local.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if self.POSTGRES_HOST:
            url = URL.create(
                drivername="postgresql+psycopg2",
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_HOST,
                port=self.POSTGRES_PORT,
                database=self.POSTGRES_DB,
                query={"sslmode": self.POSTGRES_SSLMODE},
            )
            return url.render_as_string(hide_password=False)

        return f"sqlite:///{self.SQLITE_PATH}"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# ✅ Instância global
config = Config()


def validate_config(settings: Config = config) -> None:
    """Valida configurações críticas"""
    errors = []

    if settings.ENVIRONMENT.lower() not in ["development", "test", "production"]:
        errors.append("ENVIRONMENT deve ser: development, test ou production")

    if settings.is_production:
        if not settings.JWT_SECRET:
            errors.append("JWT_SECRET não configurada")
        if not settings.JWT_ISSUER:
            errors.append("JWT_ISSUER não configurado")
        if settings.is_sqlite:
            errors.append("Banco PostgreSQL obrigatório em produção (POSTGRES_HOST ou DATABASE_URL)")

    if errors:
        raise ValueError(
            "❌ Erros de configuração:\n" + "\n".join(f"  • {e}" for e in errors)
        )
