# schemas/customer.py
from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from src.core.utils import validators
from .base_schema import AppBaseModel

# Limite das colunas String(255) da tabela customers
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255


class CustomerCreate(AppBaseModel):
    """Corpo do POST /customers"""

    name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Customer 1"])
    cpf: str = Field(..., examples=["12345678900"])
    email: EmailStr = Field(..., examples=["email@email.com"])

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Remove espaços extras do nome."""
        name_clean = v.strip()
        if not name_clean:
            raise ValueError('Nome é obrigatório')
        return name_clean

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        if not validators.validate_cpf_format(v):
            raise ValueError('CPF deve conter exatamente 11 dígitos')
        return v

    @field_validator('email', mode='before')
    @classmethod
    def validate_email_length(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if len(v) > EMAIL_MAX_LENGTH:
                raise ValueError(f'Email deve ter no máximo {EMAIL_MAX_LENGTH} caracteres')
        return v


class CustomerListQuery(AppBaseModel):
    """Query string do GET /customers. CPF vazio significa "sem filtro"."""

    cpf: str = ""

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        if v and not validators.validate_cpf_format(v):
            raise ValueError('CPF deve conter exatamente 11 dígitos')
        return v


class CustomerOut(AppBaseModel):
    id: int
    name: str
    cpf: str
    email: str
    created_at: datetime | None = None
