# src/core/domain/entities.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    """
    Cliente no formato de domínio.

    `id` e `created_at` são atribuídos pelo banco e ficam vazios
    até o registro ser persistido.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str
    cpf: str
    email: str
    created_at: datetime | None = None
