from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.domain.entities import Customer as CustomerEntity


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    # `default` usa uma função Python, não do banco.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True
    )


class Customer(Base, TimestampMixin):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cpf: Mapped[str] = mapped_column(String(11), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def to_domain(self) -> CustomerEntity:
        # SQLite descarta o fuso: os valores gravados são sempre UTC
        created_at = self.created_at
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return CustomerEntity(
            id=self.id,
            name=self.name,
            cpf=self.cpf,
            email=self.email,
            created_at=created_at,
        )

    @classmethod
    def from_domain(cls, entity: CustomerEntity) -> "Customer":
        return cls(name=entity.name, cpf=entity.cpf, email=entity.email)
