# src/core/domain/gateways.py
"""Contratos que a camada de serviços consome."""

from abc import ABC, abstractmethod

from src.core.domain.entities import Customer


class CustomerRepository(ABC):
    """Repositório do agregado Customer."""

    @abstractmethod
    def create(self, customer: Customer) -> Customer:
        """Persiste o cliente e retorna a versão com id e created_at preenchidos."""

    @abstractmethod
    def find_first_by_cpf(self, customer: Customer) -> Customer:
        """Retorna o primeiro cliente com o mesmo CPF de `customer`."""
