# src/api/services/customer_service.py
"""
Casos de uso de clientes
========================

- CreateCustomerService: valida (via schema) e persiste um cliente.
- ListCustomerService: identifica o cliente pelo CPF e emite um token.

A emissão de token é fail-open: se a busca pelo CPF falhar por qualquer
motivo, o chamador recebe um token anônimo em vez de um erro. Apenas
falhas de assinatura chegam ao chamador.
"""

import logging

from src.api.schemas.customer import CustomerCreate, CustomerListQuery
from src.core.domain.entities import Customer
from src.core.domain.gateways import CustomerRepository
from src.core.security.token_service import TokenService

logger = logging.getLogger(__name__)


class CreateCustomerService:
    """Cria clientes"""

    def __init__(self, customer_repository: CustomerRepository):
        self.customer_repository = customer_repository

    def execute(self, data: CustomerCreate) -> Customer:
        customer = Customer(name=data.name, cpf=data.cpf, email=data.email)

        created = self.customer_repository.create(customer)
        logger.info(f"✅ Cliente criado: id={created.id}")
        return created


class ListCustomerService:
    """Emite o token de acesso, vinculado ao cliente quando o CPF é encontrado"""

    def __init__(self, customer_repository: CustomerRepository, token_service: TokenService):
        self.customer_repository = customer_repository
        self.token_service = token_service

    def execute(self, query: CustomerListQuery) -> str:
        # Sem CPF: token anônimo, sem consultar o banco
        if not query.cpf:
            return self.token_service.generate_token(None)

        try:
            found = self.customer_repository.find_first_by_cpf(
                Customer(name="", cpf=query.cpf, email="")
            )
        except Exception as e:
            # Cliente não encontrado ou falha na busca: segue com token anônimo
            logger.warning(f"⚠️ Busca por CPF falhou, emitindo token anônimo: {e}")
            return self.token_service.generate_token(None)

        return self.token_service.generate_token(found.id)
