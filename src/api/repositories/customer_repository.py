# src/api/repositories/customer_repository.py
import logging

from src.core import models
from src.core.database import Database, StoreError, UniqueViolationError
from src.core.domain.entities import Customer
from src.core.domain.gateways import CustomerRepository
from src.core.exceptions import CustomerCreationError, DuplicateCustomerError

logger = logging.getLogger(__name__)


class SqlCustomerRepository(CustomerRepository):
    """Traduz clientes de domínio para registros da tabela `customers` e vice-versa."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, customer: Customer) -> Customer:
        record = models.Customer.from_domain(customer)

        try:
            self.db.create(record)
        except UniqueViolationError:
            logger.info("CPF duplicado ao criar cliente")
            raise DuplicateCustomerError()
        except StoreError as e:
            logger.error(f"❌ Erro ao criar cliente: {e}")
            raise CustomerCreationError()

        return record.to_domain()

    def find_first_by_cpf(self, customer: Customer) -> Customer:
        # Erros do gateway (não encontrado, falha do banco) sobem sem alteração
        record = self.db.find_first(models.Customer, "cpf", customer.cpf)
        return record.to_domain()
