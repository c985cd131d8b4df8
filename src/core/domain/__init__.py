from src.core.domain.entities import Customer
from src.core.domain.gateways import CustomerRepository

__all__ = ["Customer", "CustomerRepository"]
