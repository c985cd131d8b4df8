# src/core/dependencies.py
from typing import Annotated

from fastapi import Depends

from src.api.repositories.customer_repository import SqlCustomerRepository
from src.api.services.customer_service import CreateCustomerService, ListCustomerService
from src.core.database import GetDBDep, SessionDatabase
from src.core.domain.gateways import CustomerRepository
from src.core.security.token_service import TokenService, get_token_service


def get_customer_repository(db: GetDBDep) -> CustomerRepository:
    """Repositório com o gateway injetado a partir da sessão da requisição"""
    return SqlCustomerRepository(SessionDatabase(db))


GetCustomerRepositoryDep = Annotated[CustomerRepository, Depends(get_customer_repository)]
GetTokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_create_customer_service(repository: GetCustomerRepositoryDep) -> CreateCustomerService:
    return CreateCustomerService(repository)


def get_list_customer_service(
        repository: GetCustomerRepositoryDep,
        token_service: GetTokenServiceDep,
) -> ListCustomerService:
    return ListCustomerService(repository, token_service)


GetCreateCustomerServiceDep = Annotated[CreateCustomerService, Depends(get_create_customer_service)]
GetListCustomerServiceDep = Annotated[ListCustomerService, Depends(get_list_customer_service)]
