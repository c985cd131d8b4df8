import logging
from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from src.api.schemas.customer import CustomerCreate, CustomerListQuery, CustomerOut
from src.core.dependencies import GetCreateCustomerServiceDep, GetListCustomerServiceDep
from src.core.exceptions import CustomerError, SigningError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Customers"], prefix="/customers")


@router.get("", response_model=str)
def list_customers(
        query: Annotated[CustomerListQuery, Query()],
        service: GetListCustomerServiceDep,
):
    """
    Emite um token de acesso.

    Com um CPF cadastrado o token carrega o `customerId`; sem CPF, ou com
    um CPF desconhecido, o token é anônimo.
    """
    try:
        return service.execute(query)
    except SigningError as e:
        logger.error(f"❌ Falha ao emitir token: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )


@router.post("", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
def create_customer(customer_in: CustomerCreate, service: GetCreateCustomerServiceDep):
    try:
        customer = service.execute(customer_in)
    except CustomerError as e:
        # CPF duplicado também responde 500
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )

    return CustomerOut.model_validate(customer)
