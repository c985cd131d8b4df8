# schemas/__init__.py
from .base_schema import AppBaseModel
from .customer import CustomerCreate, CustomerListQuery, CustomerOut

__all__ = [
    'AppBaseModel',
    'CustomerCreate',
    'CustomerListQuery',
    'CustomerOut',
]
