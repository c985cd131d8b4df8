"""
Exceções de Domínio
===================
Levantadas pelos repositórios e serviços quando uma regra de negócio falha.
As rotas capturam essas exceções e as traduzem em respostas HTTP.
"""


class CustomerError(Exception):
    """Erro base para operações de cliente."""

    message = "erro ao processar o cliente"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class DuplicateCustomerError(CustomerError):
    """Já existe um cliente com o mesmo CPF."""

    message = "cliente já existe no sistema"


class CustomerCreationError(CustomerError):
    """Falha de armazenamento não identificada ao criar o cliente."""

    message = "ocorreu um erro desconhecido ao criar o cliente"


class SigningError(Exception):
    """Falha ao assinar o token JWT (ex: chave ausente ou inválida)."""
