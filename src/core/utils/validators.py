"""
Validadores de dados brasileiros
=================================
Validação de formato de CPF. E-mail é validado pelo `EmailStr` do pydantic.
"""

import re

CPF_PATTERN = re.compile(r"[0-9]{11}")


def validate_cpf_format(cpf: str) -> bool:
    """
    Valida o formato do CPF: exatamente 11 dígitos, sem pontuação.

    Os dígitos verificadores não são conferidos.

    Examples:
        >>> validate_cpf_format('12345678900')
        True
        >>> validate_cpf_format('123.456.789-00')
        False
        >>> validate_cpf_format('invalid_cpf_format')
        False
    """
    if not cpf:
        return False

    return bool(CPF_PATTERN.fullmatch(cpf))
