"""
API pública de validação de CPF e placas.
Funções de módulo delegam a uma instância padrão de ValidatorService.
"""
from brvalida.api.services.validator_service import ValidatorService
from brvalida.utils.errors import ValidationError, ValidationErrorKind

_service = ValidatorService()


def validate_cpf(cpf: str) -> None:
    """
    Valida um CPF.
    Exceções:
        ValidationError: tamanho incorreto ou dígitos verificadores inválidos
    """
    _service.validate_cpf(cpf)


def is_cpf_valid(cpf: str) -> bool:
    return _service.is_cpf_valid(cpf)


def format_cpf(cpf: str) -> str:
    """
    Formata um CPF como DDD.DDD.DDD-DD, sem validar.
    """
    return _service.format_cpf(cpf)


def calculate_cpf_check_digits(base: str) -> str:
    """
    Calcula os dois dígitos verificadores de uma base de 9 dígitos.
    Exceções:
        ValidationError: base fora do tamanho ou com caracteres não numéricos
    """
    return _service.calculate_cpf_check_digits(base)


def validate_plate(plate: str) -> None:
    """
    Valida uma placa no padrão antigo (ABC1234, ABC-1234) ou Mercosul (ABC1D23).
    Exceções:
        ValidationError: placa fora dos formatos aceitos
    """
    _service.validate_plate(plate)


def is_plate_valid(plate: str) -> bool:
    return _service.is_plate_valid(plate)


# Grafias alternativas
is_valid_cpf = is_cpf_valid
is_valid_plate = is_plate_valid

__all__ = [
    "ValidationError",
    "ValidationErrorKind",
    "ValidatorService",
    "validate_cpf",
    "is_cpf_valid",
    "format_cpf",
    "calculate_cpf_check_digits",
    "validate_plate",
    "is_plate_valid",
    "is_valid_cpf",
    "is_valid_plate",
]
