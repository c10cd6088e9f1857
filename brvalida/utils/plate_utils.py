"""
Validação de placas de veículos brasileiras (padrão antigo e Mercosul).
"""
import re

from brvalida.utils.errors import ValidationError, ValidationErrorKind

# Antigo: ABC1234 ou ABC-1234. Mercosul: ABC1D23
PLATE_PATTERN = re.compile(r"^[A-Z]{3}((\d[A-Z]\d{2})|(-?\d{4}))$", re.ASCII)


class PlateUtils:
    @staticmethod
    def validate_plate(plate: str) -> None:
        """
        Valida a placa contra os dois formatos aceitos.
        Não converte para maiúsculas nem remove espaços.
        Parâmetros:
            plate (str): placa informada
        Exceções:
            ValidationError: INVALID_PLATE com a placa original na mensagem
        """
        if PLATE_PATTERN.fullmatch(plate) is None:
            raise ValidationError(ValidationErrorKind.INVALID_PLATE, f"Placa inválida: {plate}")

    @staticmethod
    def is_valid_plate(plate: str) -> bool:
        try:
            PlateUtils.validate_plate(plate)
        except ValidationError:
            return False
        return True
