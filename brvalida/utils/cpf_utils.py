"""
Módulo utilitário para validação e formatação de CPF.
Funções reutilizáveis e testáveis, sem estado compartilhado.
"""
import re
from typing import List

from brvalida.utils.errors import ValidationError, ValidationErrorKind

CPF_LENGTH = 11
CPF_BASE_LENGTH = 9
_PUNCTUATION = re.compile(r"[.-]")
_REPEATED_DIGIT = re.compile(r"(\d)\1{10}", re.ASCII)
_ASCII_DIGITS = "0123456789"


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove pontos e hífens do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF sem pontuação
        Exemplo: '123.456.789-09' -> '12345678909'
        """
        return _PUNCTUATION.sub("", cpf)

    @staticmethod
    def calculate_check_digit(digits: List[int], factor: int) -> int:
        """
        Calcula um dígito verificador: soma ponderada com pesos decrescentes
        a partir de `factor`, multiplicada por 10, módulo 11.
        """
        soma = sum(digit * (factor - i) for i, digit in enumerate(digits))
        resto = (soma * 10) % 11
        return 0 if resto >= 10 else resto

    @staticmethod
    def calculate_cpf_check_digits(base: str) -> str:
        """
        Calcula os dois dígitos verificadores de uma base de 9 dígitos.
        Parâmetros:
            base (str): 9 primeiros dígitos do CPF, sem pontuação
        Retorno:
            str: os dois dígitos verificadores
        Exceções:
            ValidationError: INVALID_LENGTH se a base não tiver 9 caracteres;
            INVALID_CHECKSUM se houver caractere fora de 0-9
        """
        if len(base) != CPF_BASE_LENGTH:
            raise ValidationError(
                ValidationErrorKind.INVALID_LENGTH,
                f"Base do CPF deve conter 9 dígitos (comprimento atual: {len(base)})",
            )
        if any(c not in _ASCII_DIGITS for c in base):
            raise ValidationError(ValidationErrorKind.INVALID_CHECKSUM, f"Base do CPF inválida: {base}")

        digits = [int(c) for c in base]
        dv1 = CPFUtils.calculate_check_digit(digits, 10)
        dv2 = CPFUtils.calculate_check_digit(digits + [dv1], 11)
        return f"{dv1}{dv2}"

    @staticmethod
    def validate_cpf(cpf: str) -> None:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF com ou sem pontuação
        Retorno:
            None
        Exceções:
            ValidationError: INVALID_LENGTH se não houver 11 caracteres após a
            limpeza; INVALID_CHECKSUM para dígitos repetidos, caracteres não
            numéricos ou dígitos verificadores incorretos
        """
        clean = CPFUtils.normalize_cpf(cpf)
        if len(clean) != CPF_LENGTH:
            raise ValidationError(
                ValidationErrorKind.INVALID_LENGTH,
                f"CPF deve conter 11 dígitos (comprimento atual: {len(clean)})",
            )

        if _REPEATED_DIGIT.fullmatch(clean):
            raise ValidationError(
                ValidationErrorKind.INVALID_CHECKSUM,
                f"CPF inválido: {CPFUtils.format_cpf(clean)}",
            )

        # Caracteres não numéricos nunca coincidem com um dígito calculado
        if any(c not in _ASCII_DIGITS for c in clean):
            raise ValidationError(ValidationErrorKind.INVALID_CHECKSUM, f"CPF inválido: {clean}")

        if CPFUtils.calculate_cpf_check_digits(clean[:9]) != clean[9:]:
            raise ValidationError(ValidationErrorKind.INVALID_CHECKSUM, f"CPF inválido: {clean}")

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Retorna True se o CPF for válido, False caso contrário.
        """
        try:
            CPFUtils.validate_cpf(cpf)
        except ValidationError:
            return False
        return True

    @staticmethod
    def format_cpf(cpf: str) -> str:
        """
        Formata o CPF como DDD.DDD.DDD-DD.
        Não valida a entrada: valores curtos geram segmentos curtos ou vazios.
        Exemplo: '12345678909' -> '123.456.789-09'
        """
        clean = CPFUtils.normalize_cpf(cpf)
        return f"{clean[0:3]}.{clean[3:6]}.{clean[6:9]}-{clean[9:11]}"
