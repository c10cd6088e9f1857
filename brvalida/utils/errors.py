"""
Erros de validação compartilhados pelos validadores de CPF e placa.
"""
from enum import Enum


class ValidationErrorKind(str, Enum):
    INVALID_LENGTH = "InvalidLength"
    INVALID_CHECKSUM = "InvalidChecksum"
    INVALID_PLATE = "InvalidPlate"


class ValidationError(Exception):
    """
    Falha de validação com tipo e mensagem legível.
    Parâmetros:
        kind (ValidationErrorKind): tipo da falha
        message (str): mensagem para exibição
    """

    def __init__(self, kind: ValidationErrorKind, message: str):
        kind = ValidationErrorKind(kind)
        # args completos para pickle/copy reconstruírem o erro
        super().__init__(kind, message)
        self._kind = kind
        self._message = message

    def __str__(self) -> str:
        return self._message

    @property
    def kind(self) -> ValidationErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"ValidationError(kind={self._kind.value!r}, message={self._message!r})"
