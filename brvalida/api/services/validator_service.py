"""
Serviço de validação: encapsula CPFUtils e PlateUtils com logging opcional.
Facilita testes, reuso e injeção de logger pela aplicação.
"""
import logging
from typing import Optional

from brvalida.utils.cpf_utils import CPFUtils
from brvalida.utils.errors import ValidationError
from brvalida.utils.plate_utils import PlateUtils

DEFAULT_LOGGER_NAME = "brvalida.validator"


class ValidatorService:
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs de diagnóstico.
                Sem logger, usa "brvalida.validator" com NullHandler, deixando
                a configuração de saída para a aplicação.
        """
        if logger is None:
            logger = logging.getLogger(DEFAULT_LOGGER_NAME)
            if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
                logger.addHandler(logging.NullHandler())
        self.logger = logger

    def validate_cpf(self, cpf: str) -> None:
        """
        Valida o CPF e propaga ValidationError ao chamador.
        Parâmetros:
            cpf (str): CPF com ou sem pontuação
        Retorno:
            None
        """
        self.logger.debug("Validando CPF")
        try:
            CPFUtils.validate_cpf(cpf)
        except ValidationError as err:
            self.logger.debug(f"CPF rejeitado: kind={err.kind.value}")
            raise
        self.logger.debug("CPF válido")

    def is_cpf_valid(self, cpf: str) -> bool:
        try:
            self.validate_cpf(cpf)
        except ValidationError:
            return False
        return True

    def format_cpf(self, cpf: str) -> str:
        return CPFUtils.format_cpf(cpf)

    def calculate_cpf_check_digits(self, base: str) -> str:
        return CPFUtils.calculate_cpf_check_digits(base)

    def validate_plate(self, plate: str) -> None:
        """
        Valida a placa e propaga ValidationError ao chamador.
        Parâmetros:
            plate (str): placa no padrão antigo ou Mercosul
        Retorno:
            None
        """
        self.logger.debug("Validando placa")
        try:
            PlateUtils.validate_plate(plate)
        except ValidationError as err:
            self.logger.debug(f"Placa rejeitada: kind={err.kind.value}")
            raise
        self.logger.debug("Placa válida")

    def is_plate_valid(self, plate: str) -> bool:
        try:
            self.validate_plate(plate)
        except ValidationError:
            return False
        return True
