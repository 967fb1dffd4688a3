"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, Type

from domain.constants import Limits
from domain.exceptions import InvalidInputException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""
    
    @staticmethod
    def validate_range(
        value: int,
        min_val: int,
        max_val: int,
        param_name: str,
        exception_class: Type[Exception] = InvalidInputException
    ) -> int:
        """
        Valida se valor numérico está dentro do range (inclusivo)
        
        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar
        
        Returns:
            Valor validado
        
        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise exception_class(
                f"{param_name} must be between {min_val} and {max_val}",
                details={
                    param_name: value,
                    "min": min_val,
                    "max": max_val
                }
            )
        return value
    
    @staticmethod
    def validate_integer(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = InvalidInputException
    ) -> int:
        """
        Valida se valor é inteiro (bool não é aceito)
        
        Raises:
            exception_class: Se não for inteiro
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise exception_class(
                f"{param_name} must be an integer",
                details={param_name: repr(value)}
            )
        return value
    
    @staticmethod
    def validate_not_empty(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = InvalidInputException
    ) -> str:
        """
        Valida se string não está vazia
        
        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar
        
        Returns:
            String validada e trimmed
        
        Raises:
            exception_class: Se string vazia
        """
        if not isinstance(value, str) or not value.strip():
            raise exception_class(
                f"{param_name} cannot be empty",
                details={param_name: value}
            )
        return value.strip()


class CityValidator:
    """Validate city (location key) parameter"""
    
    @staticmethod
    def validate(city: str) -> str:
        return GenericValidator.validate_not_empty(city, param_name="city")


class RecordIdValidator:
    """Validate stored snapshot id parameter"""
    
    @staticmethod
    def validate(record_id: str) -> str:
        return GenericValidator.validate_not_empty(record_id, param_name="id")


class ForecastDaysValidator:
    """Validate forecast days parameter"""
    
    MIN_DAYS = Limits.FORECAST_DAYS_MIN
    MAX_DAYS = Limits.FORECAST_DAYS_MAX
    
    @staticmethod
    def validate(days: int) -> int:
        """
        Validate days is an integer within [1, 10]
        
        Raises:
            InvalidInputException: If days is out of range
        """
        GenericValidator.validate_integer(days, param_name="days")
        return GenericValidator.validate_range(
            value=days,
            min_val=ForecastDaysValidator.MIN_DAYS,
            max_val=ForecastDaysValidator.MAX_DAYS,
            param_name="days"
        )


class HistoryCountValidator:
    """Validate history count parameter"""
    
    MIN_COUNT = Limits.HISTORY_COUNT_MIN
    MAX_COUNT = Limits.HISTORY_COUNT_MAX
    
    @staticmethod
    def validate(count: int) -> int:
        """
        Validate count is an integer within [1, 100]
        
        Raises:
            InvalidInputException: If count is out of range
        """
        GenericValidator.validate_integer(count, param_name="count")
        return GenericValidator.validate_range(
            value=count,
            min_val=HistoryCountValidator.MIN_COUNT,
            max_val=HistoryCountValidator.MAX_COUNT,
            param_name="count"
        )
