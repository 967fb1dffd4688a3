"""
Result - Resultado discriminado retornado pelos use cases
Substitui exceções na fronteira da camada de aplicação
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from domain.exceptions import (
    DomainException,
    InvalidInputException,
    WeatherDataNotFoundException,
    TransportFailureException,
    OperationCancelledException,
)

T = TypeVar('T')


class ErrorKind(Enum):
    """Categorias de falha de um use case"""
    INVALID_INPUT = "InvalidInput"
    NOT_FOUND = "NotFound"
    TRANSPORT_FAILURE = "TransportFailure"
    CANCELLED = "Cancelled"


_KIND_BY_EXCEPTION = {
    InvalidInputException: ErrorKind.INVALID_INPUT,
    WeatherDataNotFoundException: ErrorKind.NOT_FOUND,
    TransportFailureException: ErrorKind.TRANSPORT_FAILURE,
    OperationCancelledException: ErrorKind.CANCELLED,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Sucesso com valor ou falha com a exceção de domínio correspondente

    Usage:
        result = await use_case.execute("Paris")
        if result.is_success:
            snapshot = result.value
        elif result.kind is ErrorKind.NOT_FOUND:
            ...
    """
    value: Optional[T] = None
    error: Optional[DomainException] = None

    @classmethod
    def success(cls, value: T = None) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainException) -> 'Result[T]':
        if error is None:
            raise ValueError("failure requires an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Categoria da falha (None em caso de sucesso)"""
        if self.error is None:
            return None
        for exception_class, kind in _KIND_BY_EXCEPTION.items():
            if isinstance(self.error, exception_class):
                return kind
        return ErrorKind.TRANSPORT_FAILURE

    def unwrap(self) -> T:
        """Retorna o valor ou lança a exceção de domínio carregada"""
        if self.error is not None:
            raise self.error
        return self.value
