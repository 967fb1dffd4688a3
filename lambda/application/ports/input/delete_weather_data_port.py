"""
Input Port: Interface para remover um snapshot armazenado
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.result import Result
from shared.utils.cancellation import CancellationToken


class IDeleteWeatherDataUseCase(ABC):
    """Interface para caso de uso de remoção (idempotente)"""
    
    @abstractmethod
    async def execute(
        self,
        record_id: str,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[None]:
        pass
