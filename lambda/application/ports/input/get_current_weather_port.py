"""
Input Port: Interface para buscar o clima atual de uma cidade
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.weather_snapshot import WeatherSnapshot
from domain.result import Result
from shared.utils.cancellation import CancellationToken


class IGetCurrentWeatherUseCase(ABC):
    """Interface para caso de uso de clima atual com cache-aside"""
    
    @abstractmethod
    async def execute(
        self,
        city: str,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[WeatherSnapshot]:
        """
        Busca clima atual (cache se fresco, senão fonte externa)
        
        Args:
            city: Nome da cidade
            cancellation_token: Sinal de cancelamento (opcional)
        
        Returns:
            Result com WeatherSnapshot ou falha (InvalidInput, NotFound,
            TransportFailure, Cancelled)
        """
        pass
