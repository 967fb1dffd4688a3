"""
Input Port: Interface para buscar previsão diária agregada
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.constants import Limits
from domain.entities.forecast_summary import ForecastSummary
from domain.result import Result
from shared.utils.cancellation import CancellationToken


class IGetWeatherForecastUseCase(ABC):
    """Interface para caso de uso de previsão por dia"""
    
    @abstractmethod
    async def execute(
        self,
        city: str,
        days: int = Limits.FORECAST_DAYS_DEFAULT,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[ForecastSummary]:
        """
        Busca amostras na fonte e agrega por dia
        
        Args:
            city: Nome da cidade
            days: Número de dias (1-10)
            cancellation_token: Sinal de cancelamento (opcional)
        """
        pass
