"""
Input Port: Interface para consultar snapshots recentes
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.constants import Limits
from domain.entities.weather_snapshot import WeatherSnapshot
from domain.result import Result
from shared.utils.cancellation import CancellationToken


class IGetWeatherHistoryUseCase(ABC):
    """Interface para caso de uso de histórico"""
    
    @abstractmethod
    async def execute(
        self,
        count: int = Limits.HISTORY_COUNT_DEFAULT,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[List[WeatherSnapshot]]:
        pass
