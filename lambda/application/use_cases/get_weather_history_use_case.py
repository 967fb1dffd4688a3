"""
Async Use Case: Get Weather History
"""
from typing import List, Optional
from ddtrace import tracer

from domain.constants import Limits
from domain.entities.weather_snapshot import WeatherSnapshot
from domain.exceptions import DomainException
from domain.result import Result
from application.ports.input.get_weather_history_port import IGetWeatherHistoryUseCase
from application.ports.output.weather_repository_port import IWeatherRepository
from application.services.port_call_service import PortCallService
from shared.utils.cancellation import CancellationToken
from shared.utils.validators import HistoryCountValidator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetWeatherHistoryUseCase(IGetWeatherHistoryUseCase):
    """Async use case: most recent stored snapshots"""
    
    def __init__(self, weather_repository: IWeatherRepository):
        self.weather_repository = weather_repository
    
    @tracer.wrap(resource="use_case.get_weather_history")
    async def execute(
        self,
        count: int = Limits.HISTORY_COUNT_DEFAULT,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[List[WeatherSnapshot]]:
        """
        Returns at most `count` snapshots, newest first
        
        The repository gives no ordering guarantee, so the result is
        re-sorted by captured_at and capped here.
        """
        try:
            count = HistoryCountValidator.validate(count)
            
            snapshots = await PortCallService.call(
                self.weather_repository.get_recent(count),
                operation="repository.get_recent",
                cancellation_token=cancellation_token
            )
            
            ordered = sorted(
                snapshots or [],
                key=lambda snapshot: snapshot.captured_at,
                reverse=True
            )[:count]
            
            return Result.success(ordered)
        
        except DomainException as ex:
            logger.warning(
                "History request failed",
                error_type=type(ex).__name__,
                error=str(ex),
                details=ex.details
            )
            return Result.failure(ex)
