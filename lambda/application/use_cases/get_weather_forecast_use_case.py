"""
Async Use Case: Get Weather Forecast
Busca amostras brutas na fonte e agrega em resumos diários
"""
import uuid
from datetime import datetime
from typing import Callable, Optional
from ddtrace import tracer

from domain.constants import Limits
from domain.entities.forecast_summary import ForecastSummary
from domain.exceptions import DomainException, WeatherDataNotFoundException
from domain.result import Result
from domain.services.daily_forecast_aggregator import DailyForecastAggregator
from application.ports.input.get_weather_forecast_port import IGetWeatherForecastUseCase
from application.ports.output.weather_source_port import IWeatherSource
from application.services.port_call_service import PortCallService
from shared.utils.cancellation import CancellationToken
from shared.utils.datetime_parser import DateTimeParser
from shared.utils.validators import CityValidator, ForecastDaysValidator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetWeatherForecastUseCase(IGetWeatherForecastUseCase):
    """Async use case: daily forecast summaries for a city"""
    
    def __init__(
        self,
        weather_source: IWeatherSource,
        clock: Callable[[], datetime] = DateTimeParser.utc_now
    ):
        self.weather_source = weather_source
        self.clock = clock
    
    @tracer.wrap(resource="use_case.get_weather_forecast")
    async def execute(
        self,
        city: str,
        days: int = Limits.FORECAST_DAYS_DEFAULT,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[ForecastSummary]:
        """
        Execute use case asynchronously
        
        Args:
            city: City name
            days: Number of days (1-10)
            cancellation_token: Cancellation signal (optional)
        
        Returns:
            Result with ForecastSummary (at most `days` entries, first-seen date order)
        """
        try:
            city = CityValidator.validate(city)
            days = ForecastDaysValidator.validate(days)
            
            samples = await PortCallService.call(
                self.weather_source.get_forecast_samples(city, days),
                operation="source.get_forecast_samples",
                cancellation_token=cancellation_token
            )
            
            if not samples:
                raise WeatherDataNotFoundException(
                    f"Forecast not found for city: {city}",
                    details={"city": city, "days": days}
                )
            
            summary = ForecastSummary(
                id=str(uuid.uuid4()),
                city=city,
                generated_at=self.clock(),
                days=DailyForecastAggregator.aggregate(samples, days)
            )
            
            logger.info(
                "Forecast aggregated",
                city=city,
                samples=len(samples),
                days_requested=days,
                days_returned=len(summary.days)
            )
            return Result.success(summary)
        
        except DomainException as ex:
            logger.warning(
                "Forecast request failed",
                error_type=type(ex).__name__,
                error=str(ex),
                details=ex.details
            )
            return Result.failure(ex)
