"""
Async Use Case: Get Current Weather
Cache-aside: reutiliza o snapshot armazenado enquanto fresco, senão busca na fonte
"""
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Optional
from ddtrace import tracer

from domain.entities.weather_snapshot import WeatherSnapshot
from domain.exceptions import DomainException, WeatherDataNotFoundException
from domain.result import Result
from application.ports.input.get_current_weather_port import IGetCurrentWeatherUseCase
from application.ports.output.weather_repository_port import IWeatherRepository
from application.ports.output.weather_source_port import IWeatherSource
from application.services.port_call_service import PortCallService
from shared.config.settings import FRESHNESS_WINDOW_MINUTES
from shared.utils.cancellation import CancellationToken
from shared.utils.datetime_parser import DateTimeParser
from shared.utils.validators import CityValidator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetCurrentWeatherUseCase(IGetCurrentWeatherUseCase):
    """Async use case: current weather for a city with freshness cache"""
    
    def __init__(
        self,
        weather_source: IWeatherSource,
        weather_repository: IWeatherRepository,
        freshness_window: timedelta = timedelta(minutes=FRESHNESS_WINDOW_MINUTES),
        clock: Callable[[], datetime] = DateTimeParser.utc_now
    ):
        self.weather_source = weather_source
        self.weather_repository = weather_repository
        self.freshness_window = freshness_window
        self.clock = clock
    
    def is_fresh(self, snapshot: WeatherSnapshot, now: datetime) -> bool:
        """Fresco se a idade for estritamente menor que a janela"""
        return now - snapshot.captured_at < self.freshness_window
    
    @tracer.wrap(resource="use_case.get_current_weather")
    async def execute(
        self,
        city: str,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[WeatherSnapshot]:
        """
        Execute use case asynchronously
        
        Args:
            city: City name (location key)
            cancellation_token: Cancellation signal (optional)
        
        Returns:
            Result with the cached or freshly fetched WeatherSnapshot
        """
        try:
            city = CityValidator.validate(city)
            
            cached = await PortCallService.call(
                self.weather_repository.get_by_city(city),
                operation="repository.get_by_city",
                cancellation_token=cancellation_token
            )
            
            now = self.clock()
            if cached is not None and self.is_fresh(cached, now):
                logger.info(
                    "Cache HIT",
                    city=city,
                    snapshot_id=cached.id,
                    age_seconds=round(cached.age_at(now), 1)
                )
                return Result.success(cached)
            
            logger.info(
                "Cache MISS" if cached is None else "Cache STALE",
                city=city,
                provider=self.weather_source.provider_name
            )
            
            snapshot = await PortCallService.call(
                self.weather_source.get_current_weather(city),
                operation="source.get_current_weather",
                cancellation_token=cancellation_token
            )
            
            if snapshot is None:
                raise WeatherDataNotFoundException(
                    f"Weather data not found for city: {city}",
                    details={"city": city}
                )
            
            if snapshot.city != city:
                # Chave do cache é a cidade solicitada (get_by_city lê por ela)
                snapshot = replace(snapshot, city=city)
            
            await PortCallService.call(
                self.weather_repository.save(snapshot),
                operation="repository.save",
                cancellation_token=cancellation_token
            )
            
            logger.info("Weather fetched and cached", city=city, snapshot_id=snapshot.id)
            return Result.success(snapshot)
        
        except DomainException as ex:
            logger.warning(
                "Current weather request failed",
                error_type=type(ex).__name__,
                error=str(ex),
                details=ex.details
            )
            return Result.failure(ex)
