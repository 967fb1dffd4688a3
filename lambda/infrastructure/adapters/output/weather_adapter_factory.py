"""
Weather Adapter Factory - composição das portas de saída (repositório + fonte)
Único ponto que resolve implementações concretas; use cases recebem as portas
pelo construtor.
"""
from typing import Optional

from application.ports.output.weather_repository_port import IWeatherRepository
from application.ports.output.weather_source_port import IWeatherSource
from infrastructure.adapters.output.persistence import (
    DynamoDBWeatherRepository,
    InMemoryWeatherRepository,
)
from infrastructure.adapters.output.providers.openweathermap import get_openweathermap_source
from shared.config import settings


class WeatherAdapterFactory:
    """
    Factory com lazy-loading dos adapters.
    Mantém instâncias para reuso em execução quente da Lambda.
    """

    def __init__(
        self,
        repository_backend: Optional[str] = None,
        weather_repository: Optional[IWeatherRepository] = None,
        weather_source: Optional[IWeatherSource] = None
    ):
        self.repository_backend = (repository_backend or settings.REPOSITORY_BACKEND).lower()
        self._weather_repository = weather_repository
        self._weather_source = weather_source

    def get_weather_repository(self) -> IWeatherRepository:
        """Retorna repositório configurado (dynamodb | memory)."""
        if self._weather_repository is None:
            if self.repository_backend == 'memory':
                self._weather_repository = InMemoryWeatherRepository()
            elif self.repository_backend == 'dynamodb':
                self._weather_repository = DynamoDBWeatherRepository()
            else:
                raise ValueError(f"Unknown REPOSITORY_BACKEND: {self.repository_backend}")
        return self._weather_repository

    def get_weather_source(self) -> IWeatherSource:
        """Retorna fonte padrão (OpenWeatherMap)."""
        if self._weather_source is None:
            self._weather_source = get_openweathermap_source()
        return self._weather_source


# Factory singleton global
_factory_instance: Optional[WeatherAdapterFactory] = None


def get_weather_adapter_factory() -> WeatherAdapterFactory:
    """Retorna singleton da factory."""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherAdapterFactory()

    return _factory_instance


def set_weather_adapter_factory(factory: Optional[WeatherAdapterFactory]) -> None:
    """Substitui a factory global (servidor local e testes)."""
    global _factory_instance
    _factory_instance = factory
