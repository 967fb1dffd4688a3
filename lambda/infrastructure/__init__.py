"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de repositórios e serviços externos
"""

from infrastructure.adapters.output.persistence import (
    DynamoDBWeatherRepository,
    InMemoryWeatherRepository
)
from infrastructure.adapters.output.providers import OpenWeatherMapSource
from infrastructure.adapters.output.weather_adapter_factory import WeatherAdapterFactory

__all__ = [
    'DynamoDBWeatherRepository',
    'InMemoryWeatherRepository',
    'OpenWeatherMapSource',
    'WeatherAdapterFactory'
]
