"""
Configurações e fixtures compartilhadas para testes unitários
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_snapshot import WeatherSnapshot
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.http.dynamodb_client_manager import DynamoDBClientManager


NOW = datetime(2025, 11, 27, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Instante fixo usado como relógio dos use cases"""
    return NOW


@pytest.fixture
def make_snapshot():
    """
    Factory fixture para criar WeatherSnapshot com valores padrão
    
    Usage:
        def test_something(make_snapshot):
            snapshot = make_snapshot(city='Paris', captured_at=...)
    """
    def _make(
        id: str = 'snap-1',
        city: str = 'Paris',
        country: str = 'FR',
        temperature: float = 18.0,
        feels_like: float = 17.5,
        humidity: int = 60,
        wind_speed: float = 3.5,
        description: str = 'clear sky',
        icon: str = '01d',
        captured_at: datetime = NOW,
        source: str = 'OpenWeatherMap'
    ) -> WeatherSnapshot:
        return WeatherSnapshot(
            id=id,
            city=city,
            country=country,
            temperature=temperature,
            feels_like=feels_like,
            humidity=humidity,
            wind_speed=wind_speed,
            description=description,
            icon=icon,
            captured_at=captured_at,
            source=source
        )
    
    return _make


@pytest.fixture
def make_sample():
    """Factory fixture para criar ForecastSample"""
    def _make(
        timestamp: datetime = NOW,
        temperature: float = 20.0,
        humidity: int = 50,
        wind_speed: float = 4.0,
        description: str = 'few clouds',
        icon: str = '02d'
    ) -> ForecastSample:
        return ForecastSample(
            timestamp=timestamp,
            temperature=temperature,
            humidity=humidity,
            wind_speed=wind_speed,
            description=description,
            icon=icon
        )
    
    return _make


@pytest.fixture
def mock_weather_repository():
    """Mock do repositório de snapshots (todas as operações async)"""
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_city = AsyncMock(return_value=None)
    repo.get_recent = AsyncMock(return_value=[])
    repo.save = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_weather_source():
    """Mock da fonte externa de clima"""
    source = MagicMock()
    source.provider_name = 'StubSource'
    source.get_current_weather = AsyncMock(return_value=None)
    source.get_forecast_samples = AsyncMock(return_value=None)
    return source


@pytest.fixture(autouse=True)
def reset_client_singletons():
    """Isola os singletons de cliente HTTP/DynamoDB entre testes"""
    AiohttpSessionManager.reset_instance()
    DynamoDBClientManager.reset_instance()
    yield
    AiohttpSessionManager.reset_instance()
    DynamoDBClientManager.reset_instance()
