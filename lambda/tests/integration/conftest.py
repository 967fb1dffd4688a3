"""
Fixtures compartilhadas para testes de integração
"""
import pytest
import json
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List, Optional

from application.ports.output.weather_source_port import IWeatherSource
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_snapshot import WeatherSnapshot
from infrastructure.adapters.output.persistence import InMemoryWeatherRepository
from infrastructure.adapters.output.weather_adapter_factory import (
    WeatherAdapterFactory,
    set_weather_adapter_factory,
)


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weather-api'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-api'
        self.log_stream_name = '2025/11/27/[$LATEST]test'
    
    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


class StubWeatherSource(IWeatherSource):
    """
    Fonte de clima determinística (sem rede)
    
    Cidades desconhecidas retornam None (NotFound).
    """
    
    KNOWN_CITIES = {'Paris': 'FR', 'Berlin': 'DE', 'New York': 'US'}
    
    def __init__(self):
        self.current_calls: List[str] = []
        self.forecast_calls: List[tuple] = []
    
    @property
    def provider_name(self) -> str:
        return 'StubSource'
    
    async def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        self.current_calls.append(city)
        if city not in self.KNOWN_CITIES:
            return None
        return WeatherSnapshot(
            id=f'{city.lower().replace(" ", "-")}-{len(self.current_calls)}',
            city=city,
            country=self.KNOWN_CITIES[city],
            temperature=18.0,
            feels_like=17.0,
            humidity=60,
            wind_speed=3.0,
            description='clear sky',
            icon='01d',
            captured_at=datetime.now(timezone.utc),
            source='StubSource'
        )
    
    async def get_forecast_samples(self, city: str, days: int) -> Optional[List[ForecastSample]]:
        self.forecast_calls.append((city, days))
        if city not in self.KNOWN_CITIES:
            return None
        start = datetime(2025, 11, 27, 0, 0, tzinfo=timezone.utc)
        return [
            ForecastSample(
                timestamp=start + timedelta(hours=3 * i),
                temperature=10.0 + (i % 8),
                humidity=70,
                wind_speed=2.5,
                description='few clouds',
                icon='02d'
            )
            for i in range(days * 8)
        ]


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


@pytest.fixture
def weather_source():
    return StubWeatherSource()


@pytest.fixture
def weather_repository():
    return InMemoryWeatherRepository()


@pytest.fixture(autouse=True)
def adapter_factory(weather_source, weather_repository):
    """Injeta adapters em memória na factory global do handler"""
    factory = WeatherAdapterFactory(
        repository_backend='memory',
        weather_repository=weather_repository,
        weather_source=weather_source
    )
    set_weather_adapter_factory(factory)
    yield factory
    set_weather_adapter_factory(None)


def build_api_gateway_event(
    method: str,
    path: str,
    resource: str,
    path_parameters: Optional[Dict[str, str]] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway
    
    Args:
        method: HTTP method (GET, DELETE, etc)
        path: Request path (/api/weather/current/Paris)
        resource: API Gateway resource (/api/weather/current/{city})
        path_parameters: Path params dict (e.g. {'city': 'Paris'})
        query_parameters: Query string params dict
        body: Request body dict (will be JSON encoded)
    """
    return {
        'resource': resource,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        },
        'pathParameters': path_parameters,
        'queryStringParameters': query_parameters,
        'requestContext': {'identity': {'sourceIp': '127.0.0.1'}},
        'body': json.dumps(body) if body else None,
        'isBase64Encoded': False
    }


def build_health_event() -> Dict[str, Any]:
    return build_api_gateway_event(method='GET', path='/health', resource='/health')


def build_current_weather_event(city: str) -> Dict[str, Any]:
    """Builder para evento GET /api/weather/current/{city}"""
    return build_api_gateway_event(
        method='GET',
        path=f'/api/weather/current/{city}',
        resource='/api/weather/current/{city}',
        path_parameters={'city': city}
    )


def build_forecast_event(city: str, days: Optional[str] = None) -> Dict[str, Any]:
    """Builder para evento GET /api/weather/forecast/{city}?days=5"""
    return build_api_gateway_event(
        method='GET',
        path=f'/api/weather/forecast/{city}',
        resource='/api/weather/forecast/{city}',
        path_parameters={'city': city},
        query_parameters={'days': days} if days is not None else None
    )


def build_history_event(count: Optional[str] = None) -> Dict[str, Any]:
    """Builder para evento GET /api/weather/history?count=10"""
    return build_api_gateway_event(
        method='GET',
        path='/api/weather/history',
        resource='/api/weather/history',
        query_parameters={'count': count} if count is not None else None
    )


def build_delete_event(record_id: str) -> Dict[str, Any]:
    """Builder para evento DELETE /api/weather/{id}"""
    return build_api_gateway_event(
        method='DELETE',
        path=f'/api/weather/{record_id}',
        resource='/api/weather/{id}',
        path_parameters={'id': record_id}
    )
