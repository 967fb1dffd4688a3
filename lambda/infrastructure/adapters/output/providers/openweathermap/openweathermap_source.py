"""OpenWeatherMap Source - Implementação da fonte de clima para a API 2.5"""

import asyncio
from typing import Any, Dict, List, Optional
import aiohttp
from ddtrace import tracer

from application.ports.output.weather_source_port import IWeatherSource
from domain.constants import API
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_snapshot import WeatherSnapshot
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers.openweathermap.mappers import OpenWeatherMapDataMapper
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


class OpenWeatherMapSource(IWeatherSource):
    """
    Fonte OpenWeatherMap (endpoints /weather e /forecast)
    
    Características:
    - 100% async com aiohttp (sessão compartilhada)
    - Sem cache próprio: o cache-aside fica no use case
    - HTTP != 2xx, timeout, erro de rede ou payload inválido → None
    """
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session_manager=None
    ):
        """
        Inicializa source
        
        Args:
            api_key: OpenWeatherMap API key (env se None)
            base_url: URL base da API (env se None)
            session_manager: Gerenciador de sessão aiohttp (singleton se None)
        
        Raises:
            RuntimeError: Se API key não configurada (HTTP 500)
        """
        self.api_key = api_key or settings.OPENWEATHER_API_KEY
        if not self.api_key:
            raise RuntimeError("OPENWEATHER_API_KEY não configurada")
        
        self.base_url = base_url or settings.OPENWEATHER_BASE_URL
        self.session_manager = session_manager or get_aiohttp_session_manager()
    
    @property
    def provider_name(self) -> str:
        return API.OPENWEATHER_SOURCE_TAG
    
    async def _get_json(self, path: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        GET na API; ausência e falha remota viram None
        """
        url = f"{self.base_url}/{path}"
        query = {
            **params,
            'appid': self.api_key,
            'units': API.OPENWEATHER_UNITS
        }
        
        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=query) as response:
                if response.status < 200 or response.status >= 300:
                    logger.warning(
                        "OpenWeatherMap returned non-success status",
                        path=path,
                        status=response.status,
                        city=params.get('q')
                    )
                    return None
                return await response.json()
        
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(
                "OpenWeatherMap request failed",
                path=path,
                city=params.get('q'),
                error_type=type(e).__name__,
                error=str(e)
            )
            return None
    
    @tracer.wrap(resource="openweathermap.get_current_weather")
    async def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        data = await self._get_json('weather', {'q': city})
        if data is None:
            return None
        
        try:
            return OpenWeatherMapDataMapper.map_current_to_snapshot(
                data=data,
                city=city,
                captured_at=DateTimeParser.utc_now()
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Invalid OpenWeatherMap current payload", city=city, error=str(e))
            return None
    
    @tracer.wrap(resource="openweathermap.get_forecast_samples")
    async def get_forecast_samples(self, city: str, days: int) -> Optional[List[ForecastSample]]:
        """
        Busca previsões de 3 em 3 horas (8 amostras por dia solicitado)
        """
        data = await self._get_json(
            'forecast',
            {'q': city, 'cnt': days * API.FORECAST_SAMPLES_PER_DAY}
        )
        if data is None:
            return None
        
        try:
            return OpenWeatherMapDataMapper.map_forecast_to_samples(data)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Invalid OpenWeatherMap forecast payload", city=city, error=str(e))
            return None


# Factory singleton
_source_instance = None


def get_openweathermap_source(api_key: Optional[str] = None) -> OpenWeatherMapSource:
    """
    Factory para obter singleton da source
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _source_instance
    
    if _source_instance is None:
        _source_instance = OpenWeatherMapSource(api_key=api_key)
    
    return _source_instance
