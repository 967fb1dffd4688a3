"""Weather Source Port - Interface para a fonte externa de dados climáticos"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities.weather_snapshot import WeatherSnapshot
from domain.entities.forecast_sample import ForecastSample


class IWeatherSource(ABC):
    """
    Interface para provedores externos de clima.

    Ausência de dados e falha remota (timeout, HTTP != 2xx, payload inválido)
    são colapsadas no mesmo sinal: None.
    """

    @abstractmethod
    async def get_current_weather(self, city: str) -> Optional[WeatherSnapshot]:
        """
        Busca o clima atual da cidade
        
        Args:
            city: Nome da cidade (chave de localização)
        
        Returns:
            WeatherSnapshot com novo ID gerado, ou None se indisponível
        """
        pass

    @abstractmethod
    async def get_forecast_samples(self, city: str, days: int) -> Optional[List[ForecastSample]]:
        """
        Busca amostras brutas de previsão
        
        Args:
            city: Nome da cidade
            days: Número de dias desejados (a granularidade é da fonte)
        
        Returns:
            Lista de ForecastSample na ordem recebida, ou None se indisponível
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeatherMap')"""
        pass
