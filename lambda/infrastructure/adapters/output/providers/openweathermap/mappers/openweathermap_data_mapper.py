"""
OpenWeatherMap Data Mapper - Transforma dados da API OpenWeatherMap para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List

from domain.constants import API
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_snapshot import WeatherSnapshot
from shared.utils.datetime_parser import DateTimeParser


class OpenWeatherMapDataMapper:
    """
    Mapper para respostas /weather e /forecast da API 2.5
    
    Responsabilidade: Traduzir formato OpenWeatherMap → Domain entities
    """
    
    @staticmethod
    def map_current_to_snapshot(
        data: Dict[str, Any],
        city: str,
        captured_at: datetime
    ) -> WeatherSnapshot:
        """
        Mapeia resposta /weather para WeatherSnapshot
        
        Cada chamada gera um novo ID (não há chave determinística por cidade).
        `city` é a chave de busca do cache, não o nome canônico da API
        ('paris' continua 'paris' mesmo com name='Paris').
        
        Args:
            data: Resposta raw da API
            city: Chave de localização solicitada (gravada como snapshot.city)
            captured_at: Instante da captura (UTC)
        
        Raises:
            KeyError, IndexError, TypeError, ValueError: Payload incompleto
        """
        main = data['main']
        weather = data['weather'][0]
        
        return WeatherSnapshot(
            id=str(uuid.uuid4()),
            city=city,
            country=data.get('sys', {}).get('country', ''),
            temperature=float(main['temp']),
            feels_like=float(main['feels_like']),
            humidity=int(main['humidity']),
            wind_speed=float(data['wind']['speed']),
            description=weather.get('description', ''),
            icon=weather.get('icon', ''),
            captured_at=captured_at,
            source=API.OPENWEATHER_SOURCE_TAG
        )
    
    @staticmethod
    def map_forecast_item_to_sample(item: Dict[str, Any]) -> ForecastSample:
        """Mapeia um item de 'list' (/forecast) para ForecastSample"""
        main = item['main']
        weather = (item.get('weather') or [{}])[0]
        
        return ForecastSample(
            timestamp=DateTimeParser.from_unix(item['dt']),
            temperature=float(main['temp']),
            humidity=int(main.get('humidity', 0)),
            wind_speed=float(item.get('wind', {}).get('speed', 0.0)),
            description=weather.get('description', ''),
            icon=weather.get('icon', '')
        )
    
    @staticmethod
    def map_forecast_to_samples(data: Dict[str, Any]) -> List[ForecastSample]:
        """
        Mapeia resposta /forecast para lista de ForecastSample
        
        Preserva a ordem recebida (a agregação depende dela).
        """
        return [
            OpenWeatherMapDataMapper.map_forecast_item_to_sample(item)
            for item in data.get('list', [])
        ]
