"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""
 
from .weather_repository_port import IWeatherRepository
from .weather_source_port import IWeatherSource
