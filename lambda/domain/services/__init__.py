"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openweathermap/mappers/openweathermap_data_mapper.py
"""

from domain.services.daily_forecast_aggregator import DailyForecastAggregator

__all__ = ['DailyForecastAggregator']
