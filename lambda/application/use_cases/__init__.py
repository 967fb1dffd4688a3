"""Application Use Cases - 100% ASYNC com portas injetadas explicitamente"""
from .get_current_weather_use_case import GetCurrentWeatherUseCase
from .get_weather_forecast_use_case import GetWeatherForecastUseCase
from .get_weather_history_use_case import GetWeatherHistoryUseCase
from .delete_weather_data_use_case import DeleteWeatherDataUseCase

__all__ = [
    'GetCurrentWeatherUseCase',
    'GetWeatherForecastUseCase',
    'GetWeatherHistoryUseCase',
    'DeleteWeatherDataUseCase'
]
