"""Weather source providers"""
from .openweathermap import OpenWeatherMapSource, get_openweathermap_source

__all__ = ['OpenWeatherMapSource', 'get_openweathermap_source']
