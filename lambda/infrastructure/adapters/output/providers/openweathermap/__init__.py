"""OpenWeatherMap source"""
from .openweathermap_source import OpenWeatherMapSource, get_openweathermap_source

__all__ = ['OpenWeatherMapSource', 'get_openweathermap_source']
