"""Persistence adapters"""
from .dynamodb_weather_repository import DynamoDBWeatherRepository
from .in_memory_weather_repository import InMemoryWeatherRepository

__all__ = ['DynamoDBWeatherRepository', 'InMemoryWeatherRepository']
