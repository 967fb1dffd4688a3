"""
Configurações centralizadas da aplicação
"""
import os

from domain.constants import Cache

# API de Clima (OpenWeatherMap)
OPENWEATHER_BASE_URL = os.environ.get('OPENWEATHER_BASE_URL', 'https://api.openweathermap.org/data/2.5')
OPENWEATHER_API_KEY = os.environ.get('OPENWEATHER_API_KEY', '')

# Persistência (DynamoDB)
TABLE_NAME = os.environ.get('TABLE_NAME', 'WeatherData')
REPOSITORY_BACKEND = os.environ.get('REPOSITORY_BACKEND', 'dynamodb').lower()

# Janela de frescor do snapshot em cache (minutos)
FRESHNESS_WINDOW_MINUTES = int(os.environ.get('FRESHNESS_WINDOW_MINUTES', Cache.FRESHNESS_WINDOW_MINUTES))

# AWS
AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
