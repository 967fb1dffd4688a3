"""
Domain Constants - Constantes de regras de negócio centralizadas
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeatherMap
    OPENWEATHER_SOURCE_TAG = "OpenWeatherMap"
    OPENWEATHER_UNITS = "metric"
    FORECAST_SAMPLES_PER_DAY = 8  # previsões de 3 em 3 horas

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Cache:
    """Constantes do cache-aside de clima atual"""

    FRESHNESS_WINDOW_MINUTES = 30


class Storage:
    """Constantes do repositório DynamoDB"""

    PARTITION_KEY = "Id"
    CITY_INDEX_NAME = "CityIndex"
    CITY_ATTRIBUTE = "City"
    TIMESTAMP_ATTRIBUTE = "Timestamp"


class Limits:
    """Limites dos parâmetros de consulta"""

    FORECAST_DAYS_MIN = 1
    FORECAST_DAYS_MAX = 10
    FORECAST_DAYS_DEFAULT = 5

    HISTORY_COUNT_MIN = 1
    HISTORY_COUNT_MAX = 100
    HISTORY_COUNT_DEFAULT = 10
