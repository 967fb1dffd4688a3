"""
WeatherSnapshot Entity - Leitura pontual de clima para uma localização
"""
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class WeatherSnapshot:
    """Entidade Snapshot de clima atual"""
    id: str
    city: str  # Chave de localização (nome da cidade)
    country: str
    temperature: float  # °C
    feels_like: float  # °C
    humidity: int  # %
    wind_speed: float  # m/s
    description: str
    icon: str
    captured_at: datetime  # UTC - relógio de frescor do cache
    source: str

    def __post_init__(self):
        # Timestamps sem timezone são tratados como UTC
        if self.captured_at.tzinfo is None:
            self.captured_at = self.captured_at.replace(tzinfo=timezone.utc)
        else:
            self.captured_at = self.captured_at.astimezone(timezone.utc)

    def age_at(self, now: datetime) -> float:
        """Idade do snapshot em segundos no instante informado"""
        return (now - self.captured_at).total_seconds()

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'id': self.id,
            'city': self.city,
            'country': self.country,
            'temperature': round(self.temperature, 1),
            'feelsLike': round(self.feels_like, 1),
            'humidity': self.humidity,
            'windSpeed': round(self.wind_speed, 1),
            'description': self.description,
            'icon': self.icon,
            'timestamp': self.captured_at.isoformat(),
            'source': self.source
        }
