"""
ForecastSummary Entity - Previsão agregada por dia (efêmera, nunca persistida)
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List


@dataclass(frozen=True)
class DaySummary:
    """Resumo de um dia: extremos de temperatura + amostra representativa"""
    date: date
    min_temperature: float
    max_temperature: float
    description: str
    icon: str
    humidity: int
    wind_speed: float

    def to_api_response(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'minTemperature': round(self.min_temperature, 1),
            'maxTemperature': round(self.max_temperature, 1),
            'description': self.description,
            'icon': self.icon,
            'humidity': self.humidity,
            'windSpeed': round(self.wind_speed, 1)
        }


@dataclass
class ForecastSummary:
    """Previsão de vários dias para uma cidade"""
    id: str
    city: str
    generated_at: datetime
    days: List[DaySummary] = field(default_factory=list)

    def to_api_response(self) -> dict:
        return {
            'id': self.id,
            'city': self.city,
            'days': [day.to_api_response() for day in self.days],
            'timestamp': self.generated_at.isoformat()
        }
