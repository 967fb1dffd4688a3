"""
ForecastSample Entity - Amostra bruta de previsão usada na agregação diária
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class ForecastSample:
    """Amostra de previsão com timestamp (tipicamente de 3 em 3 horas)"""
    timestamp: datetime
    temperature: float  # °C
    humidity: int = 0  # %
    wind_speed: float = 0.0  # m/s
    description: str = ""
    icon: str = ""

    @property
    def utc_date(self) -> date:
        """Data de calendário (UTC) da amostra"""
        if self.timestamp.tzinfo is None:
            return self.timestamp.date()
        return self.timestamp.astimezone(timezone.utc).date()
