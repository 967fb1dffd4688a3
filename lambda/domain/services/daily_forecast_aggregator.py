"""
Service: Agregação de amostras brutas de previsão em resumos diários
"""
from datetime import date
from typing import Dict, Iterable, List

from domain.entities.forecast_sample import ForecastSample
from domain.entities.forecast_summary import DaySummary


class DailyForecastAggregator:
    """
    Agrupa amostras por data UTC e gera um DaySummary por dia

    Regras:
    - Dias na ordem em que cada data aparece pela primeira vez na sequência bruta
      (a fonte não garante ordenação cronológica)
    - Min/max de temperatura sobre todas as amostras do dia
    - Descrição, ícone, umidade e vento copiados da amostra mais antiga do dia
      (amostra representativa, sem médias)
    - Resultado truncado aos primeiros `days` dias
    """

    @staticmethod
    def group_by_date(samples: Iterable[ForecastSample]) -> Dict[date, List[ForecastSample]]:
        """Agrupa amostras por data preservando a ordem da primeira ocorrência"""
        groups: Dict[date, List[ForecastSample]] = {}
        for sample in samples:
            groups.setdefault(sample.utc_date, []).append(sample)
        return groups

    @staticmethod
    def summarize_day(day: date, samples: List[ForecastSample]) -> DaySummary:
        temperatures = [sample.temperature for sample in samples]
        # min() é estável: empate de timestamp mantém a ordem de chegada
        representative = min(samples, key=lambda sample: sample.timestamp)

        return DaySummary(
            date=day,
            min_temperature=min(temperatures),
            max_temperature=max(temperatures),
            description=representative.description,
            icon=representative.icon,
            humidity=representative.humidity,
            wind_speed=representative.wind_speed
        )

    @classmethod
    def aggregate(cls, samples: Iterable[ForecastSample], days: int) -> List[DaySummary]:
        """
        Gera resumos diários a partir das amostras brutas

        Args:
            samples: Amostras na ordem recebida da fonte
            days: Número máximo de dias no resultado

        Returns:
            Lista de DaySummary com datas únicas, no máximo `days` itens
        """
        if days < 1:
            return []

        summaries = []
        for day, day_samples in cls.group_by_date(samples).items():
            if len(summaries) >= days:
                break
            summaries.append(cls.summarize_day(day, day_samples))

        return summaries
