"""
Output Port: Interface do Repositório de Snapshots de Clima
Define o contrato que deve ser implementado pela camada de infraestrutura
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities.weather_snapshot import WeatherSnapshot


class IWeatherRepository(ABC):
    """Interface para armazenamento durável de snapshots"""
    
    @abstractmethod
    async def get_by_id(self, record_id: str) -> Optional[WeatherSnapshot]:
        """Busca snapshot por ID"""
        pass
    
    @abstractmethod
    async def get_by_city(self, city: str) -> Optional[WeatherSnapshot]:
        """Retorna o snapshot mais recente da cidade (ou None)"""
        pass
    
    @abstractmethod
    async def get_recent(self, count: int) -> List[WeatherSnapshot]:
        """
        Retorna até `count` snapshots recentes
        
        A ordenação não é garantida pelo contrato
        """
        pass
    
    @abstractmethod
    async def save(self, snapshot: WeatherSnapshot) -> None:
        """Upsert do snapshot pela chave `id`"""
        pass
    
    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove snapshot por ID (ID inexistente não é erro)"""
        pass
