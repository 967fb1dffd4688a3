"""
Output Adapter: Repositório de snapshots em memória
Usado no servidor local e nos testes de integração
"""
from typing import Dict, List, Optional

from application.ports.output.weather_repository_port import IWeatherRepository
from domain.entities.weather_snapshot import WeatherSnapshot


class InMemoryWeatherRepository(IWeatherRepository):
    """Repositório em memória indexado por ID"""
    
    def __init__(self, snapshots: Optional[List[WeatherSnapshot]] = None):
        self._items: Dict[str, WeatherSnapshot] = {}
        for snapshot in snapshots or []:
            self._items[snapshot.id] = snapshot
    
    async def get_by_id(self, record_id: str) -> Optional[WeatherSnapshot]:
        return self._items.get(record_id)
    
    async def get_by_city(self, city: str) -> Optional[WeatherSnapshot]:
        matches = [s for s in self._items.values() if s.city == city]
        if not matches:
            return None
        return max(matches, key=lambda s: s.captured_at)
    
    async def get_recent(self, count: int) -> List[WeatherSnapshot]:
        # Ordem de inserção, como um scan (sem garantia de recência)
        return list(self._items.values())[:count]
    
    async def save(self, snapshot: WeatherSnapshot) -> None:
        self._items[snapshot.id] = snapshot
    
    async def delete(self, record_id: str) -> None:
        self._items.pop(record_id, None)
    
    def __len__(self) -> int:
        return len(self._items)
