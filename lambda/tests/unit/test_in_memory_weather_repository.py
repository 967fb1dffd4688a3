"""
Testes Unitários - InMemoryWeatherRepository
"""
import pytest
from datetime import timedelta

from infrastructure.adapters.output.persistence.in_memory_weather_repository import InMemoryWeatherRepository


@pytest.mark.asyncio
class TestInMemoryWeatherRepository:
    
    async def test_save_and_get_by_id(self, make_snapshot):
        repo = InMemoryWeatherRepository()
        snapshot = make_snapshot(id='a')
        
        await repo.save(snapshot)
        
        assert await repo.get_by_id('a') is snapshot
        assert len(repo) == 1
    
    async def test_get_by_city_returns_most_recent(self, make_snapshot, now):
        repo = InMemoryWeatherRepository([
            make_snapshot(id='old', city='Paris', captured_at=now - timedelta(hours=1)),
            make_snapshot(id='new', city='Paris', captured_at=now),
            make_snapshot(id='other', city='Rome', captured_at=now),
        ])
        
        assert (await repo.get_by_city('Paris')).id == 'new'
        assert await repo.get_by_city('Oslo') is None
    
    async def test_get_recent_limit(self, make_snapshot):
        repo = InMemoryWeatherRepository([make_snapshot(id=str(i)) for i in range(5)])
        
        assert len(await repo.get_recent(3)) == 3
    
    async def test_delete_is_idempotent(self, make_snapshot):
        repo = InMemoryWeatherRepository([make_snapshot(id='a')])
        
        await repo.delete('a')
        await repo.delete('a')
        
        assert await repo.get_by_id('a') is None
        assert len(repo) == 0
