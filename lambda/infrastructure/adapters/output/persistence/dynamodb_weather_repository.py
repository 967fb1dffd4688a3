"""
Output Adapter: Repositório de snapshots no DynamoDB (100% assíncrono com aioboto3)

Estrutura do item:
{
    "Id": "5f0c...",            # partition key
    "City": "Paris",            # partition key do GSI CityIndex
    "Timestamp": "2025-11-25T10:00:00+00:00",  # sort key do GSI CityIndex
    "Country": "FR",
    "Temperature": 18.0, "FeelsLike": 17.2, "Humidity": 60, "WindSpeed": 3.6,
    "Description": "clear sky", "Icon": "01d", "Source": "OpenWeatherMap"
}

Falhas do DynamoDB NÃO são silenciadas: propagam para o use case.
"""
from typing import Any, Dict, List, Optional
from ddtrace import tracer

from application.ports.output.weather_repository_port import IWeatherRepository
from domain.constants import Storage
from domain.entities.weather_snapshot import WeatherSnapshot
from infrastructure.adapters.output.http.dynamodb_client_manager import get_dynamodb_client_manager
from shared.config import settings
from shared.utils.datetime_parser import DateTimeParser


class DynamoDBWeatherRepository(IWeatherRepository):
    """Repositório DynamoDB para WeatherSnapshot"""
    
    def __init__(
        self,
        table_name: Optional[str] = None,
        region_name: Optional[str] = None,
        client_manager=None
    ):
        self.table_name = table_name or settings.TABLE_NAME
        self.region_name = region_name or settings.AWS_REGION
        self.client_manager = client_manager or get_dynamodb_client_manager(
            region_name=self.region_name
        )
    
    async def _get_client(self):
        return await self.client_manager.get_client()
    
    @tracer.wrap(resource="dynamodb_repository.get_by_id")
    async def get_by_id(self, record_id: str) -> Optional[WeatherSnapshot]:
        client = await self._get_client()
        response = await client.get_item(
            TableName=self.table_name,
            Key={Storage.PARTITION_KEY: {'S': record_id}}
        )
        
        item = response.get('Item')
        return self.item_to_snapshot(item) if item else None
    
    @tracer.wrap(resource="dynamodb_repository.get_by_city")
    async def get_by_city(self, city: str) -> Optional[WeatherSnapshot]:
        """Consulta o GSI CityIndex em ordem decrescente de Timestamp (mais recente)"""
        client = await self._get_client()
        response = await client.query(
            TableName=self.table_name,
            IndexName=Storage.CITY_INDEX_NAME,
            KeyConditionExpression='#city = :city',
            ExpressionAttributeNames={'#city': Storage.CITY_ATTRIBUTE},
            ExpressionAttributeValues={':city': {'S': city}},
            ScanIndexForward=False,
            Limit=1
        )
        
        items = response.get('Items', [])
        return self.item_to_snapshot(items[0]) if items else None
    
    @tracer.wrap(resource="dynamodb_repository.get_recent")
    async def get_recent(self, count: int) -> List[WeatherSnapshot]:
        """
        Scan limitado a `count` itens
        
        Scan não tem ordem definida; a ordenação é feita pelo use case.
        """
        client = await self._get_client()
        response = await client.scan(
            TableName=self.table_name,
            Limit=count
        )
        
        return [self.item_to_snapshot(item) for item in response.get('Items', [])]
    
    @tracer.wrap(resource="dynamodb_repository.save")
    async def save(self, snapshot: WeatherSnapshot) -> None:
        client = await self._get_client()
        await client.put_item(
            TableName=self.table_name,
            Item=self.snapshot_to_item(snapshot)
        )
    
    @tracer.wrap(resource="dynamodb_repository.delete")
    async def delete(self, record_id: str) -> None:
        """DeleteItem de chave inexistente é no-op no DynamoDB"""
        client = await self._get_client()
        await client.delete_item(
            TableName=self.table_name,
            Key={Storage.PARTITION_KEY: {'S': record_id}}
        )
    
    @staticmethod
    def snapshot_to_item(snapshot: WeatherSnapshot) -> Dict[str, Dict[str, str]]:
        """Converte entity para item DynamoDB (formato low-level)"""
        return {
            'Id': {'S': snapshot.id},
            'City': {'S': snapshot.city},
            'Country': {'S': snapshot.country},
            'Temperature': {'N': str(snapshot.temperature)},
            'FeelsLike': {'N': str(snapshot.feels_like)},
            'Humidity': {'N': str(snapshot.humidity)},
            'WindSpeed': {'N': str(snapshot.wind_speed)},
            'Description': {'S': snapshot.description},
            'Icon': {'S': snapshot.icon},
            'Timestamp': {'S': snapshot.captured_at.isoformat()},
            'Source': {'S': snapshot.source}
        }
    
    @staticmethod
    def item_to_snapshot(item: Dict[str, Dict[str, Any]]) -> WeatherSnapshot:
        """Converte item DynamoDB para entity"""
        def _s(key: str) -> str:
            return item.get(key, {}).get('S', '')
        
        def _n(key: str) -> float:
            return float(item.get(key, {}).get('N', '0'))
        
        return WeatherSnapshot(
            id=_s('Id'),
            city=_s('City'),
            country=_s('Country'),
            temperature=_n('Temperature'),
            feels_like=_n('FeelsLike'),
            humidity=int(_n('Humidity')),
            wind_speed=_n('WindSpeed'),
            description=_s('Description'),
            icon=_s('Icon'),
            captured_at=DateTimeParser.from_iso(_s('Timestamp')),
            source=_s('Source')
        )
