#!/usr/bin/env python3
"""
Cria a tabela DynamoDB de snapshots de clima

Estrutura:
- Partition key: Id (S)
- GSI CityIndex: City (S) + Timestamp (S), projeção ALL
  (consulta do snapshot mais recente por cidade)

Uso:
    python scripts/create_weather_table.py [--table WeatherData] [--region us-east-1]
"""
import argparse
import asyncio
import os
import sys

import aioboto3

# Adicionar path do projeto
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'lambda'))

from domain.constants import Storage
import shared.config.settings as settings


async def create_table(table_name: str, region: str) -> None:
    """Cria a tabela (PAY_PER_REQUEST) e aguarda ficar ACTIVE"""
    session = aioboto3.Session()
    
    async with session.client('dynamodb', region_name=region) as client:
        existing = await client.list_tables()
        if table_name in existing.get('TableNames', []):
            print(f"ℹ️  Tabela {table_name} já existe")
            return
        
        print(f"🔨 Criando tabela {table_name} em {region}...")
        await client.create_table(
            TableName=table_name,
            BillingMode='PAY_PER_REQUEST',
            AttributeDefinitions=[
                {'AttributeName': Storage.PARTITION_KEY, 'AttributeType': 'S'},
                {'AttributeName': Storage.CITY_ATTRIBUTE, 'AttributeType': 'S'},
                {'AttributeName': Storage.TIMESTAMP_ATTRIBUTE, 'AttributeType': 'S'},
            ],
            KeySchema=[
                {'AttributeName': Storage.PARTITION_KEY, 'KeyType': 'HASH'},
            ],
            GlobalSecondaryIndexes=[
                {
                    'IndexName': Storage.CITY_INDEX_NAME,
                    'KeySchema': [
                        {'AttributeName': Storage.CITY_ATTRIBUTE, 'KeyType': 'HASH'},
                        {'AttributeName': Storage.TIMESTAMP_ATTRIBUTE, 'KeyType': 'RANGE'},
                    ],
                    'Projection': {'ProjectionType': 'ALL'},
                }
            ],
        )
        
        waiter = client.get_waiter('table_exists')
        await waiter.wait(TableName=table_name)
        print(f"✅ Tabela {table_name} ACTIVE")


def main():
    parser = argparse.ArgumentParser(description="Cria a tabela DynamoDB de snapshots de clima")
    parser.add_argument('--table', default=settings.TABLE_NAME, help="Nome da tabela")
    parser.add_argument('--region', default=settings.AWS_REGION, help="Região AWS")
    args = parser.parse_args()
    
    asyncio.run(create_table(args.table, args.region))


if __name__ == '__main__':
    main()
