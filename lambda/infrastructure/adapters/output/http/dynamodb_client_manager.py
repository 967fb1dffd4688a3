"""
DynamoDB Client Manager - Singleton para gerenciar cliente aioboto3
Reutiliza cliente entre invocações Lambda (warm starts)
"""
import asyncio
from typing import Optional
import aioboto3
from botocore.config import Config


class DynamoDBClientManager:
    """
    Gerenciador singleton de cliente DynamoDB com aioboto3
    
    - Reutiliza cliente entre invocações Lambda (warm starts)
    - Recria cliente quando o event loop muda
    - Retries ficam a cargo do botocore (o core não faz retry)
    
    Uso:
        manager = get_dynamodb_client_manager(region_name='us-east-1')
        client = await manager.get_client()
        response = await client.get_item(...)
    """
    
    _instance: Optional['DynamoDBClientManager'] = None
    
    def __init__(
        self,
        region_name: str = 'us-east-1',
        max_pool_connections: int = 50,
        connect_timeout: int = 3,
        read_timeout: int = 3
    ):
        self.region_name = region_name
        self.session = aioboto3.Session()
        self.boto_config = Config(
            region_name=region_name,
            max_pool_connections=max_pool_connections,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': 2, 'mode': 'adaptive'}
        )
        
        self._client = None
        self._client_loop_id = None
        self._client_context_manager = None
    
    @classmethod
    def get_instance(cls, region_name: str = 'us-east-1') -> 'DynamoDBClientManager':
        """
        Retorna instância singleton do gerenciador
        
        Args:
            region_name: Região AWS (usado apenas na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(region_name=region_name)
        return cls._instance
    
    async def get_client(self):
        """
        Retorna cliente DynamoDB (cria ou reutiliza no event loop atual)
        
        Raises:
            RuntimeError: Se o cliente não puder ser criado
        """
        loop_id = id(asyncio.get_running_loop())
        
        if self._client is not None and self._client_loop_id == loop_id:
            return self._client
        
        if self._client is not None:
            await self._close_client()
        
        try:
            self._client_context_manager = self.session.client(
                'dynamodb',
                region_name=self.region_name,
                config=self.boto_config
            )
            self._client = await self._client_context_manager.__aenter__()
            self._client_loop_id = loop_id
        except Exception as e:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None
            raise RuntimeError(f"Failed to create DynamoDB client: {str(e)}") from e
        
        return self._client
    
    async def _close_client(self) -> None:
        if self._client is None:
            return
        try:
            if self._client_context_manager is not None:
                await self._client_context_manager.__aexit__(None, None, None)
        finally:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None
    
    async def cleanup(self) -> None:
        """Fecha cliente e libera recursos"""
        await self._close_client()
    
    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_dynamodb_client_manager(region_name: str = 'us-east-1') -> DynamoDBClientManager:
    """Factory function para obter instância singleton do gerenciador"""
    return DynamoDBClientManager.get_instance(region_name=region_name)
