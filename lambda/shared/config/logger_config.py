"""
Logging estruturado (JSON) com AWS Lambda Powertools

O service name segue DD_SERVICE para que logs e traces do Datadog
fiquem correlacionados sob o mesmo serviço.
"""
import os
from typing import Optional
from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-api'


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna Logger do Powertools
    
    Args:
        service_name: Nome do serviço (DD_SERVICE se None)
        child: Child logger herda o contexto Lambda injetado no logger principal
    
    Nível: POWERTOOLS_LOG_LEVEL (lido pelo próprio Powertools), senão LOG_LEVEL, senão INFO.
    """
    service_name = service_name or os.environ.get('DD_SERVICE', DEFAULT_SERVICE_NAME)
    
    if child:
        return Logger(service=service_name, child=True)
    
    level = None if os.environ.get('POWERTOOLS_LOG_LEVEL') else os.environ.get('LOG_LEVEL', 'INFO')
    return Logger(service=service_name, level=level)


logger = get_logger()
