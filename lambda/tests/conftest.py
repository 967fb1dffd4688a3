"""
Configuração global dos testes
"""
import os

# Desabilita envio de traces do ddtrace durante os testes
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')
