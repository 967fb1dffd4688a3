#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask

Pré-requisitos:
    - Dependências instaladas: pip install -e ".[dev]"
    - OPENWEATHER_API_KEY exportada no ambiente
    - REPOSITORY_BACKEND=memory (padrão local) ou dynamodb

Como usar:
    cd lambda
    python local_server.py

Endpoints disponíveis:
    GET    http://localhost:8000/health
    GET    http://localhost:8000/api/weather/current/{city}
    GET    http://localhost:8000/api/weather/forecast/{city}?days=5
    GET    http://localhost:8000/api/weather/history?count=10
    DELETE http://localhost:8000/api/weather/{id}
"""
import atexit
import os
import sys
import json
from datetime import datetime
from flask import Flask, request
from flask_cors import CORS

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Repositório em memória por padrão no ambiente local
os.environ.setdefault('REPOSITORY_BACKEND', 'memory')

from lambda_function import lambda_handler
from infrastructure.adapters.input.lambda_handler import run_async
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.http.dynamodb_client_manager import get_dynamodb_client_manager

app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": "*"}})


class MockLambdaContext:
    """Mock do contexto Lambda para testes locais"""
    def __init__(self):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = "local-weather-api"
        self.function_version = "$LATEST"
        self.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:local-weather-api"
        self.memory_limit_in_mb = "512"
        self.log_group_name = "/aws/lambda/local-weather-api"
        self.log_stream_name = "local"
        
    def get_remaining_time_in_millis(self):
        return 30000  # timeout da função (30s)


def flask_to_lambda_event(flask_request):
    """Converte requisição Flask para evento Lambda/API Gateway"""
    query_string_parameters = dict(flask_request.args.items())
    body = flask_request.data.decode('utf-8') if flask_request.data else None
    
    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers.items()),
        'queryStringParameters': query_string_parameters or None,
        'pathParameters': None,
        'body': body,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '000000000000',
            'apiId': 'local',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'stage': 'local',
            'requestId': f"local-{datetime.now().timestamp()}",
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response):
    """Converte resposta Lambda para resposta Flask"""
    status_code = lambda_response.get('statusCode', 200)
    headers = lambda_response.get('headers') or {}
    body = lambda_response.get('body') or ''
    
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    
    return body, status_code, headers


@app.route('/', defaults={'path': ''}, methods=['GET', 'DELETE', 'OPTIONS'])
@app.route('/<path:path>', methods=['GET', 'DELETE', 'OPTIONS'])
def proxy(path):
    """Encaminha qualquer rota para o lambda_handler (como o {proxy+} do API Gateway)"""
    event = flask_to_lambda_event(request)
    response = lambda_handler(event, MockLambdaContext())
    return lambda_to_flask_response(response)


def cleanup_clients():
    """Fecha sessão aiohttp e cliente DynamoDB no loop global ao encerrar o servidor"""
    run_async(get_aiohttp_session_manager().cleanup())
    run_async(get_dynamodb_client_manager().cleanup())

if __name__ == '__main__':
    atexit.register(cleanup_clients)
    
    if not os.environ.get('OPENWEATHER_API_KEY'):
        print("⚠️  AVISO: OPENWEATHER_API_KEY não configurada - rotas de clima retornarão erro\n")
    
    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')
    
    print("=" * 70)
    print("🚀 Servidor Local - Weather API")
    print("=" * 70)
    print(f"\n📍 Rodando em: http://{host}:{port}")
    print(f"💾 Repositório: {os.environ.get('REPOSITORY_BACKEND')}")
    print("\n📋 Endpoints disponíveis:")
    print(f"   • GET    http://localhost:{port}/health")
    print(f"   • GET    http://localhost:{port}/api/weather/current/{{city}}")
    print(f"   • GET    http://localhost:{port}/api/weather/forecast/{{city}}?days=5")
    print(f"   • GET    http://localhost:{port}/api/weather/history?count=10")
    print(f"   • DELETE http://localhost:{port}/api/weather/{{id}}")
    print("\n💡 Exemplo de uso:")
    print(f"   curl http://localhost:{port}/api/weather/current/Paris")
    print("\n" + "=" * 70 + "\n")
    
    app.run(host=host, port=port, debug=True, use_reloader=True)
