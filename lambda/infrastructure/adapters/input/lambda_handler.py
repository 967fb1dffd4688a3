"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio
import time
from typing import Optional
from urllib.parse import unquote
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.get_current_weather_use_case import GetCurrentWeatherUseCase
from application.use_cases.get_weather_forecast_use_case import GetWeatherForecastUseCase
from application.use_cases.get_weather_history_use_case import GetWeatherHistoryUseCase
from application.use_cases.delete_weather_data_use_case import DeleteWeatherDataUseCase

# Domain Layer
from domain.constants import Limits
from domain.exceptions import (
    InvalidInputException,
    WeatherDataNotFoundException,
    TransportFailureException,
    OperationCancelledException
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.weather_adapter_factory import get_weather_adapter_factory

# Shared Layer - Utilities
from shared.config.settings import CORS_ORIGIN
from shared.utils.cancellation import CancellationToken
from shared.utils.datetime_parser import DateTimeParser
from shared.config.logger_config import get_logger

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# Margem reservada antes do timeout da Lambda para cancelar chamadas em andamento
DEADLINE_MARGIN_MS = 1000

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(InvalidInputException)(exception_service.handle_invalid_input)
app.exception_handler(WeatherDataNotFoundException)(exception_service.handle_weather_data_not_found)
app.exception_handler(TransportFailureException)(exception_service.handle_transport_failure)
app.exception_handler(OperationCancelledException)(exception_service.handle_operation_cancelled)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def _int_query_param(name: str, default: int) -> int:
    """Lê parâmetro inteiro da query string (InvalidInputException se não numérico)"""
    raw = app.current_event.get_query_string_value(name=name, default_value=None)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputException(
            f"{name} must be an integer",
            details={name: raw}
        )


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/health")
def health_route():
    """GET /health"""
    return {
        'status': 'healthy',
        'timestamp': DateTimeParser.utc_now().isoformat()
    }


@app.get("/api/weather/current/<city>")
def get_current_weather_route(city: str):
    """
    GET /api/weather/current/{city}
    
    Returns the cached snapshot when fresh (< 30 min), otherwise fetches
    from OpenWeatherMap and stores the new snapshot
    """
    factory = get_weather_adapter_factory()
    use_case = GetCurrentWeatherUseCase(
        weather_source=factory.get_weather_source(),
        weather_repository=factory.get_weather_repository()
    )
    
    result = run_with_deadline(
        lambda token: use_case.execute(unquote(city), cancellation_token=token)
    )
    
    return result.unwrap().to_api_response()


@app.get("/api/weather/forecast/<city>")
def get_weather_forecast_route(city: str):
    """
    GET /api/weather/forecast/{city}?days=5
    
    Query params (optional):
    - days: Number of days, 1-10 (default 5)
    """
    days = _int_query_param("days", Limits.FORECAST_DAYS_DEFAULT)
    
    factory = get_weather_adapter_factory()
    use_case = GetWeatherForecastUseCase(weather_source=factory.get_weather_source())
    
    result = run_with_deadline(
        lambda token: use_case.execute(unquote(city), days, cancellation_token=token)
    )
    
    return result.unwrap().to_api_response()


@app.get("/api/weather/history")
def get_weather_history_route():
    """
    GET /api/weather/history?count=10
    
    Query params (optional):
    - count: Number of snapshots, 1-100 (default 10)
    """
    count = _int_query_param("count", Limits.HISTORY_COUNT_DEFAULT)
    
    factory = get_weather_adapter_factory()
    use_case = GetWeatherHistoryUseCase(weather_repository=factory.get_weather_repository())
    
    result = run_with_deadline(
        lambda token: use_case.execute(count, cancellation_token=token)
    )
    
    return [snapshot.to_api_response() for snapshot in result.unwrap()]


@app.delete("/api/weather/<record_id>")
def delete_weather_data_route(record_id: str):
    """
    DELETE /api/weather/{id}
    
    Idempotent: unknown ids also return 204
    """
    factory = get_weather_adapter_factory()
    use_case = DeleteWeatherDataUseCase(weather_repository=factory.get_weather_repository())
    
    result = run_with_deadline(
        lambda token: use_case.execute(unquote(record_id), cancellation_token=token)
    )
    result.unwrap()
    
    return Response(status_code=204, content_type="application/json", body="")


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC
    
    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging
    
    Available routes:
    - GET    /health
    - GET    /api/weather/current/{city}
    - GET    /api/weather/forecast/{city}?days=5
    - GET    /api/weather/history?count=10
    - DELETE /api/weather/{id}
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}
    started = time.perf_counter()
    
    logger.info(
        "HTTP request received",
        path=event.get('path', 'N/A'),
        method=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )
    
    response = app.resolve(event, context)
    
    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}
    
    response['headers']['Access-Control-Allow-Origin'] = CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,DELETE,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'
    
    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "HTTP request completed",
        path=event.get('path', 'N/A'),
        method=event.get('httpMethod', 'N/A'),
        status_code=status_code,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2)
    )
    
    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente
    
    Reutiliza event loop entre invocações Lambda (warm starts) para que
    clientes aioboto3/aiohttp permaneçam válidos
    """
    global _global_event_loop
    
    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop
    
    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)
    
    return _global_event_loop


def _remaining_time_seconds() -> Optional[float]:
    """Tempo restante da invocação (None fora da Lambda)"""
    context = getattr(app, 'lambda_context', None)
    get_remaining = getattr(context, 'get_remaining_time_in_millis', None)
    if get_remaining is None:
        return None
    return max(get_remaining() - DEADLINE_MARGIN_MS, 0) / 1000


def run_with_deadline(execute):
    """
    Executa o use case no event loop global com token de cancelamento
    disparado pouco antes do timeout da Lambda
    
    Args:
        execute: Callable que recebe o CancellationToken e retorna a coroutine
    
    Returns:
        Result do use case
    """
    remaining = _remaining_time_seconds()
    
    async def _run():
        token = CancellationToken()
        timer = None
        if remaining is not None:
            timer = asyncio.get_running_loop().call_later(
                remaining, token.cancel, "lambda deadline reached"
            )
        try:
            return await execute(token)
        finally:
            if timer is not None:
                timer.cancel()
    
    return run_async(_run())


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
