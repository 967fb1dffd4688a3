"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    InvalidInputException,
    WeatherDataNotFoundException,
    TransportFailureException,
    OperationCancelledException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _json_response(status_code: int, payload: dict) -> Response:
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps(payload)
        )

    @staticmethod
    def handle_invalid_input(ex: InvalidInputException) -> Response:
        """Handle 400 - Invalid input"""
        ExceptionHandlerService.logger.warning("Invalid input", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(400, {
            "type": "InvalidInputException",
            "error": "Invalid input",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_weather_data_not_found(ex: WeatherDataNotFoundException) -> Response:
        """Handle 404 - Weather data not available"""
        ExceptionHandlerService.logger.warning("Weather data not found", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(404, {
            "type": "WeatherDataNotFoundException",
            "error": "Weather data not found",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_transport_failure(ex: TransportFailureException) -> Response:
        """Handle 502 - Storage or weather source failure"""
        ExceptionHandlerService.logger.error(
            "Transport failure",
            error=str(ex),
            details=ex.details,
            exc_info=ex.original is not None
        )
        return ExceptionHandlerService._json_response(502, {
            "type": "TransportFailureException",
            "error": "Upstream failure",
            "message": str(ex),
            "details": {"operation": ex.details.get("operation")}
        })

    @staticmethod
    def handle_operation_cancelled(ex: OperationCancelledException) -> Response:
        """Handle 503 - Operation cancelled"""
        ExceptionHandlerService.logger.warning("Operation cancelled", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(503, {
            "type": "OperationCancelledException",
            "error": "Operation cancelled",
            "message": str(ex)
        })

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return ExceptionHandlerService._json_response(400, {
            "type": "ValidationError",
            "error": "Validation error",
            "message": str(ex)
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService._json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
