"""
Async Use Case: Delete Weather Data
"""
from typing import Optional
from ddtrace import tracer

from domain.exceptions import DomainException
from domain.result import Result
from application.ports.input.delete_weather_data_port import IDeleteWeatherDataUseCase
from application.ports.output.weather_repository_port import IWeatherRepository
from application.services.port_call_service import PortCallService
from shared.utils.cancellation import CancellationToken
from shared.utils.validators import RecordIdValidator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DeleteWeatherDataUseCase(IDeleteWeatherDataUseCase):
    """Async use case: idempotent removal of a stored snapshot"""
    
    def __init__(self, weather_repository: IWeatherRepository):
        self.weather_repository = weather_repository
    
    @tracer.wrap(resource="use_case.delete_weather_data")
    async def execute(
        self,
        record_id: str,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Result[None]:
        try:
            record_id = RecordIdValidator.validate(record_id)
            
            await PortCallService.call(
                self.weather_repository.delete(record_id),
                operation="repository.delete",
                cancellation_token=cancellation_token
            )
            
            logger.info("Weather data deleted", record_id=record_id)
            return Result.success(None)
        
        except DomainException as ex:
            logger.warning(
                "Delete request failed",
                error_type=type(ex).__name__,
                error=str(ex),
                details=ex.details
            )
            return Result.failure(ex)
