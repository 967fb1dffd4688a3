"""
Serviço de chamadas de porta para a camada de aplicação.
Propaga o cancelamento para a chamada em andamento e converte falhas
inesperadas de infraestrutura em exceções de domínio.
"""
import asyncio
from typing import Any, Awaitable, Optional

from domain.exceptions import (
    DomainException,
    OperationCancelledException,
    TransportFailureException,
)
from shared.config.logger_config import get_logger
from shared.utils.cancellation import CancellationToken

logger = get_logger(child=True)


class PortCallService:
    """Executa uma chamada de porta observando o token de cancelamento."""

    @staticmethod
    async def call(
        awaitable: Awaitable[Any],
        operation: str,
        cancellation_token: Optional[CancellationToken] = None
    ) -> Any:
        """
        Aguarda a chamada de porta

        Args:
            awaitable: Coroutine da porta (ex: repository.get_by_city(city))
            operation: Nome da operação (logs e details)
            cancellation_token: Token de cancelamento (opcional)

        Returns:
            Resultado da porta

        Raises:
            OperationCancelledException: Token cancelado antes ou durante a chamada
            TransportFailureException: A porta lançou erro inesperado
        """
        if cancellation_token is not None and cancellation_token.is_cancelled:
            # Nunca agendada: fecha a coroutine sem executar a porta
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise OperationCancelledException(
                "Operation cancelled",
                details={"operation": operation, "reason": cancellation_token.reason}
            )

        if cancellation_token is None:
            # Sem token: CancelledError da task externa propaga como exceção (não vira Result)
            try:
                return await awaitable
            except DomainException:
                raise
            except Exception as ex:
                raise PortCallService._transport_failure(operation, ex) from ex

        port_task = asyncio.ensure_future(awaitable)
        cancel_task = asyncio.ensure_future(cancellation_token.wait())

        try:
            done, _ = await asyncio.wait(
                {port_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            # Task externa cancelada: aborta a porta e repassa o cancelamento
            port_task.cancel()
            cancel_task.cancel()
            raise

        if port_task in done:
            cancel_task.cancel()
            try:
                return port_task.result()
            except asyncio.CancelledError:
                raise OperationCancelledException(
                    "Port call cancelled",
                    details={"operation": operation}
                )
            except DomainException:
                raise
            except Exception as ex:
                raise PortCallService._transport_failure(operation, ex) from ex

        port_task.cancel()
        try:
            await port_task
        except asyncio.CancelledError:
            pass
        except Exception as ex:
            logger.warning(
                "Port call failed while being cancelled",
                operation=operation,
                error=str(ex)
            )

        raise OperationCancelledException(
            "Operation cancelled",
            details={"operation": operation, "reason": cancellation_token.reason}
        )

    @staticmethod
    def _transport_failure(operation: str, ex: Exception) -> TransportFailureException:
        return TransportFailureException(
            f"{operation} failed",
            details={
                "operation": operation,
                "error_type": type(ex).__name__,
                "error": str(ex)
            },
            original=ex
        )
