"""
Testes Unitários - PortCallService (cancelamento e conversão de falhas)
"""
import asyncio
import pytest

from application.services.port_call_service import PortCallService
from domain.exceptions import (
    OperationCancelledException,
    TransportFailureException,
    WeatherDataNotFoundException,
)
from shared.utils.cancellation import CancellationToken


async def _value(value):
    return value


async def _raise(exc):
    raise exc


@pytest.mark.asyncio
class TestPortCallService:
    
    async def test_returns_value_without_token(self):
        assert await PortCallService.call(_value(42), operation="op") == 42
    
    async def test_returns_value_with_token(self):
        token = CancellationToken()
        
        assert await PortCallService.call(_value('ok'), operation="op", cancellation_token=token) == 'ok'
    
    @pytest.mark.parametrize('with_token', [False, True])
    async def test_unexpected_error_wrapped(self, with_token):
        """Testa conversão de erro inesperado em TransportFailureException"""
        original = KeyError('Item')
        token = CancellationToken() if with_token else None
        
        with pytest.raises(TransportFailureException) as exc_info:
            await PortCallService.call(_raise(original), operation="repository.get_by_id",
                                       cancellation_token=token)
        
        assert exc_info.value.original is original
        assert exc_info.value.details['operation'] == 'repository.get_by_id'
        assert exc_info.value.details['error_type'] == 'KeyError'
    
    async def test_domain_exception_passes_through(self):
        error = WeatherDataNotFoundException("missing")
        
        with pytest.raises(WeatherDataNotFoundException) as exc_info:
            await PortCallService.call(_raise(error), operation="op",
                                       cancellation_token=CancellationToken())
        
        assert exc_info.value is error
    
    async def test_pre_cancelled_token_never_runs_port(self):
        token = CancellationToken()
        token.cancel("client gone")
        ran = []
        
        async def port():
            ran.append(True)
        
        with pytest.raises(OperationCancelledException) as exc_info:
            await PortCallService.call(port(), operation="op", cancellation_token=token)
        
        assert ran == []
        assert exc_info.value.details == {'operation': 'op', 'reason': 'client gone'}
    
    async def test_cancel_in_flight_cancels_port(self):
        """Testa que o cancelamento do token interrompe a porta em andamento"""
        token = CancellationToken()
        observed = asyncio.Event()
        
        async def port():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                observed.set()
                raise
        
        loop = asyncio.get_running_loop()
        loop.call_later(0.01, token.cancel, "deadline")
        
        with pytest.raises(OperationCancelledException) as exc_info:
            await PortCallService.call(port(), operation="source.get_forecast_samples",
                                       cancellation_token=token)
        
        assert observed.is_set()
        assert exc_info.value.details['reason'] == 'deadline'
    
    async def test_outer_task_cancellation_propagates(self):
        token = CancellationToken()
        port_cancelled = asyncio.Event()
        
        async def port():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                port_cancelled.set()
                raise
        
        task = asyncio.ensure_future(
            PortCallService.call(port(), operation="op", cancellation_token=token)
        )
        await asyncio.sleep(0.01)
        task.cancel()
        
        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0.01)
        assert port_cancelled.is_set()
    
    async def test_outer_task_cancellation_without_token_propagates(self):
        """Sem token, o cancelamento da task externa não vira OperationCancelledException"""
        started = asyncio.Event()
        
        async def port():
            started.set()
            await asyncio.sleep(10)
        
        task = asyncio.ensure_future(PortCallService.call(port(), operation="op"))
        await started.wait()
        task.cancel()
        
        with pytest.raises(asyncio.CancelledError):
            await task
