"""
Cancellation Token
Sinal de cancelamento cooperativo propagado até as chamadas de porta
"""
import asyncio
from typing import Optional


class CancellationToken:
    """
    Token de cancelamento baseado em asyncio.Event

    Usage:
        token = CancellationToken()
        result_task = asyncio.create_task(use_case.execute("Paris", cancellation_token=token))
        token.cancel("client disconnected")
        result = await result_task  # ErrorKind.CANCELLED
    """

    def __init__(self):
        self._event = asyncio.Event()
        self.reason: Optional[str] = None

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: Optional[str] = None) -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    async def wait(self) -> None:
        """Bloqueia até o token ser cancelado"""
        await self._event.wait()
