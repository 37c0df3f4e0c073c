# cinefav/client/debounce.py

import asyncio
from typing import Awaitable, Callable, Optional


class Debouncer:
    """입력이 delay 동안 멈췄을 때만 실행

    새 호출은 대기 중이거나 실행 중인 이전 작업을 취소한다.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def call(self, func: Callable[..., Awaitable], *args) -> asyncio.Task:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(func, *args))
        return self._task

    async def _run(self, func: Callable[..., Awaitable], *args):
        await asyncio.sleep(self.delay)
        return await func(*args)

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
