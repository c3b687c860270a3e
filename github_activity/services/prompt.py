"""Line-oriented user input for the interactive session.

The session controller never reads stdin itself. It opens a ``LineReader``
around each logical prompt exchange and awaits answers from the yielded
``ask`` callable:

>>> async with reader.open() as ask:
...     choice = await ask("Select an option (1-6): ")
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

logger = logging.getLogger(__name__)

Ask = Callable[[str], Awaitable[str]]


class LineReader(ABC):
    """Source of single-line answers to prompts."""

    @abstractmethod
    async def readline(self, prompt: str) -> str:
        """Show ``prompt`` and return the raw answer."""

    @asynccontextmanager
    async def open(self) -> AsyncGenerator[Ask, None]:
        """Scope one prompt exchange; answers are stripped of whitespace."""
        logger.debug("Prompt exchange opened")

        async def ask(prompt: str) -> str:
            answer = await self.readline(prompt)
            return answer.strip()

        try:
            yield ask
        finally:
            logger.debug("Prompt exchange closed")


class ConsoleLineReader(LineReader):
    """Read answers from standard input without blocking the event loop."""

    async def readline(self, prompt: str) -> str:
        return await asyncio.to_thread(input, prompt)
