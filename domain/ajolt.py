import asyncio
import typing


class AsyncJolt:
    """Hands control back to the event loop around a blocking-ish call.

    `latency` adds a sleep on the way in, handy for pretending there is a
    store at the other end.
    """

    def __init__(self, latency: float = 0) -> None:
        self.latency = latency

    async def __aenter__(self) -> None:
        await asyncio.sleep(self.latency)

    async def __aexit__(self, *args: typing.Any, **kwargs: typing.Any) -> None:
        await asyncio.sleep(0)
