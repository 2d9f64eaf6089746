import asyncio


async def next_tick() -> None:
    """
    Suspends the running task for one turn of the event loop.
    """
    await asyncio.sleep(0)
