import asyncio
from ..core.logging import logger


# Simulated backend access times, in seconds
SLOW_DELAY = 1.0
DATABASE_DELAY = 0.020  # HDD-like
MEMORY_DELAY = 0.001  # RAM-like


async def simulate_latency(seconds: float) -> None:
    """Suspend the current request without blocking the event loop."""
    logger.debug(f"event=latency_start delay_ms={seconds * 1000:.0f}")
    await asyncio.sleep(seconds)
