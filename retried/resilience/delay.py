"""Jittered delay used between retry attempts.

Randomizing each delay spreads out callers that failed at the same moment so
they do not all retry in lockstep.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from retried.core.config import DEFAULT_JITTER_MAX, get_config

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_JITTER_MAX", "DelayFn", "compute_jitter", "default_delay"]

DelayFn = Callable[[int], Awaitable[None]]
"""Suspend for the given number of milliseconds."""


def compute_jitter(jitter_max: int, rng: Optional[random.Random] = None) -> int:
    """Pick a random jitter in ``[0, jitter_max)`` milliseconds.

    Args:
        jitter_max: Exclusive upper bound; values <= 0 disable jitter
        rng: Random source, defaults to the module-level generator

    Returns:
        Jitter in milliseconds
    """
    if jitter_max <= 0:
        return 0
    return (rng or random).randrange(jitter_max)


async def default_delay(
    timeout: int,
    jitter_max: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Sleep for ``timeout`` milliseconds plus random jitter.

    Args:
        timeout: Base delay in milliseconds
        jitter_max: Jitter ceiling in milliseconds, defaults to the global config
        rng: Random source for the jitter
    """
    if jitter_max is None:
        jitter_max = get_config().jitter_max

    delay = timeout + compute_jitter(jitter_max, rng)
    logger.debug(f"Sleeping {delay}ms (base={timeout}ms, jitter_max={jitter_max}ms)")
    await asyncio.sleep(delay / 1000)
