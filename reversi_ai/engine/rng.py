"""Process-wide random generator shared by the random player and tie-breaks.

The generator is created once, on first use or by an explicit init_rng(), and
never reseeded afterwards. Strategies take it as an argument so tests can pass
their own random.Random instead.
"""

from __future__ import annotations

import logging
import os
import random
import time
from typing import Optional

logger = logging.getLogger(__name__)

_rng: Optional[random.Random] = None


def init_rng(seed: Optional[int] = None) -> random.Random:
    global _rng
    if _rng is None:
        if seed is None:
            seed = int(time.time()) - os.getpid()
        _rng = random.Random(seed)
        logger.debug("shared rng seeded with %d", seed)
    elif seed is not None:
        logger.debug("shared rng already seeded, ignoring seed %d", seed)
    return _rng


def shared_rng() -> random.Random:
    return init_rng()
