"""Triangle Agency dice bot.

The core lives in :mod:`triangle_agency_bot.dice` and :mod:`triangle_agency_bot.rng`;
everything else is Telegram plumbing around it.
"""

from .dice import Failure, RollOutcome, RollResult, Success, Triscendence, roll
from .rng import TriangleAgencyRng, create_rng

__all__ = [
    "Failure",
    "RollOutcome",
    "RollResult",
    "Success",
    "Triscendence",
    "TriangleAgencyRng",
    "create_rng",
    "roll",
]
