import hashlib
import random
import time
from typing import Iterable

# RNG picked for the triangle agency bot.
TriangleAgencyRng = random.Random

NANOS_PER_SECOND = 1_000_000_000


def _as_bytes(seed_feed: bytes | str | Iterable[int]) -> bytes:
    if isinstance(seed_feed, str):
        return seed_feed.encode("utf-8")
    return bytes(seed_feed)


def seed_from_feed(seed_feed: bytes | str | Iterable[int], now_ns: int) -> bytes:
    """Hash the seed feed together with a wall-clock reading into a 256-bit seed.

    The sub-second nanoseconds (u32, little-endian) and the whole seconds since
    the epoch (i64, little-endian) are appended to the feed, in that order.
    """
    seconds, nanos = divmod(now_ns, NANOS_PER_SECOND)
    data = bytearray(_as_bytes(seed_feed))
    data += nanos.to_bytes(4, "little")
    data += seconds.to_bytes(8, "little", signed=True)
    return hashlib.sha256(data).digest()


def create_rng(seed_feed: bytes | str | Iterable[int] = b"") -> TriangleAgencyRng:
    """Create an RNG from the given seed feed input.

    Input of arbitrary length is used to produce a seed of the correct length.
    Timestamp data is appended to the seed feed, so two calls only share a
    stream if both the feed and the clock reading are identical.
    """
    return TriangleAgencyRng(seed_from_feed(seed_feed, time.time_ns()))
