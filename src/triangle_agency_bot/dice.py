from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Union

DICE_COUNT = 6
DIE_FACES = 4
SUCCESS_FACE = 3

HIT_GLYPH = "▲"
MISS_GLYPH = "▽"
CHAOS_GLYPH = "🌀"


class DiceSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Success:
    """How many 3's were rolled (but not 0 or exactly 3)."""

    count: int

    def __post_init__(self) -> None:
        if self.count not in (1, 2, 4, 5, 6):
            raise ValueError(f"Success count must be 1, 2, 4, 5 or 6, got {self.count}")

    @property
    def hits(self) -> int:
        return self.count

    @property
    def chaos(self) -> int:
        # failed dice
        return DICE_COUNT - self.count

    @property
    def glyph(self) -> str:
        return "✅"


@dataclass(frozen=True)
class Failure:
    """No 3's were rolled."""

    hits = 0

    @property
    def chaos(self) -> int:
        # all dice failed
        return DICE_COUNT

    @property
    def glyph(self) -> str:
        return "❌"


@dataclass(frozen=True)
class Triscendence:
    """Exactly three 3's were rolled."""

    hits = 3

    @property
    def chaos(self) -> int:
        return 0

    @property
    def glyph(self) -> str:
        return "✨"


RollResult = Union[Success, Failure, Triscendence]


@dataclass(frozen=True)
class RollOutcome:
    """Full outcome of rolling: the result, the rendered dice and chaos."""

    result: RollResult
    rendered: str
    chaos: int

    def to_display_text(self) -> str:
        return f"{self.result.glyph}  {self.rendered}\n{CHAOS_GLYPH} {self.chaos}"

    def __str__(self) -> str:
        return self.to_display_text()


def roll_6d4(rng: DiceSource) -> tuple[bool, ...]:
    """Roll 6d4 in draw order. A die is True if it rolled a 3."""
    return tuple(rng.randint(1, DIE_FACES) == SUCCESS_FACE for _ in range(DICE_COUNT))


def count_successes(rolls: Sequence[bool]) -> int:
    return sum(1 for r in rolls if r)


def interpret_roll(count: int) -> RollResult:
    """Interpret the count of 3's as a roll result."""
    if count == 0:
        return Failure()
    if count == 3:
        return Triscendence()
    return Success(count)


def render_rolls(rolls: Sequence[bool]) -> str:
    """Convert dice rolls into Unicode triangles: ▲ = 3, ▽ = not 3."""
    return " ".join(HIT_GLYPH if r else MISS_GLYPH for r in rolls)


def outcome_from_rolls(rolls: Sequence[bool]) -> RollOutcome:
    result = interpret_roll(count_successes(rolls))
    return RollOutcome(result=result, rendered=render_rolls(rolls), chaos=result.chaos)


def roll(rng: DiceSource) -> RollOutcome:
    """Typical Triangle Agency roll."""
    return outcome_from_rolls(roll_6d4(rng))
