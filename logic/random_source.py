"""Injected randomness and identifier helpers for the styling engine."""

from __future__ import annotations

import uuid
from typing import Callable, Protocol, Sequence, TypeVar

T = TypeVar("T")

IdFactory = Callable[[], str]


class RandomSource(Protocol):
    """Anything that yields floats in ``[0, 1)``; ``random.Random`` qualifies."""

    def random(self) -> float:
        ...


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Choose one element of a non-empty sequence using ``rng``."""

    if not options:
        raise ValueError("Cannot pick from an empty sequence")
    index = min(int(rng.random() * len(options)), len(options) - 1)
    return options[index]


def new_outfit_id() -> str:
    return f"outfit-{uuid.uuid4().hex}"


__all__ = ["RandomSource", "IdFactory", "pick", "new_outfit_id"]
