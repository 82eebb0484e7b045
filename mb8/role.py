"""Execution roles: the judge program and the bots it hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Role:
    """Who is running: the judge (``bot`` is None) or the bot with id ``bot``."""

    bot: Optional[int] = None

    def __post_init__(self) -> None:
        if self.bot is not None and not 0 <= self.bot <= 0xFF:
            raise ValueError(f"bot id must fit in 8 bits, got {self.bot!r}")

    def is_judge(self) -> bool:
        """Return True for the judge role."""
        return self.bot is None


JUDGE = Role()
"""The judge role, which is also the default."""