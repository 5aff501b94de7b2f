"""Colour palettes for terminal output."""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """A named set of colours."""

    name: str
    background: str
    foreground: str
    accent: str


PALETTES: tuple[Theme, ...] = (
    Theme(name="peach", background="#fafcc6", foreground="#e3b4af", accent="#5d07fe"),
    Theme(name="mint", background="#e8f6ef", foreground="#4e9f86", accent="#b8405e"),
    Theme(name="dusk", background="#2d2a4a", foreground="#f2b880", accent="#7fc8f8"),
    Theme(name="sand", background="#f4ecd6", foreground="#a0613c", accent="#2e6f95"),
)


def pick_theme(rng: random.Random | None = None) -> Theme:
    """Pick one palette uniformly at random."""
    return (rng or random).choice(PALETTES)
