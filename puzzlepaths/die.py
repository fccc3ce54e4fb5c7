"""A single letter die."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Die:
    """A die showing one face, marked while it is part of a word being built."""

    face: str
    used: bool = False

    @classmethod
    def roll(cls, faces: Sequence[str], rng: random.Random | None = None) -> Die:
        """Return a die showing a randomly chosen face."""
        chooser = rng if rng is not None else random
        return cls(chooser.choice(faces))