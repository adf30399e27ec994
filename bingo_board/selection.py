"""
Weighted random selection of distinct cell texts.
"""

import random
from typing import Sequence

from .elements import BingoElement
from .errors import InsufficientElements

__all__ = ["choose_cells"]


def choose_cells(elements: Sequence[BingoElement], count: int,
                 rng: random.Random | None = None) -> list[str]:
    """
    Draw ``count`` distinct contents, each draw weighted by probability.

    Elements are drawn with replacement and repeats are discarded, so an
    element's chance to appear grows with its weight. Elements sharing a
    content string count once.

    Raises:
        InsufficientElements: If fewer than ``count`` distinct contents
            have a positive weight
    """
    if rng is None:
        rng = random.Random()

    selectable = {e.content for e in elements if e.probability > 0}
    if len(selectable) < count:
        raise InsufficientElements(
            f"need {count} distinct elements with positive probability, "
            f"only {len(selectable)} available"
        )

    weights = [e.probability for e in elements]
    chosen = []
    seen = set()
    while len(chosen) < count:
        element = rng.choices(elements, weights=weights)[0]
        if element.content not in seen:
            seen.add(element.content)
            chosen.append(element.content)
    return chosen
