"""
Bingo element list loading.

File format (JSON):
    {
        "bingo_elements": [
            {"content": "Someone says 'synergy'", "probability": 5},
            ...
        ]
    }

``probability`` is a relative, non-negative integer weight.
"""

import json
from dataclasses import dataclass
from pathlib import Path

__all__ = ["BingoElement", "read_elements", "parse_elements"]


@dataclass(frozen=True)
class BingoElement:
    content: str
    probability: int


def parse_elements(data, source: str = "<data>") -> list[BingoElement]:
    """
    Validate decoded JSON and build the element list.

    Raises:
        ValueError: If the structure or a field is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("bingo_elements"), list):
        raise ValueError(f"{source}: expected an object with a 'bingo_elements' list")

    elements = []
    for i, item in enumerate(data["bingo_elements"]):
        if not isinstance(item, dict):
            raise ValueError(f"{source}: bingo_elements[{i}] is not an object")
        content = item.get("content")
        probability = item.get("probability")
        if not isinstance(content, str):
            raise ValueError(f"{source}: bingo_elements[{i}].content must be a string")
        # bool is an int subclass; reject it explicitly
        if isinstance(probability, bool) or not isinstance(probability, int) or probability < 0:
            raise ValueError(
                f"{source}: bingo_elements[{i}].probability must be a non-negative integer"
            )
        elements.append(BingoElement(content, probability))
    return elements


def read_elements(path) -> list[BingoElement]:
    """
    Read a bingo element file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid element JSON
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: invalid JSON: {e}") from e
    return parse_elements(data, str(path))
