from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

"""Laptop record model.

A Laptop is one normalized listing built from a single data row of the
source table. Records are created once during parsing and never mutated.
"""

__all__ = [
    "Laptop",
    "UNKNOWN",
    "CAMEL_CASE_NAMES",
]

# Fallback for empty company / type cells
UNKNOWN = "Unknown"

# Python attribute -> external (display layer) key
CAMEL_CASE_NAMES = {
    "type_name": "typeName",
    "screen_resolution": "screenResolution",
    "op_sys": "opSys",
}


@dataclass(frozen=True)
class Laptop:
    """One parsed laptop listing.

    ``id`` is the 1-based line position in the source text (the header is
    line 0), so ids of retained records may have gaps where rows were dropped.
    """
    id: int
    company: str
    type_name: str
    inches: float
    screen_resolution: str
    cpu: str
    ram: float  # GB
    memory: str  # storage description, e.g. "256GB SSD"
    gpu: str
    op_sys: str
    weight: float  # kg
    price: float  # always > 0 for retained records

    def to_dict(self, camel_case: bool = False) -> dict[str, Any]:
        data = asdict(self)
        if not camel_case:
            return data
        return {CAMEL_CASE_NAMES.get(k, k): v for k, v in data.items()}
