"""DTOs for content lookups (verses, duas, hadith)."""
from dataclasses import dataclass
from typing import Any


@dataclass
class ContentResultDTO:
    """Selected content plus the size of the pool it was drawn from."""
    data: Any
    total: int
