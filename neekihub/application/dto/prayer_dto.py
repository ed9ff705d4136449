"""DTOs for prayer times responses."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class PrayerTimesDTO:
    """Prayer timings for one day at one location."""
    date: Dict[str, Any]
    timings: Dict[str, str]
    method: Optional[str]
    location: Dict[str, Any]
    source: str
    fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "date": self.date,
            "timings": self.timings,
            "method": self.method,
            "location": self.location,
        }
