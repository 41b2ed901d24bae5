import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from django.utils import timezone


@dataclass
class SecuritySettings:
    system_enabled: bool = True
    auto_lock: bool = True
    play_sound: bool = True
    request_location: bool = True
    failed_attempts_threshold: int = 3

    def merge(self, **changes):
        """
        Returns a copy with `changes` applied over the fixed field set.
        Unknown fields and thresholds below 1 are rejected with ValueError.
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown security settings: {', '.join(sorted(unknown))}")

        threshold = changes.get('failed_attempts_threshold', self.failed_attempts_threshold)
        if int(threshold) < 1:
            raise ValueError("failed_attempts_threshold must be at least 1.")

        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def __str__(self):
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


@dataclass
class Threat:
    reason: str
    location: Optional[Location] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=timezone.now)

    def __str__(self):
        return f"{self.timestamp.isoformat()} - {self.reason}"

    @property
    def location_display(self):
        return str(self.location) if self.location else 'N/A'


def threat_reason(threshold):
    return f"{threshold} failed redemption attempts."
