import logging
from dataclasses import dataclass
from typing import Optional

from django.utils import timezone

from giftcards.models.security import Location, Threat, threat_reason


logger = logging.getLogger("security")


@dataclass(frozen=True)
class ThreatEvent:
    threat: Threat
    locked: bool
    play_sound: bool


def resolve_location(locate) -> Optional[Location]:
    """Single call to the locator; any failure means no location."""
    try:
        return locate()
    except Exception as e:
        logger.warning("Location capture failed: %s", e, exc_info=True)
        return None


class ThreatMonitor:
    """
    Counts consecutive failed redemptions for a session and raises a threat
    once the configured threshold is reached.
    """

    def __init__(self, state):
        self.state = state

    def record_success(self):
        self.state.failed_attempts = 0

    def record_failure(self, locate=None, now=None) -> Optional[ThreatEvent]:
        state = self.state
        settings = state.settings
        state.failed_attempts += 1

        if not settings.system_enabled or state.failed_attempts < settings.failed_attempts_threshold:
            return None

        # reset and lock before the location lookup
        state.failed_attempts = 0
        if settings.auto_lock:
            state.is_locked = True

        threat = Threat(
            reason=threat_reason(settings.failed_attempts_threshold),
            timestamp=now or timezone.now(),
        )
        if settings.request_location and locate is not None:
            threat.location = resolve_location(locate)

        state.threats.insert(0, threat)
        logger.warning(
            "Threat detected: %s (locked=%s, location=%s)",
            threat.reason, state.is_locked, threat.location_display,
        )
        return ThreatEvent(threat=threat, locked=state.is_locked, play_sound=settings.play_sound)
