from .announcement import Announcement
from .giftcard import GiftCard, Promotion
from .redemption import RedemptionResult
from .security import Location, SecuritySettings, Threat
from .state import AppState, EntityNotFound, Notification, StateChangeNotAllowed
from .threats import ThreatEvent, ThreatMonitor
