"""
Account Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum, IntEnum


class TokenScheme(IntEnum):
    """Purpose of a single-use token"""

    CONFIRM_CONTACT = 0
    RESET_PASSWORD = 1


class ContactSchema(str, Enum):
    """URI scheme of a contact address"""

    mailto = "mailto"
    tel = "tel"


class EventLevel(IntEnum):
    """Severity of an event log entry"""

    info = 0
    warning = 1
    error = 2


class NotificationPriority(IntEnum):
    """Notification priority, lower is more urgent"""

    CRITICAL = 0
    WARNING = 100
    INFORMATION = 200
    EVENTLOG = 300
