"""
Account Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    TokenScheme,
    ContactSchema,
    EventLevel,
    NotificationPriority,
)

# Export all entities
from .role import Role
from .account import Account
from .contact import Contact, MAILTO_PREFIX
from .token import Token
from .event_log import EventLog
from .notification import Notification
from .reference import Language, Timezone

__all__ = [
    # Enums
    "TokenScheme",
    "ContactSchema",
    "EventLevel",
    "NotificationPriority",
    # Entities
    "Role",
    "Account",
    "Contact",
    "MAILTO_PREFIX",
    "Token",
    "EventLog",
    "Notification",
    "Language",
    "Timezone",
]
