"""
Notification Use Cases
"""

from .list_notifications_use_case import ListNotificationsUseCase
from .unread_count_use_case import UnreadCountUseCase
from .mark_read_use_case import MarkReadUseCase
from .dtos import (
    NotificationInfo,
    NotificationsPage,
    UnreadCountResponse,
    MarkReadCommand,
    MarkReadResponse,
)

__all__ = [
    "ListNotificationsUseCase",
    "UnreadCountUseCase",
    "MarkReadUseCase",
    "NotificationInfo",
    "NotificationsPage",
    "UnreadCountResponse",
    "MarkReadCommand",
    "MarkReadResponse",
]
