"""Application layer: the notification manager."""

from .manager import NotificationManager

__all__ = ["NotificationManager"]
