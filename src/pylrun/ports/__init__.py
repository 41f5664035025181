from .eventbus import EventBus
from .sandbox import Command, Sandbox

__all__ = [
    "EventBus",
    "Command",
    "Sandbox",
]
