from .bus import MessageBus, MessageStore, Renderer, bus

__all__ = ["bus", "MessageBus", "MessageStore", "Renderer"]
