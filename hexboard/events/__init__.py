"""
Events module - logowanie zdarzeń planszy do formatu JSON.

Zawiera:
- BoardEvent: Dataclass reprezentująca zdarzenie
- EventType: Enum typów zdarzeń
- EventLogger: Klasa logująca zdarzenia
"""

from .event_logger import BoardEvent, EventType, EventLogger

__all__ = ["BoardEvent", "EventType", "EventLogger"]
