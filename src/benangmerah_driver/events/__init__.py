from benangmerah_driver.events.models import EventKind, LogLevel, Triple
from benangmerah_driver.events.observable import Listenable, Listener, Observable

__all__ = ["EventKind", "Listenable", "Listener", "LogLevel", "Observable", "Triple"]
