# gdengine/core/signal.py
"""
Change notification for scene objects.

A Transform bound to a SignalBridge announces each mutation on
SIGNAL_TRANSFORM_CHANGED. Listeners run synchronously in connection order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging

logger = logging.getLogger(__name__)

SIGNAL_TRANSFORM_CHANGED = 'transform_changed'    # (transform,)


@dataclass
class Connection:
    """Handle returned by connect(); disconnect() is idempotent."""
    signal: str
    callback_id: int
    bridge: Optional[SignalBridge] = None

    def disconnect(self):
        if self.bridge:
            self.bridge._listeners.get(self.signal, {}).pop(self.callback_id, None)
            self.bridge = None


class SignalBridge:
    """Routes named signals to their listeners."""

    def __init__(self):
        self._listeners: Dict[str, Dict[int, Callable]] = {}
        self._next_id: int = 0

    def connect(self, signal: str, handler: Callable) -> Connection:
        callback_id = self._next_id
        self._next_id += 1
        self._listeners.setdefault(signal, {})[callback_id] = handler
        return Connection(signal=signal, callback_id=callback_id, bridge=self)

    def emit(self, signal: str, *args):
        # Snapshot so listeners may disconnect while being notified
        for handler in list(self._listeners.get(signal, {}).values()):
            try:
                handler(*args)
            except Exception as e:
                logger.error(f"Signal handler error [{signal}]: {e}")


class SignalEmitter:
    """Mixin for objects that announce changes through an optional bridge."""

    _bridge: Optional[SignalBridge] = None

    def bind_bridge(self, bridge: Optional[SignalBridge]):
        self._bridge = bridge

    def emit(self, signal: str, *args):
        if self._bridge:
            self._bridge.emit(signal, *args)

    def connect(self, signal: str, handler: Callable) -> Optional[Connection]:
        if self._bridge:
            return self._bridge.connect(signal, handler)
        return None
