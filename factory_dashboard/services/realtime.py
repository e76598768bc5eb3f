from __future__ import annotations

import asyncio

import logging
from typing import Any, Dict, Optional, Set

from starlette.websockets import WebSocket, WebSocketState

from factory_dashboard.schemas.realtime import WsEnvelope

logger = logging.getLogger(__name__)


class BroadcastManager:
    """
    Simple in-process pub-sub manager for WebSocket topics.

    Topics:
      - updates:{factory_name}

    When constructed with ``enabled=False`` nothing is sent; publishing only logs.
    """

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self._topics: Dict[str, Set[WebSocket]] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        self._global_lock = asyncio.Lock()

    def _topic_lock(self, topic: str) -> asyncio.Lock:
        if topic not in self._locks:
            self._locks[topic] = asyncio.Lock()
        return self._locks[topic]

    # PUBLIC_INTERFACE
    def updates_topic(self, factory_id: str) -> str:
        """Return the update topic name for a factory."""
        return f"updates:{factory_id}"

    async def _ensure_topic(self, topic: str) -> None:
        async with self._global_lock:
            if topic not in self._topics:
                self._topics[topic] = set()

    # PUBLIC_INTERFACE
    def subscriber_count(self, topic: str) -> int:
        return len(self._topics.get(topic, ()))

    # PUBLIC_INTERFACE
    async def connect(self, topic: str, websocket: WebSocket) -> None:
        """
        Add an accepted websocket to topic subscribers.
        """
        await self._ensure_topic(topic)
        async with self._topic_lock(topic):
            self._topics[topic].add(websocket)
            logger.info("WebSocket connected to topic=%s; subscribers=%d", topic, len(self._topics[topic]))

    # PUBLIC_INTERFACE
    async def disconnect(self, topic: str, websocket: WebSocket) -> None:
        """Remove websocket from topic subscribers."""
        if topic not in self._topics:
            return
        async with self._topic_lock(topic):
            self._topics[topic].discard(websocket)
            logger.info("WebSocket disconnected from topic=%s; subscribers=%d", topic, len(self._topics[topic]))

    # PUBLIC_INTERFACE
    async def broadcast(self, topic: str, message: dict) -> None:
        """
        Broadcast a dict message to all subscribers in the topic.
        """
        await self._ensure_topic(topic)
        async with self._topic_lock(topic):
            to_drop: list[WebSocket] = []
            for ws in list(self._topics[topic]):
                try:
                    if ws.application_state == WebSocketState.DISCONNECTED or ws.client_state == WebSocketState.DISCONNECTED:
                        to_drop.append(ws)
                        continue
                    await ws.send_json(message)
                except Exception:
                    logger.exception("Failed to send message to websocket; scheduling drop")
                    to_drop.append(ws)
            for ws in to_drop:
                self._topics[topic].discard(ws)

    # PUBLIC_INTERFACE
    async def publish(self, factory_id: str, event: str, data: Optional[Dict[str, Any]] = None) -> None:
        """Publish an update event to the factory's subscribers."""
        if not self.enabled:
            logger.debug("Update broadcast disabled: %s for factory %s", event, factory_id)
            return
        env = WsEnvelope(topic=event, data=data or {})
        await self.broadcast(self.updates_topic(factory_id), env.model_dump(mode="json"))
