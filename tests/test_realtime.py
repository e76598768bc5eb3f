from starlette.websockets import WebSocketState

from factory_dashboard.services.realtime import BroadcastManager


class FakeWebSocket:
    application_state = WebSocketState.CONNECTED
    client_state = WebSocketState.CONNECTED

    def __init__(self):
        self.sent = []

    async def send_json(self, message):
        self.sent.append(message)


async def test_disabled_manager_sends_nothing():
    manager = BroadcastManager(enabled=False)
    ws = FakeWebSocket()
    await manager.connect(manager.updates_topic("Plant A"), ws)
    await manager.publish("Plant A", "production_updated", {"id": 1})
    assert ws.sent == []


async def test_enabled_manager_pushes_to_factory_subscribers_only():
    manager = BroadcastManager(enabled=True)
    plant_a, plant_b = FakeWebSocket(), FakeWebSocket()
    await manager.connect(manager.updates_topic("Plant A"), plant_a)
    await manager.connect(manager.updates_topic("Plant B"), plant_b)

    await manager.publish("Plant A", "alert_created", {"alert": {"id": 3}})

    assert len(plant_a.sent) == 1
    assert plant_a.sent[0]["topic"] == "alert_created"
    assert plant_a.sent[0]["data"] == {"alert": {"id": 3}}
    assert plant_b.sent == []


async def test_disconnected_sockets_are_dropped():
    manager = BroadcastManager(enabled=True)
    topic = manager.updates_topic("Plant A")
    gone = FakeWebSocket()
    gone.client_state = WebSocketState.DISCONNECTED
    await manager.connect(topic, gone)

    await manager.broadcast(topic, {"topic": "x"})

    assert gone.sent == []
    assert manager.subscriber_count(topic) == 0


async def test_disconnect_removes_subscriber():
    manager = BroadcastManager(enabled=True)
    topic = manager.updates_topic("Plant A")
    ws = FakeWebSocket()
    await manager.connect(topic, ws)
    await manager.disconnect(topic, ws)
    await manager.publish("Plant A", "workforce_updated")
    assert ws.sent == []
