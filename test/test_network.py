import json
import socket
import time

import pytest

from Network import NetworkBridge


class BrokenConn:
    def __init__(self):
        self.closed = False

    def sendall(self, data):
        raise BrokenPipeError("client went away")

    def close(self):
        self.closed = True


@pytest.fixture
def bridge():
    b = NetworkBridge("127.0.0.1", 0)
    yield b
    b.close()


def test_send_without_client(bridge):
    assert bridge.connected is False
    assert bridge.send_event({"event": "prediction"}) is False


def test_sends_newline_delimited_json(bridge):
    client = socket.create_connection(bridge.addr, timeout=2.0)
    try:
        deadline = time.time() + 2.0
        while not bridge.connected and time.time() < deadline:
            bridge.update()
            time.sleep(0.01)
        assert bridge.connected

        assert bridge.send_event({"event": "prediction", "label": "fist", "confidence": 97})
        assert bridge.send_event({"event": "gestures_cleared"})

        data = b""
        while data.count(b"\n") < 2:
            data += client.recv(4096)
        lines = data.decode("utf-8").splitlines()
        assert json.loads(lines[0]) == {"event": "prediction", "label": "fist", "confidence": 97}
        assert json.loads(lines[1]) == {"event": "gestures_cleared"}
    finally:
        client.close()


def test_broken_client_is_dropped(bridge):
    conn = BrokenConn()
    bridge.conn = conn

    assert bridge.send_event({"event": "prediction"}) is False
    assert bridge.conn is None
    assert conn.closed is True
