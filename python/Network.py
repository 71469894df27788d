import socket
import json


# ==========================================
# NETWORK ENGINE
# ==========================================
class NetworkBridge:
    """
    Single-client TCP server publishing newline-delimited JSON events
    (predictions and gesture-list changes) to the presentation layer.
    """

    def __init__(self, host="127.0.0.1", port=5555):
        self.addr = (host, port)
        self.sock = None
        self.conn = None
        self._setup_server()

    def _setup_server(self):
        try:
            self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.sock.bind(self.addr)
            self.sock.listen(1)
            self.sock.setblocking(False)  # Non-blocking accept
            self.addr = self.sock.getsockname()
            print(f"[NET] Listening on {self.addr}...")
        except OSError as e:
            print(f"[NET] Init Error: {e}")
            if self.sock is not None:
                self.sock.close()
            self.sock = None

    @property
    def connected(self):
        return self.conn is not None

    def update(self):
        """Check for new connections non-blockingly"""
        if self.conn is None and self.sock is not None:
            try:
                self.conn, addr = self.sock.accept()
                self.conn.setblocking(True)  # Blocking sends
                print(f"[NET] Connected: {addr}")
            except BlockingIOError:
                pass

    def send_event(self, event_data):
        """Send one event; returns False when there is no live client."""
        if not self.conn:
            return False
        try:
            # Create lightweight JSON payload
            msg = json.dumps(event_data) + "\n"
            self.conn.sendall(msg.encode("utf-8"))
            return True
        except (BrokenPipeError, ConnectionResetError):
            print("[NET] Client disconnected")
            self.conn.close()
            self.conn = None
            return False

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
        if self.sock is not None:
            self.sock.close()
            self.sock = None
