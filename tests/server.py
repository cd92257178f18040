import socket
import threading


class OneShotServer:
    """Accepts a single connection on 127.0.0.1, records the request and answers with a canned reply."""

    def __init__(self, reply=b'', hold_open=False):
        self.reply = reply
        self.hold_open = hold_open
        self.received = b''
        self.release = threading.Event()
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.listen(1)
        self.port = self.sock.getsockname()[1]
        self.thread = threading.Thread(target=self._serve, daemon=True)

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release.set()
        self.thread.join(timeout=5)
        self.sock.close()

    def _read_request(self, conn):
        data = b''
        while b'\r\n\r\n' not in data:
            chunk = conn.recv(1024)
            if not chunk:
                return data
            data += chunk

        head, _, body = data.partition(b'\r\n\r\n')
        length = 0
        for line in head.split(b'\r\n')[1:]:
            name, _, value = line.partition(b':')
            if name.strip().lower() == b'content-length':
                length = int(value.strip())
        while len(body) < length:
            chunk = conn.recv(1024)
            if not chunk:
                break
            body += chunk
        return head + b'\r\n\r\n' + body

    def _serve(self):
        conn, _ = self.sock.accept()
        with conn:
            self.received = self._read_request(conn)
            if self.hold_open:
                self.release.wait(timeout=5)
                return
            conn.sendall(self.reply)


def unused_port():
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(('127.0.0.1', 0))
    port = s.getsockname()[1]
    s.close()
    return port
