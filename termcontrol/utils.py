import socket
import logging

logger = logging.getLogger("termcontrol")

PORT = 12013


class UDPHandler(logging.Handler):
    """Send log records over UDP, so they don't mix with the terminal output."""

    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        while bb:
            bb1 = bb[:size]
            bb = bb[size:]
            self._socket.sendto(bb1, self.udp_address)

    def close(self):
        self._socket.close()
        super().close()


def enable_log_forwarding(level=logging.INFO):
    """Send the termcontrol logs to ``termcontrol --listen``.

    Returns the handler, so it can be removed again.
    """
    handler = UDPHandler()
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def listen_to_logs():
    """Called from ``termcontrol --listen``.

    This way we can see the logs from another process, so they do not get
    mixed up with the output that is being controlled.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", PORT))

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())
