"""
Fire-and-forget UDP datagrams.

Every send binds a fresh ephemeral socket, sends once and closes it. There is
no retry, acknowledgment or session state.
"""

import socket

# Local bind address: all interfaces, OS-assigned port
EPHEMERAL_ADDR = ("0.0.0.0", 0)


def send_datagram(host: str, port: int, payload: bytes) -> int:
    """
    Send one datagram from a fresh ephemeral socket.

    Args:
        host: Destination host name or address
        port: Destination port
        payload: Datagram body

    Returns:
        Number of bytes sent

    Raises:
        OSError: If binding, resolving or sending fails
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(EPHEMERAL_ADDR)
        return sock.sendto(payload, (host, port))
