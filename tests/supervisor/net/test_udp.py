"""
Tests for owl/net/udp.py.
"""

from unittest.mock import MagicMock, patch

import pytest

from owl.net.udp import EPHEMERAL_ADDR, send_datagram


@pytest.mark.unit
class TestSendDatagramUnit:
    """Test socket usage with a mocked socket."""

    def test_fresh_socket_per_send(self):
        with patch("owl.net.udp.socket.socket") as mock_socket:
            sock = MagicMock()
            sock.sendto.return_value = 5
            mock_socket.return_value.__enter__.return_value = sock

            assert send_datagram("10.0.0.1", 9090, b"hello") == 5
            assert send_datagram("10.0.0.1", 9090, b"hello") == 5

        assert mock_socket.call_count == 2
        sock.bind.assert_called_with(EPHEMERAL_ADDR)
        sock.sendto.assert_called_with(b"hello", ("10.0.0.1", 9090))

    def test_errors_propagate(self):
        with patch("owl.net.udp.socket.socket") as mock_socket:
            sock = MagicMock()
            sock.sendto.side_effect = OSError("unreachable")
            mock_socket.return_value.__enter__.return_value = sock

            with pytest.raises(OSError):
                send_datagram("10.0.0.1", 9090, b"x")


@pytest.mark.integration
class TestSendDatagramLoopback:
    """Test real delivery over loopback."""

    def test_delivers_payload(self, udp_listener):
        send_datagram(udp_listener.host, udp_listener.port, b"1||2||job||Running")

        assert udp_listener.receive() == b"1||2||job||Running"
