"""
Network transport for supervisor telemetry.
"""

from .udp import send_datagram

__all__ = ["send_datagram"]
