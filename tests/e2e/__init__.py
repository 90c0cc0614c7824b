"""
End-to-end tests for the owl supervisor.

These run the complete program against real child processes and loopback
UDP sockets, both in the test process and as ``python -m owl``.
"""
