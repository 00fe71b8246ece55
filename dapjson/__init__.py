"""JSON reading and writing for Debug Adapter Protocol values, and a session termination flag."""

__version__ = "0.1.0"
__all__ = ["serializer", "session_state"]