"""
Slack chat bridge port.

Bridges Slack channels to host content channels:
- one RTM session per process, created on the first prepare_channel
- inbound Slack messages -> envelopes -> content channel subscribers
- channel_archive ends the bridge for that channel
"""

from .manager import BridgeManager
from .router import EventRouter
from .session import ChatSession, SessionState, SessionSupervisor

__all__ = ["BridgeManager", "ChatSession", "EventRouter", "SessionState", "SessionSupervisor"]
