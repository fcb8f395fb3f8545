"""
IAgentTransport - Port: one request/response exchange with the harvest agent.
Implementations own connectivity and timeouts; the core never retries.
"""

from abc import ABC, abstractmethod


class AgentTransportError(Exception):
    """Network failure, timeout, non-2xx status or undecodable body."""


class IAgentTransport(ABC):
    """Port for running the remote contact-harvesting agent."""

    @abstractmethod
    async def send(self, payload: dict) -> dict:
        """
        Sends the harvest request and returns the decoded response envelope:
        {"status": "success" | other, "message"?: str, "result"?: {...}}.
        Raises AgentTransportError when no envelope could be obtained.
        """
        pass
