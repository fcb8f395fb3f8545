from .i_agent_transport import IAgentTransport, AgentTransportError

__all__ = [
    "IAgentTransport",
    "AgentTransportError",
]
