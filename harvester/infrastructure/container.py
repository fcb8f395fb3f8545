"""
Dependency Injection Container.
Wires the agent transport to its port and composes the use cases.
This is the ONLY place that knows about concrete implementations.
"""

from typing import Callable, Optional

from .config import Config
from ..adapters.http_agent_adapter import HttpAgentTransport
from ..domain.entities.roster import Roster
from ..use_cases.dashboard_state import DashboardState
from ..use_cases.invoke_agent import AgentInvocationClient
from ..use_cases.request_lifecycle import RequestLifecycleController


class Container:
    """
    Composes the full application object graph.
    Swap the transport by changing a single line here.
    """

    def __init__(
        self,
        config: Config,
        roster: Optional[Roster] = None,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self.config = config

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        self.transport = HttpAgentTransport(
            api_url=config.agent_api_url,
            api_key=config.agent_api_key,
            agent_id=config.agent_id,
            timeout=config.agent_timeout_seconds,
        )

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.agent_client = AgentInvocationClient(transport=self.transport)
        self.dashboard = DashboardState(roster=roster)
        self.lifecycle = RequestLifecycleController(
            client=self.agent_client,
            dashboard=self.dashboard,
            reset_delay=config.success_reset_delay_seconds,
            on_close=on_close,
        )
