"""
HttpAgentTransport - Implements IAgentTransport over the agent platform's
HTTP inference endpoint.

The platform takes {"agent_id", "message"} where message is the JSON-encoded
harvest request, and answers {"response": ...}. The agent's own envelope sits
inside "response", either as an object or as a JSON string.
"""

import json
import logging

import httpx

from ..domain.interfaces.i_agent_transport import AgentTransportError, IAgentTransport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 300.0


class HttpAgentTransport(IAgentTransport):
    """Single POST per harvest; no retries."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        agent_id: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.agent_id = agent_id
        self.timeout = timeout

    async def send(self, payload: dict) -> dict:
        body = {"agent_id": self.agent_id, "message": json.dumps(payload)}
        headers = {"x-api-key": self.api_key, "Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=body, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as exc:
            logger.warning(f"[HttpAgent] Timeout after {self.timeout}s calling agent {self.agent_id}")
            raise AgentTransportError(f"Timed out after {self.timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning(f"[HttpAgent] Agent endpoint returned HTTP {status}")
            raise AgentTransportError(f"HTTP {status} from agent endpoint") from exc
        except httpx.HTTPError as exc:
            logger.warning(f"[HttpAgent] Request failed: {exc!r}")
            raise AgentTransportError(f"Request failed: {exc}") from exc
        except ValueError as exc:
            logger.warning(f"[HttpAgent] Response body is not JSON: {exc}")
            raise AgentTransportError("Response body is not JSON") from exc

        return self._unwrap(data)

    def _unwrap(self, data: object) -> dict:
        envelope = data.get("response", data) if isinstance(data, dict) else data

        if isinstance(envelope, str):
            try:
                envelope = json.loads(envelope)
            except json.JSONDecodeError as exc:
                raise AgentTransportError("Agent response is not JSON") from exc

        if not isinstance(envelope, dict):
            raise AgentTransportError(
                f"Agent response is {type(envelope).__name__}, expected an object"
            )
        return envelope
