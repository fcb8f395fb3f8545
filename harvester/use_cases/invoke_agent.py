"""
AgentInvocationClient - one harvest request against the remote agent.

Every outcome comes back as an InvocationResult; nothing is raised. The
three failure kinds are kept apart so the lifecycle controller never has to
inspect raw transport errors or envelopes itself:

  TRANSPORT         : no envelope at all (network, timeout, non-2xx)
  REJECTED          : envelope status is not "success"
  MALFORMED_RESPONSE: "success" but the result does not match HarvestResult
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from pydantic import ValidationError

from ..domain.entities.harvest_result import HarvestResult
from ..domain.entities.scan_date_range import ScanDateRange
from ..domain.interfaces.i_agent_transport import IAgentTransport
from .agent_schemas import HarvestResultPayload

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"
DEFAULT_REJECTION_MESSAGE = "The harvest agent declined the request."


class InvocationErrorKind(str, Enum):
    TRANSPORT = "transport"
    REJECTED = "rejected"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class InvocationError:
    kind: InvocationErrorKind
    message: str
    detail: Optional[str] = None  # Diagnostic text for logs, never shown to users


@dataclass(frozen=True)
class InvocationResult:
    """Either a HarvestResult or an InvocationError, never both."""

    result: Optional[HarvestResult] = None
    error: Optional[InvocationError] = None

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("InvocationResult needs exactly one of result or error")

    @classmethod
    def ok(cls, result: HarvestResult) -> "InvocationResult":
        return cls(result=result)

    @classmethod
    def failure(
        cls,
        kind: InvocationErrorKind,
        message: str,
        detail: Optional[str] = None,
    ) -> "InvocationResult":
        return cls(error=InvocationError(kind=kind, message=message, detail=detail))

    @property
    def success(self) -> bool:
        return self.result is not None


def build_request_payload(
    list_name: str, domains: Iterable[str], date_range: ScanDateRange
) -> dict:
    return {
        "list_name": list_name,
        "target_domains": list(domains),
        "date_range": date_range.to_request_payload(),
    }


class AgentInvocationClient:
    """
    Wraps the transport port. Input validation (non-empty name and domains)
    is the caller's job; see RequestLifecycleController.
    """

    def __init__(self, transport: IAgentTransport):
        self.transport = transport

    async def invoke(
        self,
        list_name: str,
        domains: Iterable[str],
        date_range: ScanDateRange,
    ) -> InvocationResult:
        payload = build_request_payload(list_name, domains, date_range)
        logger.info(
            f"[Invoke] ── START ── list={list_name!r} | "
            f"domains={payload['target_domains']} | "
            f"range={date_range.start_date}..{date_range.end_date}"
        )

        try:
            envelope = await self.transport.send(payload)
        except Exception as exc:
            logger.warning(f"[Invoke] Transport failed for {list_name!r}: {exc!r}")
            return InvocationResult.failure(
                InvocationErrorKind.TRANSPORT,
                message="Transport failure",
                detail=str(exc),
            )

        return self.normalize(envelope)

    def normalize(self, envelope: object) -> InvocationResult:
        """Classify a decoded response envelope."""
        if not isinstance(envelope, dict):
            logger.warning(
                f"[Invoke] Envelope is {type(envelope).__name__}, not an object → rejected"
            )
            return InvocationResult.failure(
                InvocationErrorKind.REJECTED,
                message=DEFAULT_REJECTION_MESSAGE,
                detail=f"envelope type {type(envelope).__name__}",
            )

        status = envelope.get("status")
        if status != SUCCESS_STATUS:
            message = envelope.get("message")
            if not isinstance(message, str) or not message.strip():
                message = DEFAULT_REJECTION_MESSAGE
            logger.warning(f"[Invoke] Agent rejected request | status={status!r} | message={message!r}")
            return InvocationResult.failure(
                InvocationErrorKind.REJECTED,
                message=message,
                detail=f"status={status!r}",
            )

        raw_result = envelope.get("result")
        if isinstance(raw_result, str):
            # Some agent deployments double-encode the result object.
            try:
                raw_result = json.loads(raw_result)
            except json.JSONDecodeError as exc:
                return self._malformed(f"result is not JSON: {exc}")

        try:
            result = HarvestResultPayload.model_validate(raw_result).to_entity()
        except ValidationError as exc:
            return self._malformed(
                f"{exc.error_count()} validation error(s): "
                + "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in exc.errors()
                )
            )
        except ValueError as exc:
            return self._malformed(str(exc))

        logger.info(
            f"[Invoke] Success → list={result.list_name!r} | "
            f"total_contacts={result.total_contacts} | "
            f"added={result.contacts_added} | updated={result.contacts_updated} | "
            f"emails_logged={result.total_emails_logged}"
        )
        return InvocationResult.ok(result)

    def _malformed(self, detail: str) -> InvocationResult:
        logger.error(f"[Invoke] Malformed harvest result: {detail}")
        return InvocationResult.failure(
            InvocationErrorKind.MALFORMED_RESPONSE,
            message="Malformed response",
            detail=detail,
        )
