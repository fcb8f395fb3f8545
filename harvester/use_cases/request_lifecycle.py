"""
RequestLifecycleController - drives one harvest request at a time.

    IDLE ──submit──▶ SUBMITTING ──ok──▶ SUCCEEDED ──(reset_delay)──▶ IDLE
                                 └─err─▶ FAILED ──reset()/submit──▶ ...

The only client-side validation (non-blank list name, at least one domain)
runs here before anything is sent. This is also the only place that turns
an InvocationError into text for the user, and the roster is only touched
on the success path.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..domain.entities.harvest_result import HarvestResult
from ..domain.entities.scan_date_range import InvalidRangeError
from .dashboard_state import DashboardState
from .invoke_agent import AgentInvocationClient, InvocationError, InvocationErrorKind
from .resolve_date_range import DateInput, resolve_date_range

logger = logging.getLogger(__name__)

DEFAULT_RESET_DELAY_SECONDS = 2.0

TRANSPORT_ERROR_MESSAGE = (
    "Could not reach the harvest agent. Check your connection and try again."
)
MALFORMED_RESPONSE_MESSAGE = "The harvest agent returned an unexpected response."


class LifecycleState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class LifecycleSnapshot:
    state: LifecycleState
    message: Optional[str] = None
    result: Optional[HarvestResult] = None


@dataclass
class HarvestRequest:
    list_name: str
    domains: List[str] = field(default_factory=list)
    preset: str = "30"
    custom_start: DateInput = None
    custom_end: DateInput = None


def normalize_domains(domains: Iterable[str]) -> List[str]:
    """Trim, drop blanks and duplicates, keep first-seen order."""
    seen: List[str] = []
    for domain in domains:
        domain = (domain or "").strip()
        if domain and domain not in seen:
            seen.append(domain)
    return seen


def describe_error(error: InvocationError) -> str:
    if error.kind == InvocationErrorKind.TRANSPORT:
        return TRANSPORT_ERROR_MESSAGE
    if error.kind == InvocationErrorKind.REJECTED:
        return error.message
    return MALFORMED_RESPONSE_MESSAGE


class RequestLifecycleController:
    """
    Owns the request state shown in the "Add Company List" dialog.
    Dependencies injected via constructor.
    """

    def __init__(
        self,
        client: AgentInvocationClient,
        dashboard: DashboardState,
        reset_delay: float = DEFAULT_RESET_DELAY_SECONDS,
        on_close: Optional[Callable[[], None]] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.client = client
        self.dashboard = dashboard
        self.reset_delay = reset_delay
        self.on_close = on_close
        self.clock = clock

        self._snapshot = LifecycleSnapshot(state=LifecycleState.IDLE)
        self._listeners: List[Callable[[LifecycleSnapshot], None]] = []
        self._in_flight = False
        self._generation = 0
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    # ── Read side ──────────────────────────────────────────────────────────

    @property
    def snapshot(self) -> LifecycleSnapshot:
        return self._snapshot

    @property
    def state(self) -> LifecycleState:
        return self._snapshot.state

    @property
    def message(self) -> Optional[str]:
        return self._snapshot.message

    @property
    def result(self) -> Optional[HarvestResult]:
        return self._snapshot.result

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def subscribe(self, listener: Callable[[LifecycleSnapshot], None]) -> None:
        self._listeners.append(listener)

    # ── Transitions ────────────────────────────────────────────────────────

    async def submit(self, request: HarvestRequest) -> bool:
        """
        Run one harvest. Returns True when the agent was invoked, False when
        the request was ignored (invalid input, already submitting) or its
        date range could not be resolved.
        """
        list_name = (request.list_name or "").strip()
        domains = normalize_domains(request.domains)

        if not list_name or not domains:
            logger.info(
                f"[Lifecycle] Ignoring submit: list_name={list_name!r} | domains={domains}"
            )
            return False
        if self._in_flight:
            logger.info(f"[Lifecycle] Ignoring submit for {list_name!r}: a harvest is already running")
            return False

        self._cancel_auto_reset()

        try:
            date_range = resolve_date_range(
                request.preset,
                request.custom_start,
                request.custom_end,
                today=self.clock(),
            )
        except InvalidRangeError as exc:
            logger.info(f"[Lifecycle] Invalid date range for {list_name!r}: {exc}")
            self._transition(LifecycleState.FAILED, message=str(exc))
            return False

        self._generation += 1
        generation = self._generation
        self._in_flight = True
        self._transition(LifecycleState.SUBMITTING)

        try:
            outcome = await self.client.invoke(list_name, domains, date_range)
        finally:
            self._in_flight = False

        if generation != self._generation:
            logger.info(
                f"[Lifecycle] Discarding stale result for {list_name!r} "
                f"(reset while submitting)"
            )
            return True

        if outcome.success:
            self.dashboard.apply_harvest(outcome.result)
            self._transition(
                LifecycleState.SUCCEEDED,
                message=outcome.result.summary(),
                result=outcome.result,
            )
            self._schedule_auto_reset()
        else:
            error = outcome.error
            logger.warning(
                f"[Lifecycle] Harvest failed for {list_name!r} | kind={error.kind.value} | "
                f"detail={error.detail!r}"
            )
            self._transition(LifecycleState.FAILED, message=describe_error(error))
        return True

    def reset(self) -> None:
        """
        Back to IDLE from any state. While SUBMITTING the call keeps running
        but its result will be dropped.
        """
        self._cancel_auto_reset()
        if self.state == LifecycleState.SUBMITTING:
            self._generation += 1
            logger.info("[Lifecycle] Reset while submitting; pending result will be discarded")
        self._transition(LifecycleState.IDLE)

    # ── Internals ──────────────────────────────────────────────────────────

    def _transition(
        self,
        state: LifecycleState,
        message: Optional[str] = None,
        result: Optional[HarvestResult] = None,
    ) -> None:
        previous = self._snapshot.state
        self._snapshot = LifecycleSnapshot(state=state, message=message, result=result)
        logger.debug(f"[Lifecycle] {previous.value} → {state.value}")

        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception:
                logger.warning("[Lifecycle] Listener raised; continuing", exc_info=True)

    def _schedule_auto_reset(self) -> None:
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.reset_delay, self._auto_reset)

    def _cancel_auto_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _auto_reset(self) -> None:
        self._reset_handle = None
        if self.state != LifecycleState.SUCCEEDED:
            return
        self._transition(LifecycleState.IDLE)
        if self.on_close:
            self.on_close()
