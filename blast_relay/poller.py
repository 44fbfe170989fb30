from __future__ import annotations

import asyncio

import structlog

from .client import BlastClient
from .exceptions import PollTimeout, TransportError
from .models import PollOutcome, PollStatus, Ticket

WAITING_MARKER = "Status=WAITING"
DEFAULT_POLL_INTERVAL_SECONDS = 5.0
DEFAULT_MAX_ATTEMPTS = 10


class ResultPoller:
    """Polls ``CMD=Get`` for a ticket until the waiting marker disappears.

    Each attempt sleeps ``interval`` first, then queries once. Attempts are
    strictly sequential. A transport failure ends the loop at once. When the
    budget runs out the last body is returned, unless ``raise_on_timeout`` is
    set, in which case :class:`PollTimeout` is raised with that body.
    """

    def __init__(self, client: BlastClient, *, raise_on_timeout: bool = False) -> None:
        self._client = client
        self._raise_on_timeout = raise_on_timeout
        self._logger = structlog.get_logger("blast_poller")

    async def poll_once(self, ticket: Ticket) -> PollOutcome:
        try:
            body = await self._client.get(ticket.rid)
        except TransportError as exc:
            return PollOutcome.failed(exc)
        if WAITING_MARKER in body:
            return PollOutcome.waiting(body)
        return PollOutcome.ready(body)

    async def poll(
        self,
        ticket: Ticket,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ) -> str:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if interval < 0:
            raise ValueError("interval must not be negative")

        last_body = ""
        for attempt in range(1, max_attempts + 1):
            await asyncio.sleep(interval)
            outcome = await self.poll_once(ticket)

            if outcome.status is PollStatus.transport_error:
                self._logger.warning(
                    "blast_transport_error",
                    operation="poll",
                    rid=ticket.rid,
                    attempt=attempt,
                    error=str(outcome.error),
                )
                raise outcome.error

            if outcome.status is PollStatus.ready:
                self._logger.info(
                    "blast_results_ready",
                    rid=ticket.rid,
                    attempts=attempt,
                    body_length=len(outcome.body),
                )
                return outcome.body

            last_body = outcome.body
            self._logger.info("blast_results_not_ready", rid=ticket.rid, attempt=attempt)

        self._logger.warning("blast_poll_exhausted", rid=ticket.rid, attempts=max_attempts)
        if self._raise_on_timeout:
            raise PollTimeout(ticket.rid, max_attempts, last_body)
        return last_body
