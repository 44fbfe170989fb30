from __future__ import annotations

import structlog

from .client import BlastClient
from .exceptions import NoTicketFound, PollTimeout, TransportError
from .models import RelayResponse
from .poller import ResultPoller
from .settings import RelaySettings
from .submitter import JobSubmitter

NO_SEQUENCE_MESSAGE = "No sequence provided."
NO_RID_MESSAGE = "Failed to get RID from BLAST."
FETCH_ERROR_MESSAGE = "Error fetching BLAST results."
POLL_TIMEOUT_MESSAGE = "BLAST results not ready."


class BlastRelay:
    def __init__(
        self,
        *,
        submitter: JobSubmitter,
        poller: ResultPoller,
        max_attempts: int = 10,
        interval: float = 5.0,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.submitter = submitter
        self.poller = poller
        self.max_attempts = max_attempts
        self.interval = interval
        self.logger = structlog.get_logger("blast_relay")

    @classmethod
    def from_settings(cls, client: BlastClient, settings: RelaySettings) -> BlastRelay:
        return cls(
            submitter=JobSubmitter(client, database=settings.database, program=settings.program),
            poller=ResultPoller(client, raise_on_timeout=settings.raise_on_poll_timeout),
            max_attempts=settings.max_poll_attempts,
            interval=settings.poll_interval_seconds,
        )

    async def run(self, sequence: str) -> str:
        """Submit ``sequence`` and wait for its raw BLAST report text."""
        ticket = await self.submitter.submit(sequence)
        return await self.poller.poll(ticket, max_attempts=self.max_attempts, interval=self.interval)

    async def handle_submission(self, sequence: str | None) -> RelayResponse:
        if not sequence:
            self.logger.info("blast_relay_failed", reason="no_sequence")
            return RelayResponse(status_code=400, body=NO_SEQUENCE_MESSAGE)

        try:
            text = await self.run(sequence)
        except NoTicketFound:
            self.logger.error("blast_relay_failed", reason="no_rid")
            return RelayResponse(status_code=500, body=NO_RID_MESSAGE)
        except PollTimeout as exc:
            self.logger.error("blast_relay_failed", reason="poll_timeout", rid=exc.rid, attempts=exc.attempts)
            return RelayResponse(status_code=504, body=POLL_TIMEOUT_MESSAGE)
        except TransportError as exc:
            self.logger.error("blast_relay_failed", reason="transport_error", operation=exc.operation, error=exc.detail)
            return RelayResponse(status_code=500, body=FETCH_ERROR_MESSAGE)
        except Exception as exc:
            self.logger.exception("blast_relay_failed", reason="unexpected", error=str(exc))
            return RelayResponse(status_code=500, body=FETCH_ERROR_MESSAGE)

        return RelayResponse(status_code=200, body=text)
