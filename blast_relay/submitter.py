from __future__ import annotations

import re

import structlog

from .client import BlastClient
from .exceptions import NoTicketFound, TransportError
from .logging import preview_text
from .models import Ticket

RID_PATTERN = re.compile(r"RID = ([A-Z0-9\-]+)")


def extract_ticket(text: str) -> Ticket | None:
    match = RID_PATTERN.search(text)
    if not match:
        return None
    return Ticket(match.group(1))


class JobSubmitter:
    """Registers a query sequence with BLAST and returns its RID.

    Submissions are never retried here: BLAST may already have queued the
    job, so a failed ``Put`` is terminal for the request.
    """

    def __init__(self, client: BlastClient, *, database: str = "core_nt", program: str = "blastn") -> None:
        self._client = client
        self._database = database
        self._program = program
        self._logger = structlog.get_logger("blast_submitter")

    async def submit(self, sequence: str) -> Ticket:
        self._logger.info(
            "blast_submit_started",
            sequence_length=len(sequence),
            sequence=preview_text(sequence),
            database=self._database,
            program=self._program,
        )
        try:
            body = await self._client.put(sequence, database=self._database, program=self._program)
        except TransportError as exc:
            self._logger.warning("blast_transport_error", operation=exc.operation, error=exc.detail)
            raise

        ticket = extract_ticket(body)
        if ticket is None:
            self._logger.warning("blast_rid_missing", body=preview_text(body, limit=200))
            raise NoTicketFound(body)

        self._logger.info("blast_rid_received", rid=ticket.rid)
        return ticket
