from __future__ import annotations


class BlastRelayError(Exception):
    """Base class for every terminal failure of a relay call."""


class SubmitError(BlastRelayError):
    """Raised when a BLAST submission does not yield a usable ticket."""


class NoTicketFound(SubmitError):
    """Raised when the submission response carries no ``RID = ...`` line."""

    def __init__(self, body: str):
        self.body = body
        super().__init__("BLAST submission response contained no RID")


class TransportError(BlastRelayError):
    """Raised when BLAST cannot be reached or its response cannot be read."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")


class PollTimeout(BlastRelayError):
    """Raised when results are still pending after the last allowed poll."""

    def __init__(self, rid: str, attempts: int, last_body: str):
        self.rid = rid
        self.attempts = attempts
        self.last_body = last_body
        super().__init__(f"RID {rid} still waiting after {attempts} attempts")
