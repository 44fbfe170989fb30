from .client import BlastClient
from .exceptions import BlastRelayError, NoTicketFound, PollTimeout, SubmitError, TransportError
from .models import PollOutcome, PollStatus, RelayResponse, SequenceRequest, Ticket
from .poller import ResultPoller
from .relay import BlastRelay
from .settings import RelaySettings
from .submitter import JobSubmitter, extract_ticket

__all__ = [
    "BlastClient",
    "BlastRelay",
    "BlastRelayError",
    "JobSubmitter",
    "NoTicketFound",
    "PollOutcome",
    "PollStatus",
    "PollTimeout",
    "RelayResponse",
    "RelaySettings",
    "ResultPoller",
    "SequenceRequest",
    "SubmitError",
    "Ticket",
    "TransportError",
    "extract_ticket",
]
