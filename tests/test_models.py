import pytest
from pydantic import ValidationError

from blast_relay.models import PollOutcome, PollStatus, SequenceRequest


def test_sequence_request_keeps_extra_fields_out():
    request = SequenceRequest.model_validate({"sequence": "ACGT", "format": "fasta"})

    assert request.sequence == "ACGT"
    assert not hasattr(request, "format")


@pytest.mark.parametrize("payload", [{}, {"sequence": ""}, {"sequence": None}, {"sequence": 42}])
def test_sequence_request_requires_non_empty_text(payload):
    with pytest.raises(ValidationError):
        SequenceRequest.model_validate(payload)


def test_poll_outcome_constructors():
    error = RuntimeError("boom")

    assert PollOutcome.ready("done").status is PollStatus.ready
    assert PollOutcome.waiting("Status=WAITING").body == "Status=WAITING"
    failed = PollOutcome.failed(error)
    assert failed.status is PollStatus.transport_error
    assert failed.error is error
    assert failed.body == ""
