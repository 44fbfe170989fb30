from __future__ import annotations

from collections import deque

import httpx
import pytest

from blast_relay.client import BlastClient

WAITING_BODY = "<!--QBlastInfoBegin\n    Status=WAITING\nQBlastInfoEnd\n-->"
REPORT_BODY = "BLASTN 2.16.0+\nQuery= ACGTACGT\nSequences producing significant alignments:\n"


class FakeBlast:
    """In-memory stand-in for Blast.cgi, driven through httpx.MockTransport."""

    def __init__(self, put_body: str = "    RID = ABC123-X\n    RTOE = 12\n", get_bodies=()):
        self.put_body = put_body
        self.get_bodies = deque(get_bodies)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        cmd = request.url.params.get("CMD")
        if cmd == "Put":
            body = self.put_body
        elif cmd == "Get":
            body = self.get_bodies.popleft()
        else:
            return httpx.Response(400, text="unknown CMD")
        if isinstance(body, type) and issubclass(body, httpx.HTTPError):
            raise body("upstream unreachable", request=request)
        if isinstance(body, type) and issubclass(body, Exception):
            raise body("upstream exploded")
        return httpx.Response(200, text=body)

    def calls(self, cmd: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.params.get("CMD") == cmd]

    def client(self) -> BlastClient:
        transport = httpx.MockTransport(self.handler)
        return BlastClient(http_client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    recorded: list[float] = []

    async def fake_sleep(seconds: float):
        recorded.append(seconds)

    monkeypatch.setattr("blast_relay.poller.asyncio.sleep", fake_sleep)
    return recorded
