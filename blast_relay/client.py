from __future__ import annotations

import httpx

from .exceptions import TransportError

DEFAULT_BLAST_URL = "https://blast.ncbi.nlm.nih.gov/blast/Blast.cgi"


class BlastClient:
    """Async client for the NCBI BLAST URL API (``CMD=Put`` / ``CMD=Get``).

    Query values are passed through ``params=`` so httpx percent-encodes them.
    Any ``httpx.HTTPError``, and any URL the request cannot be built from, is
    re-raised as :class:`TransportError`. Upstream status codes are not
    inspected, the body text is returned as is.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BLAST_URL,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = base_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def put(self, sequence: str, *, database: str, program: str) -> str:
        return await self._fetch_text(
            "submit",
            {"CMD": "Put", "QUERY": sequence, "DATABASE": database, "PROGRAM": program},
        )

    async def get(self, rid: str) -> str:
        return await self._fetch_text(
            "poll",
            {"CMD": "Get", "RID": rid, "FORMAT_TYPE": "Text"},
        )

    async def _fetch_text(self, operation: str, params: dict[str, str]) -> str:
        try:
            response = await self._client.get(self._url, params=params)
            return response.text
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise TransportError(operation, str(exc) or type(exc).__name__) from exc
