import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

load_dotenv()

T = TypeVar("T")


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        return default


def _flag(raw: str) -> bool:
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass
class RelaySettings:
    blast_url: str = os.getenv("BLAST_URL", "https://blast.ncbi.nlm.nih.gov/blast/Blast.cgi")
    database: str = os.getenv("BLAST_DATABASE", "core_nt")
    program: str = os.getenv("BLAST_PROGRAM", "blastn")
    poll_interval_seconds: float = _env("BLAST_POLL_INTERVAL_SECONDS", 5.0, float)
    max_poll_attempts: int = _env("BLAST_MAX_POLL_ATTEMPTS", 10, int)
    request_timeout_seconds: float = _env("BLAST_REQUEST_TIMEOUT_SECONDS", 30.0, float)
    raise_on_poll_timeout: bool = _env("BLAST_RAISE_ON_POLL_TIMEOUT", False, _flag)
    log_level: str = os.getenv("BLAST_LOG_LEVEL", "INFO")


settings = RelaySettings()
