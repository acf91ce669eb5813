# indexnow_sync/submit/submitter.py
"""
Batched IndexNow submission.

Changed URLs are split into contiguous batches (10,000 URLs max per the
IndexNow protocol) and POSTed one request per batch:

    {
      "host": "example.com",
      "key": "<key>",
      "keyLocation": "https://example.com/<key>.txt",
      "urlList": ["https://example.com/a/", ...]
    }

Every batch is attempted once. A failed batch is recorded in the report and
logged; it never stops the batches after it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar
from urllib.parse import urlparse

import httpx

from indexnow_sync.exceptions import SubmissionError
from indexnow_sync.logging import LOG_PREFIX, get_logger

logger = get_logger(__name__)

INDEXNOW_ENDPOINT = "https://api.indexnow.org/indexnow"
INDEXNOW_BATCH_SIZE = 10_000
DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split items into contiguous lists of at most `size` elements."""
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


_DEFAULT_PORTS = {"http": 80, "https": 443}


def site_host(site_url: str) -> str:
    """
    Host component of a site URL as IndexNow expects it.

    Lowercased, without credentials, and with the port only when it is not
    the scheme default.
    """
    parsed = urlparse(site_url)
    hostname = parsed.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parsed.port
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme.lower()):
        return f"{hostname}:{port}"
    return hostname


def build_payload(batch: Sequence[str], host: str, key: str, key_location: str) -> dict:
    """Build the JSON body for one batch."""
    return {
        "host": host,
        "key": key,
        "keyLocation": key_location,
        "urlList": list(batch),
    }


@dataclass(frozen=True)
class BatchOutcome:
    """A batch the endpoint accepted."""

    batch_index: int
    size: int
    status_code: int


@dataclass(frozen=True)
class BatchResult:
    """Either an outcome or an error for one batch, never both."""

    outcome: Optional[BatchOutcome] = None
    error: Optional[SubmissionError] = None

    def __post_init__(self) -> None:
        if (self.outcome is None) == (self.error is None):
            raise ValueError("BatchResult needs exactly one of outcome or error")

    @property
    def ok(self) -> bool:
        return self.outcome is not None

    @property
    def batch_index(self) -> int:
        return self.outcome.batch_index if self.outcome else self.error.batch_index

    @property
    def size(self) -> int:
        return self.outcome.size if self.outcome else self.error.size


@dataclass
class SubmissionReport:
    """Per-batch results of one submission."""

    results: List[BatchResult] = field(default_factory=list)

    @property
    def batches(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def submitted_urls(self) -> int:
        """URLs in batches the endpoint accepted."""
        return sum(r.size for r in self.results if r.ok)

    @property
    def errors(self) -> List[SubmissionError]:
        return [r.error for r in self.results if r.error is not None]


class BatchSubmitter:
    """
    Sends changed URLs to an IndexNow endpoint.

    Usage:
        submitter = BatchSubmitter()
        report = submitter.submit(urls, site_url="https://example.com", key="abc")
        if not report.ok:
            ...

    A preconfigured httpx.Client may be passed in (tests use one backed by
    httpx.MockTransport); otherwise a client is created per submit() call.
    """

    def __init__(
        self,
        endpoint: str = INDEXNOW_ENDPOINT,
        batch_size: int = INDEXNOW_BATCH_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not 1 <= batch_size <= INDEXNOW_BATCH_SIZE:
            raise ValueError(
                f"batch_size must be between 1 and {INDEXNOW_BATCH_SIZE}, got {batch_size}"
            )
        self._endpoint = endpoint
        self._batch_size = batch_size
        self._timeout = timeout
        self._client = client

    def submit(self, changed_urls: Sequence[str], site_url: str, key: str) -> SubmissionReport:
        """
        Submit changed URLs in batches.

        No request is made when changed_urls is empty.
        """
        report = SubmissionReport()
        if not changed_urls:
            logger.info(f"{LOG_PREFIX} no changed URLs detected, skipping submission")
            return report

        batches = chunk(changed_urls, self._batch_size)
        logger.info(
            f"{LOG_PREFIX} submitting {len(changed_urls)} changed URLs "
            f"in {len(batches)} batch(es)"
        )

        payload_base = {
            "host": site_host(site_url),
            "key": key,
            "key_location": f"{site_url}/{key}.txt",
        }

        if self._client is not None:
            self._submit_all(self._client, batches, payload_base, report)
        else:
            with httpx.Client(timeout=self._timeout) as client:
                self._submit_all(client, batches, payload_base, report)

        if report.failed:
            logger.warning(
                f"{LOG_PREFIX} {report.failed}/{report.batches} batch(es) failed"
            )
        return report

    def _submit_all(
        self,
        client: httpx.Client,
        batches: List[List[str]],
        payload_base: dict,
        report: SubmissionReport,
    ) -> None:
        total = len(batches)
        for index, batch in enumerate(batches):
            logger.debug(
                f"{LOG_PREFIX} submitting batch {index + 1}/{total} ({len(batch)} URLs)"
            )
            report.results.append(self._submit_batch(client, index, batch, payload_base))

    def _submit_batch(
        self,
        client: httpx.Client,
        index: int,
        batch: List[str],
        payload_base: dict,
    ) -> BatchResult:
        try:
            response = client.post(
                self._endpoint,
                json=build_payload(batch, **payload_base),
                headers={"Content-Type": "application/json; charset=utf-8"},
            )
        except httpx.HTTPError as e:
            logger.warning(
                f"{LOG_PREFIX} batch {index + 1} submission failed (network error: {e})"
            )
            return BatchResult(
                error=SubmissionError(index, len(batch), f"network error: {e}")
            )

        if not response.is_success:
            logger.warning(f"{LOG_PREFIX} batch {index + 1} failed ({response.status_code})")
            return BatchResult(
                error=SubmissionError(
                    index,
                    len(batch),
                    f"HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        return BatchResult(
            outcome=BatchOutcome(
                batch_index=index, size=len(batch), status_code=response.status_code
            )
        )


__all__ = [
    "INDEXNOW_ENDPOINT",
    "INDEXNOW_BATCH_SIZE",
    "DEFAULT_TIMEOUT",
    "chunk",
    "site_host",
    "build_payload",
    "BatchOutcome",
    "BatchResult",
    "SubmissionReport",
    "BatchSubmitter",
]
