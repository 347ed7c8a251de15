"""
Spreadsheet Sync Gateway - OSPA Scorer
ospa/services/sync_gateway.py

One-way, best-effort push of scored candidates to a spreadsheet ingestion
endpoint (a Google Apps Script web app). Each candidate is flattened to a
SyncRecord and the batch is POSTed as a JSON array. When a shared secret is
configured it is sent as the ``token`` query parameter.

A single attempt is made: no retry, no per-record status. The outcome is
True whenever the request completes, whatever its status (a non-2xx
answer is logged as a warning); False on a transport failure.
"""

import logging
from typing import Iterable, List, Optional, Union

import httpx

from ospa.models.candidate import Candidate
from ospa.models.sync import SyncRecord

logger = logging.getLogger(__name__)


class SheetsSyncGateway:
    """Push candidate results to the external spreadsheet."""

    def __init__(
        self,
        url: Optional[str],
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    @staticmethod
    def build_payload(candidates: Iterable[Candidate]) -> List[dict]:
        return [SyncRecord.from_candidate(c).to_payload() for c in candidates]

    async def send(self, candidates: Union[Candidate, Iterable[Candidate]]) -> bool:
        """
        Transmit one candidate or a batch.

        Returns:
            True once the endpoint has answered, False on a transport
            failure or when no endpoint is configured.
        """
        if not self.enabled:
            logger.warning("Spreadsheet sync skipped: SYNC_URL is not configured")
            return False

        batch = [candidates] if isinstance(candidates, Candidate) else list(candidates)
        payload = self.build_payload(batch)
        params = {"token": self.token} if self.token else None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                resp = await client.post(self.url, json=payload, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Spreadsheet sync failed for {len(batch)} candidate(s): {e}")
            return False

        if resp.is_success:
            logger.info(f"Synced {len(batch)} candidate(s) to spreadsheet (HTTP {resp.status_code})")
        else:
            logger.warning(
                f"Spreadsheet endpoint answered HTTP {resp.status_code} for {len(batch)} candidate(s)"
            )
        return True
