# ABOUTME: Delivery client posting finished records to the storage backend one at a time
# ABOUTME: Applies the "desconocido" sentinel for missing origins and reports per-record failures

import httpx
from pydantic import BaseModel, Field

from lexicon_harvest.config import get_config
from lexicon_harvest.core.models import Record
from lexicon_harvest.extraction.base import HarvestError
from lexicon_harvest.utils.logging import get_logger, log_api_call
from lexicon_harvest.utils.retry import transport_retry


class DeliveryError(HarvestError):
    """Raised when a record could not be delivered."""

    pass


class DeliveryFailure(BaseModel):
    """A record the backend did not accept."""

    word: str
    error: str


class DeliveryReport(BaseModel):
    """Outcome of delivering a batch of records. Earlier deliveries are never rolled back.

    Entries follow delivery order; a word repeated in the batch appears once per record.
    """

    delivered: list[str] = Field(default_factory=list)
    failures: list[DeliveryFailure] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


class BackendDeliveryClient:
    """Client for the backend that stores finished records."""

    def __init__(
        self,
        endpoint: str | None = None,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        max_attempts: int | None = None,
    ):
        config = get_config()
        self.endpoint = endpoint if endpoint is not None else config.delivery_endpoint
        self.token = token if token is not None else config.delivery_token
        self.origin_label = config.delivery_origin_label
        self.unknown_origin = config.unknown_origin
        self.max_attempts = max_attempts or config.delivery_max_attempts
        self.http_client = client or httpx.AsyncClient(
            headers={"User-Agent": config.user_agent}, timeout=config.http_timeout
        )
        self.logger = get_logger(__name__)

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint)

    def build_payload(self, record: Record) -> dict[str, str]:
        """Backend payload for ``record``; the only place the unknown-origin sentinel is applied."""
        return {
            "text": record.word,
            "definition": record.definition,
            "origin": self.origin_label,
            "latin": record.origin or self.unknown_origin,
        }

    async def deliver(self, record: Record) -> None:
        """Deliver a single record.

        Raises:
            DeliveryError: If the endpoint is missing or the backend rejects the record
        """
        if not self.is_configured:
            raise DeliveryError("Delivery endpoint not configured")

        try:
            async for attempt in transport_retry(self.max_attempts):
                with attempt:
                    await self._post(self.build_payload(record))
        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"Backend rejected {record.word!r}: {e.response.status_code} {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"Could not deliver {record.word!r}: {e}") from e

        self.logger.info("Delivered record", word=record.word)

    async def deliver_all(self, records: list[Record]) -> DeliveryReport:
        """Deliver records in order, collecting failures instead of stopping."""
        report = DeliveryReport()

        for record in records:
            try:
                await self.deliver(record)
                report.delivered.append(record.word)
            except DeliveryError as e:
                self.logger.error("Failed to deliver record", word=record.word, error=str(e))
                report.failures.append(DeliveryFailure(word=record.word, error=str(e)))

        self.logger.info(
            "Delivery finished", delivered=len(report.delivered), failed=len(report.failures), total=len(records)
        )
        return report

    @log_api_call("backend")
    async def _post(self, payload: dict[str, str]) -> None:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = await self.http_client.post(self.endpoint, json=payload, headers=headers)
        response.raise_for_status()

    async def close(self) -> None:
        await self.http_client.aclose()
