from __future__ import annotations

import logging
from typing import Protocol

import httpx

from course_assistant.core.settings import TelemetryConfig
from course_assistant.schema.assistant import TelemetryRecord

log = logging.getLogger(__name__)

NOT_CALLED_STATUS = "Qualtrics not called"


class TelemetrySink(Protocol):
    async def log(self, record: TelemetryRecord) -> str: ...


class NullTelemetrySink:
    async def log(self, record: TelemetryRecord) -> str:
        return NOT_CALLED_STATUS


class QualtricsTelemetrySink:
    """
    Records each exchange as a Qualtrics survey response.

    The returned status string ends up in a trailing comment of the answer;
    failures are reported there and never raised.
    """

    def __init__(
        self,
        config: TelemetryConfig,
        *,
        timeout_s: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_s))

    @property
    def url(self) -> str:
        return (
            f"https://{self._config.datacenter}.qualtrics.com"
            f"/API/v3/surveys/{self._config.survey_id}/responses"
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def log(self, record: TelemetryRecord) -> str:
        headers = {
            "Content-Type": "application/json",
            "X-API-TOKEN": self._config.api_token,
        }
        try:
            resp = await self._client.post(self.url, headers=headers, json=record.to_payload())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning("Qualtrics request failed: %s: %s", type(e).__name__, e)
            return f"Qualtrics error: {type(e).__name__}"
        if resp.status_code >= 300:
            log.warning("Qualtrics returned %s", resp.status_code)
        return f"Qualtrics status: {resp.status_code}"
