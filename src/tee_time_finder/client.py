"""HTTP client for the tee time server's inventory and alert endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

import httpx
import structlog
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from .alerts import validate_alert_request
from .config import Settings
from .date_window import TargetDate
from .errors import AlertRejectedError, AlertValidationError, CollaboratorError
from .metros import get_metro
from .models import AlertRecord, AlertRequest, TeeTimeRecord

LOGGER = structlog.get_logger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    """Transport failures and 5xx answers are worth another attempt; 4xx are not."""
    if not isinstance(exc, CollaboratorError):
        return False
    return exc.status_code is None or exc.status_code >= 500


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    text = response.text.strip()
    return text or f"HTTP {response.status_code}"


class TeeTimeClient:
    """Talks to the tee time server. Every failure surfaces as ``CollaboratorError``."""

    def __init__(self, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport

    async def fetch_inventory(self, metro: str, target: TargetDate) -> List[TeeTimeRecord]:
        """Fetch every listed tee time for a metro on one date, in server order."""
        slug = get_metro(metro).slug
        payload = await self._get_json(f"/{slug}/teetimes", params={"date": target.iso})
        records = [TeeTimeRecord.from_payload(item) for item in self._as_list(payload) if isinstance(item, dict)]
        LOGGER.info("client.inventory.fetched", metro=slug, date=target.iso, count=len(records))
        return records

    async def fetch_alerts(self, phone: str) -> List[AlertRecord]:
        """Return the alerts registered for ``phone``.

        The listing is filtered here by exact phone match; the server may hand
        back every alert it holds.
        """
        phone = (phone or "").strip()
        if not phone:
            return []
        payload = await self._get_json("/api/alerts", params={"phone": phone})
        alerts = [AlertRecord.from_payload(item) for item in self._as_list(payload) if isinstance(item, dict)]
        mine = [alert for alert in alerts if alert.phone == phone]
        LOGGER.info("client.alerts.fetched", total=len(alerts), matched=len(mine))
        return mine

    async def create_alert(self, request: AlertRequest) -> AlertRecord:
        """Create an alert. Incomplete requests fail before anything is sent."""
        validate_alert_request(request)
        response = await self._request("POST", "/api/alerts/create", retry=False, json=request.to_payload())
        if response.is_client_error:
            message = _error_message(response)
            LOGGER.warning("client.alerts.rejected", status_code=response.status_code, error=message)
            raise AlertRejectedError(message, status_code=response.status_code)
        payload = self._decode(response)
        if not isinstance(payload, dict):
            raise CollaboratorError("Unexpected response when creating alert")
        alert = AlertRecord.from_payload(payload)
        LOGGER.info("client.alerts.created", alert_id=alert.id, course=alert.course, date=alert.date)
        return alert

    async def delete_alert(self, alert_id: str) -> None:
        """Delete an alert. Unknown ids are not an error."""
        alert_id = (alert_id or "").strip()
        if not alert_id:
            raise AlertValidationError("An alert id is required.")
        response = await self._request("POST", "/api/alerts/delete", params={"id": alert_id})
        if response.status_code == 404:
            LOGGER.info("client.alerts.delete.missing", alert_id=alert_id)
            return
        if response.is_client_error:
            raise CollaboratorError(_error_message(response), status_code=response.status_code)
        LOGGER.info("client.alerts.deleted", alert_id=alert_id)

    async def _get_json(self, path: str, *, params: dict[str, str]) -> Any:
        response = await self._request("GET", path, params=params)
        if response.is_client_error:
            raise CollaboratorError(_error_message(response), status_code=response.status_code)
        return self._decode(response)

    async def _request(self, method: str, path: str, *, retry: bool = True, **kwargs: Any) -> httpx.Response:
        """Send a request with retry behaviour; 4xx responses are returned to the caller.

        Requests that are not safe to repeat pass ``retry=False`` and get one attempt.
        """
        attempts = self._settings.retry_attempts if retry else 1
        async for attempt in AsyncRetrying(
            wait=wait_exponential(multiplier=self._settings.retry_backoff_seconds, max=8),
            stop=stop_after_attempt(attempts),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        ):
            with attempt:
                return await self._send_once(method, path, **kwargs)
        raise CollaboratorError(f"{method} {path} failed")

    async def _send_once(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self._settings.api_base,
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            LOGGER.warning("client.request.failed", method=method, path=path, error=str(exc))
            raise CollaboratorError(f"Could not reach tee time server: {exc}") from exc

        if response.is_server_error:
            LOGGER.warning("client.request.server_error", method=method, path=path, status_code=response.status_code)
            raise CollaboratorError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise CollaboratorError("Tee time server returned invalid JSON") from exc

    @staticmethod
    def _as_list(payload: Any) -> list:
        # The server encodes an empty result as null.
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise CollaboratorError("Expected a JSON list from the tee time server")
        return payload
