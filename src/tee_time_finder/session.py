"""Interactive state holders that own the current inventory and selections.

The pure engine functions are re-run on every change; the only awaited work is
the call to the tee time server, and a failed call never replaces data that is
already on screen.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Union

import structlog

from .client import TeeTimeClient
from .course_names import CourseNameNormalizer
from .date_window import TargetDate
from .errors import AlertRejectedError, AlertValidationError, CollaboratorError
from .filtering import filter_tee_times
from .models import ALL, ANY, AlertRecord, AlertRequest, FilterState, TeeTimeRecord
from .options import CITY, COURSE, FilterOptions, derive_options, reconcile

LOGGER = structlog.get_logger(__name__)

MSG_LOAD_FAILED = "Failed to load tee times. Please try again."
MSG_ALERTS_FAILED = "Failed to load alerts."
MSG_CREATE_FAILED = "Failed to create alert. Please try again."
MSG_CREATED = "✓ Alert created! We'll text you when a tee time opens up."
MSG_DELETE_FAILED = "Failed to delete alert."


@dataclass(frozen=True)
class StatusMessage:
    """User-facing outcome of the last action."""

    text: str
    is_error: bool = False
    is_validation: bool = False


class BrowseSession:
    """Current tee time snapshot plus the filter selection applied to it."""

    def __init__(
        self,
        client: TeeTimeClient,
        normalizer: CourseNameNormalizer,
        metro: str,
        state: Optional[FilterState] = None,
    ):
        self._client = client
        self._normalizer = normalizer
        self.metro = metro
        self.state = state or FilterState()
        self.inventory: List[TeeTimeRecord] = []
        self.target: Optional[TargetDate] = None
        self.status: Optional[StatusMessage] = None

    async def load(self, target: TargetDate) -> bool:
        """Fetch a day's inventory; keep the previous snapshot on failure."""
        try:
            inventory = await self._client.fetch_inventory(self.metro, target)
        except CollaboratorError as exc:
            LOGGER.warning("session.load.failed", metro=self.metro, date=target.iso, error=str(exc))
            self.status = StatusMessage(MSG_LOAD_FAILED, is_error=True)
            return False
        self.inventory = inventory
        self.target = target
        self.status = None
        self.state = reconcile(self.inventory, self.state, self._normalizer)
        return True

    @property
    def options(self) -> FilterOptions:
        return derive_options(self.inventory, self.state, self._normalizer)

    @property
    def visible(self) -> List[TeeTimeRecord]:
        return filter_tee_times(self.inventory, self.state, self._normalizer)

    def select_course(self, course: Optional[str]) -> FilterState:
        return self._update(COURSE, course=course or ALL)

    def select_city(self, city: Optional[str]) -> FilterState:
        return self._update(CITY, city=city or ALL)

    def set_time_window(self, time_from: int, time_to: int) -> FilterState:
        for hour in (time_from, time_to):
            if not 0 <= hour <= 24:
                raise ValueError(f"hour must be between 0 and 24, got {hour}")
        low, high = sorted((time_from, time_to))
        return self._update(COURSE, time_from=low, time_to=high)

    def set_min_openings(self, value: Union[int, str, None]) -> FilterState:
        if value in (None, "", ANY):
            return self._update(COURSE, min_openings=ANY)
        return self._update(COURSE, min_openings=int(value))

    def set_holes(self, value: Optional[str]) -> FilterState:
        return self._update(COURSE, holes=value or ANY)

    def alert_context(self) -> Optional[str]:
        """Prompt shown beside the alert form, or None until a course is picked."""
        if self.state.course == ALL or self.target is None:
            return None
        return f"Get a text when a tee time opens at {self.state.course} on {self.target.iso}."

    def alert_request(
        self,
        phone: str,
        start_time: str,
        end_time: str,
        *,
        min_players: int = 0,
        holes: Optional[str] = None,
    ) -> AlertRequest:
        """Build an alert for the selected course and loaded date."""
        return AlertRequest(
            phone=phone,
            course=self.state.course if self.state.course != ALL else "",
            date=self.target.iso if self.target else "",
            start_time=start_time,
            end_time=end_time,
            min_players=min_players,
            holes=holes,
        )

    def _update(self, changed: str, **changes) -> FilterState:
        self.state = reconcile(self.inventory, replace(self.state, **changes), self._normalizer, changed)
        return self.state


class AlertBook:
    """Alerts belonging to one phone number."""

    def __init__(self, client: TeeTimeClient):
        self._client = client
        self.phone: str = ""
        self.alerts: List[AlertRecord] = []
        self.status: Optional[StatusMessage] = None

    async def lookup(self, phone: str) -> bool:
        phone = (phone or "").strip()
        if not phone:
            return False
        self.phone = phone
        return await self.refresh()

    async def refresh(self) -> bool:
        try:
            alerts = await self._client.fetch_alerts(self.phone)
        except CollaboratorError as exc:
            LOGGER.warning("session.alerts.failed", error=str(exc))
            self.status = StatusMessage(MSG_ALERTS_FAILED, is_error=True)
            return False
        self.alerts = alerts
        self.status = None
        return True

    async def create(self, request: AlertRequest) -> Optional[AlertRecord]:
        """Create an alert and report the outcome through ``status``."""
        try:
            alert = await self._client.create_alert(request)
        except AlertValidationError as exc:
            self.status = StatusMessage(str(exc), is_error=True, is_validation=True)
            return None
        except AlertRejectedError as exc:
            self.status = StatusMessage(str(exc) or MSG_CREATE_FAILED, is_error=True)
            return None
        except CollaboratorError as exc:
            LOGGER.warning("session.alerts.create_failed", error=str(exc))
            self.status = StatusMessage(MSG_CREATE_FAILED, is_error=True)
            return None
        if alert.phone == self.phone:
            self.alerts = [*self.alerts, alert]
        self.status = StatusMessage(MSG_CREATED)
        return alert

    async def remove(self, alert_id: str) -> bool:
        try:
            await self._client.delete_alert(alert_id)
        except (AlertValidationError, CollaboratorError) as exc:
            LOGGER.warning("session.alerts.delete_failed", alert_id=alert_id, error=str(exc))
            self.status = StatusMessage(MSG_DELETE_FAILED, is_error=True)
            return False
        self.alerts = [alert for alert in self.alerts if alert.id != alert_id]
        self.status = None
        return True
