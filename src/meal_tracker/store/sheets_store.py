"""Google Forms / Sheets backed store. Writes go through the form, reads come from the CSV export."""

import asyncio
import logging

import httpx

from meal_tracker.config import get_form_fields, get_settings
from meal_tracker.exceptions import StoreReadError
from meal_tracker.models import MealRecord, SubmissionResult, SubmissionStatus
from meal_tracker.store.base import MealStore
from meal_tracker.store.csv_export import parse_export
from meal_tracker.store.dates import day_key, parse_day

logger = logging.getLogger(__name__)


def to_form_date(text: str) -> str:
    """Normalize date text to YYYY-MM-DD for the form's date field. Unknown shapes pass through."""
    day = parse_day(text)
    if day:
        return day
    logger.warning("Unrecognized date %r, submitting as entered", text)
    return text.strip()


class SheetsMealStore(MealStore):
    """Store backed by a published Google Form and its response sheet."""

    def __init__(
        self,
        *,
        sheet_id: str | None = None,
        form_id: str | None = None,
        sheet_name: str | None = None,
        form_fields: dict[str, str] | None = None,
        submit_delay: float | None = None,
        confirm_writes: bool | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._sheet_id = sheet_id or settings.sheet_id
        self._form_id = form_id or settings.form_id
        self._sheet_name = sheet_name or settings.sheet_name
        self._fields = form_fields or get_form_fields(
            str(settings.config_dir) if settings.config_dir else ""
        )
        self._delay = settings.submit_delay_seconds if submit_delay is None else submit_delay
        self._confirm = settings.confirm_writes if confirm_writes is None else confirm_writes
        self._timeout = timeout or settings.request_timeout_seconds
        self._forms_base = settings.forms_base_url.rstrip("/")
        self._sheets_base = settings.sheets_base_url.rstrip("/")
        self._transport = transport

    @property
    def form_url(self) -> str:
        return f"{self._forms_base}/forms/d/e/{self._form_id}/formResponse"

    @property
    def export_url(self) -> str:
        return f"{self._sheets_base}/spreadsheets/d/{self._sheet_id}/gviz/tq"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=self._timeout)

    def form_data(self, record: MealRecord) -> dict[str, str]:
        """Record encoded as form entry fields."""
        return {
            self._fields["date"]: to_form_date(record.date),
            self._fields["lunch"]: str(record.lunch),
            self._fields["dinner"]: str(record.dinner),
        }

    async def submit(self, record: MealRecord) -> SubmissionResult:
        """
        Post the record to the form, then wait for the sheet to catch up.
        With confirm_writes, CONFIRMED only when the export gains a matching
        row compared to a read taken before posting.
        """
        before = await self._count_matching(record) if self._confirm else None

        data = self.form_data(record)
        logger.info("Submitting meal entry: %s", data)
        try:
            async with self._client() as client:
                resp = await client.post(self.form_url, data=data)
        except httpx.HTTPError as e:
            logger.exception("Meal entry submission error: %s", e)
            return SubmissionResult.failed(str(e))
        if resp.status_code >= 400:
            logger.error(
                "Meal entry submission failed: %s %s",
                resp.status_code,
                resp.text[:200],
            )
            return SubmissionResult.failed(f"form responded {resp.status_code}")

        await asyncio.sleep(self._delay)

        if before is not None:
            after = await self._count_matching(record)
            if after is not None and after > before:
                return SubmissionResult(status=SubmissionStatus.CONFIRMED)
            logger.warning("Submitted entry for %s not yet visible in export", record.date)
        return SubmissionResult(status=SubmissionStatus.SENT)

    async def _count_matching(self, record: MealRecord) -> int | None:
        """Rows equal to record, dates compared by day. None when the export is unreadable."""
        try:
            rows = parse_export(await self.fetch_export())
        except StoreReadError as e:
            logger.warning("Cannot check export for %s: %s", record.date, e)
            return None
        wanted = day_key(record.date)
        return sum(
            1
            for r in rows
            if day_key(r.date) == wanted and r.lunch == record.lunch and r.dinner == record.dinner
        )

    async def fetch_export(self) -> str:
        """Raw CSV export text. Raises StoreReadError."""
        params = {"tqx": "out:csv", "sheet": self._sheet_name}
        try:
            async with self._client() as client:
                resp = await client.get(self.export_url, params=params)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise StoreReadError(f"Failed to fetch entries: {e}") from e
        return resp.text

    async def list(self) -> list[MealRecord]:
        try:
            text = await self.fetch_export()
            logger.debug("Fetched export: %s", text)
            return parse_export(text)
        except StoreReadError as e:
            logger.error("Error fetching meal entries: %s", e)
            return []
