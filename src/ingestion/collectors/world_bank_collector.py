"""World Bank GDP collector.

Fetches the ``NY.GDP.MKTP.CD`` indicator (GDP, current US$) for all
countries in a single page. The v2 API answers with a two-element array
``[metadata, entries]``; each entry looks like::

    {"country": {"id": "US", "value": "United States"},
     "countryiso3code": "USA", "date": "2023", "value": 27360935000000.0}

Entries for one country are ordered most-recent-year-first.

API Documentation: https://datahelpdesk.worldbank.org/knowledgebase/articles/889392
"""

from pathlib import Path
from typing import Any

from src.ingestion.collectors.base_collector import BaseCollector
from src.shared.config import Config
from src.shared.exceptions import DataSourceError


class WorldBankCollector(BaseCollector):
    """Collector for a World Bank v2 indicator time series."""

    SOURCE_NAME = "worldbank"

    def __init__(
        self,
        url: str | None = None,
        timeout: int | None = None,
        log_file: Path | None = None,
    ) -> None:
        super().__init__(
            url=url or Config.WORLD_BANK_GDP_URL,
            timeout=timeout,
            log_file=log_file,
        )
        self.logger.info("WorldBankCollector initialized, url=%s", self.url)

    def collect(self) -> list[dict[str, Any]]:
        """Fetch the raw indicator entries.

        Returns:
            The entry list (second element of the payload). Empty when the
            payload carries no entry list, which the API does for an
            empty result page.

        Raises:
            DataSourceError: If the request fails or the body is not an array.
        """
        payload = self.fetch_json()
        if not isinstance(payload, list):
            raise DataSourceError(self.SOURCE_NAME, "expected a [metadata, entries] array")

        entries = payload[1] if len(payload) > 1 and isinstance(payload[1], list) else []
        if not entries:
            self.logger.warning("No indicator entries in World Bank payload")

        self.logger.info("Received %d indicator entries", len(entries))
        return entries
