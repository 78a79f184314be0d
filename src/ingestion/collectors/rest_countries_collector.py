"""REST Countries collector.

Fetches country metadata: common name, ISO alpha-2/alpha-3 codes, capitals,
region, population and currencies.

API Documentation: https://restcountries.com/

Example:
    >>> from src.ingestion.collectors.rest_countries_collector import RestCountriesCollector
    >>>
    >>> collector = RestCountriesCollector()
    >>> countries = collector.collect()
    >>> countries[0]["cca3"]
    'AFG'
"""

from pathlib import Path
from typing import Any

from src.ingestion.collectors.base_collector import BaseCollector
from src.shared.config import Config
from src.shared.exceptions import DataSourceError


class RestCountriesCollector(BaseCollector):
    """Collector for the REST Countries v3.1 ``/all`` endpoint.

    The endpoint is queried with a ``fields`` filter, so each entry only
    carries ``name``, ``cca2``, ``cca3``, ``capital``, ``region``,
    ``population`` and ``currencies``.
    """

    SOURCE_NAME = "restcountries"

    def __init__(
        self,
        url: str | None = None,
        timeout: int | None = None,
        log_file: Path | None = None,
    ) -> None:
        super().__init__(
            url=url or Config.REST_COUNTRIES_URL,
            timeout=timeout,
            log_file=log_file,
        )
        self.logger.info("RestCountriesCollector initialized, url=%s", self.url)

    def collect(self) -> list[dict[str, Any]]:
        """Fetch the raw country metadata entries.

        Returns:
            List of country objects as returned by the API.

        Raises:
            DataSourceError: If the request fails or the body is not a JSON array.
        """
        payload = self.fetch_json()
        if not isinstance(payload, list):
            raise DataSourceError(self.SOURCE_NAME, "expected a JSON array of countries")

        self.logger.info("Received %d country entries", len(payload))
        return payload
