"""Abstract base class for the upstream JSON source collectors.

Collectors are responsible ONLY for fetching raw payloads:
- One HTTP GET per dataset, with the configured timeout
- No retries; any failure surfaces immediately as DataSourceError
- Payloads are returned as decoded JSON, untouched

Reshaping and joining is handled by the country merger preprocessor.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import requests

from src.shared.config import Config
from src.shared.exceptions import DataSourceError
from src.shared.utils import setup_logger


class BaseCollector(ABC):
    """Base class for all data collectors.

    Subclasses must define:
        SOURCE_NAME (str): identifier used in logs and errors (e.g. "restcountries").

    Subclasses must implement:
        collect(): fetch and return the raw entries of the source.

    fetch_json() maps every HTTP failure to DataSourceError.
    """

    SOURCE_NAME: str  # e.g. "restcountries", "worldbank"
    USER_AGENT = "world-data-explorer/0.1"
    HEALTH_CHECK_TIMEOUT = 10

    def __init__(
        self,
        url: str,
        timeout: int | None = None,
        log_file: Path | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            url: Endpoint of the dataset.
            timeout: Request timeout in seconds (defaults to Config.REQUEST_TIMEOUT).
            log_file: Optional path for file-based logging.
        """
        self.url = url
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self.logger = setup_logger(self.__class__.__name__, log_file, Config.LOG_LEVEL)
        self._session = self._create_session()

    @abstractmethod
    def collect(self) -> list[dict[str, Any]]:
        """Fetch all entries from the source.

        Returns:
            Raw entries as decoded from the JSON payload.

        Raises:
            DataSourceError: If the source fails or returns an unexpected shape.
        """
        ...

    def health_check(self) -> bool:
        """Verify the data source is reachable and responding.

        Returns:
            True if the source is available, False otherwise.
        """
        try:
            return self._session.get(self.url, timeout=self.HEALTH_CHECK_TIMEOUT).ok
        except requests.exceptions.RequestException as e:
            self.logger.error("%s health check failed: %s", self.SOURCE_NAME, e)
            return False

    # ------------------------------------------------------------------
    # HTTP layer
    # ------------------------------------------------------------------

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({"User-Agent": self.USER_AGENT, "Accept": "application/json"})
        return session

    def fetch_json(self, url: str | None = None) -> Any:
        """GET a JSON document.

        Args:
            url: Target URL (defaults to the collector's endpoint).

        Returns:
            The decoded JSON body.

        Raises:
            DataSourceError: Non-success status, network failure or invalid JSON.
        """
        target = url or self.url
        self.logger.debug("GET %s", target)

        try:
            response = self._session.get(target, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            self.logger.error("%s returned HTTP %s", self.SOURCE_NAME, status)
            raise DataSourceError(
                self.SOURCE_NAME, "upstream returned a non-success status", status
            ) from exc
        except requests.exceptions.RequestException as exc:
            self.logger.error("Request to %s failed: %s", self.SOURCE_NAME, exc)
            raise DataSourceError(self.SOURCE_NAME, f"request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            self.logger.error("Invalid JSON from %s: %s", self.SOURCE_NAME, exc)
            raise DataSourceError(self.SOURCE_NAME, "response body is not valid JSON") from exc
