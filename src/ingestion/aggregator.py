"""Country aggregation: fetch both sources concurrently, then merge.

Example:
    >>> from src.ingestion.aggregator import fetch_countries
    >>> records = fetch_countries()
    >>> records[0].name
    'India'
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from src.domain.models import CountryRecord
from src.ingestion.collectors.base_collector import BaseCollector
from src.ingestion.collectors.rest_countries_collector import RestCountriesCollector
from src.ingestion.collectors.world_bank_collector import WorldBankCollector
from src.ingestion.preprocessors.country_merger import merge_countries
from src.shared.config import Config
from src.shared.exceptions import DataSourceError
from src.shared.utils import setup_logger


class CountryAggregator:
    """Run the metadata and GDP collectors in parallel and join their output.

    Both fetches must succeed: the first DataSourceError aborts the whole
    aggregation and no partial record set is returned. There are no retries.
    """

    def __init__(
        self,
        countries_collector: BaseCollector | None = None,
        gdp_collector: BaseCollector | None = None,
        log_file: Path | None = None,
    ) -> None:
        self.countries_collector = countries_collector or RestCountriesCollector()
        self.gdp_collector = gdp_collector or WorldBankCollector()
        self.logger = setup_logger(self.__class__.__name__, log_file, Config.LOG_LEVEL)

    def fetch(self) -> tuple[CountryRecord, ...]:
        """Fetch both datasets and return the merged records.

        Returns:
            Records sorted by population, descending.

        Raises:
            DataSourceError: If either source fails.
        """
        collectors = {
            "countries": self.countries_collector,
            "gdp": self.gdp_collector,
        }
        self.logger.info("Fetching %d sources in parallel", len(collectors))

        results = {}
        with ThreadPoolExecutor(max_workers=len(collectors)) as executor:
            future_to_name = {
                executor.submit(collector.collect): name for name, collector in collectors.items()
            }
            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    results[name] = future.result()
                except DataSourceError as e:
                    self.logger.error("Aggregation aborted, %s source failed: %s", name, e)
                    raise

        records = merge_countries(results["countries"], results["gdp"], self.logger)
        self.logger.info("Aggregated %d country records", len(records))
        return records


def fetch_countries() -> tuple[CountryRecord, ...]:
    """Fetch and merge the country record set with the default collectors."""
    return CountryAggregator().fetch()
