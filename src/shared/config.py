"""Configuration management for World Data Explorer."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # Project paths
    ROOT_DIR = Path(__file__).parent.parent.parent
    LOGS_DIR = ROOT_DIR / "logs"

    # Upstream sources
    REST_COUNTRIES_URL: str = os.getenv(
        "REST_COUNTRIES_URL",
        "https://restcountries.com/v3.1/all?fields=name,cca2,cca3,capital,region,population,currencies",
    )
    WORLD_BANK_GDP_URL: str = os.getenv(
        "WORLD_BANK_GDP_URL",
        "https://api.worldbank.org/v2/country/all/indicator/NY.GDP.MKTP.CD?format=json&per_page=20000",
    )
    BOUNDARIES_URL: str = os.getenv(
        "BOUNDARIES_URL",
        "https://raw.githubusercontent.com/nvkelso/natural-earth-vector/master/geojson/"
        "ne_110m_admin_0_countries.geojson",
    )

    # HTTP settings
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

    # Dashboard settings
    MAP_BACKEND: str = os.getenv("MAP_BACKEND", "plotly")
    MAP_BACKENDS: tuple[str, ...] = ("plotly", "folium")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if cls.MAP_BACKEND not in cls.MAP_BACKENDS:
            raise ValueError(
                f"MAP_BACKEND must be one of {', '.join(cls.MAP_BACKENDS)}, got '{cls.MAP_BACKEND}'"
            )
        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

