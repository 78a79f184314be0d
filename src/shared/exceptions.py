"""Exceptions shared across the ingestion and dashboard layers."""


class DataSourceError(Exception):
    """An upstream data source could not deliver its dataset.

    Raised on a non-success HTTP status, a transport failure or a body that
    is not the expected JSON shape. Aggregation treats it as fatal.
    """

    def __init__(self, source: str, message: str, status_code: int | None = None) -> None:
        self.source = source
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"[{source}] {message}{detail}")
