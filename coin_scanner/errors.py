"""Error taxonomy surfaced by the data sources and the controller."""

from __future__ import annotations


class CoinScannerError(Exception):
    """Base class for recoverable failures with a user-displayable message."""

    default_description = "Something went wrong."

    def __init__(self, description: str | None = None) -> None:
        self.description = description or self.default_description
        super().__init__(self.description)


class NetworkError(CoinScannerError):
    default_description = "No internet connection. Please check your network and try again."


class DecodingError(CoinScannerError):
    default_description = "Failed to decode the server response."


class StorageError(CoinScannerError):
    default_description = "Failed to read saved coins."
