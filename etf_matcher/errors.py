from __future__ import annotations


class ManifestClientError(Exception):
    """Base class for everything this client raises."""


class TransportError(ManifestClientError):
    def __init__(self, url: str, reason: str, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"Request to {url} failed: {reason}")


class ParseError(ManifestClientError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Manifest at {source} is invalid: {reason}")


class NotFoundError(ManifestClientError, KeyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Config for key '{key}' not found")

    def __str__(self) -> str:
        return self.args[0]
