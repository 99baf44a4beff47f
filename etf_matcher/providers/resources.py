from __future__ import annotations

import logging
from dataclasses import dataclass

from etf_matcher.config.settings import settings
from etf_matcher.providers.http import fetch_bytes
from etf_matcher.providers.manifest import get_config_by_key_remote

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class AbsoluteUrl:
    url: str

    def to_url(self, base_url: str | None = None) -> str:
        return self.url


@dataclass(frozen=True)
class RelativeFilename:
    filename: str

    def to_url(self, base_url: str | None = None) -> str:
        return resource_url(self.filename, base_url)


ResolvedReference = AbsoluteUrl | RelativeFilename


def resolve_reference(path_or_url: str) -> ResolvedReference:
    """Classify a dataset path as a full URL or a filename under the base URL.

    Only a literal, case-sensitive "http://" or "https://" prefix counts as a
    URL. Anything else, "ftp://" and "example.com/x" included, is a filename.
    """
    if path_or_url.startswith(_ABSOLUTE_PREFIXES):
        return AbsoluteUrl(path_or_url)
    return RelativeFilename(path_or_url)


def resource_url(filename: str, base_url: str | None = None) -> str:
    # Plain concatenation: no slash collapsing, no escaping.
    return f"{settings.base_url if base_url is None else base_url}{filename}"


def symbol_map_url(base_url: str | None = None) -> str:
    return resource_url(settings.symbol_map_filename, base_url)


def fetch_resource(path_or_url: str, base_url: str | None = None) -> bytes:
    target = resolve_reference(path_or_url).to_url(base_url)
    return fetch_bytes(target)


def fetch_symbol_map(base_url: str | None = None) -> bytes:
    return fetch_bytes(RelativeFilename(settings.symbol_map_filename).to_url(base_url))


def fetch_dataset_by_key(key: str, base_url: str | None = None) -> bytes:
    config = get_config_by_key_remote(key, base_url)
    logger.debug("Dataset %r resolves to %s", key, config.path)
    return fetch_resource(config.path, base_url)


get_ticker_vectors_collection_by_key = fetch_dataset_by_key
