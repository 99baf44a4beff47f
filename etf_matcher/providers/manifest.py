"""Remote ticker vector manifest: fetch, parse and look up dataset configs."""

from __future__ import annotations

import logging
import tomllib

from pydantic import ValidationError

from etf_matcher.config.settings import settings
from etf_matcher.errors import NotFoundError, ParseError
from etf_matcher.providers.http import fetch_text
from etf_matcher.schemas.ticker_vector import ConfigMap, ManifestDocument, TickerVectorConfig

logger = logging.getLogger(__name__)


def manifest_url(base_url: str | None = None) -> str:
    return f"{settings.base_url if base_url is None else base_url}{settings.manifest_filename}"


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def parse_manifest(text: str, source: str = "<string>") -> ConfigMap:
    """Parse manifest TOML into a key-sorted ConfigMap.

    Either every entry validates or ParseError is raised; no partial map is
    ever returned.
    """
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(source, f"invalid TOML: {exc}") from exc

    try:
        document = ManifestDocument.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(source, _describe_validation_error(exc)) from exc

    entries = document.ticker_vector_config
    return {key: entries[key] for key in sorted(entries)}


def load_all_configs_from_url(url: str) -> ConfigMap:
    text = fetch_text(url)
    configs = parse_manifest(text, source=url)
    logger.info("Loaded %d ticker vector configs from %s", len(configs), url)
    return configs


def get_all_configs(base_url: str | None = None) -> ConfigMap:
    return load_all_configs_from_url(manifest_url(base_url))


def get_config_by_key(configs: ConfigMap, key: str) -> TickerVectorConfig | None:
    return configs.get(key)


def get_config_by_key_remote(key: str, base_url: str | None = None) -> TickerVectorConfig:
    configs = get_all_configs(base_url)
    config = get_config_by_key(configs, key)
    if config is None:
        raise NotFoundError(key)
    return config


get_all_etf_matcher_configs = get_all_configs
get_etf_matcher_config_by_key = get_config_by_key_remote
