"""Localized phrase resources with preloading and locale fallback.

Resources live next to this module as ``{locale}_{resource_type}.yaml`` (or
``.json``). Lookups fall back ``ko -> en`` and finally to the default locale,
and every loaded resource is cached as an immutable mapping.

Usage:
    >>> from app.i18n import get_i18n_resource
    >>> phrases = get_i18n_resource("competitiveness", "ko")
    >>> phrases["band_top"].format(pct=5)
    '상위 5%'
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from threading import RLock
from types import MappingProxyType
from typing import Any, Callable, Mapping

import yaml

__all__ = [
    "SUPPORTED_LOCALES",
    "RESOURCE_TYPES",
    "preload_i18n_resources",
    "get_i18n_resource",
    "clear_i18n_cache",
]

logger = logging.getLogger(__name__)

_resource_cache: dict[tuple[str, str], Mapping[str, Any]] = {}
_cache_lock = RLock()

_LOCALE_FALLBACK: dict[str, list[str]] = {
    "en": ["en"],
    "ko": ["ko", "en"],
}
_DEFAULT_LOCALE = "en"
_RESOURCE_SUFFIXES: tuple[str, ...] = (".yaml", ".yml", ".json")

SUPPORTED_LOCALES: tuple[str, ...] = tuple(_LOCALE_FALLBACK)
RESOURCE_TYPES: tuple[str, ...] = ("competitiveness", "recommendations")


def _load_json_data(filepath: Path) -> Any:
    with open(filepath, "r", encoding="utf-8") as file_obj:
        return json.load(file_obj)


def _load_yaml_data(filepath: Path) -> Any:
    with open(filepath, "r", encoding="utf-8") as file_obj:
        return yaml.safe_load(file_obj)


_STRUCTURED_LOADERS: dict[str, Callable[[Path], Any]] = {
    ".json": _load_json_data,
    ".yaml": _load_yaml_data,
    ".yml": _load_yaml_data,
}


def _get_i18n_directory() -> Path:
    return Path(__file__).parent


def _load_structured_file(filepath: Path) -> Mapping[str, Any] | None:
    """Load a JSON/YAML resource, returning an immutable mapping when successful."""

    loader = _STRUCTURED_LOADERS.get(filepath.suffix.lower())
    if not loader:
        logger.debug("Unsupported i18n file suffix: %s", filepath.suffix)
        return None
    try:
        data = loader(filepath)
    except FileNotFoundError:
        logger.debug("i18n file not found: %s", filepath)
        return None
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        logger.warning("Failed to parse i18n file %s: %s", filepath, exc)
        return None

    if not isinstance(data, Mapping):
        logger.warning("i18n file %s must contain a mapping root", filepath)
        return None
    return MappingProxyType(dict(data))


def _load_resource_with_fallback(resource_type: str, locale: str) -> Mapping[str, Any] | None:
    i18n_dir = _get_i18n_directory()

    def _try_load(base_name: str) -> Mapping[str, Any] | None:
        for suffix in _RESOURCE_SUFFIXES:
            candidate = i18n_dir / f"{base_name}{suffix}"
            if candidate.exists():
                data = _load_structured_file(candidate)
                if data is not None:
                    logger.debug(
                        "Loaded i18n resource: type=%s file=%s", resource_type, candidate.name
                    )
                    return data
        return None

    fallback_locales = list(_LOCALE_FALLBACK.get(locale, [locale]))
    if _DEFAULT_LOCALE not in fallback_locales:
        fallback_locales.append(_DEFAULT_LOCALE)
    for fallback_locale in fallback_locales:
        resource = _try_load(f"{fallback_locale}_{resource_type}")
        if resource is not None:
            return resource

    logger.warning(
        "No i18n resource found: type=%s, locale=%s, fallbacks=%s",
        resource_type,
        locale,
        fallback_locales,
    )
    return None


def preload_i18n_resources(
    *,
    resource_types: tuple[str, ...] = RESOURCE_TYPES,
    locales: tuple[str, ...] = SUPPORTED_LOCALES,
) -> dict[str, int]:
    """Load resources into memory at startup; returns preload statistics."""

    loaded_count = 0
    failed_count = 0

    with _cache_lock:
        for resource_type in resource_types:
            for locale in locales:
                cache_key = (resource_type, locale)
                if cache_key in _resource_cache:
                    continue
                resource = _load_resource_with_fallback(resource_type, locale)
                if resource is not None:
                    _resource_cache[cache_key] = resource
                    loaded_count += 1
                else:
                    failed_count += 1

    logger.info(
        "i18n preload complete: loaded=%s, failed=%s, cache_size=%s",
        loaded_count,
        failed_count,
        len(_resource_cache),
    )
    return {
        "loaded_count": loaded_count,
        "failed_count": failed_count,
        "cache_size": len(_resource_cache),
    }


@lru_cache(maxsize=128)
def get_i18n_resource(resource_type: str, locale: str = _DEFAULT_LOCALE) -> Mapping[str, Any]:
    """Return a cached resource, loading on demand with locale fallback.

    Raises:
        KeyError: If the resource is missing even after fallback.
    """
    cache_key = (resource_type, locale)
    with _cache_lock:
        if cache_key in _resource_cache:
            return _resource_cache[cache_key]

    logger.info("i18n cache miss, loading on-demand: type=%s, locale=%s", resource_type, locale)
    resource = _load_resource_with_fallback(resource_type, locale)
    if resource is not None:
        with _cache_lock:
            _resource_cache[cache_key] = resource
        return resource

    raise KeyError(f"i18n resource not found: type={resource_type}, locale={locale}")


def clear_i18n_cache() -> None:
    """Clear the resource cache (used by tests)."""
    with _cache_lock:
        _resource_cache.clear()
    get_i18n_resource.cache_clear()
