"""Tests for i18n preloading and caching functionality."""

from typing import Mapping

import pytest

from app.i18n import (
    RESOURCE_TYPES,
    SUPPORTED_LOCALES,
    clear_i18n_cache,
    get_i18n_resource,
    preload_i18n_resources,
)


def test_preload_loads_every_bundled_resource():
    stats = preload_i18n_resources()
    assert stats["loaded_count"] == len(RESOURCE_TYPES) * len(SUPPORTED_LOCALES)
    assert stats["failed_count"] == 0
    assert stats["cache_size"] == stats["loaded_count"]


def test_preload_is_idempotent():
    preload_i18n_resources()
    again = preload_i18n_resources()
    assert again["loaded_count"] == 0


def test_repeated_lookups_reuse_the_same_mapping():
    preload_i18n_resources()
    first = get_i18n_resource("competitiveness", "ko")
    second = get_i18n_resource("competitiveness", "ko")
    assert first is second
    assert isinstance(first, Mapping)


def test_resources_are_read_only():
    resource = get_i18n_resource("competitiveness", "en")
    with pytest.raises(TypeError):
        resource["band_top"] = "changed"  # type: ignore[index]


def test_korean_phrases():
    resource = get_i18n_resource("competitiveness", "ko")
    assert resource["band_top"].format(pct=5) == "상위 5%"
    assert resource["band_bottom"].format(pct=70) == "하위 70%"


def test_unknown_locale_falls_back_to_english():
    resource = get_i18n_resource("recommendations", "ja")
    assert resource["strengthen"]["gpa"] == "GPA"
    assert resource["category"]["reach"] == "Reach"


def test_unknown_resource_raises_key_error():
    with pytest.raises(KeyError):
        get_i18n_resource("does_not_exist", "en")


def test_clear_cache_allows_reload():
    preload_i18n_resources()
    clear_i18n_cache()
    stats = preload_i18n_resources(resource_types=("competitiveness",), locales=("en",))
    assert stats["loaded_count"] == 1
