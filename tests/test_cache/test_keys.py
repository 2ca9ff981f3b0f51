"""Tests for cache-key derivation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import pytest

from contentful_core.cache.keys import extract_space_id, make_cache_key
from contentful_core.exceptions import ConfigError, InvalidArgumentError

BASE = "https://cdn.contentful.com/spaces/cfexampleapi/"


class TestExtractSpaceId:
    def test_simple(self) -> None:
        assert extract_space_id(BASE) == "cfexampleapi"

    def test_with_environment(self) -> None:
        uri = "https://cdn.contentful.com/spaces/abc123/environments/master/"
        assert extract_space_id(uri) == "abc123"

    @pytest.mark.parametrize(
        "uri",
        [
            "https://cdn.contentful.com/",
            "https://cdn.contentful.com/spaces/abc123",
            "https://api.contentful.com/organizations/org1/",
        ],
    )
    def test_missing_segment_raises(self, uri: str) -> None:
        with pytest.raises(ConfigError):
            extract_space_id(uri)


class TestMakeCacheKey:
    def test_prefixed_with_space(self) -> None:
        key = make_cache_key("cfexampleapi", BASE, "entries", None)
        assert key.startswith("cfexampleapi_")
        assert len(key) == len("cfexampleapi_") + 64

    def test_deterministic(self) -> None:
        query = {"limit": 5, "skip": 10}
        assert make_cache_key("s", BASE, "entries", query) == make_cache_key(
            "s", BASE, "entries", dict(query)
        )

    def test_key_order_does_not_matter(self) -> None:
        assert make_cache_key("s", BASE, "entries", {"a": 1, "b": 2}) == make_cache_key(
            "s", BASE, "entries", {"b": 2, "a": 1}
        )

    @pytest.mark.parametrize(
        "other",
        [
            {"limit": 6, "skip": 10},
            {"limit": 5},
            {"limit": 5, "skip": 10, "order": "sys.id"},
            "limit=5&skip=10",
            None,
        ],
    )
    def test_different_queries_differ(self, other) -> None:
        base_key = make_cache_key("s", BASE, "entries", {"limit": 5, "skip": 10})
        assert make_cache_key("s", BASE, "entries", other) != base_key

    def test_path_and_base_uri_participate(self) -> None:
        key = make_cache_key("s", BASE, "entries", None)
        assert make_cache_key("s", BASE, "assets", None) != key
        assert make_cache_key("s", BASE.replace("cdn", "preview"), "entries", None) != key

    @pytest.mark.parametrize(
        "same",
        [
            {"limit": "5", "skip": "10"},
            {"skip": 10, "limit": 5, "include": None},
            MappingProxyType({"skip": 10, "limit": 5}),
        ],
    )
    def test_same_wire_query_same_key(self, same) -> None:
        base_key = make_cache_key("s", BASE, "entries", {"limit": 5, "skip": 10})
        assert make_cache_key("s", BASE, "entries", same) == base_key

    def test_mapping_proxies_in_any_order(self) -> None:
        first = MappingProxyType({"a": 1, "b": 2})
        second = MappingProxyType({"b": 2, "a": 1})
        assert make_cache_key("s", BASE, "entries", first) == make_cache_key(
            "s", BASE, "entries", second
        )

    def test_custom_mapping_hashes_its_items(self) -> None:
        class Params(Mapping):
            def __init__(self, **items) -> None:
                self._items = items

            def __getitem__(self, key):
                return self._items[key]

            def __iter__(self):
                return iter(self._items)

            def __len__(self) -> int:
                return len(self._items)

        assert make_cache_key("s", BASE, "entries", Params(limit=5)) == make_cache_key(
            "s", BASE, "entries", {"limit": 5}
        )

    def test_non_string_names(self) -> None:
        key = make_cache_key("s", BASE, "entries", {1: "x", "limit": 5})
        assert key == make_cache_key("s", BASE, "entries", {"limit": 5, "1": "x"})

    def test_repeated_values_keep_their_order(self) -> None:
        assert make_cache_key("s", BASE, "entries", {"order": ["a", "b"]}) != make_cache_key(
            "s", BASE, "entries", {"order": ["b", "a"]}
        )

    def test_empty_query_is_no_query(self) -> None:
        key = make_cache_key("s", BASE, "entries", None)
        assert make_cache_key("s", BASE, "entries", {}) == key
        assert make_cache_key("s", BASE, "entries", "") == key

    def test_leading_slash_ignored(self) -> None:
        assert make_cache_key("s", BASE, "/entries", None) == make_cache_key(
            "s", BASE, "entries", None
        )

    def test_invalid_query_type(self) -> None:
        with pytest.raises(InvalidArgumentError):
            make_cache_key("s", BASE, "entries", 42)  # type: ignore[arg-type]
