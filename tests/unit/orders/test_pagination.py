"""Unit tests for listing pagination normalisation."""

from __future__ import annotations

import pytest

from modules.orders.pagination import PageRequest, normalize_page, parse_int_param

pytestmark = pytest.mark.unit


class TestNormalizePage:
    @pytest.mark.parametrize(
        ("page", "size", "expected"),
        [
            (0, -5, PageRequest(1, 10)),
            (-3, 0, PageRequest(1, 10)),
            (2, 25, PageRequest(2, 25)),
            (1, 1, PageRequest(1, 1)),
        ],
    )
    def test_normalisation(self, page, size, expected):
        assert normalize_page(page, size) == expected

    def test_size_clamped_to_maximum(self, settings):
        settings.MAX_PAGE_SIZE = 50
        assert normalize_page(1, 1000) == PageRequest(1, 50)

    def test_default_size_comes_from_settings(self, settings):
        settings.DEFAULT_PAGE_SIZE = 20
        assert normalize_page(1, 0).size == 20

    def test_offset(self):
        assert PageRequest(page=3, size=10).offset == 20


class TestParseIntParam:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("4", 4), ("-2", -2), ("abc", 0), ("", 0), (None, 0), ("2.5", 0)],
    )
    def test_parse(self, raw, expected):
        assert parse_int_param(raw) == expected
