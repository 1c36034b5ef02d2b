# tests/test_schemas.py
"""Tests for shared pagination schemas."""

import pytest
from pydantic import ValidationError

from snsserver.core.settings import settings
from snsserver.schemas.common import PageRequest


def test_page_request_defaults_follow_settings() -> None:
    request = PageRequest()

    assert request.page == 0
    assert request.size == settings.default_page_size


def test_page_request_accepts_max_page_size() -> None:
    assert PageRequest(size=settings.max_page_size).size == settings.max_page_size


def test_page_request_rejects_size_above_max() -> None:
    with pytest.raises(ValidationError):
        PageRequest(size=settings.max_page_size + 1)


def test_page_request_tracks_raised_max_page_size(monkeypatch) -> None:
    """Raising MAX_PAGE_SIZE widens the accepted range."""
    monkeypatch.setattr(settings, "max_page_size", 250)

    assert PageRequest(size=200).size == 200
