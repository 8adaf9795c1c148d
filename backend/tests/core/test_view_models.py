"""View-model projection — pure mapping from entities to display records."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from chirp.core.view_models import (
    AuthorViewModel, CheepViewModel, as_utc,
    to_author_view_model, to_cheep_view_model,
)


def test_author_projection_keeps_name_and_email():
    author = SimpleNamespace(id=7, name="ada", email="ada@x.com")
    assert to_author_view_model(author) == AuthorViewModel("ada", "ada@x.com")


def test_cheep_projection_uses_given_author_name():
    ts = datetime(2023, 8, 1, 12, 0, tzinfo=timezone.utc)
    cheep = SimpleNamespace(id=3, author_id=7, text="hello", timestamp=ts)
    vm = to_cheep_view_model(cheep, "ada")
    assert vm == CheepViewModel(author="ada", text="hello", timestamp=ts, cheep_id=3)


def test_naive_timestamp_is_read_as_utc():
    cheep = SimpleNamespace(
        id=1, text="t", timestamp=datetime(1970, 1, 1, 0, 16, 40),
    )
    vm = to_cheep_view_model(cheep, "ada")
    assert vm.timestamp == datetime.fromtimestamp(1000, tz=timezone.utc)
    assert vm.timestamp.tzinfo is timezone.utc


def test_aware_timestamp_is_converted_to_utc():
    cet = timezone(timedelta(hours=1))
    value = datetime(2023, 8, 1, 13, 0, tzinfo=cet)
    converted = as_utc(value)
    assert converted == value
    assert converted.hour == 12
    assert converted.tzinfo is timezone.utc


def test_view_models_are_read_only():
    vm = AuthorViewModel("ada", "ada@x.com")
    with pytest.raises(FrozenInstanceError):
        vm.name = "bob"
