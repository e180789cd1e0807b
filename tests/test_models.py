"""Tests for API payload models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from smashcast.models import EditorRecord, HosterRecord


def test_editor_record_keeps_unknown_fields() -> None:
    record = EditorRecord.model_validate({"user_name": "alice", "user_id": "7", "followers": "12"})

    assert record.user_name == "alice"
    assert record.user_id == "7"
    assert record.model_extra == {"followers": "12"}


def test_hoster_record_requires_user_name() -> None:
    with pytest.raises(ValidationError):
        HosterRecord.model_validate({"user_id": "1"})
