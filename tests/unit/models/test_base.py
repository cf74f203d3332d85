"""Tests for contentpurge.models.base."""

from __future__ import annotations

import pytest

from contentpurge.models.base import PublishState, PurgeModel


class TestPublishState:
    """Publish state from version counters."""

    def test_never_published_is_draft(self) -> None:
        assert PublishState.from_versions(1, None) is PublishState.DRAFT

    def test_version_right_after_publish_is_published(self) -> None:
        assert PublishState.from_versions(4, 3) is PublishState.PUBLISHED

    @pytest.mark.parametrize("version", [5, 9])
    def test_edits_after_publish_are_changed(self, version: int) -> None:
        assert PublishState.from_versions(version, 3) is PublishState.CHANGED

    def test_str_values(self) -> None:
        assert PublishState("published") is PublishState.PUBLISHED
        assert PublishState.CHANGED == "changed"


class TestPurgeModel:
    """Shared model configuration."""

    def test_extra_keys_ignored(self) -> None:
        class Sample(PurgeModel):
            name: str

        sample = Sample(name="  x  ", unexpected=True)
        assert sample.name == "x"
        assert not hasattr(sample, "unexpected")
