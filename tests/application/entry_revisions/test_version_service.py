"""
バージョン履歴サービスのテスト
"""

from datetime import datetime, timezone

import pytest

from bounded_contexts.entry_revisions.domain.entities import LiveEntry
from bounded_contexts.entry_revisions.domain.exceptions import RevisionValidationError
from core.models.entry_revisions.models import EntryVersionRecord
from tests.helpers.entry_revision_fakes import FakeActor


ENTRY_ID = 200


def _entry(title="Release notes", **overrides) -> LiveEntry:
    values = dict(
        id=ENTRY_ID,
        section_id=10,
        locale="en",
        type_id=2,
        author_id=8,
        title=title,
        slug="release-notes",
        post_date=datetime(2024, 1, 15, tzinfo=timezone.utc),
        field_values={"body": f"{title} body"},
    )
    values.update(overrides)
    return LiveEntry(**values)


def _save_titles(version_service, *titles):
    for title in titles:
        assert version_service.save_version(_entry(title=title)) is True


def test_versions_are_numbered_sequentially(version_service):
    """バージョン番号は 1 から連番"""
    _save_titles(version_service, "v1", "v2", "v3")

    nums = [record.num for record in EntryVersionRecord.query.order_by(EntryVersionRecord.id).all()]
    assert nums == [1, 2, 3]


def test_numbering_is_per_locale(version_service):
    version_service.save_version(_entry(locale="en"))
    version_service.save_version(_entry(locale="en"))
    version_service.save_version(_entry(locale="ja"))

    record = EntryVersionRecord.query.filter_by(locale="ja").one()
    assert record.num == 1


def test_creator_is_actor_when_given(version_service):
    version_service.save_version(_entry(), actor=FakeActor(id=42))

    assert EntryVersionRecord.query.one().creator_id == 42


def test_creator_falls_back_to_author(version_service):
    version_service.save_version(_entry())

    assert EntryVersionRecord.query.one().creator_id == 8


def test_revision_notes_are_stored(version_service):
    version_service.save_version(_entry(revision_notes="Fixed typo"))

    version = version_service.get_version_by_id(EntryVersionRecord.query.one().id)
    assert version.notes == "Fixed typo"


def test_unsaved_entry_is_rejected(version_service):
    """未保存のエントリーはバージョンを作れない"""
    with pytest.raises(RevisionValidationError):
        version_service.save_version(_entry(id=None))

    assert EntryVersionRecord.query.count() == 0


def test_get_version_by_id_materializes_fields(version_service):
    version_service.save_version(_entry(title="Full"))
    record = EntryVersionRecord.query.one()

    version = version_service.get_version_by_id(record.id)

    assert version.version_id == record.id
    assert version.num == 1
    assert version.title == "Full"
    assert version.field_values == {"body": "Full body"}
    assert version.post_date == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert version.date_created is not None


def test_get_missing_version_returns_none(version_service):
    assert version_service.get_version_by_id(404) is None


def test_history_skips_current_version(version_service):
    """最新のバージョンは履歴一覧に含めない"""
    _save_titles(version_service, "v1", "v2", "v3")

    history = version_service.get_versions_by_entry_id(ENTRY_ID)

    assert [version.num for version in history] == [2, 1]
    assert [version.title for version in history] == ["v2", "v1"]
    assert all(version.field_values == {} for version in history)


def test_history_respects_explicit_limit(version_service):
    _save_titles(version_service, "v1", "v2", "v3", "v4")

    history = version_service.get_versions_by_entry_id(ENTRY_ID, limit=2)

    assert [version.num for version in history] == [3, 2]


def test_history_uses_configured_limit(app, version_service):
    _save_titles(version_service, "v1", "v2", "v3", "v4")
    app.config["ENTRY_REVISIONS_HISTORY_LIMIT"] = 1

    history = version_service.get_versions_by_entry_id(ENTRY_ID)

    assert [version.num for version in history] == [3]


def test_history_with_single_version_is_empty(version_service):
    _save_titles(version_service, "only")

    assert version_service.get_versions_by_entry_id(ENTRY_ID) == []


def test_history_filters_by_locale(version_service):
    version_service.save_version(_entry(locale="ja", title="ja1"))
    version_service.save_version(_entry(locale="ja", title="ja2"))
    version_service.save_version(_entry(locale="en", title="en1"))

    assert [v.title for v in version_service.get_versions_by_entry_id(ENTRY_ID, "ja")] == ["ja1"]
    assert version_service.get_versions_by_entry_id(ENTRY_ID) == []


def test_get_version_by_offset_counts_from_newest(version_service):
    _save_titles(version_service, "v1", "v2", "v3")

    assert version_service.get_version_by_offset(ENTRY_ID).title == "v3"
    assert version_service.get_version_by_offset(ENTRY_ID, 2).title == "v1"
    assert version_service.get_version_by_offset(ENTRY_ID, 3) is None
