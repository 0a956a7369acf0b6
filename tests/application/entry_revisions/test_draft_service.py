"""
ドラフトサービスのテスト
"""

import logging

import pytest

from bounded_contexts.entry_revisions.domain.entities import EntryDraft
from bounded_contexts.entry_revisions.domain.events import RevisionEventKind
from bounded_contexts.entry_revisions.domain.exceptions import DraftNotFoundError
from core.models.entry_revisions.models import EntryDraftRecord
from tests.helpers.entry_revision_fakes import FakeActor


ENTRY_ID = 100
SECTION_ID = 10


def _draft(**overrides) -> EntryDraft:
    values = dict(
        entry_id=ENTRY_ID,
        section_id=SECTION_ID,
        locale="en",
        creator_id=5,
        type_id=1,
        author_id=5,
        title="Spring launch",
        slug="spring-launch",
        field_values={"body": "Hello", "summary": None},
    )
    values.update(overrides)
    return EntryDraft(**values)


class TestSaveDraft:
    """save_draft のテスト"""

    def test_save_and_load_round_trip(self, draft_service):
        """保存したドラフトを ID で読み戻せる"""
        draft = _draft(name="Copy edits", revision_notes="Tighten intro")

        assert draft_service.save_draft(draft) is True
        assert draft.draft_id is not None
        assert draft.date_created is not None

        loaded = draft_service.get_draft_by_id(draft.draft_id)
        assert loaded is not None
        assert loaded.name == "Copy edits"
        assert loaded.notes == "Tighten intro"
        assert loaded.title == "Spring launch"
        assert loaded.slug == "spring-launch"
        assert loaded.creator_id == 5
        assert loaded.field_values == {"body": "Hello"}

    def test_unnamed_drafts_are_numbered(self, draft_service):
        """名前なしのドラフトは既存数 + 1 の番号で命名される"""
        first = _draft()
        second = _draft()

        assert draft_service.save_draft(first)
        assert draft_service.save_draft(second)

        assert first.name == "Draft 1"
        assert second.name == "Draft 2"

    def test_numbering_counts_only_same_locale(self, draft_service):
        draft_service.save_draft(_draft(locale="en"))

        other = _draft(locale="ja")
        assert draft_service.save_draft(other)

        assert other.name == "Draft 1"

    def test_update_overwrites_content_but_keeps_creator(self, draft_service):
        """更新時は内容を上書きし、作成者は変わらない"""
        draft = _draft(name="First")
        draft_service.save_draft(draft)
        draft_id = draft.draft_id

        draft.name = "Renamed"
        draft.title = "Updated title"
        draft.field_values = {"summary": "Short"}
        draft.creator_id = 99
        assert draft_service.save_draft(draft)

        loaded = draft_service.get_draft_by_id(draft_id)
        assert loaded.draft_id == draft_id
        assert loaded.name == "Renamed"
        assert loaded.title == "Updated title"
        assert loaded.field_values == {"summary": "Short"}
        assert loaded.creator_id == 5
        assert EntryDraftRecord.query.count() == 1

    def test_saved_event_reports_whether_draft_was_new(self, draft_service, event_sink):
        draft = _draft()
        draft_service.save_draft(draft)
        draft_service.save_draft(draft)

        assert event_sink.kinds() == [RevisionEventKind.DRAFT_SAVED, RevisionEventKind.DRAFT_SAVED]
        assert [event.is_new_draft for event in event_sink.events] == [True, False]
        assert event_sink.events[0].draft is draft

    def test_validation_failure_returns_false_with_errors(self, draft_service, event_sink):
        """検証エラー時は保存せず、エラーをドラフトに記録する"""
        draft = _draft(name="x" * 256)

        assert draft_service.save_draft(draft) is False
        assert "name" in draft.errors
        assert draft.draft_id is None
        assert EntryDraftRecord.query.count() == 0
        assert event_sink.events == []

    def test_failed_update_leaves_stored_draft_untouched(self, draft_service):
        draft = _draft(name="Stable")
        draft_service.save_draft(draft)

        draft.name = "y" * 300
        assert draft_service.save_draft(draft) is False

        loaded = draft_service.get_draft_by_id(draft.draft_id)
        assert loaded.name == "Stable"

    def test_errors_are_reset_on_each_save(self, draft_service):
        draft = _draft(name="z" * 300)
        draft_service.save_draft(draft)
        assert draft.has_errors()

        draft.name = "Valid"
        assert draft_service.save_draft(draft) is True
        assert draft.errors == {}

    def test_missing_creator_is_rejected(self, draft_service):
        draft = _draft(creator_id=None, name="Orphan")

        assert draft_service.save_draft(draft) is False
        assert "creator_id" in draft.errors

    def test_stale_draft_id_raises(self, draft_service):
        """存在しない ID のドラフトを保存すると例外"""
        draft = _draft(name="Ghost", draft_id=9999)

        with pytest.raises(DraftNotFoundError) as exc_info:
            draft_service.save_draft(draft)

        assert exc_info.value.draft_id == 9999
        assert "9999" in str(exc_info.value)


class TestDraftQueries:
    """ドラフト取得系のテスト"""

    def test_get_missing_draft_returns_none(self, draft_service):
        assert draft_service.get_draft_by_id(12345) is None

    def test_list_is_ordered_by_name_without_field_content(self, draft_service):
        for name in ("Charlie", "Alpha", "Bravo"):
            draft_service.save_draft(_draft(name=name))

        drafts = draft_service.get_drafts_by_entry_id(ENTRY_ID)

        assert [draft.name for draft in drafts] == ["Alpha", "Bravo", "Charlie"]
        assert all(draft.field_values == {} for draft in drafts)
        assert all(draft.title == "Spring launch" for draft in drafts)

    def test_list_defaults_to_primary_locale(self, draft_service, locale_provider):
        draft_service.save_draft(_draft(name="English", locale="en"))
        draft_service.save_draft(_draft(name="Japanese", locale="ja"))

        assert [d.name for d in draft_service.get_drafts_by_entry_id(ENTRY_ID)] == ["English"]
        assert [d.name for d in draft_service.get_drafts_by_entry_id(ENTRY_ID, "ja")] == ["Japanese"]

        locale_provider.locale = "ja"
        assert [d.name for d in draft_service.get_drafts_by_entry_id(ENTRY_ID)] == ["Japanese"]

    def test_list_for_other_entry_is_empty(self, draft_service):
        draft_service.save_draft(_draft(name="Mine"))

        assert draft_service.get_drafts_by_entry_id(ENTRY_ID + 1) == []

    def test_editable_drafts_are_filtered_by_actor(self, draft_service):
        """編集可能なドラフトのみ返す"""
        draft_service.save_draft(_draft(name="Own", creator_id=5))
        draft_service.save_draft(_draft(name="Peer", creator_id=6))

        owner = FakeActor(id=5)
        editor = FakeActor(id=7, permissions=frozenset({f"editPeerEntryDrafts:{SECTION_ID}"}))

        assert [d.name for d in draft_service.get_editable_drafts_by_entry_id(ENTRY_ID, actor=owner)] == ["Own"]
        assert [d.name for d in draft_service.get_editable_drafts_by_entry_id(ENTRY_ID, actor=editor)] == [
            "Own",
            "Peer",
        ]
        assert draft_service.get_editable_drafts_by_entry_id(ENTRY_ID, actor=None) == []

    def test_get_draft_by_offset_is_deprecated(self, draft_service, caplog):
        """オフセット取得は作成順で、非推奨の警告を出す"""
        draft_service.save_draft(_draft(name="Zulu"))
        draft_service.save_draft(_draft(name="Alpha"))

        with caplog.at_level(logging.WARNING, logger="entry_revisions"):
            first = draft_service.get_draft_by_offset(ENTRY_ID)
            second = draft_service.get_draft_by_offset(ENTRY_ID, 1)
            missing = draft_service.get_draft_by_offset(ENTRY_ID, 2)

        assert first.name == "Zulu"
        assert second.name == "Alpha"
        assert second.field_values == {"body": "Hello"}
        assert missing is None
        deprecations = [r for r in caplog.records if getattr(r, "event", None) == "entry_revisions.deprecated"]
        assert len(deprecations) == 3


class TestDeleteDraft:
    """delete_draft のテスト"""

    def test_delete_removes_draft_and_emits_events(self, draft_service, event_sink):
        draft = _draft(name="Doomed")
        draft_service.save_draft(draft)
        event_sink.events.clear()

        draft_service.delete_draft(draft)

        assert draft_service.get_draft_by_id(draft.draft_id) is None
        assert event_sink.kinds() == [
            RevisionEventKind.BEFORE_DRAFT_DELETED,
            RevisionEventKind.AFTER_DRAFT_DELETED,
        ]
        assert all(event.draft is draft for event in event_sink.events)

    def test_delete_unsaved_draft_only_emits_events(self, draft_service, event_sink):
        draft_service.save_draft(_draft(name="Keeper"))
        event_sink.events.clear()

        draft_service.delete_draft(_draft(name="Never saved"))

        assert EntryDraftRecord.query.count() == 1
        assert event_sink.kinds() == [
            RevisionEventKind.BEFORE_DRAFT_DELETED,
            RevisionEventKind.AFTER_DRAFT_DELETED,
        ]

    def test_delete_with_stale_id_raises(self, draft_service, event_sink):
        with pytest.raises(DraftNotFoundError):
            draft_service.delete_draft(_draft(name="Ghost", draft_id=4242))

        assert event_sink.events == []
