import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from bounded_contexts.entry_revisions.domain.entities import Section, SectionType  # noqa: E402
from bounded_contexts.entry_revisions.domain.ports import FieldDefinition  # noqa: E402
from bounded_contexts.entry_revisions.domain.snapshot import SnapshotCodec  # noqa: E402
from tests.helpers.entry_revision_fakes import (  # noqa: E402
    FakeEntryPipeline,
    FakeFieldRegistry,
    FakeLocaleProvider,
    FakeSectionProvider,
    HOMEPAGE_SECTION_ID,
    NEWS_SECTION_ID,
    RecordingEventSink,
)


@pytest.fixture
def app_context():
    """インメモリDBを使うアプリケーションコンテキストを提供するfixture"""
    from tests.config import TestConfig
    from webapp import create_app
    from webapp.extensions import db

    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app(app_context):
    return app_context


@pytest.fixture
def db_session(app):
    from webapp.extensions import db

    return db.session


@pytest.fixture
def field_registry():
    return FakeFieldRegistry([
        FieldDefinition(id=1, handle="body"),
        FieldDefinition(id=2, handle="summary"),
        FieldDefinition(id=3, handle="heroImage"),
    ])


@pytest.fixture
def codec(field_registry):
    return SnapshotCodec(field_registry)


@pytest.fixture
def event_sink():
    return RecordingEventSink()


@pytest.fixture
def locale_provider():
    return FakeLocaleProvider("en")


@pytest.fixture
def sections():
    return FakeSectionProvider([
        Section(id=NEWS_SECTION_ID, name="News", type=SectionType.CHANNEL),
        Section(id=HOMEPAGE_SECTION_ID, name="Homepage", type=SectionType.SINGLE),
    ])


@pytest.fixture
def draft_service(app, codec, event_sink, locale_provider):
    from bounded_contexts.entry_revisions.application.drafts import EntryDraftService

    return EntryDraftService(codec, locale_provider=locale_provider, events=event_sink)


@pytest.fixture
def version_service(app, codec, locale_provider):
    from bounded_contexts.entry_revisions.application.versions import EntryVersionService

    return EntryVersionService(codec, locale_provider=locale_provider)


@pytest.fixture
def pipeline(version_service):
    return FakeEntryPipeline(version_service)


@pytest.fixture
def promotion_service(pipeline, sections, draft_service, event_sink):
    from bounded_contexts.entry_revisions.application.promotion import EntryPromotionService

    return EntryPromotionService(pipeline, sections, draft_service, events=event_sink)
