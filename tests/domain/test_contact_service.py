"""Tests for storing contact form submissions."""

import asyncio

import pytest
from sqlalchemy import select

from plugin_skeleton.db.models import ContactMessage
from plugin_skeleton.db.session import build_engine, build_sessionmaker, create_tables
from plugin_skeleton.domain.contact_service import submit_contact_message
from plugin_skeleton.options.errors import SubmissionRejected


def run_with_session(database_url: str, fn):
    async def scenario():
        engine = build_engine(database_url)
        try:
            await create_tables(engine)
            async with build_sessionmaker(engine)() as session:
                return await fn(session)
        finally:
            await engine.dispose()

    return asyncio.run(scenario())


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'contact.db'}"


def test_valid_message_is_stored_sanitized(database_url: str) -> None:
    async def fn(session):
        msg = await submit_contact_message(
            session,
            {
                "email": " jane@example.com ",
                "subject": "<b>Question</b>",
                "body": "Line one\r\n<script>x</script>Line two",
                "form-submitted": "Submit",
            },
        )
        res = await session.execute(select(ContactMessage))
        return msg, res.scalars().all()

    msg, rows = run_with_session(database_url, fn)

    assert msg.id is not None
    assert (msg.email, msg.subject, msg.body) == ("jane@example.com", "Question", "Line one\nLine two")
    assert len(rows) == 1


def test_invalid_message_is_not_stored(database_url: str) -> None:
    async def fn(session):
        with pytest.raises(SubmissionRejected) as exc_info:
            await submit_contact_message(session, {"email": "nope", "subject": "", "body": "x"})
        res = await session.execute(select(ContactMessage))
        return exc_info.value, res.scalars().all()

    exc, rows = run_with_session(database_url, fn)

    assert [(e.field, e.reason) for e in exc.errors] == [("email", "invalid_email"), ("subject", "required")]
    assert rows == []
