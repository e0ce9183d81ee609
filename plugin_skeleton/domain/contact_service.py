from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plugin_skeleton.db.models import ContactMessage
from plugin_skeleton.options.errors import SubmissionRejected
from plugin_skeleton.options.groups import CONTACT_FORM
from plugin_skeleton.options.sanitize import sanitize, validate
from plugin_skeleton.options.schema import RawSubmission

log = structlog.get_logger(__name__)


async def submit_contact_message(session: AsyncSession, submission: RawSubmission) -> ContactMessage:
    errors = validate(CONTACT_FORM, submission)
    if errors:
        log.info("contact_message_rejected", errors=[e.as_dict() for e in errors])
        raise SubmissionRejected(CONTACT_FORM.id, errors)

    cleaned = sanitize(CONTACT_FORM, submission)
    message = ContactMessage(
        email=cleaned["email"],
        subject=cleaned["subject"],
        body=cleaned["body"],
    )
    session.add(message)
    await session.commit()
    await session.refresh(message)

    # no PII in logs
    log.info("contact_message_stored", message_id=message.id)
    return message
