from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from plugin_skeleton.db.session import get_session
from plugin_skeleton.domain.contact_service import submit_contact_message
from plugin_skeleton.options.errors import SubmissionRejected
from plugin_skeleton.options.groups import CONTACT_FORM
from plugin_skeleton.options.sanitize import sanitize
from plugin_skeleton.ui.routes_admin import form_rows, templates

router = APIRouter(tags=["contact"])


def _render_form(request: Request, values: dict, *, errors=None, sent: bool = False, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "contact.html",
        {
            "title": CONTACT_FORM.title,
            "group": CONTACT_FORM,
            "rows": form_rows(CONTACT_FORM, values, errors or []),
            "errors": errors or [],
            "sent": sent,
        },
        status_code=status_code,
    )


@router.get("/contact", response_class=HTMLResponse)
async def contact_form(request: Request):
    return _render_form(request, CONTACT_FORM.defaults())


@router.post("/contact", response_class=HTMLResponse)
async def contact_submit(request: Request, session: AsyncSession = Depends(get_session)):
    form = await request.form()
    submission = {k: v for k, v in form.items() if isinstance(v, str)}

    try:
        await submit_contact_message(session, submission)
    except SubmissionRejected as e:
        return _render_form(request, sanitize(CONTACT_FORM, submission), errors=e.errors, status_code=422)

    return _render_form(request, CONTACT_FORM.defaults(), sent=True)
