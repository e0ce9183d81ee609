from __future__ import annotations

from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.templating import Jinja2Templates

from plugin_skeleton.db.session import get_session
from plugin_skeleton.domain.options_service import load_options, save_options
from plugin_skeleton.options.errors import FieldError, SubmissionRejected
from plugin_skeleton.options.registry import default_field_registry
from plugin_skeleton.options.sanitize import sanitize
from plugin_skeleton.options.schema import SanitizedOptions, SettingsGroup
from plugin_skeleton.options.store import SqlOptionsStore

router = APIRouter(prefix="/admin", tags=["admin"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

DEFAULT_TAB = "general_options"


def form_rows(group: SettingsGroup, values: SanitizedOptions, errors: List[FieldError]) -> list[dict]:
    by_field = {e.field: e for e in errors}
    return [
        {
            "field": field,
            "html": default_field_registry.render(field, values.get(field.name)),
            "error": by_field.get(field.name),
        }
        for field in group.descriptors
    ]


def _render_page(
    request: Request,
    group: SettingsGroup,
    values: SanitizedOptions,
    *,
    errors: List[FieldError] | None = None,
    updated: bool = False,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "options.html",
        {
            "title": f"{request.app.state.settings.plugin_slug} options",
            "tabs": request.app.state.schemas.all(),
            "group": group,
            "rows": form_rows(group, values, errors or []),
            "errors": errors or [],
            "updated": updated,
        },
        status_code=status_code,
    )


def _not_found(request: Request, tab: str):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": "Not found", "what": f"settings tab {tab}"},
        status_code=404,
    )


# -----------------------
# Tabbed options page
# -----------------------
@router.get("/options", response_class=HTMLResponse)
async def options_page(
    request: Request,
    tab: str = DEFAULT_TAB,
    updated: bool = False,
    session: AsyncSession = Depends(get_session),
):
    try:
        group = request.app.state.schemas.get(tab)
    except KeyError:
        return _not_found(request, tab)

    option_name = request.app.state.settings.option_name(group.id)
    values = await load_options(SqlOptionsStore(session), group, option_name=option_name)
    return _render_page(request, group, values, updated=updated)


@router.post("/options/{tab}", response_class=HTMLResponse)
async def options_submit(
    request: Request,
    tab: str,
    session: AsyncSession = Depends(get_session),
):
    try:
        group = request.app.state.schemas.get(tab)
    except KeyError:
        return _not_found(request, tab)

    form = await request.form()
    submission = {k: v for k, v in form.items() if isinstance(v, str)}

    option_name = request.app.state.settings.option_name(group.id)
    try:
        await save_options(SqlOptionsStore(session), group, submission, option_name=option_name)
    except SubmissionRejected as e:
        # redisplay what was submitted (cleaned), nothing is stored
        return _render_page(request, group, sanitize(group, submission), errors=e.errors, status_code=422)

    return RedirectResponse(url=f"/admin/options?tab={group.id}&updated=1", status_code=303)
