from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from plugin_skeleton.api.schemas_options import FieldSchemaResponse, GroupSchemaResponse, OptionsResponse
from plugin_skeleton.db.session import get_session
from plugin_skeleton.domain.options_service import load_options, save_options
from plugin_skeleton.options.errors import SubmissionRejected
from plugin_skeleton.options.schema import SettingsGroup
from plugin_skeleton.options.store import SqlOptionsStore


router = APIRouter(prefix="/api/options", tags=["options"])


def _get_group(request: Request, group_id: str) -> SettingsGroup:
    try:
        return request.app.state.schemas.get(group_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="settings group not found")


def _group_schema(group: SettingsGroup) -> GroupSchemaResponse:
    return GroupSchemaResponse(
        id=group.id,
        title=group.title,
        description=group.description,
        fields=[
            FieldSchemaResponse(
                name=f.name,
                kind=f.kind.value,
                label=f.label,
                required=f.required,
                default=f.default,
                allowed_values=[c.value for c in f.choices],
            )
            for f in group.descriptors
        ],
    )


@router.get("", response_model=list[GroupSchemaResponse])
async def list_groups(request: Request):
    return [_group_schema(g) for g in request.app.state.schemas.all()]


@router.get("/{group_id}", response_model=OptionsResponse)
async def get_options(group_id: str, request: Request, session: AsyncSession = Depends(get_session)):
    group = _get_group(request, group_id)
    option_name = request.app.state.settings.option_name(group.id)

    options = await load_options(SqlOptionsStore(session), group, option_name=option_name)
    return OptionsResponse(group_id=group.id, option_name=option_name, options=options)


@router.put("/{group_id}", response_model=OptionsResponse)
async def put_options(
    group_id: str,
    request: Request,
    values: Dict[str, Optional[str]] = Body(...),
    session: AsyncSession = Depends(get_session),
):
    """
    Replace a group's options. Checkboxes follow form semantics: a key that is
    present (whatever its value) means checked, a missing key means unchecked.
    """
    group = _get_group(request, group_id)
    option_name = request.app.state.settings.option_name(group.id)

    try:
        options = await save_options(SqlOptionsStore(session), group, values, option_name=option_name)
    except SubmissionRejected as e:
        raise HTTPException(status_code=422, detail=[err.as_dict() for err in e.errors])
    return OptionsResponse(group_id=group.id, option_name=option_name, options=options)
