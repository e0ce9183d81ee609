from __future__ import annotations

from typing import Dict, List, Union

from pydantic import BaseModel


class FieldSchemaResponse(BaseModel):
    name: str
    kind: str
    label: str
    required: bool
    default: Union[bool, str]
    allowed_values: List[str] = []


class GroupSchemaResponse(BaseModel):
    id: str
    title: str
    description: str
    fields: List[FieldSchemaResponse]


class OptionsResponse(BaseModel):
    group_id: str
    option_name: str
    options: Dict[str, Union[bool, str]]


class EndpointResponse(BaseModel):
    success: bool = True
    data: Dict[str, str] = {}
