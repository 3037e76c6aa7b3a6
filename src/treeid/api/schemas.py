from typing import Literal
from pydantic import BaseModel, Field

Policy = Literal['sequential', 'path']


class TreePayload(BaseModel):
    tree: dict


class AnnotatePayload(TreePayload):
    start_id: int = Field(default=0, ge=0)
    policy: Policy = 'sequential'


class AnnotateResponse(BaseModel):
    tree: dict
    next_id: int


class TreeStats(BaseModel):
    size: int
    depth: int
