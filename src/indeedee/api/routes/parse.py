"""Parse and render endpoints. Callers post raw export text, never files."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from indeedee.models.outcome import Failure
from indeedee.services.prompt_session import PromptSession

router = APIRouter(tags=["parse"])


class MappingRequest(BaseModel):
    text: str


class SalaryRequest(BaseModel):
    text: str
    required_column: str | None = None


class PromptRequest(BaseModel):
    mapping_text: str
    salary_text: str
    year: int = Field(ge=1)
    month: int = Field(ge=1, le=12)
    required_column: str | None = None
    filter_column: str | None = None
    filter_values: list[str] = Field(default_factory=list)


def _session(request: Request) -> PromptSession:
    return PromptSession(settings=request.app.state.settings)


@router.post("/mapping/parse")
async def parse_mapping(body: MappingRequest, request: Request) -> dict:
    return _session(request).load_mapping(body.text).model_dump(mode="json")


@router.post("/salary/parse")
async def parse_salary(body: SalaryRequest, request: Request) -> dict:
    outcome = _session(request).load_salary(body.text, body.required_column)
    return outcome.model_dump(mode="json")


@router.post("/prompt")
async def render_prompt(body: PromptRequest, request: Request) -> dict:
    """Parse both exports and render the prompt; 422 with the first failure."""
    session = _session(request)
    for outcome in (
        session.load_mapping(body.mapping_text),
        session.load_salary(body.salary_text, body.required_column),
    ):
        if isinstance(outcome, Failure):
            raise HTTPException(status_code=422, detail=outcome.model_dump(mode="json"))

    session.select(body.filter_column, body.filter_values)
    return {
        "prompt": session.render(body.year, body.month),
        "row_count": len(session.selected_rows()),
    }
