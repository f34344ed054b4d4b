"""
Shared pytest fixtures.

`client` talks to a throwaway FastAPI app with the dashkit error handlers
installed, so the HTTP envelope can be checked without a real service.
"""
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from dashkit.core.errors import Issue, register_exception_handlers
from dashkit.schemas.dashboard import Dashboard, Widget
from dashkit.services.validation import ParseOutcome, validate_or_throw


class StubSchema:
    """Hand-built schema: accepts ints, otherwise reports the configured issues."""

    def __init__(self, issues: list[Issue] | None = None):
        self.issues = tuple(issues or [Issue(path=(), message="Required")])
        self.calls = 0

    def safe_parse(self, data: Any) -> ParseOutcome:
        self.calls += 1
        if isinstance(data, int) and not isinstance(data, bool):
            return ParseOutcome(success=True, data=data * 2)
        return ParseOutcome(success=False, issues=self.issues)


class User(BaseModel):
    name: str
    age: int


class Note(BaseModel):
    body: str


@pytest.fixture()
def user_model():
    return User


@pytest.fixture()
def stub_schema():
    return StubSchema(issues=[
        Issue(path=("user", "name"), message="Required"),
        Issue(path=("user", "tags", 2), message="Expected string"),
    ])


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/widgets")
    def create_widget(widget: Widget):
        return {"id": widget.id}

    @app.post("/dashboards")
    def create_dashboard(payload: dict):
        dashboard = validate_or_throw(Dashboard, payload)
        return {"id": dashboard.id, "widgets": len(dashboard.widgets)}

    @app.post("/notes")
    def create_note(note: Note):
        return {"body": note.body}

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.fixture()
def client():
    with TestClient(_build_app(), raise_server_exceptions=False) as c:
        yield c
