"""Atlas — FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from rights_atlas import catalog
from rights_atlas.backends.gemini import GeminiClient
from rights_atlas.config import settings
from rights_atlas.models.citation import DialogueResult
from rights_atlas.models.request import Scope
from rights_atlas.orchestrator.retrieval import RetrievalOrchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.google_api_key:
        logger.warning("ATLAS_GOOGLE_API_KEY is not set; searches will return fallbacks")
    app.state.orchestrator = RetrievalOrchestrator(GeminiClient())
    yield


app = FastAPI(
    title="Atlas",
    description="Citation-backed evidence for human-rights articles",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_orchestrator(request: Request) -> RetrievalOrchestrator:
    return request.app.state.orchestrator


# --- Request / Response models ---


class ScopedRequest(BaseModel):
    scope: Scope = Scope.INTERNATIONAL
    sub_scope: str = ""


class SingleRightRequest(ScopedRequest):
    right: str = Field(min_length=1)


class NexusRequest(ScopedRequest):
    right_a: str = Field(min_length=1)
    right_b: str = Field(min_length=1)


class SemanticRequest(BaseModel):
    term: str
    right_ids: list[str] | None = None


class CitationOut(BaseModel):
    title: str
    uri: str
    date: str
    reference: str


class DialogueResponse(BaseModel):
    sources: list[CitationOut]


class SemanticResponse(BaseModel):
    ids: list[str]


class RightOut(BaseModel):
    id: str
    name: str
    summary: str
    category: str


def _dialogue(result: DialogueResult) -> DialogueResponse:
    return DialogueResponse(**result.to_dict())


# --- Routes ---


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/rights", response_model=list[RightOut])
async def list_rights():
    return [
        RightOut(id=r.id, name=r.name, summary=r.summary, category=r.category.value)
        for r in catalog.all_rights()
    ]


@app.post("/api/legal-framework", response_model=DialogueResponse)
async def legal_framework(
    req: SingleRightRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
):
    """Legal instruments protecting a right at the requested scope."""
    result = await orchestrator.legal_framework(req.right, req.scope, req.sub_scope)
    return _dialogue(result)


@app.post("/api/field-status", response_model=DialogueResponse)
async def field_status(
    req: SingleRightRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
):
    """Recent monitoring reports on a right."""
    result = await orchestrator.field_status(req.right, req.scope, req.sub_scope)
    return _dialogue(result)


@app.post("/api/nexus", response_model=DialogueResponse)
async def nexus(
    req: NexusRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
):
    """Academic work connecting two rights."""
    result = await orchestrator.nexus(req.right_a, req.right_b, req.scope, req.sub_scope)
    return _dialogue(result)


@app.post("/api/semantic-matches", response_model=SemanticResponse)
async def semantic_matches(
    req: SemanticRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
):
    """Catalog ids relevant to a free-text term."""
    if req.right_ids is None:
        rights = list(catalog.all_rights())
    else:
        rights = []
        for right_id in req.right_ids:
            right = catalog.get_right(right_id)
            if right is None:
                raise HTTPException(status_code=404, detail=f"Unknown right: {right_id}")
            rights.append(right)

    ids = await orchestrator.semantic_match(req.term, rights)
    return SemanticResponse(ids=ids)


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
