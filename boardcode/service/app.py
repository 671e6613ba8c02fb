"""FastAPI application entrypoint for boardcode service mode."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..document.render import DocumentRenderer
from ..document.splitter import split_blocks
from ..document.structure import extract_structure
from ..hardware.deriver import add_common_peripherals, derive_from_text
from ..hardware.examples import list_examples
from ..hardware.parser import HardwareConfigError
from ..llm.runner import GenerationClient, GenerationError
from ..models import PeripheralItem
from ..workspace import Workspace


class PeripheralModel(BaseModel):
    identity: str
    display_type: str
    selected: bool = True
    pinned: bool = False


class PeripheralsRequest(BaseModel):
    config: str
    previous: List[PeripheralModel] = Field(default_factory=list)
    add_common: bool = False


class PeripheralsResponse(BaseModel):
    peripherals: List[PeripheralModel]
    used_fallback: bool
    error: Optional[str] = None


class DocumentRequest(BaseModel):
    text: str
    platform: Optional[str] = None
    include_html: bool = False


class StructureModel(BaseModel):
    text: str
    extracted: bool
    lines: List[str]
    platform: str


class DocumentResponse(BaseModel):
    blocks: List[Dict[str, Any]]
    structure: StructureModel
    html: Optional[str] = None


class GenerateRequest(BaseModel):
    config: str
    features: str = ""
    peripherals: List[PeripheralModel] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    document: str
    blocks: List[Dict[str, Any]]
    structure: StructureModel


class HealthResponse(BaseModel):
    status: str


def _default_client() -> GenerationClient:
    return GenerationClient()


def _to_items(models: List[PeripheralModel]) -> List[PeripheralItem]:
    return [PeripheralItem(**model.model_dump()) for model in models]


def _to_models(items: List[PeripheralItem]) -> List[PeripheralModel]:
    return [PeripheralModel(**asdict(item)) for item in items]


def create_app(
    client_factory: Callable[[], GenerationClient] = _default_client,
) -> FastAPI:
    """Create the FastAPI application exposing boardcode operations."""

    app = FastAPI(title="BoardCode Service", version="1.0.0")

    async def get_client() -> GenerationClient:
        return client_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/examples")
    async def examples() -> List[Dict[str, str]]:
        return list_examples()

    @app.post("/peripherals", response_model=PeripheralsResponse)
    async def peripherals(payload: PeripheralsRequest) -> PeripheralsResponse:
        outcome = derive_from_text(payload.config, _to_items(payload.previous))
        items = outcome.value
        if payload.add_common:
            items = add_common_peripherals(items)
        return PeripheralsResponse(
            peripherals=_to_models(items),
            used_fallback=outcome.used_fallback,
            error=outcome.error,
        )

    @app.post("/document", response_model=DocumentResponse)
    async def document(payload: DocumentRequest) -> DocumentResponse:
        blocks = split_blocks(payload.text)
        structure = extract_structure(payload.text, payload.platform)
        rendered = DocumentRenderer().render(blocks) if payload.include_html else None
        return DocumentResponse(
            blocks=[asdict(block) for block in blocks],
            structure=StructureModel(**asdict(structure)),
            html=rendered,
        )

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        client: GenerationClient = Depends(get_client),
    ) -> GenerateResponse:
        workspace = Workspace(payload.config, features=payload.features)
        if payload.peripherals:
            workspace.peripherals = _to_items(payload.peripherals)

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, workspace.generate, client)

        structure = workspace.current_structure()
        return GenerateResponse(
            document=workspace.document or "",
            blocks=[asdict(block) for block in workspace.blocks],
            structure=StructureModel(**asdict(structure)),
        )

    @app.exception_handler(HardwareConfigError)
    async def config_error_handler(
        _: Any, exc: HardwareConfigError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(GenerationError)
    async def generation_error_handler(
        _: Any, exc: GenerationError
    ) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
