import logging
from contextlib import asynccontextmanager
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from . import crud, schemas
from .config import Settings, get_settings
from .errors import ErrorResponse, TaskAPIError
from .logging_setup import setup_logging
from .store import TaskStore, get_store, seed_example_tasks

logger = logging.getLogger(__name__)

settings = get_settings()

HOME_PAGE = """<!DOCTYPE html>
<html>
<head><title>{name}</title></head>
<body>
    <h1>{name}</h1>
    <p>Welcome to the {name} REST API</p>
    <p>Visit <a href="/docs">Swagger UI</a> for documentation</p>
</body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if settings.seed_data:
        seed_example_tasks(app.state.store)
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield
    app.state.store.clear()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="In-memory task tracking: create, update, patch, delete and filter tasks.",
    license_info={"name": "Apache 2.0", "url": "https://www.apache.org/licenses/LICENSE-2.0"},
    lifespan=lifespan,
)
app.state.store = TaskStore()


@app.exception_handler(TaskAPIError)
async def task_api_error_handler(request: Request, exc: TaskAPIError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response().model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("%s %s -> VALIDATION_ERROR", request.method, request.url.path)
    body = ErrorResponse(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        detail={"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(status_code=422, content=body.model_dump())


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def home():
    return HOME_PAGE.format(name=settings.app_name)


@app.get("/health")
def health_check():
    return {"status": "ok"}


router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.get("", response_model=List[schemas.TaskOut])
def list_tasks(store: TaskStore = Depends(get_store)):
    return crud.get_tasks(store)


@router.get("/status/{task_status}", response_model=List[schemas.TaskOut])
def tasks_by_status(task_status: str, store: TaskStore = Depends(get_store)):
    return crud.get_tasks_by_status(store, task_status)


@router.get("/priority/{priority}", response_model=List[schemas.TaskOut])
def tasks_by_priority(priority: str, store: TaskStore = Depends(get_store)):
    return crud.get_tasks_by_priority(store, priority)


@router.get("/{task_id}", response_model=schemas.TaskOut)
def get_task(task_id: UUID, store: TaskStore = Depends(get_store)):
    return crud.get_task(store, task_id)


@router.post("", response_model=schemas.TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(task_in: schemas.TaskCreate, store: TaskStore = Depends(get_store)):
    return crud.create_task(store, task_in)


@router.put("/{task_id}", response_model=schemas.TaskOut)
def update_task(task_id: UUID, task_in: schemas.TaskCreate, store: TaskStore = Depends(get_store)):
    return crud.replace_task(store, task_id, task_in)


@router.patch("/{task_id}", response_model=schemas.TaskOut)
def patch_task(task_id: UUID, task_in: schemas.TaskUpdate, store: TaskStore = Depends(get_store)):
    return crud.patch_task(store, task_id, task_in)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: UUID,
    store: TaskStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
):
    crud.delete_task(store, task_id, strict=app_settings.strict_delete)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app.include_router(router)
