"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the student records backend.
Controllers are intentionally thin: they parse the path id, delegate to
`StudentService`, and turn its outcomes into JSON responses.

Endpoints implemented:
- GET /
- GET /health
- GET /students
- GET /students/{id}
- POST /students
- PUT /students/{id}
- DELETE /students/{id}
- GET /students/{id}/summary
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
import json
import logging
import time
import uuid
from typing import List

from pydantic import ValidationError

from .config import settings
from .models import DEMO_STUDENTS, Student
from .repositories import StudentRepository
from .schemas import StudentIn, StudentOut, SummaryOut
from .services import StudentService
from .utils.summary_client import SummaryClient, SummaryError

app = FastAPI(title="Student Records API")
logger = logging.getLogger("student_service.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

app.state.students = StudentRepository(DEMO_STUDENTS if settings.SEED_DEMO_STUDENTS else None)
app.state.summary_client = SummaryClient(
    url=settings.OLLAMA_URL,
    model=settings.OLLAMA_MODEL,
    timeout=settings.SUMMARY_TIMEOUT_SECONDS,
)

# Wide-open CORS keeps local HTML testers working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/students"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """Report malformed JSON bodies and mistyped fields as 400."""
    logger.info("invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


def get_repository(request: Request) -> StudentRepository:
    return request.app.state.students


def get_summary_client(request: Request) -> SummaryClient:
    return request.app.state.summary_client


def get_service(
    repo: StudentRepository = Depends(get_repository),
    summary_client: SummaryClient = Depends(get_summary_client),
) -> StudentService:
    return StudentService(repo, summary_client)


async def read_raw_body(request: Request) -> bytes:
    return await request.body()


def _parse_student_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid student id")


def _require_student(svc: StudentService, raw_id: str) -> Student:
    student = svc.get_student(_parse_student_id(raw_id))
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@app.get("/", response_class=PlainTextResponse)
def home():
    """Plain-text greeting for quick manual checks."""
    return "Well, hello there!"


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


@app.get("/students", response_model=List[StudentOut])
def list_students(svc: StudentService = Depends(get_service)):
    """Return every student in insertion order."""
    return [s.to_dict() for s in svc.list_students()]


@app.get("/students/{student_id}", response_model=StudentOut)
def get_student(student_id: str, svc: StudentService = Depends(get_service)):
    return _require_student(svc, student_id).to_dict()


@app.post("/students", status_code=201, response_model=StudentOut)
def create_student(payload: StudentIn, svc: StudentService = Depends(get_service)):
    """Create a student from name/age/email.

    Any `id` in the body is ignored; the repository assigns one.
    Returns 400 with the first failing field's message.
    """
    try:
        student = svc.create_student(payload.name, payload.age, payload.email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return student.to_dict()


@app.put("/students/{student_id}")
def update_student(student_id: str, raw: bytes = Depends(read_raw_body), svc: StudentService = Depends(get_service)):
    """Overwrite a student's name, age and email. The id never changes.

    The body is decoded only after the id resolves, so an unknown id is a
    404 even when the payload is malformed.
    """
    sid = _require_student(svc, student_id).id
    try:
        payload = StudentIn.model_validate_json(raw)
    except ValidationError as e:
        logger.info("invalid request body on %s: %s", student_id, e.errors())
        raise HTTPException(status_code=400, detail="Invalid request body")
    try:
        updated = svc.update_student(sid, payload.name, payload.age, payload.email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail="Student not found")
    return "student updated"


@app.delete("/students/{student_id}")
def delete_student(student_id: str, svc: StudentService = Depends(get_service)):
    if not svc.delete_student(_parse_student_id(student_id)):
        raise HTTPException(status_code=404, detail="Student not found")
    return "student deleted"


@app.get("/students/{student_id}/summary", response_model=SummaryOut)
def student_summary(student_id: str, svc: StudentService = Depends(get_service)):
    """Ask the generation API for a short profile summary.

    Upstream failures are logged and reported as a generic 500; the
    underlying error is not returned to the client.
    """
    student = _require_student(svc, student_id)
    try:
        summary = svc.summarize_student(student)
    except SummaryError:
        logger.exception("summary generation failed for student %s", student.id)
        raise HTTPException(status_code=500, detail="Failed to generate summary")
    return {"summary": summary}
