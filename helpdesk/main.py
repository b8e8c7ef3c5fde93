# helpdesk/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from helpdesk.core.config import get_settings
from helpdesk.core.database import init_db
from helpdesk.core.logging import get_logger, setup_logging
from helpdesk.core.schemas import ApiResponse
from helpdesk.ticket.routes import router as ticket_router
from helpdesk.comment.routes import router as comment_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
logger = get_logger(__name__)

init_db()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Errors go out in the same envelope as successful responses
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ApiResponse(success=False, message=str(exc.detail), data=None)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err["loc"][1:]), "message": err["msg"]}
        for err in exc.errors()
    ]
    logger.info("request.invalid", path=request.url.path, errors=len(errors))
    body = ApiResponse(success=False, message="Validation failed", data=errors)
    return JSONResponse(status_code=422, content=body.model_dump())


# Routers
app.include_router(ticket_router)
app.include_router(comment_router)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
