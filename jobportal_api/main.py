from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import DuplicateKeyError, PyMongoError, WriteError

from .config import settings
from .db import InvalidIdentifier, connect
from .logging_config import configure_logging, get_logger
from .routers import applications as applications_router
from .routers import auth as auth_router
from .routers import jobs as jobs_router

configure_logging()
logger = get_logger(__name__)

app = FastAPI(title=settings.APP_NAME, version="0.3.0")

# CORS: credentialed requests need explicit origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(jobs_router.router)
app.include_router(applications_router.router)


@app.on_event("startup")
def _on_startup():
    app.state.store = None
    try:
        store = connect(settings)
    except PyMongoError as e:
        # bad URI or unresolvable SRV host; keep serving, store-backed routes answer 503
        logger.error("MongoDB client setup failed: %s", e)
        return
    app.state.store = store
    try:
        store.ping()
        logger.info("Pinged your deployment. Connected to MongoDB.")
    except PyMongoError as e:
        # the driver reconnects on its own once the cluster is reachable
        logger.error("MongoDB ping failed: %s", e)


@app.on_event("shutdown")
def _on_shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        store.close()
        logger.info("MongoDB client closed")


@app.exception_handler(InvalidIdentifier)
def _invalid_identifier(request: Request, exc: InvalidIdentifier):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# Handlers resolve by the exception's MRO, so the write errors below win over
# the generic PyMongoError one.
@app.exception_handler(DuplicateKeyError)
def _duplicate_key(request: Request, exc: DuplicateKeyError):
    logger.warning("duplicate key on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=409, content={"detail": "Duplicate key"})


@app.exception_handler(WriteError)
def _write_rejected(request: Request, exc: WriteError):
    logger.warning("write rejected on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Write rejected by the database"})


@app.exception_handler(PyMongoError)
def _store_error(request: Request, exc: PyMongoError):
    logger.exception("store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Database unavailable"})


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Job is falling from the sky."


@app.get("/health")
def health(request: Request):
    store = getattr(request.app.state, "store", None)
    status = "unavailable"
    if store is not None:
        try:
            store.ping()
            status = "connected"
        except PyMongoError as e:
            logger.warning("health ping failed: %s", e)
    return {"ok": True, "store": status}
