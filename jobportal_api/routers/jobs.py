from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query, Response

from ..db import JobStore
from ..deps import get_store
from ..logging_config import get_logger
from ..schemas import InsertResult, serialize_doc

router = APIRouter(prefix="/jobs", tags=["jobs"])
logger = get_logger(__name__)


@router.get("")
def list_jobs(
    email: str | None = Query(None, description="only jobs posted by this hr_email"),
    store: JobStore = Depends(get_store),
):
    query = {"hr_email": email} if email else {}
    return [serialize_doc(doc) for doc in store.jobs.list(query)]


@router.get("/{job_id}")
def get_job(job_id: str, store: JobStore = Depends(get_store)):
    job = store.jobs.get_by_id(job_id)
    if job is None:
        # unknown id -> 200 with an empty body, not a 404
        return Response(status_code=200)
    return serialize_doc(job)


@router.post("", response_model=InsertResult)
def post_job(job: Dict[str, Any] = Body(...), store: JobStore = Depends(get_store)):
    result = store.jobs.insert(job)
    logger.info("job posted id=%s hr_email=%s", result.inserted_id, job.get("hr_email"))
    return InsertResult.from_result(result)
