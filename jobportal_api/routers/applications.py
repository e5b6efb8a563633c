from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ..db import JobStore
from ..deps import get_store, require_email_match, require_identity
from ..logging_config import get_logger
from ..schemas import (
    DeleteResultOut,
    InsertResult,
    StatusUpdate,
    UpdateResultOut,
    serialize_doc,
)
from ..services.enrichment import enrich_applications

router = APIRouter(prefix="/job-applications", tags=["job-applications"])
logger = get_logger(__name__)


@router.get("")
def my_applications(
    email: str | None = Query(None, description="applicant email; must match the token"),
    identity: Dict[str, Any] = Depends(require_identity),
    store: JobStore = Depends(get_store),
):
    require_email_match(identity, email)
    applications = store.applications.list({"applicant_email": email})
    enrich_applications(applications, store.jobs)
    return [serialize_doc(doc) for doc in applications]


@router.get("/jobs/{job_id}")
def applications_for_job(job_id: str, store: JobStore = Depends(get_store)):
    """Who applied to a given job (job_id is stored as the job's hex id)."""
    return [serialize_doc(doc) for doc in store.applications.list({"job_id": job_id})]


@router.post("", response_model=InsertResult)
def apply(application: Dict[str, Any] = Body(...), store: JobStore = Depends(get_store)):
    job_id = application.get("job_id")
    if store.jobs.get_by_id(job_id) is None:
        raise HTTPException(status_code=404, detail="Job not found")

    result = store.applications.insert(application)
    store.jobs.increment_by_id(job_id, "applicationCount")
    logger.info("application %s submitted for job %s", result.inserted_id, job_id)
    return InsertResult.from_result(result)


@router.patch("/{application_id}", response_model=UpdateResultOut)
def update_status(application_id: str, payload: StatusUpdate, store: JobStore = Depends(get_store)):
    result = store.applications.update_by_id(application_id, {"status": payload.status})
    logger.info("application %s status=%s matched=%d", application_id, payload.status, result.matched_count)
    return UpdateResultOut.from_result(result)


@router.delete("/{application_id}", response_model=DeleteResultOut)
def delete_application(application_id: str, store: JobStore = Depends(get_store)):
    result = store.applications.delete_by_id(application_id)
    logger.info("application %s deleted=%d", application_id, result.deleted_count)
    return DeleteResultOut.from_result(result)
