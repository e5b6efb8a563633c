from typing import Any, Dict, List

from bson import ObjectId

from ..db import DocumentRepository

DISPLAY_FIELDS = ("title", "company", "company_logo", "location")


def enrich_applications(
    applications: List[Dict[str, Any]], jobs: DocumentRepository
) -> List[Dict[str, Any]]:
    """Copy job display fields onto each application, in place.

    One batched lookup for all referenced jobs instead of one per
    application. Applications pointing at a missing job (or holding a
    job_id that isn't an ObjectId) are returned unchanged.
    """
    job_ids = []
    for application in applications:
        job_id = application.get("job_id")
        if isinstance(job_id, str) and ObjectId.is_valid(job_id) and job_id not in job_ids:
            job_ids.append(job_id)

    if not job_ids:
        return applications
    by_id = {str(job["_id"]): job for job in jobs.get_many_by_ids(job_ids)}

    for application in applications:
        job_id = application.get("job_id")
        job = by_id.get(job_id) if isinstance(job_id, str) else None
        if job is None:
            continue
        for field in DISPLAY_FIELDS:
            if field in job:
                application[field] = job[field]
    return applications
