from typing import Any, Dict, Iterable, List, Mapping, Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from pymongo.server_api import ServerApi

from .config import Settings
from .logging_config import get_logger

logger = get_logger(__name__)

JOBS_COLLECTION = "jobs"
APPLICATIONS_COLLECTION = "job-applications"


class InvalidIdentifier(ValueError):
    """Raised when a path/body id can't be parsed into an ObjectId."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid id: {value}")
        self.value = value


def to_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifier(value)
    return ObjectId(value)


class DocumentRepository:
    """Thin pass-through over a single collection.

    Ids are accepted as hex strings and converted here; filters and documents
    go to the driver untouched.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def list(self, query: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        return list(self.collection.find(dict(query or {})))

    def get_by_id(self, doc_id: Any) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"_id": to_object_id(doc_id)})

    def get_many_by_ids(self, ids: Iterable[Any]) -> List[Dict[str, Any]]:
        oids = [to_object_id(i) for i in ids]
        if not oids:
            return []
        return list(self.collection.find({"_id": {"$in": oids}}))

    def insert(self, record: Dict[str, Any]) -> InsertOneResult:
        return self.collection.insert_one(record)

    def update_by_id(self, doc_id: Any, fields: Mapping[str, Any]) -> UpdateResult:
        return self.collection.update_one({"_id": to_object_id(doc_id)}, {"$set": dict(fields)})

    def increment_by_id(self, doc_id: Any, field: str, amount: int = 1) -> UpdateResult:
        # $inc is atomic per document and creates the field when absent
        return self.collection.update_one({"_id": to_object_id(doc_id)}, {"$inc": {field: amount}})

    def delete_by_id(self, doc_id: Any) -> DeleteResult:
        return self.collection.delete_one({"_id": to_object_id(doc_id)})


class JobStore:
    """Handle to the jobPortal database: jobs + job-applications."""

    def __init__(self, db: Database, client: Optional[MongoClient] = None):
        self.db = db
        self.client = client
        self.jobs = DocumentRepository(db[JOBS_COLLECTION])
        self.applications = DocumentRepository(db[APPLICATIONS_COLLECTION])

    def ping(self) -> Dict[str, Any]:
        return self.db.command("ping")

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None


def connect(settings: Settings) -> JobStore:
    """Build the process-wide store. The driver connects lazily."""
    client = MongoClient(
        settings.mongo_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.DB_SERVER_SELECTION_TIMEOUT_MS,
    )
    logger.info("mongo client created db=%s", settings.DB_NAME)
    return JobStore(client[settings.DB_NAME], client=client)
