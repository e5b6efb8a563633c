from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class LoginPayload(BaseModel):
    # any extra identity fields are carried into the token as-is
    model_config = ConfigDict(extra="allow")

    email: str


class LoginResponse(BaseModel):
    success: bool


class StatusUpdate(BaseModel):
    status: str


# Mutation results mirror the driver's own result objects (camelCase like the
# Node driver's JSON) so clients see the same shape as before.
class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResult":
        return cls(acknowledged=result.acknowledged, insertedId=_str_id(result.inserted_id))


class UpdateResultOut(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None
    upsertedCount: int

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultOut":
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=_str_id(result.upserted_id),
            upsertedCount=1 if result.upserted_id is not None else 0,
        )


class DeleteResultOut(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResultOut":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


def _str_id(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Render a stored document as JSON-safe data (ObjectIds -> hex strings)."""
    if doc is None:
        return None
    return {k: _serialize_value(v) for k, v in doc.items()}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize_value(v) for v in value]
    return value


__all__ = [
    "LoginPayload",
    "LoginResponse",
    "StatusUpdate",
    "InsertResult",
    "UpdateResultOut",
    "DeleteResultOut",
    "serialize_doc",
]
