import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

API_VERSION = "fastapi"

Recording = Dict[str, Any]


class RecordingStoreError(RuntimeError):
    """The metadata store could not complete an operation."""


def build_recording(
    reference_text: str,
    transcribed_text: str,
    score: int,
    user_id: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Recording:
    """Creates a new recording document with a generated id.

    Only metadata is kept; the audio itself is never stored.
    """
    recording = {
        "recording_id": str(uuid.uuid4()),
        "reference_text": reference_text,
        "transcribed_text": transcribed_text,
        "score": score,
        "user_id": user_id or "anonymous",
        "created_at": datetime.now(timezone.utc).isoformat(),
        "api_version": API_VERSION,
        "has_audio_file": False,
    }
    if metadata:
        recording.update(metadata)
    return recording


class RecordingStore:
    """Interface for recording metadata persistence.

    ``list`` and ``query`` return newest recordings first.
    """

    backend = "none"

    def save(self, recording: Recording) -> str:
        raise NotImplementedError

    def get(self, recording_id: str) -> Optional[Recording]:
        raise NotImplementedError

    def list(self, limit: int = 100) -> List[Recording]:
        raise NotImplementedError

    def query(self, field: str, value: Any, limit: int = 50) -> List[Recording]:
        raise NotImplementedError

    def query_range(
        self, field: str, minimum: float, maximum: float, limit: int = 50
    ) -> List[Recording]:
        """Records with ``minimum <= field <= maximum``, ordered by that field."""
        raise NotImplementedError

    def update(self, recording_id: str, updates: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, recording_id: str) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        pass


class InMemoryRecordingStore(RecordingStore):
    backend = "memory"

    def __init__(self):
        self._records: Dict[str, Recording] = {}
        self._lock = threading.Lock()

    def save(self, recording: Recording) -> str:
        recording_id = recording["recording_id"]
        with self._lock:
            self._records[recording_id] = dict(recording)
        logger.info(f"Metadata saved successfully. ID: {recording_id}")
        return recording_id

    def get(self, recording_id: str) -> Optional[Recording]:
        with self._lock:
            recording = self._records.get(recording_id)
            return dict(recording) if recording is not None else None

    def _newest_first(self) -> List[Recording]:
        with self._lock:
            return [dict(r) for r in reversed(list(self._records.values()))]

    def list(self, limit: int = 100) -> List[Recording]:
        return self._newest_first()[:limit]

    def query(self, field: str, value: Any, limit: int = 50) -> List[Recording]:
        return [r for r in self._newest_first() if r.get(field) == value][:limit]

    def query_range(
        self, field: str, minimum: float, maximum: float, limit: int = 50
    ) -> List[Recording]:
        matches = [
            r
            for r in self._newest_first()
            if r.get(field) is not None and minimum <= r[field] <= maximum
        ]
        # Stable sort keeps newest-first order among equal values.
        matches.sort(key=lambda r: r[field])
        return matches[:limit]

    def update(self, recording_id: str, updates: Dict[str, Any]) -> bool:
        with self._lock:
            recording = self._records.get(recording_id)
            if recording is None:
                return False
            recording.update(
                {k: v for k, v in updates.items() if k != "recording_id"}
            )
        logger.info(f"Recording {recording_id} updated successfully")
        return True

    def delete(self, recording_id: str) -> bool:
        with self._lock:
            if self._records.pop(recording_id, None) is None:
                return False
        logger.info(f"Recording {recording_id} deleted successfully")
        return True

    def close(self) -> None:
        with self._lock:
            self._records.clear()


class MongoRecordingStore(RecordingStore):
    """Recording store backed by a MongoDB collection.

    Documents use ``recording_id`` as their ``_id``.
    """

    backend = "mongodb"

    def __init__(self, collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self.client = client

    @staticmethod
    def _to_recording(document: Optional[dict]) -> Optional[Recording]:
        if document is None:
            return None
        recording = dict(document)
        recording["recording_id"] = str(recording.pop("_id"))
        return recording

    def save(self, recording: Recording) -> str:
        document = dict(recording)
        document["_id"] = document.pop("recording_id")
        try:
            self.collection.insert_one(document)
        except PyMongoError as e:
            raise RecordingStoreError(f"Failed to save recording: {e}") from e
        logger.info(f"Metadata saved successfully. ID: {document['_id']}")
        return document["_id"]

    def get(self, recording_id: str) -> Optional[Recording]:
        try:
            return self._to_recording(self.collection.find_one({"_id": recording_id}))
        except PyMongoError as e:
            raise RecordingStoreError(f"Failed to get recording: {e}") from e

    def _find(self, filter_: dict, sort: list, limit: int) -> List[Recording]:
        try:
            cursor = self.collection.find(filter_).sort(sort).limit(limit)
            return [self._to_recording(document) for document in cursor]
        except PyMongoError as e:
            raise RecordingStoreError(f"Failed to query recordings: {e}") from e

    def list(self, limit: int = 100) -> List[Recording]:
        return self._find({}, [("created_at", DESCENDING)], limit)

    def query(self, field: str, value: Any, limit: int = 50) -> List[Recording]:
        return self._find({field: value}, [("created_at", DESCENDING)], limit)

    def query_range(
        self, field: str, minimum: float, maximum: float, limit: int = 50
    ) -> List[Recording]:
        return self._find(
            {field: {"$gte": minimum, "$lte": maximum}},
            [(field, ASCENDING), ("created_at", DESCENDING)],
            limit,
        )

    def update(self, recording_id: str, updates: Dict[str, Any]) -> bool:
        updates = {k: v for k, v in updates.items() if k not in ("recording_id", "_id")}
        try:
            if not updates:
                return self.collection.count_documents({"_id": recording_id}) > 0
            result = self.collection.update_one({"_id": recording_id}, {"$set": updates})
        except PyMongoError as e:
            raise RecordingStoreError(f"Failed to update recording: {e}") from e
        if result.matched_count == 0:
            return False
        logger.info(f"Recording {recording_id} updated successfully")
        return True

    def delete(self, recording_id: str) -> bool:
        try:
            result = self.collection.delete_one({"_id": recording_id})
        except PyMongoError as e:
            raise RecordingStoreError(f"Failed to delete recording: {e}") from e
        if result.deleted_count == 0:
            return False
        logger.info(f"Recording {recording_id} deleted successfully")
        return True

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")


def create_recording_store(
    backend: str,
    mongodb_uri: Optional[str] = None,
    database: Optional[str] = None,
    collection: Optional[str] = None,
) -> RecordingStore:
    if backend == "memory":
        logger.info("Using in-memory recording store")
        return InMemoryRecordingStore()

    if backend == "mongodb":
        client = MongoClient(
            mongodb_uri,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=10000,
        )
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise RecordingStoreError(f"Failed to connect to MongoDB: {e}") from e

        mongo_collection = client[database][collection]
        mongo_collection.create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])
        mongo_collection.create_index([("score", ASCENDING), ("created_at", DESCENDING)])
        logger.info(f"Connected to MongoDB database: {database}")
        return MongoRecordingStore(mongo_collection, client)

    raise ValueError(f"Unknown recording store backend: {backend}")
