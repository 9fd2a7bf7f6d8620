# Example usage:
# from database import MemoryStorage
# from schemas import EventCreate
#
# storage = MemoryStorage()
#
# # Create an event using the Pydantic model (defaults are applied by the model)
# event = storage.create_document("events", EventCreate(title="Town Hall", ...))
#
# # Get all events, or only the published ones
# events = storage.list_documents("events")
# published = storage.list_documents("events", {"status": "published"})
#
# # Partial update (only the fields that were set on the model are merged)
# storage.update_document("events", event["id"], EventUpdate(status="published"))
#
# # Delete an event
# storage.delete_document("events", event["id"])


import copy
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Union

from loguru import logger
from pydantic import BaseModel

from schemas import RESOURCE_KINDS, ResourceKind, UiSettingsBase
from seed_data import SEED_DOCUMENTS

# Never taken from client input
PROTECTED_FIELDS = ("id", "created_at", "updated_at")


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_dict(data: Union[BaseModel, dict], partial: bool = False) -> dict:
    # Convert Pydantic model to dict if needed
    if isinstance(data, BaseModel):
        data_dict = data.model_dump(exclude_unset=partial)
    else:
        data_dict = copy.deepcopy(data)
    for key in PROTECTED_FIELDS:
        data_dict.pop(key, None)
    return data_dict


class Storage(Protocol):
    """Operations the API layer needs from a record store.

    Absence is a value (None / False), never an exception. Returned records
    are snapshots; mutating them does not change stored state.
    """

    def collection_names(self) -> List[str]: ...

    def list_documents(
        self,
        collection_name: str,
        filter_dict: Optional[dict] = None,
        search: Optional[str] = None,
        search_fields: Sequence[str] = (),
    ) -> List[dict]: ...

    def count_documents(self, collection_name: str, filter_dict: Optional[dict] = None) -> int: ...

    def get_document(self, collection_name: str, doc_id: str) -> Optional[dict]: ...

    def create_document(self, collection_name: str, data: Union[BaseModel, dict]) -> dict: ...

    def update_document(
        self, collection_name: str, doc_id: str, update_data: Union[BaseModel, dict]
    ) -> Optional[dict]: ...

    def delete_document(self, collection_name: str, doc_id: str) -> bool: ...

    def get_settings(self) -> dict: ...

    def update_settings(self, update_data: Union[BaseModel, dict]) -> dict: ...


class MemoryStorage:
    """In-process store: one dict per collection plus the UI settings singleton.

    Records are kept in insertion order. Nothing survives a restart.
    Every read and write holds one lock, so a merge never works from a
    stale copy of the record.
    """

    def __init__(self, kinds: Sequence[ResourceKind] = RESOURCE_KINDS, seed: bool = True):
        self._lock = threading.RLock()
        self._kinds = {kind.name: kind for kind in kinds}
        self._collections: Dict[str, Dict[str, dict]] = {kind.name: {} for kind in kinds}
        self._settings = {
            "id": _new_id(),
            **UiSettingsBase().model_dump(),
            "updated_at": _now(),
        }
        self._seeded = False
        if seed:
            self.seed()

    def seed(self, documents: Optional[Dict[str, Iterable[dict]]] = None) -> int:
        """Load the sample records. Runs at most once per store; returns how many were added."""
        with self._lock:
            if self._seeded:
                return 0
            self._seeded = True

            added = 0
            for name, docs in (documents or SEED_DOCUMENTS).items():
                kind = self._kinds.get(name)
                if kind is None:
                    continue
                for doc in docs:
                    self.create_document(name, kind.create_model.model_validate(doc))
                    added += 1
        logger.info("Seeded {} sample records across {} collections", added, len(self._kinds))
        return added

    def _collection(self, collection_name: str) -> Dict[str, dict]:
        try:
            return self._collections[collection_name]
        except KeyError:
            raise KeyError(f"Unknown collection: {collection_name}") from None

    def collection_names(self) -> List[str]:
        return list(self._collections)

    def list_documents(
        self,
        collection_name: str,
        filter_dict: Optional[dict] = None,
        search: Optional[str] = None,
        search_fields: Sequence[str] = (),
    ) -> List[dict]:
        """Get documents from collection, optionally filtered by field equality and a search term"""
        with self._lock:
            docs = list(self._collection(collection_name).values())
            if filter_dict:
                docs = [d for d in docs if all(d.get(k) == v for k, v in filter_dict.items())]
            if search:
                needle = search.lower()
                docs = [
                    d for d in docs
                    if any(isinstance(d.get(f), str) and needle in d[f].lower() for f in search_fields)
                ]
            return [copy.deepcopy(d) for d in docs]

    def count_documents(self, collection_name: str, filter_dict: Optional[dict] = None) -> int:
        with self._lock:
            if not filter_dict:
                return len(self._collection(collection_name))
            return len(self.list_documents(collection_name, filter_dict))

    def get_document(self, collection_name: str, doc_id: str) -> Optional[dict]:
        with self._lock:
            doc = self._collection(collection_name).get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def create_document(self, collection_name: str, data: Union[BaseModel, dict]) -> dict:
        """Insert a single document with a fresh id and creation timestamp

        Args:
            collection_name: Name of the collection
            data: Pydantic model instance or dict. Pydantic models are recommended so
                field defaults are applied.

        Returns:
            dict: The stored document
        """
        with self._lock:
            collection = self._collection(collection_name)
            doc = {"id": _new_id(), **_as_dict(data), "created_at": _now()}
            collection[doc["id"]] = doc
            logger.debug("Created {} {}", collection_name, doc["id"])
            return copy.deepcopy(doc)

    def update_document(
        self, collection_name: str, doc_id: str, update_data: Union[BaseModel, dict]
    ) -> Optional[dict]:
        """Merge fields onto an existing document

        Each supplied field replaces the stored value wholesale. ``id`` and
        ``created_at`` always keep their original values. A document deleted
        while the update waits for the lock stays deleted.

        Returns:
            dict: The updated document, or None if no document has that id
        """
        changes = _as_dict(update_data, partial=True)
        with self._lock:
            collection = self._collection(collection_name)
            existing = collection.get(doc_id)
            if existing is None:
                return None

            updated = {
                **existing,
                **changes,
                "id": existing["id"],
                "created_at": existing["created_at"],
            }
            collection[doc_id] = updated
            logger.debug("Updated {} {}", collection_name, doc_id)
            return copy.deepcopy(updated)

    def delete_document(self, collection_name: str, doc_id: str) -> bool:
        """Delete a document. Returns False if there was nothing to delete."""
        with self._lock:
            removed = self._collection(collection_name).pop(doc_id, None) is not None
        if removed:
            logger.debug("Deleted {} {}", collection_name, doc_id)
        return removed

    def get_settings(self) -> dict:
        with self._lock:
            return copy.deepcopy(self._settings)

    def update_settings(self, update_data: Union[BaseModel, dict]) -> dict:
        """Merge fields onto the UI settings singleton and refresh ``updated_at``."""
        changes = _as_dict(update_data, partial=True)
        with self._lock:
            previous = self._settings["updated_at"]
            # Strictly increasing even when two updates land in the same clock tick
            updated_at = max(_now(), previous + timedelta(microseconds=1))
            self._settings = {
                **self._settings,
                **changes,
                "id": self._settings["id"],
                "updated_at": updated_at,
            }
            logger.debug("Updated UI settings")
            return copy.deepcopy(self._settings)
