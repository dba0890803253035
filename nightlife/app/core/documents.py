# nightlife/app/core/documents.py
from typing import Any, Dict, Optional

from google.cloud.firestore import Client


class FirestoreDocumentStore:
    """Key/value view over Firestore: one document per (collection, key)."""

    def __init__(self, client: Client):
        self._client = client

    def _ref(self, collection: str, key: str):
        return self._client.collection(collection).document(key)

    def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        snap = self._ref(collection, key).get()
        return (snap.to_dict() or {}) if snap.exists else None

    def set(self, collection: str, key: str, record: Dict[str, Any]) -> None:
        self._ref(collection, key).set(record)

    def delete(self, collection: str, key: str) -> None:
        # Firestore deletes of missing documents succeed silently
        self._ref(collection, key).delete()
