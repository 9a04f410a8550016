"""
Material ledger: the in-memory project collection plus its sync badge.

Owns the ordered list the dashboard is computed from (newest first) and
applies the failure rules for each store operation:

  load    : failure is logged, ledger stays empty, app keeps serving
  add     : failure sets sync status to "error", nothing inserted locally
  remove  : failure raises LedgerError, local list unchanged
  clear   : same as remove

Each store write and its local list update happen under one lock.
"""

import logging
import threading
import time
import uuid
from typing import Optional

from . import schemas
from .config import settings
from .models import SyncStatus
from .scoring import build_dashboard
from .store import MaterialStore, StoreError

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """A store operation failed; message is shown to the user as-is."""


class SyncTracker:
    """
    Finite-state sync badge for the insert path.

    synced --begin--> syncing --succeed--> (after reset delay) synced
                              --fail-----> error
    Delete paths never touch it.
    """

    def __init__(self, reset_seconds: float = None, clock=time.monotonic):
        self.reset_seconds = settings.SYNC_RESET_SECONDS if reset_seconds is None else reset_seconds
        self.clock = clock
        self._state = SyncStatus.SYNCED
        self._settles_at: Optional[float] = None

    @property
    def status(self) -> SyncStatus:
        if self._settles_at is not None and self.clock() >= self._settles_at:
            self._state = SyncStatus.SYNCED
            self._settles_at = None
        return self._state

    def begin(self):
        self._state = SyncStatus.SYNCING
        self._settles_at = None

    def succeed(self):
        # Stay "syncing" briefly so the badge is visible, then settle
        self._settles_at = self.clock() + self.reset_seconds

    def fail(self):
        self._state = SyncStatus.ERROR
        self._settles_at = None


class MaterialLedger:

    def __init__(self, store: MaterialStore, sync: SyncTracker = None):
        self.store = store
        self.sync = sync or SyncTracker()
        self._materials: list[schemas.Material] = []
        self._lock = threading.RLock()

    @property
    def materials(self) -> list[schemas.Material]:
        with self._lock:
            return list(self._materials)

    def __len__(self):
        return len(self._materials)

    def load(self):
        """Fetch everything from the store. Read failures don't block the app."""
        with self._lock:
            try:
                self._materials = self.store.list_all()
                logger.info("Loaded %d materials", len(self._materials))
            except StoreError as e:
                logger.error("Store connection failed: %s", e)

    def add(self, material: schemas.MaterialCreate) -> schemas.Material:
        """Persist a new material and put it at the front of the ledger."""
        payload = material.model_dump(mode="json")
        if not payload.get("id"):
            payload["id"] = str(uuid.uuid4())
        new_material = schemas.Material.model_validate(payload)

        with self._lock:
            self.sync.begin()
            try:
                stored = self.store.insert(new_material)
            except StoreError as e:
                self.sync.fail()
                logger.error("Sync error: %s", e)
                raise LedgerError(str(e)) from e

            self._materials.insert(0, stored)
            self.sync.succeed()
            return stored

    def get(self, material_id: str) -> Optional[schemas.Material]:
        for m in self.materials:
            if m.id == material_id:
                return m
        return None

    def remove(self, material_id: str) -> bool:
        """Delete one material. Returns False if the store had no such id."""
        with self._lock:
            try:
                deleted = self.store.delete(material_id)
            except StoreError as e:
                logger.error("Delete operation failed for %s: %s", material_id, e)
                raise LedgerError(f"Delete operation failed: {e}") from e

            self._materials = [m for m in self._materials if m.id != material_id]
            return deleted

    def clear(self) -> int:
        """Wipe the whole project from the store, then locally."""
        with self._lock:
            try:
                removed = self.store.delete_all()
            except StoreError as e:
                logger.error("Failed to clear ledger: %s", e)
                raise LedgerError(f"Failed to clear ledger: {e}") from e

            self._materials = []
            return removed

    def summary(self) -> dict:
        return build_dashboard(self.materials)


_ledger: Optional[MaterialLedger] = None
_ledger_lock = threading.Lock()


def get_ledger() -> MaterialLedger:
    """Process-wide ledger, loaded from the store on first use."""
    global _ledger
    with _ledger_lock:
        if _ledger is None:
            from .database import SessionLocal
            ledger = MaterialLedger(MaterialStore(SessionLocal))
            ledger.load()
            _ledger = ledger
    return _ledger
