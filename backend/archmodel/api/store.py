import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from archmodel.model import Workspace


class WorkspaceStore:
    """
    In-memory workspaces served by the API, one Model each.

    Request handlers run in a threadpool. A Model allows a single writer, so
    each workspace carries its own RLock and every read or write of that
    workspace's Model happens under it.
    """

    def __init__(self):
        self.workspaces: Dict[str, Workspace] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._lock = threading.RLock()

    def create(self, name: str, description: Optional[str] = None) -> str:
        workspace_id = str(uuid.uuid4())
        with self._lock:
            self.workspaces[workspace_id] = Workspace(name=name, description=description)
            self._locks[workspace_id] = threading.RLock()
        return workspace_id

    def get(self, workspace_id: str) -> Optional[Workspace]:
        with self._lock:
            return self.workspaces.get(workspace_id)

    def lock_for(self, workspace_id: str) -> Optional[threading.RLock]:
        with self._lock:
            return self._locks.get(workspace_id)

    @contextmanager
    def locked(self, workspace_id: str) -> Iterator[Optional[Workspace]]:
        """Hold the workspace lock; yields None for an unknown workspace."""
        lock = self.lock_for(workspace_id)
        if lock is None:
            yield None
            return
        with lock:
            yield self.get(workspace_id)

    def delete(self, workspace_id: str) -> bool:
        lock = self.lock_for(workspace_id)
        if lock is None:
            return False
        with lock, self._lock:
            self._locks.pop(workspace_id, None)
            return self.workspaces.pop(workspace_id, None) is not None
