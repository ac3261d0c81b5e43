"""
In‑memory storage for users.

``UserStore`` maps generated UUIDs to :class:`User` records.  Nothing
is persisted: the store is created empty with the application and
disappears with the process.  All access goes through a single lock
so handlers running concurrently (on the event loop or in FastAPI's
threadpool) cannot corrupt the mapping.
"""

import logging
import threading
import uuid
from typing import Callable, Dict, Optional, Tuple

from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserStore:
    """Process‑local user repository.

    ``id_factory`` produces candidate identifiers for new records and
    defaults to :func:`uuid.uuid4`.  Tests substitute a deterministic
    factory to exercise the collision handling in :meth:`insert`.
    """

    def __init__(
        self,
        data: Optional[Dict[uuid.UUID, User]] = None,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ) -> None:
        self._data: Dict[uuid.UUID, User] = dict(data) if data else {}
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._data

    def insert(self, user: User) -> Tuple[User, uuid.UUID]:
        """Store ``user`` under a fresh identifier.

        Candidate identifiers are drawn until one is not already in
        use.  With random 128‑bit ids the loop body practically never
        runs more than once.  Returns the stored record and its id.
        """
        with self._lock:
            user_id = self._id_factory()
            while user_id in self._data:
                logger.warning("Identifier collision on %s, regenerating", user_id)
                user_id = self._id_factory()
            self._data[user_id] = user
            logger.debug("Inserted user %s", user_id)
            return self._data[user_id], user_id

    def find_all(self) -> Dict[uuid.UUID, User]:
        """Return a snapshot of every stored user keyed by id."""
        with self._lock:
            return dict(self._data)

    def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        with self._lock:
            return self._data.get(user_id)

    def update(self, user_id: uuid.UUID, user: User) -> None:
        """Replace the record at ``user_id``; unknown ids are ignored."""
        with self._lock:
            if user_id not in self._data:
                return
            self._data[user_id] = user
            logger.debug("Updated user %s", user_id)

    def delete(self, user_id: uuid.UUID) -> None:
        """Remove the record at ``user_id``; unknown ids are ignored."""
        with self._lock:
            if self._data.pop(user_id, None) is not None:
                logger.debug("Deleted user %s", user_id)
