"""
Account session wrapper.

The web layer stores sessions (a signed cookie); use cases only see this
wrapper around the per-request mapping and its single ``account_id`` slot.
"""

from typing import MutableMapping, Optional
from uuid import UUID

ACCOUNT_ID_KEY = "account_id"


class AccountSession:
    def __init__(self, store: MutableMapping, remote: str = ""):
        self._store = store
        self.remote = remote

    @property
    def account_id(self) -> Optional[UUID]:
        raw = self._store.get(ACCOUNT_ID_KEY)
        if raw is None:
            return None
        try:
            return UUID(str(raw))
        except ValueError:
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.account_id is not None

    def bind(self, account_id: UUID) -> None:
        """Start a fresh session for the account"""
        self._store.clear()
        self._store[ACCOUNT_ID_KEY] = str(account_id)

    def reset(self) -> None:
        self._store.clear()
