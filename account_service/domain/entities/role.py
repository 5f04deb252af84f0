"""
Role Entity

Named set of permissions that can be attached to an account.
"""

import re
from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Role(SQLModel, table=True):
    """Role entity - permissions are stored as a comma separated list"""

    __tablename__ = "auth_roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=64)
    permissions: str = Field(default="")

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    def permission_set(self) -> frozenset:
        return frozenset(
            p.strip().lower() for p in re.split(r"\s*,\s*", self.permissions) if p.strip()
        )
