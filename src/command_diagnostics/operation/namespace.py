"""Database namespaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Namespace:
    """A ``db.collection`` pair. ``coll`` is empty for database-level commands."""

    db: str
    coll: str = ""

    def __post_init__(self) -> None:
        if not self.db:
            raise ValueError("Namespace database name must be non-empty.")

    @classmethod
    def parse(cls, ns: str) -> Namespace:
        """Parse ``"db.coll"``; everything after the first dot is the collection."""
        db, _, coll = ns.partition(".")
        return cls(db=db, coll=coll)

    @property
    def is_db_only(self) -> bool:
        return not self.coll

    def __str__(self) -> str:
        if self.is_db_only:
            return self.db
        return f"{self.db}.{self.coll}"
