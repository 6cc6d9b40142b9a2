# -*- coding: utf-8 -*-
"""
Shared plumbing for the table repositories.

Every call runs inside its own savepoint so a failed statement never poisons
the caller's transaction, and database errors are translated into the
tracker's own exception types.
"""
from __future__ import annotations
from contextlib import contextmanager
import logging

from django.db import DatabaseError, IntegrityError, connections, transaction

from tracker.exceptions import BackendError, DuplicateError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(ex: IntegrityError, vendor: str = "postgresql") -> bool:
    cause = ex.__cause__
    if getattr(cause, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    if getattr(getattr(cause, "diag", None), "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    # sqlite has no SQLSTATE: "UNIQUE constraint failed: members.email"
    return vendor == "sqlite" and "UNIQUE constraint failed" in str(ex)


class BaseRepository:
    table = ""

    def __init__(self, using: str = "default"):
        self.using = using

    @contextmanager
    def call(self, operation: str):
        try:
            with transaction.atomic(using=self.using):
                yield
        except IntegrityError as ex:
            if is_unique_violation(ex, connections[self.using].vendor):
                raise DuplicateError(table=self.table, operation=operation) from ex
            logger.error("[backend] %s.%s integrity error: %s", self.table, operation, ex)
            raise BackendError(table=self.table, operation=operation) from ex
        except DatabaseError as ex:
            logger.error("[backend] %s.%s failed: %s", self.table, operation, ex)
            raise BackendError(table=self.table, operation=operation) from ex
