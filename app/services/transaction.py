# app/services/transaction.py
"""
Atomic execution of one ledger operation.

run_atomic() runs the operation against the request session, commits on success
and rolls back on any failure, so a rejected or crashed operation never leaves a
partial write behind. Capacity checks rely on the row locks taken inside the
operation (SELECT ... FOR UPDATE on the aggregate root); when the database still
aborts the transaction with a serialization failure or deadlock, the whole
operation is re-run against fresh state.
"""

import time
from typing import Callable, TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.services.exceptions import Conflict, InventoryError
from app.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATEs worth a retry: serialization_failure, deadlock_detected
RETRYABLE_SQLSTATES = {"40001", "40P01"}


def is_retryable(exc: DBAPIError) -> bool:
    """True when the database aborted the transaction and a re-run may succeed."""
    code = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
    if code in RETRYABLE_SQLSTATES:
        return True
    return "database is locked" in str(exc.orig).lower()


def run_atomic(db: Session, operation: Callable[[], T], label: str) -> T:
    """
    Run `operation` as one transaction. Returns its result after commit.

    InventoryError    → rollback, re-raised unchanged
    IntegrityError    → rollback, raised as Conflict (race loser on a unique key)
    40001 / 40P01     → rollback, retried up to TX_MAX_ATTEMPTS
    anything else     → rollback, re-raised
    """
    attempts = max(1, settings.TX_MAX_ATTEMPTS)
    for attempt in range(1, attempts + 1):
        try:
            result = operation()
            db.commit()
            return result
        except InventoryError as exc:
            db.rollback()
            logger.info(f"[{label}] rejected: {exc.kind}: {exc.detail}")
            raise
        except IntegrityError as exc:
            db.rollback()
            logger.info(f"[{label}] integrity violation translated to Conflict: {exc.orig}")
            raise Conflict(f"{label}: conflicting concurrent write") from exc
        except DBAPIError as exc:
            db.rollback()
            if not is_retryable(exc) or attempt == attempts:
                raise
            logger.warning(f"[{label}] transaction aborted ({exc.orig}), retry {attempt}/{attempts - 1}")
            time.sleep(settings.TX_RETRY_BACKOFF_SECONDS * attempt)
        except Exception:
            db.rollback()
            raise
    # Unreachable: the last attempt either returns or raises
    raise RuntimeError(f"{label}: transaction retries exhausted")
