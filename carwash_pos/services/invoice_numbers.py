import logging
import re
import threading
from contextlib import contextmanager
from collections.abc import Iterator

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from ..errors import InvoiceSequenceExhaustedError
from ..models import Sale
from ..models.base import utcnow

logger = logging.getLogger(__name__)

SEQUENCE_DIGITS = 7
MAX_SEQUENCE = 10**SEQUENCE_DIGITS - 1
# SQLite GLOB; malformed stored numbers never count as the last issued one.
INVOICE_NO_GLOB = "[0-9][0-9][0-9]-[0-9][0-9][0-9]-" + "[0-9]" * SEQUENCE_DIGITS

_LEADING_DIGITS = re.compile(r"\s*(\d+)")

_pair_locks: dict[tuple[str, str], threading.Lock] = {}
_pair_locks_guard = threading.Lock()


def parse_sequence(invoice_no: str | None) -> int:
    """Leading digits of the last ``-`` segment, or 0 when none lead."""
    if not invoice_no:
        return 0
    match = _LEADING_DIGITS.match(invoice_no.split("-")[-1])
    if not match:
        return 0
    return int(match.group(1))


def format_invoice_no(establishment: str, point_of_sale: str, sequence: int) -> str:
    return f"{establishment}-{point_of_sale}-{sequence:0{SEQUENCE_DIGITS}d}"


def next_invoice_number(
    last_issued: str | None, establishment: str, point_of_sale: str
) -> str:
    sequence = parse_sequence(last_issued) + 1
    if sequence > MAX_SEQUENCE:
        logger.error(
            "Invoice sequence exhausted for %s-%s (last issued %s)",
            establishment,
            point_of_sale,
            last_issued,
        )
        raise InvoiceSequenceExhaustedError(
            "Invoice sequence exhausted",
            details=f"{establishment}-{point_of_sale} reached {MAX_SEQUENCE}",
        )
    return format_invoice_no(establishment, point_of_sale, sequence)


@contextmanager
def pair_lock(establishment: str, point_of_sale: str) -> Iterator[None]:
    with _pair_locks_guard:
        lock = _pair_locks.setdefault((establishment, point_of_sale), threading.Lock())
    with lock:
        yield


def lock_sequence(db: Session, establishment: str, point_of_sale: str) -> None:
    # First write of the transaction; holds the pair until commit/rollback.
    now = utcnow()
    db.execute(
        text(
            "INSERT OR IGNORE INTO invoice_sequences "
            "(establishment, point_of_sale, updated_at) "
            "VALUES (:establishment, :point_of_sale, :updated_at)"
        ),
        {"establishment": establishment, "point_of_sale": point_of_sale, "updated_at": now},
    )
    db.execute(
        text(
            "UPDATE invoice_sequences SET updated_at = :updated_at "
            "WHERE establishment = :establishment AND point_of_sale = :point_of_sale"
        ),
        {"establishment": establishment, "point_of_sale": point_of_sale, "updated_at": now},
    )


def last_issued_invoice_no(
    db: Session, establishment: str, point_of_sale: str
) -> str | None:
    # Fixed-width numbers sort lexically in sequence order.
    return db.execute(
        select(Sale.invoice_no)
        .where(
            Sale.establishment == establishment,
            Sale.point_of_sale == point_of_sale,
            Sale.invoice_no.op("GLOB")(INVOICE_NO_GLOB),
        )
        .order_by(Sale.invoice_no.desc())
        .limit(1)
    ).scalar_one_or_none()


def claim_invoice_number(db: Session, establishment: str, point_of_sale: str) -> str:
    """Reserve the next number for the pair inside the caller's transaction.

    Call while holding :func:`pair_lock` and commit in the same unit of work.
    """
    lock_sequence(db, establishment, point_of_sale)
    last_issued = last_issued_invoice_no(db, establishment, point_of_sale)
    return next_invoice_number(last_issued, establishment, point_of_sale)
