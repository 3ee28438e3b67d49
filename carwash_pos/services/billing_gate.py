"""Single checkpoint for every action that issues a fiscal document."""
import logging
from collections.abc import Callable
from datetime import date
from typing import TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..errors import TimbradoInvalidError
from .company import get_fiscal_authorization
from .fiscal import FiscalAuthorization, check_validity

logger = logging.getLogger(__name__)

T = TypeVar("T")


def guard(
    authorization: FiscalAuthorization | None,
    today: date,
    operation: Callable[[FiscalAuthorization], T],
) -> T:
    verdict = check_validity(
        authorization, today, warning_days=settings.timbrado_warning_days
    )
    if verdict.blocks_invoicing:
        logger.warning(
            "Billing blocked: %s (days_left=%s)",
            verdict.error_message,
            verdict.days_left,
        )
        raise TimbradoInvalidError(verdict)
    if verdict.level == "expiring":
        logger.info("Timbrado %s %s", authorization.number, verdict.message)
    return operation(authorization)


def require_active_timbrado(db: Session = Depends(get_db)) -> FiscalAuthorization:
    """Route dependency form of :func:`guard`."""
    return guard(get_fiscal_authorization(db), date.today(), lambda auth: auth)
