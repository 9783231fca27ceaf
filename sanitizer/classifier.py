"""
Result classifier - works out which kind of payload an outbound response carries.

Classification is a pure inspection of the runtime shape of the envelope's
payload. Kinds are checked in a fixed priority order and the first match wins.
Anything unrecognised (no payload, empty list, a plain count...) classifies
as None and passes through untouched.
"""

from enum import Enum
from typing import Any, Callable, Optional

from .models import DataBase, ExplainResult, History, JobInfoDetail, ProTableResult, Result, SqlExplainResult


class PayloadKind(Enum):
    """Closed set of payload shapes that can carry sensitive fields."""
    EXPLAIN_BATCH = "explain_batch"
    EXPLAIN_LIST = "explain_list"
    HISTORY_LIST = "history_list"
    DATABASE_LIST = "database_list"
    HISTORY_RECORD = "history_record"
    JOB_DETAIL = "job_detail"
    DATABASE_CONFIG = "database_config"


def payload_of(envelope: Any) -> Any:
    """Return the payload wrapped by a known envelope, or None."""
    if isinstance(envelope, (Result, ProTableResult)):
        return envelope.data
    return None


def _list_of(record_type: type) -> Callable[[Any], bool]:
    def predicate(payload: Any) -> bool:
        return isinstance(payload, list) and len(payload) > 0 and isinstance(payload[0], record_type)
    return predicate


def _instance_of(record_type: type) -> Callable[[Any], bool]:
    def predicate(payload: Any) -> bool:
        return isinstance(payload, record_type)
    return predicate


# Priority order matters: the first matching predicate decides the kind
_PREDICATES: list[tuple[PayloadKind, Callable[[Any], bool]]] = [
    (PayloadKind.EXPLAIN_BATCH, _instance_of(ExplainResult)),
    (PayloadKind.EXPLAIN_LIST, _list_of(SqlExplainResult)),
    (PayloadKind.HISTORY_LIST, _list_of(History)),
    (PayloadKind.DATABASE_LIST, _list_of(DataBase)),
    (PayloadKind.HISTORY_RECORD, _instance_of(History)),
    (PayloadKind.JOB_DETAIL, _instance_of(JobInfoDetail)),
    (PayloadKind.DATABASE_CONFIG, _instance_of(DataBase)),
]


def classify(envelope: Any) -> Optional[PayloadKind]:
    """
    Determine the payload kind of an outbound response.

    Args:
        envelope: Any handler return value.

    Returns:
        The matching PayloadKind, or None when the response carries nothing
        that needs masking.
    """
    payload = payload_of(envelope)
    if payload is None:
        return None

    for kind, predicate in _PREDICATES:
        if predicate(payload):
            return kind
    return None
