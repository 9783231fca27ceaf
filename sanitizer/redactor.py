"""
Payload redactor - knows which fields of each payload kind are sensitive.

Free text (SQL, statements, Flink configuration) is fully masked with the
configured pattern. Stored connection passwords are partially masked so the
prefix and suffix stay recognisable.
"""

from typing import Any, Callable, Optional

from .classifier import PayloadKind
from .config import SanitizerConfig
from .masking import mask_full, mask_partial, partial_mask_bounds
from .models import DataBase, ExplainResult, History, JobInfoDetail, SqlExplainResult


class PayloadRedactor:
    """
    Masks the sensitive fields of a classified payload in place.

    There is exactly one handler per PayloadKind; a kind without a handler is
    a programming error and is reported when the redactor is built.
    """

    def __init__(self, config: Optional[SanitizerConfig] = None):
        config = config or SanitizerConfig()
        self._pattern = config.compile()
        self._mask = config.mask

        self._handlers: dict[PayloadKind, Callable[[Any], None]] = {
            PayloadKind.EXPLAIN_BATCH: self._redact_explain_batch,
            PayloadKind.EXPLAIN_LIST: self._redact_explain_list,
            PayloadKind.HISTORY_LIST: self._redact_history_list,
            PayloadKind.DATABASE_LIST: self._redact_database_list,
            PayloadKind.HISTORY_RECORD: self._redact_history,
            PayloadKind.JOB_DETAIL: self._redact_job_detail,
            PayloadKind.DATABASE_CONFIG: self._redact_database,
        }
        missing = set(PayloadKind) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No redaction handler for: {sorted(k.name for k in missing)}")

    def mask(self, text: Optional[str]) -> Optional[str]:
        """Fully mask ``text`` with the configured pattern."""
        return mask_full(text, self._pattern, self._mask)

    def redact(self, kind: PayloadKind, payload: Any) -> None:
        """Mask the sensitive fields of ``payload`` according to ``kind``."""
        self._handlers[kind](payload)

    def _redact_explain_batch(self, payload: ExplainResult) -> None:
        self._redact_explain_list(payload.sql_explain_results or [])

    def _redact_explain_list(self, payload: list) -> None:
        for entry in payload:
            if isinstance(entry, SqlExplainResult):
                entry.sql = self.mask(entry.sql)

    def _redact_history_list(self, payload: list) -> None:
        for entry in payload:
            if isinstance(entry, History):
                self._redact_history(entry)

    def _redact_history(self, payload: History) -> None:
        payload.statement = self.mask(payload.statement)

    def _redact_job_detail(self, payload: JobInfoDetail) -> None:
        if payload.history is not None:
            self._redact_history(payload.history)

    def _redact_database_list(self, payload: list) -> None:
        for entry in payload:
            if isinstance(entry, DataBase):
                self._redact_database(entry)

    def _redact_database(self, payload: DataBase) -> None:
        start, end = partial_mask_bounds(payload.password)
        payload.password = mask_partial(payload.password, start, end)
        payload.flink_config = self.mask(payload.flink_config)
