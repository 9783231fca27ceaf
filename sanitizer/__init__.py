"""
Sanitizer Module - Response masking for the Dinky admin API

This module masks credentials in outbound API results (SQL with embedded
'password'='...' assignments, stored connection passwords, Flink
configuration) before they leave the service.

Architecture:
    - ResponseSanitizer: Classifies a response and masks it in place
    - sanitize_response: Decorator applying the sanitizer to a handler
    - classifier: Maps a response envelope to a PayloadKind
    - redactor: Per-kind field masking rules
    - masking: The full (regex) and partial (positional) masking primitives

Example:
    from sanitizer import sanitize_response
    from sanitizer.models import Result, History

    @sanitize_response
    def get_history(history_id: int) -> Result:
        return Result(code=0, data=History(statement="... 'password'='x' ..."))

    get_history(1).data.statement
    # "... 'password'='******' ..."
"""

from .classifier import PayloadKind, classify
from .config import SanitizerConfig, load_config
from .interceptor import ResponseSanitizer, get_default_sanitizer, sanitize_response
from .masking import mask_full, mask_partial

__all__ = [
    "ResponseSanitizer",
    "sanitize_response",
    "get_default_sanitizer",
    "PayloadKind",
    "classify",
    "SanitizerConfig",
    "load_config",
    "mask_full",
    "mask_partial",
]
