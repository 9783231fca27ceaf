"""
ResponseSanitizer - the single interception point for outbound responses.

Handlers opt in explicitly with the ``sanitize_response`` decorator:

    @sanitize_response
    def get_database(db_id: int) -> Result:
        return Result(code=0, data=repository.get(db_id))

The decorator classifies whatever the handler returns, masks the sensitive
fields in place and hands back the same object. It never fails a response:
masking too little is a bug for the tests to catch, breaking every response
is an outage.

Thread-safe: a sanitizer holds only its compiled pattern and mask, and each
call works on the object graph of one response.
"""

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from .classifier import PayloadKind, classify, payload_of
from .config import SanitizerConfig, load_config
from .redactor import PayloadRedactor

logger = logging.getLogger(__name__)


class ResponseSanitizer:
    """
    Classifies outbound responses and masks their sensitive fields.

    Example:
        sanitizer = ResponseSanitizer()

        response = Result(code=0, data=DataBase(password="abcdefgh12"))
        sanitizer.process(response)
        # response.data.password == "ab****gh12"

        masked, was_masked = sanitizer.mask_text("'password'='s3cret'")
        # masked: "'password'='******'"
        # was_masked: True
    """

    def __init__(self, config: Optional[SanitizerConfig] = None):
        """
        Initialize the sanitizer.

        Args:
            config: Pattern and mask to use. Defaults to the built-in
                    'password'='...' pattern.
        """
        self.config = config or SanitizerConfig()
        self._redactor = PayloadRedactor(self.config)

    def classify(self, response: Any) -> Optional[PayloadKind]:
        """Return the payload kind of ``response``, or None if nothing to mask."""
        return classify(response)

    def process(self, response: Any) -> Any:
        """
        Mask the sensitive fields of ``response`` in place.

        Args:
            response: Any handler return value.

        Returns:
            The same ``response`` object.
        """
        kind = classify(response)
        if kind is None:
            return response

        try:
            self._redactor.redact(kind, payload_of(response))
            logger.debug(f"Masked sensitive fields of {kind.value} response")
        except Exception as e:
            logger.warning(f"Masking failed for {kind.value} response (passing through): {e}")

        return response

    def mask_text(self, text: Optional[str]) -> tuple[Optional[str], bool]:
        """
        Fully mask free text.

        Returns:
            A tuple of (masked_text, was_masked).
        """
        if not text:
            return text, False

        masked = self._redactor.mask(text)
        return masked, masked != text


def sanitize_response(
    func: Optional[Callable] = None,
    *,
    sanitizer: Optional[ResponseSanitizer] = None,
):
    """
    Decorate a response-producing handler so its result is sanitized.

    Works on plain and ``async`` functions, bare or with arguments:

        @sanitize_response
        def handler(): ...

        @sanitize_response(sanitizer=ResponseSanitizer(custom_config))
        async def handler(): ...

    Without an explicit sanitizer the process-wide default is used. It is
    resolved when the decorator is applied, so a malformed configuration
    fails at import time instead of inside a handler call.
    """

    def decorator(fn: Callable):
        active = sanitizer if sanitizer is not None else get_default_sanitizer()

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                return active.process(await fn(*args, **kwargs))

            return async_wrapper

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            return active.process(fn(*args, **kwargs))

        return sync_wrapper

    if func is not None:
        return decorator(func)
    return decorator


# Singleton instance for convenience
_default_sanitizer: Optional[ResponseSanitizer] = None


def get_default_sanitizer() -> ResponseSanitizer:
    """
    Get the default ResponseSanitizer, configured from the environment.

    For tests or alternate patterns, instantiate ResponseSanitizer directly.
    """
    global _default_sanitizer
    if _default_sanitizer is None:
        _default_sanitizer = ResponseSanitizer(load_config())
    return _default_sanitizer
