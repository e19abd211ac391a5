"""
Structured logging for adapter renders.

Every record emitted by an adapter is prefixed with
``[provider=.. model=.. request_id=..]`` so renders of the same prompt across
providers can be told apart in a shared log stream.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class ProviderLogger:
    """Logger bound to one provider id."""

    def __init__(self, provider_id: str):
        self.provider = provider_id
        self.logger = logging.getLogger(f"prompt_render_sdk.providers.{provider_id}")

    def log(self, level: int, message: str, model: Optional[str] = None,
            request_id: Optional[str] = None, **fields: Any) -> None:
        """Emit ``message`` at ``level`` with the provider/model/request prefix.

        Fields whose value is None are left out of the prefix.
        """
        if not self.logger.isEnabledFor(level):
            return

        parts = [f"provider={self.provider}"]
        for key, value in dict(model=model, request_id=request_id, **fields).items():
            if value is not None:
                parts.append(f"{key}={value}")
        self.logger.log(level, f"[{' '.join(parts)}] {message}")

    @contextmanager
    def track_request(self, operation: str, model: str,
                      request_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Time one adapter operation such as "render".

        Logs the start at DEBUG, completion at INFO with ``duration_ms`` and
        failures at ERROR with the exception type and message before
        re-raising.

        Yields:
            Dict carrying the request_id for follow-up records
        """
        request_id = request_id or uuid.uuid4().hex[:8]
        started = time.time()
        self.log(logging.DEBUG, f"Starting {operation} request", model, request_id)

        try:
            yield {'request_id': request_id, 'model': model, 'method': operation}
        except Exception as e:
            self.log(
                logging.ERROR, f"Failed {operation} request", model, request_id,
                duration_ms=int((time.time() - started) * 1000),
                error_type=type(e).__name__,
                error_msg=str(e)
            )
            raise

        self.log(
            logging.INFO, f"Completed {operation} request", model, request_id,
            duration_ms=int((time.time() - started) * 1000)
        )

    def log_render_estimate(self, metadata: Dict[str, Any], model: str, request_id: str) -> None:
        """Log message count and token estimate of a rendered payload."""
        self.log(
            logging.DEBUG, "Render estimate", model, request_id,
            message_count=metadata.get('message_count'),
            estimated_tokens=metadata.get('estimated_tokens'),
            has_system_message=metadata.get('has_system_message')
        )
