"""Fire-and-forget execution of notification triggers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

Trigger = Callable[..., Any]
ErrorSink = Callable[[str, BaseException], None]
Scheduler = Callable[..., Any]


def log_trigger_error(trigger_name: str, exc: BaseException) -> None:
    """Default error sink: record the failure for operators."""

    logger.error("Notification trigger %s failed: %s", trigger_name, exc, exc_info=exc)


class TriggerRunner:
    """Run notification triggers without letting them fail the caller.

    Every trigger gets its own session from ``session_factory`` so a failed
    notification write can never roll back the domain change that caused it.
    When ``scheduler`` is given (for example ``BackgroundTasks.add_task``) the
    run is handed to it instead of happening inline.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        error_sink: ErrorSink | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._error_sink = error_sink or log_trigger_error
        self._scheduler = scheduler

    def submit(self, trigger: Trigger, **kwargs: Any) -> None:
        """Queue ``trigger`` (called as ``trigger(session, **kwargs)``)."""

        if self._scheduler is not None:
            self._scheduler(self._run, trigger, kwargs)
        else:
            self._run(trigger, kwargs)

    def _run(self, trigger: Trigger, kwargs: dict[str, Any]) -> None:
        name = getattr(trigger, "__name__", repr(trigger))
        try:
            session = self._session_factory()
        except Exception as exc:
            self._report(name, exc)
            return
        try:
            trigger(session, **kwargs)
        except Exception as exc:
            session.rollback()
            self._report(name, exc)
        finally:
            session.close()

    def _report(self, name: str, exc: BaseException) -> None:
        try:
            self._error_sink(name, exc)
        except Exception:  # pragma: no cover - a broken sink must not escape either
            logger.exception("Error sink failed while reporting trigger %s", name)


__all__ = ["TriggerRunner", "log_trigger_error"]
