# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structured logging helpers for :mod:`shapeguards`.

The library never configures logging on import. Records are emitted through a
:class:`StructuredLogger`, which requires every call to name an ``event`` and
folds any keyword context into a single ``context`` mapping on the record.
Applications that want readable output can opt in with
:func:`configure_logging`.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from typing import Any, Final, cast, override

__all__ = [
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

LOG_LEVEL_ENV: Final[str] = "SHAPEGUARDS_LOG_LEVEL"
LOG_FORMAT_ENV: Final[str] = "SHAPEGUARDS_LOG_FORMAT"


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter enforcing an ``event`` name plus a ``context`` payload."""

    def __init__(
        self,
        logger: logging.Logger,
        *,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(logger, dict(context) if context is not None else {})

    @override
    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        if not isinstance(extra, MutableMapping):
            raise TypeError("Structured logs require a mutable mapping for extra.")
        extra_mapping = cast(MutableMapping[str, object], extra)

        payload: dict[str, object] = dict(cast(Mapping[str, object], self.extra))
        inline = kwargs.pop("context", None)
        if inline is not None:
            if not isinstance(inline, Mapping):
                raise TypeError("context must be a mapping when provided.")
            payload.update(cast(Mapping[str, object], inline))

        event = kwargs.pop("event", None)
        if event is None:
            event = extra_mapping.pop("event", None)
        if not isinstance(event, str):
            raise TypeError("Structured logs require an 'event' field.")

        payload.update(extra_mapping)
        kwargs["extra"] = {"event": event, "context": payload}
        return msg, kwargs


def get_logger(
    name: str, *, context: Mapping[str, object] | None = None
) -> StructuredLogger:
    """Return a :class:`StructuredLogger` for ``name`` with ``context`` bound."""

    return StructuredLogger(logging.getLogger(name), context=context)


def configure_logging(
    *,
    level: int | str | None = None,
    json_mode: bool | None = None,
    env: Mapping[str, str] | None = None,
    force: bool = False,
) -> None:
    """Configure the root logger for applications using :mod:`shapeguards`.

    ``level`` and ``json_mode`` fall back to the ``SHAPEGUARDS_LOG_LEVEL`` and
    ``SHAPEGUARDS_LOG_FORMAT`` environment variables (``json`` selects the JSON
    formatter, anything else the text one). An already configured root logger
    only has its level adjusted unless ``force=True``.
    """

    env = os.environ if env is None else env
    resolved_level = _coerce_level(
        level if level is not None else (env.get(LOG_LEVEL_ENV) or None)
    )
    if json_mode is None:
        json_mode = env.get(LOG_FORMAT_ENV, "text").strip().lower() == "json"

    root = logging.getLogger()
    if root.handlers and not force:
        root.setLevel(resolved_level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(event)s %(message)s %(context)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                    "defaults": {"event": "-", "context": {}},
                },
                "json": {"()": "shapeguards.logging._JsonFormatter"},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "json" if json_mode else "text",
                }
            },
            "root": {"handlers": ["stderr"], "level": resolved_level},
        }
    )


class _JsonFormatter(logging.Formatter):
    """Render structured records as compact JSON lines."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=repr, separators=(",", ":"))


def _coerce_level(level: int | str | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelNamesMapping().get(text.upper())
    if resolved is None:
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved
