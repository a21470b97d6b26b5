"""Append-only JSON lines log of custom prompt interactions."""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pythonjsonlogger import jsonlogger

from call_intelligence.exceptions import InteractionLogError
from call_intelligence.infrastructure.interfaces import InteractionLog
from call_intelligence.logging import setup_logging

logger = setup_logging()


class JsonLinesInteractionLog(InteractionLog):
    """
    Writes one JSON object per interaction to a local file.

    The file is opened on first use. If it cannot be opened the interaction
    is dropped and the failure is reported on the service log; callers never
    see an error from this class.
    """

    def __init__(self, path: Path):
        self._path = path
        self._file_logger: logging.Logger | None = None

    def record(
        self,
        transcript: Any,
        instruction: str | None,
        result: Any,
        client_address: str | None,
    ) -> None:
        try:
            file_logger = self._get_file_logger()
        except InteractionLogError:
            logger.exception(
                "Interaction not recorded", extra={"path": str(self._path)}
            )
            return

        file_logger.info(
            "interaction",
            extra={
                "transcript": transcript,
                "instruction": instruction,
                "result": _serialize_result(result),
                "client_address": client_address,
            },
        )

    def _get_file_logger(self) -> logging.Logger:
        """
        Returns a logger that writes only to the interaction file.

        Raises:
            InteractionLogError: If the file cannot be created or opened.
        """
        if self._file_logger is not None:
            return self._file_logger

        file_logger = logging.getLogger(f"{__name__}.{self._path.resolve()}")
        if not file_logger.handlers:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                handler = logging.FileHandler(self._path, encoding="utf-8")
            except OSError as e:
                raise InteractionLogError(self._path, cause=e) from e
            handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(message)s"))
            file_logger.addHandler(handler)
            file_logger.setLevel(logging.INFO)
            file_logger.propagate = False

        self._file_logger = file_logger
        return file_logger


def _serialize_result(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump()
    if isinstance(result, Exception):
        return {"error": str(result), "type": type(result).__name__}
    return result
