"""
JSON implementation of RecordStoreInterface.

Reads material exits from a JSON export of the exits API: either a plain
array of exit objects or an object with a "data" array.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from config.constants import ERROR_MESSAGES, SOURCE_EXTENSIONS
from domain.exceptions import RecordStoreError, ValidationError
from domain.models import MaterialExitRecord
from domain.validators import validate_file_path
from .interface import RecordStoreInterface

logger = logging.getLogger(__name__)


class JsonRecordStore(RecordStoreInterface):
    """
    Record store backed by a JSON file.

    The file is read on every get_all() call so the caller always sees
    the current snapshot.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize JSON record store.

        Args:
            path: Path to JSON file
            encoding: File encoding
        """
        self.path = Path(path)
        self.encoding = encoding

    def get_all(self) -> List[MaterialExitRecord]:
        """
        Read and map every exit in the file.

        Raises:
            RecordStoreError: If file is missing, unreadable or malformed
        """
        try:
            path = validate_file_path(self.path, must_exist=True, allowed_extensions=SOURCE_EXTENSIONS)
        except ValidationError as e:
            raise RecordStoreError(
                ERROR_MESSAGES["source_not_found"].format(path=self.path),
                details={"path": str(self.path), "error": e.message},
            )

        try:
            payload = json.loads(path.read_text(encoding=self.encoding))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise RecordStoreError(
                ERROR_MESSAGES["invalid_source"].format(path=path),
                details={"path": str(path), "error": str(e)},
            )

        items = self._extract_items(payload)

        records = []
        for idx, item in enumerate(items):
            try:
                records.append(MaterialExitRecord.from_dict(item))
            except ValidationError as e:
                raise RecordStoreError(
                    f"Registro {idx} inválido en {path.name}",
                    details={"path": str(path), "index": idx, "error": e.message},
                )

        logger.info(f"Loaded {len(records)} material exits from {path.name}")
        return records

    def _extract_items(self, payload: Any) -> List[Any]:
        """Get the list of exit objects from the decoded JSON."""
        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]

        if not isinstance(payload, list):
            raise RecordStoreError(
                ERROR_MESSAGES["invalid_source"].format(path=self.path),
                details={"path": str(self.path), "error": "expected a list of exits"},
            )

        return payload
