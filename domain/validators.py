"""
Input validators for Reportes de Salidas.

These validators check operator input (date bounds, sheet labels, paths)
before it reaches the report pipeline.
All validators raise ValidationError on failure.
"""

import re
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from .exceptions import ValidationError


DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Excel rejects these in worksheet names
INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
MAX_SHEET_LABEL_LENGTH = 31


def validate_date_string(value: Union[str, date, None], field_name: str = "date") -> str:
    """
    Validate a date window bound.

    Empty values mean "unbounded" and are returned as "".
    date objects are converted to their ISO string.

    Args:
        value: Bound entered by the operator ("YYYY-MM-DD", date, or empty)
        field_name: Name used in error details

    Returns:
        Cleaned "YYYY-MM-DD" string, or "" if unbounded

    Raises:
        ValidationError: If value is not a calendar date
    """
    if value is None:
        return ""

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    cleaned = str(value).strip()
    if not cleaned:
        return ""

    if not DATE_PATTERN.match(cleaned):
        raise ValidationError(
            f"Fecha inválida: '{cleaned}'. Formato esperado: AAAA-MM-DD",
            details={"field": field_name, "value": cleaned},
        )

    try:
        date.fromisoformat(cleaned)
    except ValueError:
        raise ValidationError(
            f"Fecha inexistente: '{cleaned}'",
            details={"field": field_name, "value": cleaned},
        )

    return cleaned


def validate_sheet_label(label: str) -> str:
    """
    Validate a worksheet name.

    Rules:
    - Not empty
    - Max 31 characters
    - None of [ ] : * ? / \\

    Returns:
        Cleaned label (trimmed)

    Raises:
        ValidationError: If invalid
    """
    if not label or not label.strip():
        raise ValidationError("Sheet label cannot be empty")

    cleaned = label.strip()

    if len(cleaned) > MAX_SHEET_LABEL_LENGTH:
        raise ValidationError(
            f"Sheet label too long: {len(cleaned)} characters (max {MAX_SHEET_LABEL_LENGTH})",
            details={"sheet_label": cleaned},
        )

    if INVALID_SHEET_CHARS.search(cleaned):
        raise ValidationError(
            f"Sheet label contains invalid characters: '{cleaned}'",
            details={"sheet_label": cleaned, "forbidden": "[ ] : * ? / \\"},
        )

    return cleaned


def validate_file_path(
    file_path: Union[Path, str],
    must_exist: bool = True,
    allowed_extensions: Optional[list] = None,
) -> Path:
    """
    Validate file path.

    Args:
        file_path: File path to validate
        must_exist: If True, file must exist on disk
        allowed_extensions: List of allowed extensions (e.g., ['.json'])

    Returns:
        Path object

    Raises:
        ValidationError: If invalid
    """
    if not file_path:
        raise ValidationError("File path cannot be empty")

    path = Path(file_path)

    if must_exist and not path.exists():
        raise ValidationError(
            f"File does not exist: {path}",
            details={"file_path": str(path)},
        )

    if allowed_extensions:
        if path.suffix.lower() not in [ext.lower() for ext in allowed_extensions]:
            raise ValidationError(
                f"Invalid file extension: {path.suffix}. Allowed: {allowed_extensions}",
                details={"file_path": str(path), "allowed": allowed_extensions},
            )

    return path


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename for safe storage.

    Removes/replaces characters that could cause filesystem issues.

    Args:
        filename: Original filename

    Returns:
        Safe filename
    """
    # Remove path separators
    cleaned = filename.replace("/", "_").replace("\\", "_")

    cleaned = re.sub(r'[<>:"|?*]', "_", cleaned)

    # Remove leading/trailing dots and spaces
    cleaned = cleaned.strip(". ")

    if len(cleaned) > 255:
        name, ext = cleaned.rsplit(".", 1) if "." in cleaned else (cleaned, "")
        cleaned = name[: 255 - len(ext) - 1] + "." + ext if ext else name[:255]

    return cleaned
