"""
File Service for Reportes de Salidas.

Delivers generated report artifacts to a directory (the download sink).
"""

import logging
from pathlib import Path
from typing import List, Optional

from domain.exceptions import DeliveryError, ValidationError
from domain.validators import sanitize_filename

logger = logging.getLogger(__name__)


class FileService:
    """
    Service for report file delivery.

    Handles:
    - Writing artifact bytes into the output directory
    - Overwriting earlier reports with the same name
    - Listing delivered reports
    """

    def __init__(self, base_dir: Path):
        """
        Initialize file service.

        Args:
            base_dir: Directory reports are written to
        """
        self.base_dir = Path(base_dir)

    def save_report(self, content: bytes, file_name: str) -> Path:
        """
        Write a report artifact into the output directory.

        An existing file with the same name is overwritten.

        Args:
            content: Artifact bytes
            file_name: Target file name (sanitized before use)

        Returns:
            Path to written file

        Raises:
            ValidationError: If content or file name is empty
            DeliveryError: If the directory or file cannot be written

        Example:
            >>> service = FileService(Path('./reportes'))
            >>> service.save_report(result.content, result.file_name)
        """
        if not content:
            raise ValidationError(
                "No se puede guardar un reporte vacío",
                details={"file_name": file_name},
            )

        safe_name = sanitize_filename(file_name or "")
        if not safe_name:
            raise ValidationError(
                "Nombre de archivo inválido",
                details={"file_name": file_name},
            )

        dest_path = self.base_dir / safe_name
        if dest_path.exists():
            logger.info(f"Overwriting existing report: {dest_path}")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            dest_path.write_bytes(content)
        except OSError as e:
            logger.error(f"Failed to write report {dest_path}: {e}")
            raise DeliveryError(
                f"No se pudo guardar el reporte: {e}",
                details={"file_path": str(dest_path), "error": str(e)},
            )

        logger.info(f"Saved report: {dest_path} ({len(content)} bytes)")
        return dest_path

    def list_reports(self, pattern: str = "*.xlsx") -> List[Path]:
        """
        List delivered reports, sorted by name.

        Args:
            pattern: Glob pattern for report files

        Returns:
            List of report paths (empty if directory does not exist)
        """
        if not self.base_dir.exists():
            return []
        return sorted(p for p in self.base_dir.glob(pattern) if p.is_file())

    def get_report_path(self, file_name: str) -> Optional[Path]:
        """Get path of a delivered report, or None if it does not exist."""
        path = self.base_dir / sanitize_filename(file_name)
        return path if path.is_file() else None
