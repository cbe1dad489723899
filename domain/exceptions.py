"""
Custom exceptions for Reportes de Salidas.

All exceptions inherit from ReportesBaseException for easier catching.
Each exception includes a message and optional details dict.
"""


class ReportesBaseException(Exception):
    """Base exception for all report-related errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            details: Optional dict with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """String representation with details if available."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ValidationError(ReportesBaseException):
    """Caller input validation failed."""
    pass


class RecordStoreError(ReportesBaseException):
    """Material exit records could not be retrieved."""
    pass


class ReportGenerationError(ReportesBaseException):
    """Report generation failed."""
    pass


class SerializationError(ReportGenerationError):
    """Export rows could not be encoded into a spreadsheet."""
    pass


class DeliveryError(ReportGenerationError):
    """A generated report could not be written to the output directory."""
    pass
