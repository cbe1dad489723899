"""
Domain models for Reportes de Salidas.

These dataclasses represent material exits and the values produced while
turning them into spreadsheet reports.
They are framework-agnostic and have no dependencies on storage or UI.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from .exceptions import ValidationError
from .validators import validate_date_string


class MaterialType(str, Enum):
    """
    Material type discriminator of an exit.

    OTHER is the fallback bucket for values upstream may add later.
    """

    ERSA = "ERSA"
    UNBW = "UNBW"
    OTHER = "OTHER"

    @classmethod
    def from_value(cls, value: Any) -> "MaterialType":
        """
        Map a raw upstream value to a known type, or OTHER.

        Matching is exact: " ERSA " or "ersa" are OTHER.
        """
        if isinstance(value, cls):
            return value
        if value in (cls.ERSA.value, cls.UNBW.value):
            return cls(value)
        return cls.OTHER


class ReportCategory(str, Enum):
    """Report view selector: every exit, or one material type."""

    ALL = "all"
    ERSA = "ERSA"
    UNBW = "UNBW"

    @classmethod
    def from_value(cls, value: Union[str, "ReportCategory"]) -> "ReportCategory":
        """
        Parse a category from user input.

        Accepts "all"/"todas" and the material codes in any case.

        Raises:
            ValidationError: If the value names no category
        """
        if isinstance(value, cls):
            return value

        cleaned = str(value or "").strip()
        if cleaned.lower() in ("all", "todas"):
            return cls.ALL
        for category in (cls.ERSA, cls.UNBW):
            if cleaned.upper() == category.value:
                return category

        raise ValidationError(
            f"Categoría desconocida: '{cleaned}'",
            details={"category": cleaned, "allowed": "all, todas, ERSA, UNBW"},
        )


@dataclass(frozen=True)
class MaterialExitRecord:
    """
    A recorded removal of material from inventory.

    Owned by the record store; never mutated by the report pipeline.
    material_type keeps the raw upstream value so reports show it verbatim.
    """

    id: Any
    exit_date: Union[str, date, None]  # Calendar date, usually "YYYY-MM-DD"
    exit_time: str = ""  # Display only
    material_type: str = ""
    material_code: str = ""
    material_name: str = ""
    material_location: str = ""
    quantity: Any = 0
    remaining_stock: Any = 0
    person_name: str = ""
    person_last_name: str = ""
    area: str = ""
    ceco: Optional[str] = None
    sap_code: Optional[str] = None
    work_order: Optional[str] = None
    created_at: Union[str, datetime, None] = None

    @property
    def material_kind(self) -> MaterialType:
        """Material type as a known variant (or OTHER)."""
        return MaterialType.from_value(self.material_type)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "MaterialExitRecord":
        """
        Build a record from an upstream payload.

        Accepts the camelCase keys sent by the material exit API
        (exitDate, materialType, ...) as well as snake_case keys.

        Raises:
            ValidationError: If payload is not a mapping
        """
        if not isinstance(payload, dict):
            raise ValidationError(
                "Registro de salida inválido: se esperaba un objeto",
                details={"type": type(payload).__name__},
            )

        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in payload:
                return payload[camel]
            return payload.get(snake, default)

        return cls(
            id=payload.get("id"),
            exit_date=pick("exitDate", "exit_date"),
            exit_time=pick("exitTime", "exit_time", ""),
            material_type=pick("materialType", "material_type", ""),
            material_code=pick("materialCode", "material_code", ""),
            material_name=pick("materialName", "material_name", ""),
            material_location=pick("materialLocation", "material_location", ""),
            quantity=pick("quantity", "quantity", 0),
            remaining_stock=pick("remainingStock", "remaining_stock", 0),
            person_name=pick("personName", "person_name", ""),
            person_last_name=pick("personLastName", "person_last_name", ""),
            area=pick("area", "area", ""),
            ceco=pick("ceco", "ceco"),
            sap_code=pick("sapCode", "sap_code"),
            work_order=pick("workOrder", "work_order"),
            created_at=pick("createdAt", "created_at"),
        )


@dataclass(frozen=True)
class DateWindow:
    """
    Inclusive [from, to] window over exit dates.

    Bounds are the literal "YYYY-MM-DD" strings entered by the operator;
    an empty string leaves that side unbounded. An inverted window is
    accepted and simply selects nothing.
    """

    date_from: str = ""
    date_to: str = ""

    def __post_init__(self):
        """Validate both bounds."""
        object.__setattr__(self, "date_from", validate_date_string(self.date_from, "date_from"))
        object.__setattr__(self, "date_to", validate_date_string(self.date_to, "date_to"))

    @property
    def start(self) -> Optional[date]:
        """Lower bound as a date (None = unbounded)."""
        return date.fromisoformat(self.date_from) if self.date_from else None

    @property
    def end(self) -> Optional[date]:
        """Upper bound as a date (None = unbounded)."""
        return date.fromisoformat(self.date_to) if self.date_to else None

    @property
    def is_unbounded(self) -> bool:
        return not self.date_from and not self.date_to

    @property
    def is_inverted(self) -> bool:
        """True if both bounds are set and from > to."""
        return bool(self.start and self.end and self.start > self.end)


@dataclass(frozen=True)
class ExportColumn:
    """One spreadsheet column: header label, source field and display width."""

    label: str
    field: str
    width: int


@dataclass(frozen=True)
class ExportRow:
    """
    Spreadsheet projection of a MaterialExitRecord.

    Fields are declared in spreadsheet column order.
    """

    exit_date: Any
    exit_time: Any
    material_type: Any
    material_code: Any
    material_name: Any
    material_location: Any
    quantity: Any
    remaining_stock: Any
    person_name: Any
    person_last_name: Any
    area: Any
    ceco: Any = ""
    sap_code: Any = ""
    work_order: Any = ""

    def values(self) -> List[Any]:
        """Cell values in column order."""
        return [getattr(self, f.name) for f in fields(self)]

    def as_dict(self, columns: Sequence[ExportColumn]) -> Dict[str, Any]:
        """Cell values keyed by header label, for the given column layout."""
        return {column.label: getattr(self, column.field) for column in columns}


@dataclass
class FilterResult:
    """
    Result of filtering exits by a date window.

    malformed_ids lists records dropped because their exit date
    could not be parsed.
    """

    records: List[MaterialExitRecord] = field(default_factory=list)
    malformed_ids: List[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def malformed_count(self) -> int:
        return len(self.malformed_ids)


@dataclass
class CategorizedExits:
    """
    Filtered exits split by material type.

    ersa, unbw and other are disjoint and together equal all.
    """

    all: List[MaterialExitRecord] = field(default_factory=list)
    ersa: List[MaterialExitRecord] = field(default_factory=list)
    unbw: List[MaterialExitRecord] = field(default_factory=list)
    other: List[MaterialExitRecord] = field(default_factory=list)

    def for_category(self, category: ReportCategory) -> List[MaterialExitRecord]:
        """Get the view for a report category."""
        category = ReportCategory.from_value(category)
        if category == ReportCategory.ERSA:
            return self.ersa
        if category == ReportCategory.UNBW:
            return self.unbw
        return self.all


@dataclass
class CategorySummary:
    """Exit counts per category (the figures shown above the download buttons)."""

    total: int = 0
    ersa: int = 0
    unbw: int = 0
    other: int = 0

    @property
    def exportable_categories(self) -> List[ReportCategory]:
        """Categories with at least one exit to export."""
        counts = {
            ReportCategory.ALL: self.total,
            ReportCategory.ERSA: self.ersa,
            ReportCategory.UNBW: self.unbw,
        }
        return [category for category, count in counts.items() if count > 0]


@dataclass(frozen=True)
class PreviewRow:
    """Condensed view of one exit for on-screen preview."""

    fecha: str
    tipo: str
    material: str
    cantidad: Any
    persona: str
    area: str


@dataclass
class ExitPreview:
    """First rows of a filtered set plus how many were left out."""

    rows: List[PreviewRow] = field(default_factory=list)
    remaining: int = 0

    @property
    def has_more(self) -> bool:
        return self.remaining > 0


class ExportStatus(str, Enum):
    """Outcome of one export request."""

    OK = "ok"
    EMPTY = "empty"  # Nothing to export for the requested category
    FAILED = "failed"  # Rows could not be serialized


@dataclass
class ExportResult:
    """
    Result of producing one report artifact.

    content and file_name are only meaningful when status is OK.
    """

    status: ExportStatus
    category: ReportCategory
    file_name: str
    sheet_label: str
    content: Optional[bytes] = None
    row_count: int = 0
    malformed_count: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == ExportStatus.OK

    @property
    def is_empty(self) -> bool:
        return self.status == ExportStatus.EMPTY

    @property
    def failed(self) -> bool:
        return self.status == ExportStatus.FAILED
