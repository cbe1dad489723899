"""
Unit tests for Report Operations.

Tests cover artifact production per category, result states and summaries.
"""

import pytest
from io import BytesIO
from unittest.mock import Mock
from openpyxl import load_workbook

from domain.exceptions import SerializationError, ValidationError
from domain.models import DateWindow, ExportStatus, MaterialExitRecord, ReportCategory
from operations.report_ops import (
    produce_artifact,
    produce_all_artifacts,
    get_report_summary,
)


# ==================== Fixtures ====================


def _exit(record_id, exit_date, material_type, **kwargs):
    return MaterialExitRecord(
        id=record_id,
        exit_date=exit_date,
        exit_time="10:00",
        material_type=material_type,
        material_code=f"MAT-{record_id}",
        material_name=f"Material {record_id}",
        material_location="Bodega",
        quantity=1,
        remaining_stock=5,
        person_name="Ana",
        person_last_name="Rojas",
        area="Mantención",
        **kwargs,
    )


@pytest.fixture
def sample_exits():
    """Three exits: two in January, one in February."""
    return [
        _exit(1, "2024-01-05", "ERSA", ceco="CC-1"),
        _exit(2, "2024-01-15", "UNBW"),
        _exit(3, "2024-02-01", "ERSA"),
    ]


@pytest.fixture
def january():
    """January 2024 window."""
    return DateWindow("2024-01-01", "2024-01-31")


def _data_rows(content):
    sheet = load_workbook(BytesIO(content)).active
    return [[cell.value for cell in row] for row in sheet.iter_rows(min_row=2)]


# ==================== Produce Artifact Tests ====================


def test_produce_artifact_all(sample_exits, january):
    """Test 'all' report holds every exit in the window."""
    result = produce_artifact(sample_exits, january, ReportCategory.ALL)

    assert result.status == ExportStatus.OK
    assert result.row_count == 2
    assert result.file_name == "salidas_materiales_todas_2024-01-01_2024-01-31.xlsx"
    assert result.sheet_label == "Salidas Todas"
    assert [row[0] for row in _data_rows(result.content)] == ["2024-01-05", "2024-01-15"]


def test_produce_artifact_ersa(sample_exits, january):
    """Test ERSA report holds only the January ERSA exit."""
    result = produce_artifact(sample_exits, january, "ERSA")

    assert result.ok
    assert result.category == ReportCategory.ERSA
    assert result.row_count == 1
    assert result.file_name == "salidas_materiales_ersa_2024-01-01_2024-01-31.xlsx"
    assert load_workbook(BytesIO(result.content)).sheetnames == ["Salidas ERSA"]

    row = _data_rows(result.content)[0]
    assert row[0] == "2024-01-05"
    assert row[11] == "CC-1"


def test_produce_artifact_unbw(sample_exits, january):
    """Test UNBW report."""
    result = produce_artifact(sample_exits, january, ReportCategory.UNBW)

    assert result.ok
    assert result.row_count == 1
    assert _data_rows(result.content)[0][2] == "UNBW"


def test_produce_artifact_optional_fields_blank(sample_exits, january):
    """Test absent cost references export as empty cells, not missing columns."""
    result = produce_artifact(sample_exits, january, ReportCategory.UNBW)
    sheet = load_workbook(BytesIO(result.content)).active

    assert sheet.max_column == 14
    assert [sheet.cell(row=2, column=c).value for c in (12, 13, 14)] in (
        [None, None, None],
        ["", "", ""],
    )


def test_produce_artifact_empty_selection(sample_exits):
    """Test no exits for the category gives EMPTY without content."""
    window = DateWindow("2024-02-01", "2024-02-29")
    result = produce_artifact(sample_exits, window, ReportCategory.UNBW)

    assert result.status == ExportStatus.EMPTY
    assert result.content is None
    assert result.row_count == 0
    assert result.message == "No hay datos para exportar con los filtros seleccionados"
    assert result.file_name == "salidas_materiales_unbw_2024-02-01_2024-02-29.xlsx"


def test_produce_artifact_inverted_window(sample_exits):
    """Test an inverted window gives EMPTY, not an exception."""
    result = produce_artifact(sample_exits, DateWindow("2024-01-31", "2024-01-01"), "all")
    assert result.is_empty


def test_produce_artifact_empty_does_not_call_writer(january):
    """Test nothing is serialized for an empty selection."""
    writer = Mock()
    result = produce_artifact([], january, ReportCategory.ALL, excel_writer=writer)

    assert result.is_empty
    writer.write_bytes.assert_not_called()


def test_produce_artifact_unbounded_window(sample_exits):
    """Test unbounded window exports everything with empty name segments."""
    result = produce_artifact(sample_exits, DateWindow(), ReportCategory.ALL)

    assert result.row_count == 3
    assert result.file_name == "salidas_materiales_todas__.xlsx"


def test_produce_artifact_reports_malformed_dates(sample_exits, january):
    """Test malformed exit dates are excluded and counted."""
    exits = sample_exits + [_exit(9, "sin fecha", "ERSA")]
    result = produce_artifact(exits, january, ReportCategory.ERSA)

    assert result.ok
    assert result.row_count == 1
    assert result.malformed_count == 1


def test_produce_artifact_serialization_failure(sample_exits, january):
    """Test serializer errors give FAILED instead of raising."""
    writer = Mock()
    writer.write_bytes.side_effect = SerializationError("Cannot convert value")

    result = produce_artifact(sample_exits, january, ReportCategory.ALL, excel_writer=writer)

    assert result.status == ExportStatus.FAILED
    assert result.content is None
    assert result.row_count == 2
    assert "Cannot convert value" in result.message


def test_produce_artifact_real_serialization_failure(january):
    """Test an unencodable value fails the artifact with the real writer."""
    exits = [_exit(1, "2024-01-10", "ERSA", work_order="OT\x01")]
    result = produce_artifact(exits, january, ReportCategory.ERSA)

    assert result.failed
    assert result.content is None


def test_produce_artifact_unknown_category(sample_exits, january):
    """Test unknown category is a caller error."""
    with pytest.raises(ValidationError):
        produce_artifact(sample_exits, january, "HIBE")


def test_produce_artifact_is_deterministic(sample_exits, january):
    """Test identical inputs give identical bytes and names."""
    first = produce_artifact(sample_exits, january, ReportCategory.ALL)
    second = produce_artifact(list(sample_exits), january, ReportCategory.ALL)

    assert first.content == second.content
    assert first.file_name == second.file_name


def test_produce_artifact_does_not_modify_records(sample_exits, january):
    """Test the input collection is untouched."""
    before = list(sample_exits)
    produce_artifact(sample_exits, january, ReportCategory.ERSA)
    assert sample_exits == before


# ==================== Produce All Tests ====================


def test_produce_all_artifacts(sample_exits, january):
    """Test every category is produced independently."""
    results = produce_all_artifacts(sample_exits, january)

    assert list(results) == [ReportCategory.ALL, ReportCategory.ERSA, ReportCategory.UNBW]
    assert [r.row_count for r in results.values()] == [2, 1, 1]
    assert all(r.ok for r in results.values())


def test_produce_all_artifacts_mixed_outcomes(sample_exits):
    """Test an empty category does not affect the others."""
    results = produce_all_artifacts(sample_exits, DateWindow("2024-02-01", ""))

    assert results[ReportCategory.ALL].ok
    assert results[ReportCategory.ERSA].ok
    assert results[ReportCategory.UNBW].is_empty


# ==================== Summary Tests ====================


def test_get_report_summary(sample_exits):
    """Test report summary counts."""
    results = list(produce_all_artifacts(sample_exits, DateWindow("2024-02-01", "")).values())
    summary = get_report_summary(results)

    assert summary["total"] == 3
    assert summary["produced"] == 2
    assert summary["empty"] == 1
    assert summary["failed"] == 0
    assert summary["rows"] == 2
    assert summary["files"] == [
        "salidas_materiales_todas_2024-02-01_.xlsx",
        "salidas_materiales_ersa_2024-02-01_.xlsx",
    ]


def test_get_report_summary_empty():
    """Test summary of no results."""
    summary = get_report_summary([])

    assert summary["total"] == 0
    assert summary["files"] == []
