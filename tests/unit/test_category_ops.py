"""
Unit tests for Category Operations.

Tests cover partitioning by material type and category counts.
"""

import pytest

from domain.models import MaterialExitRecord, ReportCategory
from operations.category_ops import categorize_exits, get_category_summary


# ==================== Fixtures ====================


@pytest.fixture
def mixed_exits():
    """Exits of every known type plus one unknown type."""
    return [
        MaterialExitRecord(id=1, exit_date="2024-01-05", material_type="ERSA"),
        MaterialExitRecord(id=2, exit_date="2024-01-06", material_type="UNBW"),
        MaterialExitRecord(id=3, exit_date="2024-01-07", material_type="HIBE"),
        MaterialExitRecord(id=4, exit_date="2024-01-08", material_type="ERSA"),
        MaterialExitRecord(id=5, exit_date="2024-01-09", material_type=""),
    ]


def _ids(records):
    return [r.id for r in records]


# ==================== Categorize Tests ====================


def test_categorize_known_types(mixed_exits):
    """Test ERSA and UNBW views."""
    categorized = categorize_exits(mixed_exits)

    assert _ids(categorized.all) == [1, 2, 3, 4, 5]
    assert _ids(categorized.ersa) == [1, 4]
    assert _ids(categorized.unbw) == [2]


def test_categorize_unknown_types_only_in_all(mixed_exits):
    """Test unknown types stay in 'all' and the other bucket."""
    categorized = categorize_exits(mixed_exits)

    assert _ids(categorized.other) == [3, 5]
    assert len(categorized.ersa) + len(categorized.unbw) < len(categorized.all)


def test_categorize_requires_exact_type_match():
    """Test padded or lower-case types are not ERSA/UNBW."""
    exits = [
        MaterialExitRecord(id=1, exit_date="2024-01-05", material_type=" ERSA "),
        MaterialExitRecord(id=2, exit_date="2024-01-05", material_type="ersa"),
        MaterialExitRecord(id=3, exit_date="2024-01-05", material_type="UNBW\n"),
        MaterialExitRecord(id=4, exit_date="2024-01-05", material_type="ERSA"),
    ]
    categorized = categorize_exits(exits)

    assert _ids(categorized.ersa) == [4]
    assert categorized.unbw == []
    assert _ids(categorized.other) == [1, 2, 3]
    assert _ids(categorized.all) == [1, 2, 3, 4]


def test_categorize_partition_coverage_with_known_types_only(mixed_exits):
    """Test ersa + unbw == all when every type is known."""
    known = [r for r in mixed_exits if r.material_type in ("ERSA", "UNBW")]
    categorized = categorize_exits(known)

    assert len(categorized.ersa) + len(categorized.unbw) == len(categorized.all)
    assert categorized.other == []


def test_categorize_views_are_disjoint(mixed_exits):
    """Test no exit is in more than one type view."""
    categorized = categorize_exits(mixed_exits)

    ersa_ids = set(_ids(categorized.ersa))
    unbw_ids = set(_ids(categorized.unbw))
    other_ids = set(_ids(categorized.other))

    assert not ersa_ids & unbw_ids
    assert not ersa_ids & other_ids
    assert not unbw_ids & other_ids
    assert ersa_ids | unbw_ids | other_ids == set(_ids(categorized.all))


def test_categorize_empty():
    """Test categorizing nothing."""
    categorized = categorize_exits([])

    assert categorized.all == []
    assert categorized.for_category(ReportCategory.ERSA) == []


def test_categorize_does_not_alias_input(mixed_exits):
    """Test the 'all' view is a new list."""
    categorized = categorize_exits(mixed_exits)
    categorized.all.append("x")

    assert len(mixed_exits) == 5


# ==================== Summary Tests ====================


def test_get_category_summary(mixed_exits):
    """Test category counts."""
    summary = get_category_summary(categorize_exits(mixed_exits))

    assert summary.total == 5
    assert summary.ersa == 2
    assert summary.unbw == 1
    assert summary.other == 2
    assert summary.exportable_categories == [
        ReportCategory.ALL,
        ReportCategory.ERSA,
        ReportCategory.UNBW,
    ]


def test_get_category_summary_without_unbw(mixed_exits):
    """Test a category with no exits is not exportable."""
    summary = get_category_summary(categorize_exits(mixed_exits[:1]))

    assert summary.unbw == 0
    assert ReportCategory.UNBW not in summary.exportable_categories
