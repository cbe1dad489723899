"""
Category Operations for Reportes de Salidas.

Split filtered exits by material type.
Pure functions - no I/O, no side effects.
"""

import logging
from typing import List

from domain.models import (
    CategorizedExits,
    CategorySummary,
    MaterialExitRecord,
    MaterialType,
)

logger = logging.getLogger(__name__)


def categorize_exits(records: List[MaterialExitRecord]) -> CategorizedExits:
    """
    Partition exits into material type views.

    all keeps every record; ersa and unbw hold the known types and other
    catches any type upstream may add, so nothing drops out of all.
    Order inside every view follows the input.

    Args:
        records: Filtered exits

    Returns:
        CategorizedExits with all, ersa, unbw and other views
    """
    categorized = CategorizedExits(all=list(records))

    for record in records:
        kind = record.material_kind
        if kind == MaterialType.ERSA:
            categorized.ersa.append(record)
        elif kind == MaterialType.UNBW:
            categorized.unbw.append(record)
        else:
            categorized.other.append(record)

    if categorized.other:
        logger.info(
            f"{len(categorized.other)} exits with unknown material type "
            f"(only in 'all'): {sorted({str(r.material_type) for r in categorized.other})}"
        )

    logger.debug(
        f"Categorized {len(categorized.all)} exits: "
        f"ERSA={len(categorized.ersa)}, UNBW={len(categorized.unbw)}, "
        f"other={len(categorized.other)}"
    )
    return categorized


def get_category_summary(categorized: CategorizedExits) -> CategorySummary:
    """
    Count exits per category.

    Example:
        >>> summary = get_category_summary(categorize_exits(result.records))
        >>> print(f"Total Salidas: {summary.total}")
    """
    return CategorySummary(
        total=len(categorized.all),
        ersa=len(categorized.ersa),
        unbw=len(categorized.unbw),
        other=len(categorized.other),
    )
