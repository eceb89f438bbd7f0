from __future__ import annotations

import random
from typing import Any, Callable, Dict, List, Optional, Sequence

from dashboard.constants import ROWS_PER_REPORT
from dashboard.reports.registry import REPORT_FIELDS, FieldSpec


# generator signature: (rng) -> list of rows
ReportGenerator = Callable[[Optional[random.Random]], List[Dict[str, Any]]]


def _field_value(field: FieldSpec, index: int, rng) -> Any:
    if field.kind == "label":
        return f"{field.prefix} {index + 1}"
    if field.kind == "ident":
        return f"{field.prefix}{index + 1:04d}"
    if field.kind == "month_of_row":
        return f"2024-{index + 1:02d}-01"
    if field.kind == "random_month":
        return f"2024-{rng.randint(1, 12):02d}-01"
    if field.kind == "integer":
        return rng.randrange(field.upper)
    if field.kind == "choice":
        return rng.choice(field.choices)
    raise ValueError(f"Unknown field kind '{field.kind}' for field '{field.name}'")


def generate_rows(
    fields: Sequence[FieldSpec],
    rng: Optional[random.Random] = None,
    count: int = ROWS_PER_REPORT,
) -> List[Dict[str, Any]]:
    """
    Build `count` rows; every row has the keys of `fields` in the same order.
    Values are sampled independently on every call (module-level random
    unless an explicit rng is passed).
    """
    rng = rng or random
    return [
        {field.name: _field_value(field, i, rng) for field in fields}
        for i in range(count)
    ]


def _bind(fields: Sequence[FieldSpec]) -> ReportGenerator:
    def _generate(rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
        return generate_rows(fields, rng)
    return _generate


REPORT_GENERATORS: Dict[str, ReportGenerator] = {
    report_id: _bind(fields) for report_id, fields in REPORT_FIELDS.items()
}
