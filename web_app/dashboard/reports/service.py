from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from dashboard.reports.generators import REPORT_GENERATORS
from dashboard.reports.registry import REPORT_SPECS


def is_known_report(report_type: Any) -> bool:
    return isinstance(report_type, str) and report_type in REPORT_SPECS


def generate_report_rows(report_type: str, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    if not is_known_report(report_type):
        raise KeyError(f"Unknown report type '{report_type}'")

    gen = REPORT_GENERATORS.get(report_type)
    if not gen:
        raise KeyError(f"No generator registered for report type '{report_type}'")

    return gen(rng)
