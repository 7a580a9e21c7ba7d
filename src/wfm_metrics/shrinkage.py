from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ShrinkageStep:
    label: str
    percent: float
    before: float
    after: float


# Order used everywhere a shrinkage chain is shown or applied.
SHRINKAGE_LABELS = ("Out-of-office shrinkage", "In-office shrinkage", "Billable break")


# Relative distance under which a product is taken to be a whole number.
WHOLE_TOLERANCE: float = 1e-9


def _keep(pct: float) -> float:
    return 1.0 - float(pct) / 100.0


def _snap_whole(value: float) -> float:
    # 90 * 0.70 comes out as 62.99999999999999; headcounts must stay whole.
    nearest = round(value)
    if abs(value - nearest) <= WHOLE_TOLERANCE * max(1.0, abs(value)):
        return float(nearest)
    return value


def shrinkage_factor(out_of_office_pct: float, in_office_pct: float, billable_break_pct: float) -> float:
    """Share of a raw quantity left after all three reductions."""
    return _keep(out_of_office_pct) * _keep(in_office_pct) * _keep(billable_break_pct)


def effective_quantity(raw: float, out_of_office_pct: float, in_office_pct: float, billable_break_pct: float) -> float:
    """
    Applies the three percentage reductions to a raw volume or headcount:

      effective = raw * (1 - ooo/100) * (1 - ino/100) * (1 - bb/100)

    Results within floating-point noise of a whole number are returned as
    that whole number. Percentages are not validated here; see
    config.validate_config.
    """
    value = ((float(raw) * _keep(out_of_office_pct)) * _keep(in_office_pct)) * _keep(billable_break_pct)
    return _snap_whole(value)


def shrinkage_breakdown(
    raw: float,
    out_of_office_pct: float,
    in_office_pct: float,
    billable_break_pct: float,
) -> List[ShrinkageStep]:
    """Step-by-step view of effective_quantity, one entry per factor."""
    steps: List[ShrinkageStep] = []
    value = float(raw)
    for label, pct in zip(SHRINKAGE_LABELS, (out_of_office_pct, in_office_pct, billable_break_pct)):
        after = _snap_whole(value * _keep(pct))
        steps.append(ShrinkageStep(label=label, percent=float(pct), before=value, after=after))
        value = after
    return steps


__all__ = [
    "ShrinkageStep",
    "WHOLE_TOLERANCE",
    "SHRINKAGE_LABELS",
    "shrinkage_factor",
    "effective_quantity",
    "shrinkage_breakdown",
]
