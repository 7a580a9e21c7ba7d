# src/wfm_metrics/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class StaffingConfig:
    # Seconds
    planned_aht_seconds: float = 1560.0
    service_time_seconds: float = 30.0

    # Percentages (0-100)
    sla_target: float = 80.0
    in_office_shrinkage: float = 0.0
    out_of_office_shrinkage: float = 34.88
    billable_break: float = 5.88

    @property
    def shrinkage_percentages(self) -> Tuple[float, float, float]:
        """(out-of-office, in-office, billable break), the order the chain is applied in."""
        return (
            float(self.out_of_office_shrinkage),
            float(self.in_office_shrinkage),
            float(self.billable_break),
        )

    @property
    def sla_target_fraction(self) -> float:
        return float(self.sla_target) / 100.0


_PERCENT_FIELDS = ("in_office_shrinkage", "out_of_office_shrinkage", "billable_break")

ENV_FIELDS: Dict[str, str] = {
    "PLANNED_AHT": "planned_aht_seconds",
    "SERVICE_TIME": "service_time_seconds",
    "SLA_TARGET": "sla_target",
    "IN_OFFICE_SHRINKAGE": "in_office_shrinkage",
    "OUT_OF_OFFICE_SHRINKAGE": "out_of_office_shrinkage",
    "BILLABLE_BREAK": "billable_break",
}


def validate_config(cfg: StaffingConfig) -> None:
    for name in _PERCENT_FIELDS:
        value = float(getattr(cfg, name))
        if not (0.0 <= value < 100.0):
            raise ValueError(f"{name} must be in [0, 100), got {value}")

    if not (float(cfg.planned_aht_seconds) > 0):
        raise ValueError("planned_aht_seconds must be > 0")

    if not (float(cfg.service_time_seconds) > 0):
        raise ValueError("service_time_seconds must be > 0")

    if not (0.0 < float(cfg.sla_target) <= 100.0):
        raise ValueError("sla_target must be in (0, 100]")


def load_config_from_env(
    *,
    prefix: str = "WFM_",
    base: Optional[StaffingConfig] = None,
) -> StaffingConfig:
    """
    Builds a StaffingConfig from environment variables, e.g. WFM_SLA_TARGET=85.
    Unset variables keep the base (default) value.
    """
    cfg = base or StaffingConfig()
    values = {f.name: getattr(cfg, f.name) for f in fields(StaffingConfig)}

    for suffix, name in ENV_FIELDS.items():
        var = f"{prefix}{suffix}"
        raw = os.getenv(var, "").strip()
        if not raw:
            continue
        try:
            values[name] = float(raw)
        except ValueError:
            raise RuntimeError(f"Environment variable {var} must be numeric, got {raw!r}") from None

    out = StaffingConfig(**values)
    validate_config(out)
    return out


__all__ = [
    "StaffingConfig",
    "ENV_FIELDS",
    "validate_config",
    "load_config_from_env",
]
