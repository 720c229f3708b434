
from typing import NamedTuple
from .config import EngineConstants, DEFAULT_CONSTANTS
from .utils import IncentiveKind


class IncentiveBreakdown(NamedTuple):
    federal_itc: float
    depreciation_benefit: float
    local: float

    @property
    def total(self) -> float:
        return self.federal_itc + self.depreciation_benefit + self.local

    def net_cost(self, system_cost: float) -> float:
        # not clamped: incentives above cost give a negative net cost
        return system_cost - self.total


def federal_itc(system_cost: float, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    return c.itc_rate * system_cost


def depreciation_benefit(system_cost: float, itc: float, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Tax shield from expensing the ITC-reduced basis in year 1."""
    return c.depreciation_tax_rate * (system_cost - itc)


def local_incentive(system_cost: float, enabled: bool, kind: IncentiveKind, value: float) -> float:
    if not enabled or value <= 0:
        return 0.0
    if kind is IncentiveKind.PERCENT:
        return system_cost * (value / 100.0)
    return float(value)


def incentive_breakdown(system_cost: float, enabled: bool, kind: IncentiveKind, value: float,
                        c: EngineConstants = DEFAULT_CONSTANTS) -> IncentiveBreakdown:
    itc = federal_itc(system_cost, c)
    return IncentiveBreakdown(
        federal_itc=itc,
        depreciation_benefit=depreciation_benefit(system_cost, itc, c),
        local=local_incentive(system_cost, enabled, kind, value),
    )
