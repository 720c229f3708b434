
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Season(Enum):
    FULL_YEAR = 'year'
    MARCH_TO_THANKSGIVING = 'march'

    @property
    def label(self) -> str:
        return 'Year-round' if self is Season.FULL_YEAR else 'March to Thanksgiving'

    @classmethod
    def from_label(cls, label: str) -> 'Season':
        for s in cls:
            if label in (s.value, s.label):
                return s
        raise ValueError(f'Unknown operating season: {label!r}')


class IncentiveKind(Enum):
    PERCENT = 'percent'
    FIXED_AMOUNT = 'amount'

    @property
    def symbol(self) -> str:
        return '%' if self is IncentiveKind.PERCENT else '$'

    @classmethod
    def from_symbol(cls, symbol: str) -> 'IncentiveKind':
        for k in cls:
            if symbol in (k.value, k.symbol):
                return k
        raise ValueError(f'Unknown local incentive kind: {symbol!r}')


@dataclass(frozen=True)
class EstimateInputs:
    pool_area_sqft: float
    gas_cost_per_therm: float
    season: Season = Season.FULL_YEAR
    desired_temp_f: float = 80.0  # informational, not used in formulas
    local_incentive_enabled: bool = False
    local_incentive_kind: IncentiveKind = IncentiveKind.PERCENT
    local_incentive_value: float = 0.0
    address: str = ''


class CashFlowPoint(NamedTuple):
    year: int
    cumulative: int


@dataclass(frozen=True)
class EstimateResult:
    panels_needed: int
    system_cost: float
    federal_itc: float
    depreciation_benefit: float
    local_incentive_amount: float
    total_incentives: float
    net_system_cost: float
    season_days: int
    annual_btu: float
    annual_therms: float
    first_year_savings: float
    annual_savings_20: Tuple[float, ...]
    annual_savings_25: Tuple[float, ...]
    total_20yr_savings: float
    total_25yr_savings: float
    payback_years: Optional[int]     # None: not reached within the ROI horizon
    roi_20_percent: Optional[float]  # None: net system cost is zero
    cumulative_cash_flow: Tuple[CashFlowPoint, ...]
    annual_co2_tons: float
    annual_trees_equivalent: int

    @property
    def has_payback(self) -> bool:
        return self.payback_years is not None

    @property
    def has_roi(self) -> bool:
        return self.roi_20_percent is not None


def round_half_up(value: float) -> int:
    """Round half up to a whole unit (-0.5 -> 0, 2.5 -> 3)."""
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)
