
from typing import List, Optional, Sequence, Tuple
from .utils import CashFlowPoint, round_half_up


def escalate(base: float, rate: float, years: int) -> Tuple[List[float], float]:
    """Yearly values growing at `rate` from `base` in year 1, and their direct sum."""
    values = []
    total = 0.0
    for t in range(1, years+1):
        v = base * ((1.0 + rate) ** (t-1))
        values.append(v)
        total += v
    return values, total


def payback_year(savings: Sequence[float], net_cost: float) -> Optional[int]:
    # first year whose cumulative savings cover the net cost; ties count
    cum = 0.0
    for i, s in enumerate(savings, start=1):
        cum += s
        if cum >= net_cost:
            return i
    return None


def roi_percent(total_savings: float, net_cost: float) -> Optional[float]:
    if net_cost == 0:
        return None
    return (total_savings - net_cost) / net_cost * 100.0


def cumulative_cash_flow(net_cost: float, savings: Sequence[float]) -> List[CashFlowPoint]:
    """Year 0..n running position for charting.

    Each point is rounded on its own; year t adds to the rounded point of
    year t-1, not to an unrounded running sum.
    """
    cum = round_half_up(-net_cost)
    points = [CashFlowPoint(0, cum)]
    for t, s in enumerate(savings, start=1):
        cum = round_half_up(cum + s)
        points.append(CashFlowPoint(t, cum))
    return points
