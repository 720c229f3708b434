
import logging
from .config import EngineConstants, DEFAULT_CONSTANTS
from .utils import EstimateInputs, EstimateResult
from .sizing import panels_needed, system_cost
from .incentives import incentive_breakdown
from .energy import season_days, annual_btu, annual_therms, first_year_savings
from .finance import escalate, payback_year, roi_percent, cumulative_cash_flow
from .carbon import annual_co2_tons, trees_equivalent

logger = logging.getLogger(__name__)


def compute_estimate(p: EstimateInputs, c: EngineConstants = DEFAULT_CONSTANTS) -> EstimateResult:
    """Turn one set of form inputs into every figure the summary, chart and report show.

    Pure and deterministic. Undefined outcomes (no payback inside the ROI
    horizon, ROI over a zero net cost) come back as None instead of raising.
    """
    panels = panels_needed(p.pool_area_sqft, c)
    cost = system_cost(panels, c)
    inc = incentive_breakdown(cost, p.local_incentive_enabled, p.local_incentive_kind,
                              p.local_incentive_value, c)
    net_cost = inc.net_cost(cost)

    days = season_days(p.season, c)
    btu = annual_btu(panels, days, c)
    therms = annual_therms(btu, c)
    savings = first_year_savings(therms, p.gas_cost_per_therm)

    # payback and ROI use the shorter horizon, the chart the longer one
    series_20, total_20 = escalate(savings, c.escalation_rate, c.roi_horizon_years)
    series_25, total_25 = escalate(savings, c.escalation_rate, c.chart_horizon_years)
    payback = payback_year(series_20, net_cost)
    roi = roi_percent(total_20, net_cost)
    cash_flow = cumulative_cash_flow(net_cost, series_25)

    co2 = annual_co2_tons(therms, c)

    logger.debug('estimate: area=%s panels=%d net_cost=%.2f payback=%s roi=%s',
                 p.pool_area_sqft, panels, net_cost, payback, roi)

    return EstimateResult(
        panels_needed=panels,
        system_cost=cost,
        federal_itc=inc.federal_itc,
        depreciation_benefit=inc.depreciation_benefit,
        local_incentive_amount=inc.local,
        total_incentives=inc.total,
        net_system_cost=net_cost,
        season_days=days,
        annual_btu=btu,
        annual_therms=therms,
        first_year_savings=savings,
        annual_savings_20=tuple(series_20),
        annual_savings_25=tuple(series_25),
        total_20yr_savings=total_20,
        total_25yr_savings=total_25,
        payback_years=payback,
        roi_20_percent=roi,
        cumulative_cash_flow=tuple(cash_flow),
        annual_co2_tons=co2,
        annual_trees_equivalent=trees_equivalent(co2, c),
    )
