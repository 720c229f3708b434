
from typing import List, Tuple
import pandas as pd
from .utils import EstimateInputs, EstimateResult
from .formatting import fmt_number, to_usd, fmt_payback, fmt_roi, fmt_co2, season_label


def summary_rows(p: EstimateInputs, r: EstimateResult) -> List[Tuple[str, str]]:
    """Label/value pairs for the results table, in display order."""
    rows = [
        ('System Size', f"{r.panels_needed} x 4x10 panels"),
        ('Pool Surface Area', f"{fmt_number(p.pool_area_sqft)} sqft"),
        ('Desired Pool Temp', f"{p.desired_temp_f:g} °F"),
        ('Operating Season', season_label(p.season, r.season_days)),
        ('Pre-incentive Cost', to_usd(r.system_cost)),
        ('Federal Incentive (ITC)', to_usd(r.federal_itc)),
        ('Federal Depreciation (100% Year 1, 30% rate)', to_usd(r.depreciation_benefit)),
    ]
    if r.local_incentive_amount > 0:
        rows.append(('Local Incentive', to_usd(r.local_incentive_amount)))
    rows += [
        ('Net System Cost', to_usd(r.net_system_cost)),
        ('Annual Savings', f"{fmt_number(r.annual_therms)} therms, {to_usd(r.first_year_savings)}"),
        ('Simple Payback', f"{fmt_payback(r.payback_years)} years"),
        ('20-Year ROI', f"{fmt_roi(r.roi_20_percent)}%"),
        ('Annual CO₂ Offset', f"{fmt_co2(r.annual_co2_tons)} tons (~{r.annual_trees_equivalent} trees)"),
    ]
    return rows


def summary_frame(p: EstimateInputs, r: EstimateResult) -> pd.DataFrame:
    return pd.DataFrame(summary_rows(p, r), columns=['Item', 'Value'])


def cash_flow_frame(r: EstimateResult) -> pd.DataFrame:
    return pd.DataFrame([pt._asdict() for pt in r.cumulative_cash_flow]).rename(
        columns={'cumulative': 'Cumulative'})


def savings_frame(r: EstimateResult) -> pd.DataFrame:
    """Escalated yearly savings over the chart horizon."""
    horizon = len(r.annual_savings_20)
    rows = []
    for t, s in enumerate(r.annual_savings_25, start=1):
        rows.append({
            'year': t,
            'savings': s,
            'Counts toward payback': t <= horizon,
        })
    return pd.DataFrame(rows)
