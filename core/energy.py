
from .config import EngineConstants, DEFAULT_CONSTANTS
from .utils import Season


def season_days(season: Season, c: EngineConstants = DEFAULT_CONSTANTS) -> int:
    # flat approximation, not derived from a calendar
    if season is Season.FULL_YEAR:
        return c.full_year_days
    return c.march_to_thanksgiving_days


def annual_btu(panels: int, days: int, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    return panels * c.panel_btu_per_day * days


def annual_therms(btu: float, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Gas the boiler would have burned to deliver the same heat."""
    return btu / (c.btu_per_therm * c.boiler_efficiency)


def first_year_savings(therms: float, gas_cost_per_therm: float) -> float:
    return therms * gas_cost_per_therm
