
from .config import EngineConstants, DEFAULT_CONSTANTS
from .utils import round_half_up


def annual_co2_tons(therms: float, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Tons of CO2 from the natural gas no longer burned."""
    return therms * c.co2_tons_per_therm


def trees_equivalent(co2_tons: float, c: EngineConstants = DEFAULT_CONSTANTS) -> int:
    return round_half_up(co2_tons / c.co2_tons_per_tree)
