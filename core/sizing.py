
import math
from .config import EngineConstants, DEFAULT_CONSTANTS


def panels_needed(pool_area_sqft: float, c: EngineConstants = DEFAULT_CONSTANTS) -> int:
    # collector area is a fixed share of pool surface, rounded up to whole panels
    return max(int(math.ceil(c.coverage_ratio * pool_area_sqft / c.panel_area_sqft)), 0)


def system_cost(panels: int, c: EngineConstants = DEFAULT_CONSTANTS) -> float:
    return panels * c.panel_cost
