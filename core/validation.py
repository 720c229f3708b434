
import math
import re
from typing import List
from .config import AppDefaults, APP_DEFAULTS
from .utils import EstimateInputs


def inputs_are_finite(p: EstimateInputs) -> bool:
    return all(math.isfinite(v) for v in (p.pool_area_sqft, p.gas_cost_per_therm,
                                          p.local_incentive_value, p.desired_temp_f))


def validate_inputs(p: EstimateInputs, d: AppDefaults = APP_DEFAULTS) -> List[str]:
    """Problems worth showing next to the form. The engine accepts all finite values anyway."""
    if not inputs_are_finite(p):
        return ['Inputs must be finite numbers.']
    problems = []
    if p.pool_area_sqft < 0:
        problems.append('Pool surface area cannot be negative.')
    if p.gas_cost_per_therm <= 0:
        problems.append('Natural gas cost must be greater than zero.')
    if p.local_incentive_enabled and p.local_incentive_value < 0:
        problems.append('Local incentive cannot be negative.')
    if not d.min_temp_f <= p.desired_temp_f <= d.max_temp_f:
        problems.append(f'Desired pool temperature should be between {d.min_temp_f:.0f} and {d.max_temp_f:.0f} °F.')
    return problems


def coerce_incentive_value(text: str) -> float:
    """Parse the free-text local incentive field; leading zeros dropped, blank is 0."""
    cleaned = re.sub(r'^0+(?!\.|$)', '', (text or '').strip())
    if not cleaned:
        return 0.0
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(f'not a finite number: {text!r}')
    return value
