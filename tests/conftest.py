import pytest

from core.utils import EstimateInputs, Season, IncentiveKind
from core.estimate import compute_estimate


@pytest.fixture
def reference_inputs():
    """2,000 sqft pool, year-round, $2.00/therm, no local incentive."""
    return EstimateInputs(pool_area_sqft=2000, gas_cost_per_therm=2.00, season=Season.FULL_YEAR,
                          address='95035')


@pytest.fixture
def reference_result(reference_inputs):
    return compute_estimate(reference_inputs)


@pytest.fixture
def incentive_inputs():
    """Same pool with a 10% local rebate."""
    return EstimateInputs(pool_area_sqft=2000, gas_cost_per_therm=2.00, season=Season.FULL_YEAR,
                          local_incentive_enabled=True, local_incentive_kind=IncentiveKind.PERCENT,
                          local_incentive_value=10)
