
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConstants:
    """Fixed assumptions of the pool solar model. Override with dataclasses.replace."""
    panel_area_sqft: float = 40.0      # 4'x10' collector
    coverage_ratio: float = 0.75       # collector area / pool surface area
    panel_cost: float = 3750.0         # installed cost per panel, all-in
    panel_btu_per_day: float = 32000.0
    itc_rate: float = 0.30             # federal investment tax credit
    depreciation_tax_rate: float = 0.30  # 100% year-1 depreciation shield
    full_year_days: int = 365
    march_to_thanksgiving_days: int = 275
    btu_per_therm: float = 100000.0
    boiler_efficiency: float = 0.75
    escalation_rate: float = 0.03      # gas price growth per year
    roi_horizon_years: int = 20        # payback search + ROI
    chart_horizon_years: int = 25      # cumulative cash flow
    co2_tons_per_therm: float = 0.0053
    co2_tons_per_tree: float = 0.0227


DEFAULT_CONSTANTS = EngineConstants()


@dataclass(frozen=True)
class AppDefaults:
    pool_area_sqft: float = 0.0
    desired_temp_f: float = 80.0
    min_temp_f: float = 50.0
    max_temp_f: float = 100.0
    gas_cost_per_therm: float = 2.0
    min_gas_cost_per_therm: float = 0.01
    local_incentive_enabled: bool = False
    local_incentive_value: float = 0.0


@dataclass(frozen=True)
class Branding:
    title: str = 'Commercial Pool Solar Estimate'
    app_title: str = 'Commercial Pool Solar Calculator'
    company: str = 'Maktinta Energy'
    phone: str = '408-432-9900'
    website: str = 'www.maktinta.com'
    pdf_filename: str = 'Maktinta_Pool_Solar_Estimate.pdf'

    @property
    def disclaimer(self) -> str:
        return 'Disclaimer: ' + self._disclaimer_body(self.phone, self.website)

    @property
    def disclaimer_markdown(self) -> str:
        return '**Disclaimer:** ' + self._disclaimer_body(f'**{self.phone}**', f'[{self.website}](https://{self.website})')

    def _disclaimer_body(self, phone: str, website: str) -> str:
        return ('This tool provides a preliminary estimate for informational purposes only. '
                f'For a more accurate proposal, contact {self.company} at {phone} or visit {website}.')


APP_DEFAULTS = AppDefaults()
BRANDING = Branding()
