
from typing import Optional
from .utils import Season, round_half_up

PLACEHOLDER = '-'


def round_display(value: float) -> int:
    # display rounding is half away from zero: -2.5 shows as -3
    return -round_half_up(-value) if value < 0 else round_half_up(value)


def fmt_number(value: float) -> str:
    return f"{round_display(value):,}"


def to_usd(value: float) -> str:
    return '$' + fmt_number(value)


def fmt_payback(years: Optional[int]) -> str:
    return f"{years:.1f}" if years is not None else PLACEHOLDER


def fmt_roi(percent: Optional[float]) -> str:
    return str(round_display(percent)) if percent is not None else PLACEHOLDER


def fmt_co2(tons: float) -> str:
    return f"{tons:.2f}"


def season_label(season: Season, days: int) -> str:
    return f"{season.label} ({days} days/year)"
