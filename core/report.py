
import logging
from typing import List, Tuple
import fitz  # PyMuPDF
from .config import Branding, BRANDING
from .utils import EstimateInputs, EstimateResult
from .formatting import fmt_number, to_usd, fmt_payback, fmt_roi, fmt_co2, season_label

logger = logging.getLogger(__name__)

MARGIN = 28
LINE = 18
TEXT_WIDTH = 510


def report_lines(p: EstimateInputs, r: EstimateResult) -> List[Tuple[str, bool]]:
    """Body lines of the PDF as (text, bold), using the same formatting as the summary table."""
    lines = [
        (f"Address/ZIP: {p.address}", False),
        (f"System Size: {r.panels_needed} x 4'x10' panels", False),
        (f"Pool Surface Area: {fmt_number(p.pool_area_sqft)} sqft", False),
        (f"Desired Pool Temp: {p.desired_temp_f:g} °F", False),
        (f"Operating Season: {season_label(p.season, r.season_days)}", False),
        (f"Total System Cost (after incentives): {to_usd(r.net_system_cost)}", True),
        (f"Federal ITC (30%): {to_usd(r.federal_itc)}", False),
        (f"Depreciation Tax Benefit (100% Year 1, 30% rate): {to_usd(r.depreciation_benefit)}", False),
    ]
    if r.local_incentive_amount:
        lines.append((f"Local Incentive: {to_usd(r.local_incentive_amount)}", False))
    lines += [
        (f"Net System Cost: {to_usd(r.net_system_cost)}", False),
        (f"Annual Savings (Year 1): {fmt_number(r.annual_therms)} therms, {to_usd(r.first_year_savings)}", False),
        (f"Simple Payback: {fmt_payback(r.payback_years)} years", False),
        (f"20-year ROI: {fmt_roi(r.roi_20_percent)}%", False),
        (f"Annual CO2 Offset: {fmt_co2(r.annual_co2_tons)} tons (~{r.annual_trees_equivalent} trees)", False),
    ]
    return lines


def build_pdf_report(p: EstimateInputs, r: EstimateResult, branding: Branding = BRANDING) -> bytes:
    doc = fitz.open()
    try:
        page = doc.new_page()  # A4 portrait
        y = MARGIN + 20
        page.insert_text((MARGIN, y), branding.title, fontsize=18, fontname='hebo')
        y += LINE * 2

        for text, bold in report_lines(p, r):
            page.insert_text((MARGIN, y), text, fontsize=11, fontname='hebo' if bold else 'helv')
            y += LINE

        y += LINE / 2
        box = fitz.Rect(MARGIN, y, MARGIN + TEXT_WIDTH, y + LINE * 4)
        page.insert_textbox(box, branding.disclaimer, fontsize=11, fontname='hebo', color=(0.78, 0, 0))

        data = doc.tobytes()
        logger.info('built PDF report: %d page(s), %d bytes', doc.page_count, len(data))
        return data
    finally:
        doc.close()
