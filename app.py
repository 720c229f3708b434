import logging
import streamlit as st
import plotly.express as px
from core.config import APP_DEFAULTS, BRANDING
from core.utils import EstimateInputs, Season, IncentiveKind
from core.estimate import compute_estimate
from core.validation import validate_inputs, coerce_incentive_value, inputs_are_finite
from core.formatting import to_usd
from core.summary import summary_frame, cash_flow_frame, savings_frame
from core.report import build_pdf_report

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title=BRANDING.app_title, layout='wide')

@st.cache_data
def df_to_csv_bytes(df):
    return df.to_csv(index=False).encode('utf-8')

st.title(BRANDING.app_title)
st.caption(f"Tel: {BRANDING.phone} | [{BRANDING.website}](https://{BRANDING.website})")

col_in, col_out = st.columns([1, 2])

# --- Project Inputs ---
with col_in:
    st.header('Project Inputs')
    address = st.text_input('Address or ZIP')
    pool_area = st.number_input('Pool Surface Area (sqft)', min_value=0.0, value=APP_DEFAULTS.pool_area_sqft, step=100.0, format='%.0f')
    pool_temp = st.number_input('Desired Pool Temperature (°F)', min_value=APP_DEFAULTS.min_temp_f,
                                max_value=APP_DEFAULTS.max_temp_f, value=APP_DEFAULTS.desired_temp_f, step=1.0, format='%.0f')
    season = st.selectbox('Operating Season', list(Season), format_func=lambda s: s.label)
    gas_cost = st.number_input('Natural Gas Cost ($/therm)', min_value=APP_DEFAULTS.min_gas_cost_per_therm,
                               value=APP_DEFAULTS.gas_cost_per_therm, step=0.01, format='%.2f')
    local_enabled = st.checkbox('Local Incentive', value=APP_DEFAULTS.local_incentive_enabled)
    local_kind = IncentiveKind.PERCENT
    local_value = 0.0
    if local_enabled:
        c1, c2 = st.columns([1, 2])
        local_kind = c1.selectbox('Type', list(IncentiveKind), format_func=lambda k: k.symbol)
        raw = c2.text_input('Amount', value=f"{APP_DEFAULTS.local_incentive_value:g}")
        try:
            local_value = coerce_incentive_value(raw)
        except ValueError:
            st.error(f"Local incentive must be a number, got {raw!r}.")

p = EstimateInputs(
    pool_area_sqft=float(pool_area), gas_cost_per_therm=float(gas_cost), season=season,
    desired_temp_f=float(pool_temp), local_incentive_enabled=bool(local_enabled),
    local_incentive_kind=local_kind, local_incentive_value=float(local_value), address=address,
)
for problem in validate_inputs(p):
    col_in.warning(problem)
if not inputs_are_finite(p):
    st.stop()

r = compute_estimate(p)

# --- Summary & Results ---
with col_out:
    st.header('Summary & Results')
    st.table(summary_frame(p, r).set_index('Item'))
    st.subheader('Cost')
    st.markdown(f"**Total System Cost (after incentives): {to_usd(r.net_system_cost)}**")

st.subheader(f"Cumulative Cash Flow ({len(r.annual_savings_25)} Years)")
df_cf = cash_flow_frame(r)
fig = px.bar(df_cf, x='year', y='Cumulative', labels={'year': 'Year'})
fig.update_traces(marker_color='#3571B8', hovertemplate='Year %{x}<br>$%{y:,}<extra></extra>')
fig.update_layout(height=300)
st.plotly_chart(fig, use_container_width=True)

col_a, col_b, col_c = st.columns(3)
col_a.download_button('Download PDF Report', build_pdf_report(p, r), BRANDING.pdf_filename, 'application/pdf')
col_b.download_button('Cash Flow CSV', df_to_csv_bytes(df_cf), 'cumulative_cash_flow.csv', 'text/csv')
col_c.download_button('Savings Schedule CSV', df_to_csv_bytes(savings_frame(r)), 'annual_savings.csv', 'text/csv')

st.markdown(BRANDING.disclaimer_markdown)
