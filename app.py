import numpy as np
import pandas as pd
import streamlit as st
import altair as alt

from config import DEFAULT_VALUES, FIELD_LABELS, FORM_COLUMNS, MODES, settings
from models import InvestmentParameters
from analytics.projection import project
from analytics.trajectories import (
    amortization_dataframe,
    cost_breakdown_dataframe,
    horizon_profile_dataframe,
    appreciation_sensitivity_dataframe,
)
from display import PLACEHOLDER, RESULT_SECTIONS, results_table, non_finite_fields
from forms import parse_parameters, results_to_json
from log import get_logger

logger = get_logger("investment_calculator")

st.set_page_config(page_title="Real Estate Investment Calculator", page_icon="🏠", layout="wide")

# ------------------------- UI LAYOUT -------------------------

st.title("🏠 Real Estate Purchase / Investment Calculator")

# Primary residence mode is not modelled; the selector is a placeholder only.
st.selectbox("Select Mode", MODES, index=0, disabled=True)

with st.form("inputs"):
    st.markdown("### Inputs")
    left, right = st.columns(2, gap="large")
    raw = {}
    for col, names in zip((left, right), FORM_COLUMNS):
        with col:
            for name in names:
                raw[name] = st.text_input(
                    FIELD_LABELS[name], value=f"{DEFAULT_VALUES[name]:g}", key=name
                )
    submitted = st.form_submit_button("Calculate")

if submitted or "last_params" not in st.session_state:
    st.session_state["last_params"] = parse_parameters(raw)

params: InvestmentParameters = st.session_state["last_params"]
res = project(params)
logger.info(
    "calculated: price=%s rent_years=%s roi=%s",
    params.purchase_price_listing,
    params.rent_years,
    res.roi_rate,
)
bad = non_finite_fields(res)
if bad:
    logger.warning("non-finite result fields: %s", ", ".join(bad))
    st.warning(
        "Some results are undefined for these inputs (shown as —): " + ", ".join(bad)
    )

# ---- Headline metrics ----
st.markdown("## Results")
h1, h2, h3, h4 = st.columns(4)
rows = dict(results_table(res, "Returns"))


def pct(label):
    text = rows[label]
    return text if text == PLACEHOLDER else f"{text}%"


h1.metric("Net profit", rows["Net profit (Cap. gain + Rent)"], border=True)
h2.metric("ROI", pct("ROI rate (%)"), border=True)
h3.metric("Avg yearly ROI", pct("Avg yearly ROI rate (%)"), border=True)
h4.metric(
    "Infl.-adjusted avg yearly ROI",
    pct("Infl.-adjusted avg yearly ROI (%)"),
    border=True,
    help=f"Net profit deflated over {params.total_investment_years:g} years",
)

# ---- Breakdown, one collapsible panel per section ----
for i, (section, _) in enumerate(RESULT_SECTIONS):
    with st.expander(section, expanded=(i == 0 or section == "Returns")):
        table = pd.DataFrame(results_table(res, section), columns=["Item", "Value"])
        st.dataframe(table, hide_index=True, use_container_width=True)

st.download_button(
    "Download results (JSON)",
    data=results_to_json(res, indent=2),
    file_name="investment_results.json",
    mime="application/json",
)

# ---- Charts Row: Mortgage paydown and Cost Mix ----
chart_left, chart_right = st.columns([2, 1], gap="medium")

with chart_left:
    st.markdown("### Mortgage During Rental Phase")
    adf = amortization_dataframe(params)
    melted = pd.melt(
        adf,
        id_vars=["Year"],
        value_vars=["Balance", "Cumulative interest", "Cumulative principal"],
        var_name="Series",
        value_name="Amount",
    )
    line = alt.Chart(melted).mark_line(point=True).encode(
        x=alt.X("Year:O", title="Rental year", axis=alt.Axis(labelAngle=0)),
        y=alt.Y("Amount:Q", title="Amount", axis=alt.Axis(format=",.0f")),
        color=alt.Color("Series:N", legend=alt.Legend(orient="bottom", titleLimit=0)),
        tooltip=[alt.Tooltip("Year:O"), alt.Tooltip("Series:N"), alt.Tooltip("Amount:Q", format=",.0f")],
    ).properties(height=350)
    st.altair_chart(line, use_container_width=True)
    st.caption("The mortgage is only serviced once the rental phase starts.")

with chart_right:
    st.markdown("### Cost Mix")
    cdf = cost_breakdown_dataframe(res)
    cdf = cdf[cdf["Amount"] > 0]
    pie_chart = alt.Chart(cdf).mark_arc(innerRadius=50, outerRadius=120).encode(
        theta=alt.Theta("Amount:Q"),
        color=alt.Color("Category:N", legend=alt.Legend(orient="left", titleLimit=0, labelLimit=0)),
        tooltip=["Category:N", alt.Tooltip("Amount:Q", format=",.0f")],
    )
    st.altair_chart(pie_chart, use_container_width=False)

# ---- Return vs rental horizon ----
st.markdown("### Returns vs. Rental Phase Length")
hp_df = horizon_profile_dataframe(params, max_rental_years=settings.MAX_HORIZON_YEARS)
st.line_chart(hp_df.set_index("Rental years"), use_container_width=True)
st.caption("Development phase and all other inputs are held fixed; rent stays flat.")

# ---- Sensitivity ----
st.markdown("### Sensitivity — Yearly Appreciation")
g_lo, g_hi = st.slider("Appreciation range (%)", -5.0, 10.0, (-2.0, 6.0), 0.5)
grid = np.arange(g_lo, g_hi + 0.25, 0.5) / 100.0
sens_df = appreciation_sensitivity_dataframe(params, grid)
bar_chart = alt.Chart(sens_df).mark_bar(color="#45B7D1").encode(
    x=alt.X("Appreciation (%):O", axis=alt.Axis(labelAngle=0)),
    y=alt.Y("Net profit:Q", axis=alt.Axis(format=",.0f")),
    tooltip=[
        alt.Tooltip("Appreciation (%):O"),
        alt.Tooltip("Net profit:Q", format=",.0f"),
        alt.Tooltip("ROI (%):Q", format=".2f"),
    ],
).properties(height=300)
st.altair_chart(bar_chart, use_container_width=True)

# ---- FAQ Section ----
st.markdown("---")
with st.expander("📐 How are the calculations performed?"):
    st.markdown(
        """
- **Purchase**: price × (1 + GST); downpayment is a fraction of the GST-inclusive price, the rest is mortgaged.
- **Sale price**: the *pre-GST* listing price compounded at the appreciation rate over development + rental years.
- **Transfer tax / realtor fee**: first rate up to the threshold, second rate on the excess only.
- **Mortgage**: fixed monthly payment over the amortization term; interest and principal are accrued during the rental years only.
- **Mortgage termination**: approximated as 2 monthly payments × 0.7.
- **Holding costs and rent**: accrued over the rental years only; rent is held flat.
- **Capital gain**: sale price − selling costs − adjusted cost base; half of the gain is taxed at the marginal rate.
- **ROI**: net profit ÷ (downpayment + closing costs); annualized as (1 + ROI)^(1/years) − 1, reported as 0 for a zero-year horizon.
"""
    )
