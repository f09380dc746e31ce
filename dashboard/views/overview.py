import os
import sys
from dataclasses import asdict
import streamlit as st
import plotly.graph_objects as go
import pandas as pd

# Ensure imports work from parent directory
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from styles import metric_card, section_header, status_badge, style_line_chart
from config import DashboardModules, UIConfig

TABLE_COLUMNS = {"id": "ID", "product": "Product", "date": "Date", "amount": "Amount"}

# ==============================================================================
# 1. FIGURES
# ==============================================================================
def build_sales_chart(view) -> go.Figure:
    """Line chart of summed sales per minute label."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=view.chart_labels,
        y=view.chart_values,
        name=UIConfig.CHART_SERIES_NAME,
        mode='lines',
        fill='tozeroy',
        fillcolor=UIConfig.CHART_FILL_COLOR,
        line=dict(color=UIConfig.CHART_LINE_COLOR, shape='spline', smoothing=0.8),
    ))
    fig = style_line_chart(fig, "Sales per minute", UIConfig.CHART_HEIGHT)
    fig.update_xaxes(type='category', nticks=UIConfig.CHART_MAX_TICKS)
    fig.update_yaxes(rangemode='tozero')
    return fig

def build_table(view) -> pd.DataFrame:
    df = pd.DataFrame([asdict(row) for row in view.rows], columns=list(TABLE_COLUMNS))
    return df.rename(columns=TABLE_COLUMNS)

# ==============================================================================
# 2. COMPONENT FUNCTIONS (The "Rows")
# ==============================================================================
def _render_status(view):
    label, color = view.indicator
    st.markdown(status_badge(label, color, view.status_text), unsafe_allow_html=True)

def _render_cards(view):
    if not view.cards:
        st.info("ℹ️ No metrics available.")
        return

    columns = st.columns(len(view.cards))
    for col, card in zip(columns, view.cards):
        with col:
            st.markdown(metric_card(card.title, card.value), unsafe_allow_html=True)

def _render_table(view):
    section_header("Latest transactions", f"Most recent {len(view.rows)} matching entries")
    if not view.rows:
        st.info("ℹ️ No transactions match the current search.")
        return
    st.dataframe(build_table(view), hide_index=True, use_container_width=True)

def _render_chart(view):
    if not view.chart:
        st.info("ℹ️ Waiting for transaction data...")
        return
    st.plotly_chart(build_sales_chart(view), key="sales_chart", use_container_width=True)

# ==============================================================================
# 3. PAGE
# ==============================================================================
def render_page(view, modules=None):
    """Draws every enabled region. Regions missing from the layout are skipped."""
    enabled = modules if modules is not None else DashboardModules.ENABLED_MODULES

    _render_status(view)
    st.markdown("<br>", unsafe_allow_html=True)

    if enabled.get("metric_cards"):
        _render_cards(view)
        st.markdown("<br>", unsafe_allow_html=True)

    if enabled.get("transactions_table"):
        _render_table(view)

    if enabled.get("sales_chart"):
        _render_chart(view)
