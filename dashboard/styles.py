import streamlit as st

# ==============================================================================
# 1. COLOR PALETTE
# ==============================================================================
COLORS = {
    "background": "#F4F5F7",      # Main App Background
    "card_bg": "#FFFFFF",         # Card Background
    "text": "#1F2430",
    "safe": "#2ecc71",            # Green (live)
    "danger": "#e74c3c",          # Red (demo)
    "neutral": "#6B7280",         # Subtext Gray
    "border": "#E2E5EA",          # Card Border
    "highlight": "#610000"        # Title / chart colour
}

# ==============================================================================
# 2. CSS INJECTION
# ==============================================================================
def apply_custom_css():
    """Injects global CSS styles into the Streamlit app."""
    st.markdown(f"""
    <style>
        .stDeployButton {{ display: none; }}
        #MainMenu {{ visibility: hidden; }}
        footer {{ visibility: hidden; }}

        @media (max-width: 768px) {{
            .metric-card {{ min-height: 90px; padding: 10px; }}
            .metric-card .value {{ font-size: 20px; }}
        }}

        .stApp {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
        }}
        .block-container {{
            padding-top: 2rem;
            padding-bottom: 2rem;
        }}

        .page-header {{
            text-align: left;
            margin-top: 10px; margin-bottom: 15px;
            border-bottom: 1px solid {COLORS['border']};
            padding-bottom: 5px;
        }}
        .page-header h2 {{
            font-size: 22px; font-weight: 700;
            color: {COLORS['highlight']}; margin: 0;
        }}

        /* METRIC CARDS */
        .metric-card {{
            background-color: {COLORS['card_bg']};
            border: 1px solid {COLORS['border']};
            border-radius: 10px;
            padding: 18px;
            text-align: center;
            box-shadow: 0 2px 6px rgba(0,0,0,0.06);
            margin-bottom: 10px;
            min-height: 110px;
            display: flex;
            flex-direction: column;
            justify-content: center;
        }}
        .metric-card .title {{ font-size: 13px; font-weight: 600; color: {COLORS['neutral']}; margin-bottom: 6px; }}
        .metric-card .value {{ font-size: 26px; font-weight: 800; color: {COLORS['text']}; }}

        /* CONNECTIVITY BADGE */
        .live-indicator {{ font-weight: 700; letter-spacing: 1px; }}
        .status-text {{ font-size: 12px; color: {COLORS['neutral']}; margin-left: 8px; }}
    </style>
    """, unsafe_allow_html=True)

def setup_page(title):
    st.set_page_config(page_title=title, page_icon="📈", layout="wide")
    apply_custom_css()

# ==============================================================================
# 3. UI HELPERS
# ==============================================================================
def section_header(title, caption=""):
    st.markdown(f"<div class='page-header'><h2>{title}</h2></div>", unsafe_allow_html=True)
    if caption:
        st.caption(caption)

def metric_card(title, value):
    """Returns HTML for a metric card."""
    return f"""
    <div class="metric-card">
        <div class="title">{title}</div>
        <div class="value">{value}</div>
    </div>
    """

def status_badge(label, color, status_text):
    return f"""
    <div>
        <span class="live-indicator" style="color: {color}">{label}</span>
        <span class="status-text">{status_text}</span>
    </div>
    """

def style_line_chart(fig, title, height):
    """Light card theme for the single sales chart."""
    fig.update_layout(
        title=dict(text=title, x=0.01, font=dict(size=14, color=COLORS['text'])),
        height=height,
        paper_bgcolor=COLORS['card_bg'],
        plot_bgcolor=COLORS['card_bg'],
        font=dict(color=COLORS['neutral']),
        margin=dict(l=20, r=20, t=45, b=20),
        legend=dict(x=0.99, xanchor="right", y=0.99, bgcolor="rgba(0,0,0,0)"),
        showlegend=True,
    )
    fig.update_xaxes(showgrid=False, linecolor=COLORS['border'])
    fig.update_yaxes(gridcolor=COLORS['border'], zeroline=False)
    return fig
