"""
黑体辐射可视化 (Streamlit版)
基于普朗克黑体辐射定律
选择预设天体或拖动对数温度滑块，实时查看光谱曲线、峰值波长与说明
"""

from datetime import datetime

import streamlit as st

from blackbody.calculators import stefan_calculator, wien_calculator
from blackbody.catalog import PRESETS
from blackbody.charts import create_spectrum_plot
from blackbody.config import load_settings
from blackbody.constants import MAX_T, MIN_T, SLIDER_MAX, SLIDER_MIN
from blackbody.formatting import format_temperature, format_wavelength
from blackbody.log import setup_logging
from blackbody.state import AppState
from blackbody.theme import PRESET_BACKGROUNDS, Theme, page_css

SETTINGS = load_settings()
logger = setup_logging(SETTINGS.log_level)

SLIDER_KEY = "temp_slider"

# ==================== 页面配置 ====================
st.set_page_config(
    page_title=SETTINGS.page_title,
    page_icon="🌟",
    layout="wide",
    initial_sidebar_state="expanded"
)


# ==================== 状态与回调 ====================
def preset_key(name):
    return "preset_" + name.lower().replace(" ", "_")


def get_state():
    """首次运行时创建 AppState，主题从 URL 参数恢复"""
    if "app_state" not in st.session_state:
        theme = Theme.parse(st.query_params.get("theme"), default=SETTINGS.default_theme)
        state = AppState.from_settings(SETTINGS, theme=theme)
        st.session_state.app_state = state
        st.session_state[SLIDER_KEY] = state.slider_value
    return st.session_state.app_state


def on_preset_click(name):
    state = st.session_state.app_state
    state.select_preset(name)
    st.session_state[SLIDER_KEY] = state.slider_value


def on_slider_change():
    st.session_state.app_state.set_slider(st.session_state[SLIDER_KEY])


def on_theme_toggle():
    theme = st.session_state.app_state.toggle_theme()
    st.query_params["theme"] = theme.value


def preset_button_css():
    rules = []
    for name, url in PRESET_BACKGROUNDS.items():
        rules.append(f"""
    .st-key-{preset_key(name)} button {{
        background-image: linear-gradient(rgba(0,0,0,0.45), rgba(0,0,0,0.45)), url({url});
        background-size: cover;
        background-position: center;
        color: #ffffff !important;
    }}""")
    return "<style>" + "".join(rules) + "\n</style>"


def stat_card(label, value):
    return f"""
    <div class="stat-card">
        <p class="label">{label}</p>
        <p class="value">{value}</p>
    </div>
    """


# ==================== 侧边栏 ====================
def render_sidebar(state):
    with st.sidebar:
        st.markdown("## 🎛️ Controls")

        # 预设天体
        st.markdown("### 🌌 Reference Bodies")
        cols = st.columns(2)
        for i, (name, body) in enumerate(PRESETS.items()):
            with cols[i % 2]:
                st.button(
                    f"{body.icon} {name}",
                    key=preset_key(name),
                    on_click=on_preset_click,
                    args=(name,),
                    type="primary" if state.active_preset == name else "secondary",
                    width="stretch",
                )

        # 对数温度滑块
        st.slider(
            "Temperature (log scale)",
            min_value=SLIDER_MIN,
            max_value=SLIDER_MAX,
            step=1,
            key=SLIDER_KEY,
            on_change=on_slider_change,
            help=f"Drag to set any temperature between {MIN_T:,} K and {MAX_T:,} K"
        )
        st.markdown(f"**{format_temperature(state.temperature)}**")

        st.markdown("---")

        # 显示选项
        st.markdown("### 📊 Display Options")
        options = dict(
            show_visible_band=st.checkbox(
                "Show visible band",
                value=True,
                help="Shade the 0.40–0.75 μm visible range"
            ),
            show_rj=st.checkbox(
                "Show Rayleigh-Jeans law",
                value=False,
                help="Classical approximation (valid at long wavelengths)"
            ),
            show_wien=st.checkbox(
                "Show Wien approximation",
                value=False,
                help="Short-wavelength approximation"
            ),
        )

        theme_label = "🌙 Dark mode" if state.theme is Theme.LIGHT else "☀️ Light mode"
        st.button(theme_label, key="theme_toggle", on_click=on_theme_toggle, width="stretch")

        st.markdown("---")

        # 快速计算器
        st.markdown("### 🧮 Quick Calculators")
        wien_raw = st.text_input("Wien's law: temperature (K)", value="5800", key="wien_input")
        wien = wien_calculator(wien_raw)
        st.markdown(f"**{wien.output}**")
        if wien.description:
            st.caption(wien.description)

        stefan_raw = st.text_input("Stefan-Boltzmann: temperature (K)", value="5800", key="stefan_input")
        stefan = stefan_calculator(stefan_raw)
        st.markdown(f"**{stefan.output}**")
        if stefan.description:
            st.caption(stefan.description)

    return options


# ==================== 主显示区域 ====================
def render_info_panel(report):
    profile = report.profile
    st.markdown(
        f"<h2>{profile.icon} {profile.name}</h2>",
        unsafe_allow_html=True
    )
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(stat_card("Temperature", format_temperature(report.temperature)), unsafe_allow_html=True)
        st.markdown(stat_card("Peak Region", report.region.value), unsafe_allow_html=True)
        st.markdown(stat_card("Visible Share", f"{report.visible_fraction * 100:.2f}%"), unsafe_allow_html=True)
    with col2:
        st.markdown(stat_card("Peak λ", format_wavelength(report.peak_wavelength)), unsafe_allow_html=True)
        st.markdown(stat_card("Total Power", report.power_text), unsafe_allow_html=True)
        st.markdown(stat_card("Near-IR Share", f"{report.near_infrared_fraction * 100:.2f}%"), unsafe_allow_html=True)

    st.markdown(f"<p class='observation'>&ldquo;{profile.observation}&rdquo;</p>", unsafe_allow_html=True)
    st.caption(report.power_description)


def render_theory():
    with st.expander("📚 Theory & Formulas", expanded=False):
        st.markdown("### Planck's law")
        st.latex(r"B(\lambda, T) = \frac{2\pi hc^2}{\lambda^5} \frac{1}{e^{\frac{hc}{\lambda k_B T}} - 1}")
        st.markdown(
            "- h = 6.626 × 10⁻³⁴ J·s (Planck constant)\n"
            "- c = 3.0 × 10⁸ m/s (speed of light)\n"
            "- k_B = 1.38 × 10⁻²³ J/K (Boltzmann constant)"
        )
        st.markdown("### Wien's displacement law")
        st.latex(r"\lambda_{max} \cdot T = 2898 \ \mu m \cdot K")
        st.markdown("### Stefan-Boltzmann law")
        st.latex(r"P/A = \sigma T^4, \quad \sigma = 5.67 \times 10^{-8} \ W\,m^{-2}\,K^{-4}")
        st.markdown("### Rayleigh-Jeans law (classical)")
        st.latex(r"B_{RJ}(\lambda, T) = \frac{2\pi c k_B T}{\lambda^4}")
        st.markdown(
            "**Note**: diverges at short wavelengths (the ultraviolet catastrophe), "
            "showing the limits of classical physics."
        )
        st.markdown("### Wien approximation")
        st.latex(r"B_W(\lambda, T) = \frac{2\pi hc^2}{\lambda^5} e^{-\frac{hc}{\lambda k_B T}}")


def main():
    state = get_state()
    st.markdown(page_css(state.theme), unsafe_allow_html=True)
    st.markdown(preset_button_css(), unsafe_allow_html=True)

    st.markdown("<h1 style='text-align: center;'>🌟 Blackbody Radiation Explorer 🌟</h1>", unsafe_allow_html=True)
    st.markdown(
        "<p style='text-align: center;'>An interactive look at Planck's law, Wien's law and the Stefan-Boltzmann law</p>",
        unsafe_allow_html=True
    )
    st.markdown("---")

    options = render_sidebar(state)
    report = state.report()
    logger.debug("Rendering %s at %.1f K (%s theme)", report.profile.name, report.temperature, state.theme)

    col_chart, col_info = st.columns([0.62, 0.38])

    with col_chart:
        st.markdown("### 📈 Spectral Radiance vs Wavelength")
        fig = create_spectrum_plot(report, state.theme, **options)
        st.plotly_chart(fig, width="stretch", key="main_plot")

    with col_info:
        render_info_panel(report)

    render_theory()

    # 页脚
    st.markdown("---")
    now = datetime.now().astimezone()
    st.caption(f"**Session Details:** Logged on {now.strftime('%A, %B %d, %Y, %I:%M %p %Z')}.")


# ==================== 程序入口 ====================
if __name__ == "__main__":
    main()
