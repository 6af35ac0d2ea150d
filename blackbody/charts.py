# ==================== 绘图函数 ====================

import numpy as np
import plotly.graph_objects as go

from blackbody.constants import RADIANCE_DISPLAY_SCALE, UV_LIMIT_UM, VISIBLE_LIMIT_UM
from blackbody.physics import rayleigh_jeans, wien_approximation
from blackbody.theme import color_for_temperature, fill_color, palette_for, wavelength_to_rgb

X_TITLE = "Wavelength (μm)"
Y_TITLE = "Spectral Radiance (MW/m²/sr/μm)"


def y_axis_max(spectrum):
    """纵轴上限: 峰值的 1.1 倍，曲线全为 0 时取 1"""
    return spectrum.peak_radiance * 1.1 or 1


def create_spectrum_plot(report, theme, show_visible_band=True, show_rj=False, show_wien=False):
    """
    创建辐射曲线图

    参数:
        report: RadiationReport
        theme: Theme，决定网格与文字颜色
        show_visible_band: 是否绘制可见光彩色光谱带
        show_rj / show_wien: 是否叠加经典近似曲线

    返回:
        plotly Figure
    """
    spectrum = report.spectrum
    palette = palette_for(theme)
    color = color_for_temperature(report.temperature, theme)
    x_max = spectrum.x_max
    y_max = y_axis_max(spectrum)

    fig = go.Figure()

    # 可见光彩色光谱带（从紫到红）
    if show_visible_band:
        num_bands = 60
        wavelengths_vis = np.linspace(UV_LIMIT_UM, VISIBLE_LIMIT_UM, num_bands)
        for i in range(len(wavelengths_vis) - 1):
            fig.add_shape(
                type="rect",
                x0=wavelengths_vis[i],
                x1=wavelengths_vis[i + 1],
                y0=0,
                y1=y_max,
                fillcolor=wavelength_to_rgb(wavelengths_vis[i] * 1000),
                opacity=0.15,
                layer="below",
                line_width=0,
            )

    # 瑞利-金斯公式
    if show_rj:
        B_rj = rayleigh_jeans(spectrum.wavelengths, report.temperature) * RADIANCE_DISPLAY_SCALE
        # 短波长发散部分截掉，避免撑爆纵轴
        B_rj = np.where(B_rj > y_max * 3, np.nan, B_rj)
        fig.add_trace(go.Scatter(
            x=spectrum.wavelengths,
            y=B_rj,
            mode='lines',
            name='Rayleigh-Jeans',
            line=dict(color='rgb(204, 102, 255)', width=2, dash='dash'),
            hovertemplate='λ: %{x:.3f} μm<br>B: %{y:.2e}<extra></extra>'
        ))

    # 维恩公式
    if show_wien:
        B_wien = wien_approximation(spectrum.wavelengths, report.temperature) * RADIANCE_DISPLAY_SCALE
        fig.add_trace(go.Scatter(
            x=spectrum.wavelengths,
            y=B_wien,
            mode='lines',
            name='Wien approximation',
            line=dict(color='rgb(102, 204, 255)', width=2, dash='dash'),
            hovertemplate='λ: %{x:.3f} μm<br>B: %{y:.2e}<extra></extra>'
        ))

    # 普朗克曲线（主曲线）
    fig.add_trace(go.Scatter(
        x=spectrum.wavelengths,
        y=spectrum.radiance,
        mode='lines',
        name='Spectral Intensity',
        fill='tozeroy',
        fillcolor=fill_color(color),
        line=dict(color=color, width=3, shape='spline'),
        hovertemplate='Wavelength: %{x:.2f} μm<br>Intensity: %{y:.2e} MW<extra></extra>'
    ))

    # 峰值竖线 + 标签
    fig.add_vline(
        x=report.peak_wavelength,
        line=dict(color=palette.text_secondary, width=2, dash="dash"),
        annotation_text=f"λmax: {report.peak_wavelength:.2f} μm",
        annotation_position="top right",
        annotation_font_color=palette.font,
    )

    axis_style = dict(
        gridcolor=palette.grid,
        color=palette.font,
        showgrid=True,
        zeroline=False,
    )

    fig.update_layout(
        plot_bgcolor=palette.panel,
        paper_bgcolor=palette.panel,
        font=dict(color=palette.font, size=13),
        xaxis=dict(
            title=dict(text=X_TITLE, font=dict(size=14, color=palette.font)),
            range=[0, x_max],
            **axis_style
        ),
        yaxis=dict(
            title=dict(text=Y_TITLE, font=dict(size=14, color=palette.font)),
            range=[0, y_max],
            **axis_style
        ),
        hovermode='x unified',
        showlegend=show_rj or show_wien,
        height=480,
        margin=dict(l=70, r=30, t=30, b=60),
    )

    return fig
