import numpy as np

# ==================== 物理常量 ====================
# 取整后的常量，保证 λ_max·T 与 σT⁴ 的显示结果可复现
H = 6.626e-34  # 普朗克常数: J·s
C = 3.0e8  # 光速: m/s
K_B = 1.38e-23  # 玻尔兹曼常数: J/K
SIGMA = 5.67e-8  # 斯特藩-玻尔兹曼常数: W/(m²·K⁴)
WIEN_B = 2898  # 维恩位移常数: μm·K

# 辐射常数
CONST_C1 = 2 * np.pi * H * C ** 2
CONST_C2 = H * C / K_B
CONST_RJ = 2 * np.pi * C * K_B

# ==================== 温度范围 ====================
MIN_T = 250
MAX_T = 12000
DEFAULT_T = 5800  # 太阳表面温度

# 滑块范围（对数刻度）
SLIDER_MIN = 0
SLIDER_MAX = 1000

# ==================== 光谱采样 ====================
SPECTRUM_SAMPLES = 200
WINDOW_PEAK_FACTOR = 5
WINDOW_MIN_UM = 1.5
WINDOW_MAX_UM = 30
RADIANCE_DISPLAY_SCALE = 1e-6

# 光谱分区边界 (μm)
UV_LIMIT_UM = 0.4
VISIBLE_LIMIT_UM = 0.75
NEAR_IR_LIMIT_UM = 2.5
