"""
天气偏好表
天气信号 → 各阶段优先抽取的题目 ID
"""

WEATHER_BIAS = {
    "low_ceiling": {
        "preflight": ["9.01", "9.02"],
        "enroute": ["6.13", "6.14", "12.02", "12.03", "12.04"],
        "arrival": ["6.08", "6.09", "6.10", "13.06", "13.07", "13.08"],
    },
    "gusty": {
        "taxi_depart": ["7.09", "7.10", "7.15"],
        "arrival": ["6.12", "7.06", "7.12", "7.15"],
    },
    "thunderstorm": {
        "enroute": ["6.13", "6.14"],
        "arrival": ["11.06", "11.07"],
    },
    "low_vis": {
        "enroute": ["12.02", "12.03", "12.04", "13.02", "13.03", "13.04"],
        "arrival": ["13.05", "13.06", "6.08"],
    },
}

# 判定阈值
CEILING_THRESHOLD_FT = 4000
VISIBILITY_THRESHOLD_SM = 5
GUST_THRESHOLD_KT = 15
