"""
任务剖面与机型配置
每个剖面给出题目总数范围、各阶段 [min, max]、再平衡方向和应急重试次数
"""

# 默认（最小）剖面
DEFAULT_MISSION = "local"
DEFAULT_AIRCRAFT = "C172"

MISSION_PROFILES = {
    "local": {
        "label": "Local Circuits",
        "total": (6, 8),
        "bounds": {
            "preflight": (1, 2),
            "taxi_depart": (2, 3),
            "enroute": (1, 2),
            "arrival": (2, 3),
        },
        "boost": ["taxi_depart", "arrival"],
        "reduce": ["enroute", "preflight"],
        "rebalance_shifts": 1,
        "emergency_attempts": 1,
    },
    "practice": {
        "label": "Practice Area",
        "total": (7, 10),
        "bounds": {
            "preflight": (1, 2),
            "taxi_depart": (2, 3),
            "enroute": (2, 3),
            "arrival": (2, 3),
        },
        "boost": ["arrival"],
        "reduce": ["enroute"],
        "rebalance_shifts": 1,
        "emergency_attempts": 1,
    },
    "short-hop": {
        "label": "Short Hop",
        "total": (8, 12),
        "bounds": {
            "preflight": (1, 2),
            "taxi_depart": (2, 4),
            "enroute": (2, 4),
            "arrival": (1, 2),
        },
        "boost": [],
        "reduce": [],
        "rebalance_shifts": 0,
        "emergency_attempts": 1,
    },
    "cross-country": {
        "label": "Cross-Country",
        "total": (12, 16),
        "bounds": {
            "preflight": (2, 3),
            "taxi_depart": (2, 4),
            "enroute": (4, 7),
            "arrival": (2, 4),
        },
        "boost": ["enroute", "preflight"],
        "reduce": ["taxi_depart", "arrival"],
        "rebalance_shifts": 2,
        "emergency_attempts": 2,
    },
}

AIRCRAFT_TYPES = {
    "C172": {"label": "Cessna 172", "risk": 0},
    "C150": {"label": "Cessna 150", "risk": 1},
    "PA28": {"label": "Piper Cherokee", "risk": 0},
}
