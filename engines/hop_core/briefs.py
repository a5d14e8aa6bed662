#!/usr/bin/env python3
"""
航段简报生成器

随机选择机场、跑道、呼号、巡航高度和一份 METAR，作为整个航段文本替换的上下文
"""
from typing import Mapping, Any

from data.flight_briefs import AIRPORTS, METAR_TEMPLATES, CALLSIGN_LETTERS, CRUISE_ALTITUDES
from .models import Airport, FlightBrief, Metar, MetarDecoded, WxQuestion
from .rng import choice, rand_int


def build_metar_string(icao: str, template: Mapping[str, Any], rng) -> str:
    """
    由模板拼出原始 METAR 报文

    时间组 DDHHMMZ：日 01-28，时 06-23，分 00 或 30；空片段跳过

    Args:
        icao: 机场代码
        template: METAR 模板
        rng: 随机源

    Returns:
        str: METAR 报文
    """
    parts = template["parts"]
    day = rand_int(rng, 1, 28)
    hour = rand_int(rng, 6, 23)
    minute = choice(rng, ["00", "30"])
    time_group = f"{day:02d}{hour:02d}{minute}Z"

    pieces = [
        f"METAR {icao}",
        time_group,
        parts.get("wind", ""),
        parts.get("vis", ""),
        parts.get("wx", ""),
        parts.get("clouds", ""),
        parts.get("temp_dew", ""),
        parts.get("altimeter", ""),
        parts.get("rmk", ""),
    ]
    return " ".join(p for p in pieces if p)


def random_callsign(rng) -> str:
    """C-G 加三个字母（不含 I / O）"""
    letters = "".join(choice(rng, CALLSIGN_LETTERS) for _ in range(3))
    return f"C-G{letters}"


def _decode(template: Mapping[str, Any]) -> MetarDecoded:
    decoded = template["decoded"]
    return MetarDecoded(
        wind_dir=decoded["wind_dir"],
        wind_speed=decoded["wind_speed"],
        gust_speed=decoded.get("gust_speed"),
        vis_sm=decoded["vis_sm"],
        ceiling_ft=decoded.get("ceiling_ft"),
        cloud_layers=decoded.get("cloud_layers", ""),
        temp_c=decoded["temp_c"],
        dew_c=decoded["dew_c"],
        altimeter_inhg=decoded["altimeter_inhg"],
        phenomena=decoded.get("phenomena", "None"),
        flight_category=decoded["flight_category"],
        wx_code=template["parts"].get("wx", ""),
    )


def generate_flight_brief(rng) -> FlightBrief:
    """
    生成一次航段的简报

    Args:
        rng: 随机源

    Returns:
        FlightBrief: 简报（整个会话内不变）
    """
    airport_data = choice(rng, AIRPORTS)
    airport = Airport(
        icao=airport_data["icao"],
        name=airport_data["name"],
        runways=tuple(airport_data["runways"]),
        elevation=airport_data["elevation"],
        has_atc=airport_data["has_atc"],
    )
    runway_pair = choice(rng, airport.runways)
    runway = choice(rng, runway_pair.split("/"))
    callsign = random_callsign(rng)

    template = choice(rng, METAR_TEMPLATES)
    raw = build_metar_string(airport.icao, template, rng)
    question = template["wx_question"]
    metar = Metar(
        raw=raw,
        decoded=_decode(template),
        wx_question=WxQuestion(
            stem=question["stem"],
            options=tuple(question["options"]),
            correct_option=question["correct"],
            explanation=question.get("explanation", ""),
        ),
    )

    return FlightBrief(
        airport=airport,
        runway=runway,
        callsign=callsign,
        cruise_altitude=choice(rng, CRUISE_ALTITUDES),
        metar=metar,
    )
