#!/usr/bin/env python3
"""
航段引擎数据结构

定义题目记录、航段卡片（题目 / 通话 / 应急三种变体）、简报和会话状态
所有结构都是不可变的，会话推进通过 session 模块返回新的状态
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple, FrozenSet, Union, Mapping

# ==========================================
# 常量
# ==========================================

PHASES = ("preflight", "taxi_depart", "enroute", "arrival")

MAX_RISK = 3
ESCALATION_THRESHOLD = 2
HOP_TIMEOUT_SECONDS = 600
SVFR_CARD_TIMER_SECONDS = 10
MIN_CLOCK_AFTER_PENALTY = 60
MAX_EMERGENCY_QUESTIONS = 2
BONUS_CARD_PROBABILITY = 0.5
MID_PHASE_RADIO_PROBABILITY = 0.4
EMERGENCY_BASE_PROBABILITY = 0.08
EMERGENCY_RISK_BONUS = 0.02

STATUS_BRIEFING = "briefing"
STATUS_PLAYING = "playing"
STATUS_BUSTED = "busted"
STATUS_DEBRIEF = "debrief"
TERMINAL_STATUSES = (STATUS_BUSTED, STATUS_DEBRIEF)


# ==========================================
# 异常
# ==========================================

class HopEngineError(Exception):
    """航段引擎错误基类"""


class SessionClosedError(HopEngineError):
    """会话已结束（bust / debrief），不再接受操作"""


class InvalidTransitionError(HopEngineError):
    """操作与当前卡片类型或会话状态不匹配"""


def clamp_risk_points(value: Optional[int], emergency_boost: bool = False) -> int:
    """
    题目风险权重归一化到 1..MAX_RISK

    Args:
        value: 原始权重（可为 None）
        emergency_boost: 应急题额外 +1

    Returns:
        int: 归一化后的权重
    """
    base = max(1, int(value or 1))
    if emergency_boost:
        base += 1
    return min(base, MAX_RISK)


# ==========================================
# 题库
# ==========================================

@dataclass(frozen=True)
class QuestionRecord:
    """
    题库中的一道题

    Attributes:
        id: "<章节>.<序号>"，全局唯一
        options: 4 个选项
        correct_option: 1-4
        phase: 所属飞行阶段
        risk_points: 1-3
        is_critical: 答错即 bust
    """
    id: str
    stem: str
    options: Tuple[str, str, str, str]
    correct_option: int
    phase: str
    risk_points: int = 1
    is_critical: bool = False
    explanation: str = ""
    section_name: str = ""
    flight_context: str = ""

    @property
    def section_number(self) -> int:
        return int(self.id.split(".")[0])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "stem": self.stem,
            "option1": self.options[0],
            "option2": self.options[1],
            "option3": self.options[2],
            "option4": self.options[3],
            "correctOption": self.correct_option,
            "phase": self.phase,
            "riskPoints": self.risk_points,
            "isCritical": self.is_critical,
            "explanation": self.explanation,
            "sectionName": self.section_name,
            "flightContext": self.flight_context,
        }


@dataclass(frozen=True)
class BonusCard:
    """ROC-A 附加题（不在题库中，固定 home phase）"""
    id: str
    phase: str
    stem: str
    options: Tuple[str, str, str, str]
    correct_option: int
    risk_points: int = 1
    is_critical: bool = False
    section_name: str = ""
    flight_context: str = ""
    explanation: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BonusCard":
        return cls(
            id=data["id"],
            phase=data["phase"],
            stem=data["stem"],
            options=tuple(data["options"]),
            correct_option=data["correct"],
            risk_points=data.get("risk", 1),
            is_critical=data.get("critical", False),
            section_name=data.get("section_name", ""),
            flight_context=data.get("context", ""),
            explanation=data.get("explanation", ""),
        )


@dataclass(frozen=True)
class Reference:
    """题目出处"""
    question_id: str
    doc_id: str
    locator: str
    excerpt: str
    doc_title: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionId": self.question_id,
            "docId": self.doc_id,
            "docTitle": self.doc_title,
            "locator": self.locator,
            "excerpt": self.excerpt,
        }


# ==========================================
# 航段卡片（三种变体）
# ==========================================

@dataclass(frozen=True)
class RadioLine:
    speaker: str  # "atc" or "pilot"
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"speaker": self.speaker, "text": self.text}


@dataclass(frozen=True)
class QuestionItem:
    """题目卡：文本已完成 token 替换"""
    id: str
    phase: str
    stem: str
    options: Tuple[str, str, str, str]
    correct_option: int
    risk_points: int
    is_critical: bool
    flight_context: str = ""
    explanation: str = ""
    section_name: str = ""
    has_scenario: bool = False
    is_emergency: bool = False
    is_bonus: bool = False

    kind = "question"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.kind,
            "id": self.id,
            "phase": self.phase,
            "stem": self.stem,
            "option1": self.options[0],
            "option2": self.options[1],
            "option3": self.options[2],
            "option4": self.options[3],
            "correctOption": self.correct_option,
            "flightContext": self.flight_context,
            "explanation": self.explanation,
            "isCritical": self.is_critical,
            "riskPoints": self.risk_points,
            "sectionName": self.section_name,
            "hasScenario": self.has_scenario,
        }
        if self.is_emergency:
            data["isEmergency"] = True
        if self.is_bonus:
            data["isBonus"] = True
        return data


@dataclass(frozen=True)
class RadioItem:
    """通话卡：lines 为空表示纯叙事卡"""
    id: str
    phase: str
    context: str
    lines: Tuple[RadioLine, ...] = ()

    kind = "radio"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "id": self.id,
            "phase": self.phase,
            "context": self.context,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True)
class EmergencyItem:
    """应急公告卡：确认时扣减时钟并增加风险"""
    id: str
    name: str
    phase: str
    announcement: str
    panel_label: str
    panel_sub: str
    timer_penalty: int
    immediate_risk: int
    resolution: str
    radio_lines: Tuple[RadioLine, ...] = ()
    transition_texts: Tuple[str, ...] = ()

    kind = "emergency"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "id": self.id,
            "name": self.name,
            "phase": self.phase,
            "announcement": self.announcement,
            "panelLabel": self.panel_label,
            "panelSub": self.panel_sub,
            "timerPenalty": self.timer_penalty,
            "immediateRisk": self.immediate_risk,
            "resolution": self.resolution,
            "radioLines": [line.to_dict() for line in self.radio_lines],
        }


SequenceItem = Union[QuestionItem, RadioItem, EmergencyItem]


@dataclass(frozen=True)
class EmergencyEvent:
    """应急事件静态定义"""
    id: str
    name: str
    trigger_phases: Tuple[str, ...]
    announcement: str
    panel_label: str
    panel_sub: str
    timer_penalty: int
    immediate_risk: int
    question_pool: Tuple[str, ...]
    bonus_pool: Tuple[str, ...]
    radio_lines: Tuple[RadioLine, ...]
    transition_texts: Tuple[str, ...]
    resolution: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmergencyEvent":
        return cls(
            id=data["id"],
            name=data["name"],
            trigger_phases=tuple(data["trigger_phases"]),
            announcement=data["announcement"],
            panel_label=data["panel_label"],
            panel_sub=data["panel_sub"],
            timer_penalty=data["timer_penalty"],
            immediate_risk=data["immediate_risk"],
            question_pool=tuple(data.get("question_pool", ())),
            bonus_pool=tuple(data.get("bonus_pool", ())),
            radio_lines=tuple(RadioLine(speaker, text) for speaker, text in data.get("radio_lines", ())),
            transition_texts=tuple(data.get("transition_texts", ())),
            resolution=data["resolution"],
        )


# ==========================================
# 航段简报
# ==========================================

@dataclass(frozen=True)
class Airport:
    icao: str
    name: str
    runways: Tuple[str, ...]
    elevation: int
    has_atc: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icao": self.icao,
            "name": self.name,
            "runways": list(self.runways),
            "elevation": self.elevation,
            "hasAtc": self.has_atc,
        }


@dataclass(frozen=True)
class MetarDecoded:
    """METAR 解码结果（天气分类器的输入）"""
    wind_dir: int
    wind_speed: int
    gust_speed: Optional[int]
    vis_sm: float
    ceiling_ft: Optional[int]
    cloud_layers: str
    temp_c: int
    dew_c: int
    altimeter_inhg: str
    phenomena: str
    flight_category: str
    wx_code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "windDir": self.wind_dir,
            "windSpeed": self.wind_speed,
            "gustSpeed": self.gust_speed,
            "visSm": self.vis_sm,
            "ceilingFt": self.ceiling_ft,
            "cloudLayers": self.cloud_layers,
            "tempC": self.temp_c,
            "dewC": self.dew_c,
            "altimeterInHg": self.altimeter_inhg,
            "phenomena": self.phenomena,
            "flightCategory": self.flight_category,
        }


@dataclass(frozen=True)
class WxQuestion:
    """简报中嵌入的 METAR 解码题"""
    stem: str
    options: Tuple[str, str, str, str]
    correct_option: int
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stem": self.stem,
            "options": list(self.options),
            "correctOption": self.correct_option,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class Metar:
    raw: str
    decoded: MetarDecoded
    wx_question: WxQuestion

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw": self.raw,
            "decoded": self.decoded.to_dict(),
            "wxQuestion": self.wx_question.to_dict(),
        }


@dataclass(frozen=True)
class FlightBrief:
    airport: Airport
    runway: str
    callsign: str
    cruise_altitude: str
    metar: Metar

    @property
    def tokens(self) -> Dict[str, str]:
        """模板替换用的 token"""
        return {
            "callsign": self.callsign,
            "runway": self.runway,
            "icao": self.airport.icao,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "airport": self.airport.to_dict(),
            "runway": self.runway,
            "callsign": self.callsign,
            "cruiseAltitude": self.cruise_altitude,
            "metar": self.metar.to_dict(),
        }


# ==========================================
# 航段规划结果
# ==========================================

@dataclass(frozen=True)
class HopPlan:
    """
    规划输出

    Attributes:
        items: 有序卡片序列
        target_total: 抽到的题目总数目标
        phase_counts: 普通题各阶段分配数
        reserved: 实际保留给 bonus / 应急题的数量
        emergency_id: 选中的应急事件（可为 None）
    """
    items: Tuple[SequenceItem, ...]
    mission: str
    aircraft: str
    target_total: int
    phase_counts: Dict[str, int]
    reserved: int
    emergency_id: Optional[str] = None
    emergency_phase: Optional[str] = None
    bonus_id: Optional[str] = None

    def question_ids(self) -> List[str]:
        return [item.id for item in self.items if isinstance(item, QuestionItem)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence": [item.to_dict() for item in self.items],
            "mission": self.mission,
            "aircraft": self.aircraft,
            "targetTotal": self.target_total,
            "phaseCounts": dict(self.phase_counts),
            "reserved": self.reserved,
            "emergencyId": self.emergency_id,
        }


# ==========================================
# 会话状态
# ==========================================

@dataclass(frozen=True)
class Response:
    """一次作答记录"""
    question_id: str
    selected_option: int
    is_correct: bool
    risk_before: int
    risk_after: int
    was_bust: bool
    phase: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionId": self.question_id,
            "selectedOption": self.selected_option,
            "isCorrect": self.is_correct,
            "riskBefore": self.risk_before,
            "riskAfter": self.risk_after,
            "wasBust": self.was_bust,
            "phase": self.phase,
        }


@dataclass(frozen=True)
class AnswerOutcome:
    new_risk: int
    busted: bool


@dataclass(frozen=True)
class SessionState:
    """
    会话状态（由外壳持有，只通过 session 模块的纯函数推进）

    Attributes:
        sequence: 规划好的卡片序列
        index: 当前卡片下标
        risk: 累计风险 0..MAX_RISK，只增不减
        responses: 作答记录
        clock_remaining: 航段总时钟（秒）
        card_remaining: SVFR 模式下当前题目倒计时，其他情况为 None
        active_emergency: 正在处理的应急事件 ID（仅用于展示）
        end_reason: critical / risk / clock / go_nogo / cancelled / completed
    """
    sequence: Tuple[SequenceItem, ...]
    index: int = 0
    risk: int = 0
    responses: Tuple[Response, ...] = ()
    clock_remaining: int = HOP_TIMEOUT_SECONDS
    card_remaining: Optional[int] = None
    svfr: bool = False
    paused: bool = False
    status: str = STATUS_BRIEFING
    active_emergency: Optional[str] = None
    acknowledged: FrozenSet[str] = field(default_factory=frozenset)
    end_reason: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def is_busted(self) -> bool:
        return self.status == STATUS_BUSTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "total": len(self.sequence),
            "risk": self.risk,
            "responses": [r.to_dict() for r in self.responses],
            "clockRemaining": self.clock_remaining,
            "cardRemaining": self.card_remaining,
            "svfr": self.svfr,
            "paused": self.paused,
            "status": self.status,
            "activeEmergency": self.active_emergency,
            "endReason": self.end_reason,
        }
