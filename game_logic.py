#!/usr/bin/env python3
"""
航段会话业务逻辑层 - 统一的接口供 Socket 事件和测试调用
所有业务逻辑都在这里，与 Flask 全局对象解耦

会话状态只通过 engines.hop_core 的纯函数推进，这里负责：
持有状态、广播结果、写动作日志、记录掌握度、驱动 1 秒时钟
"""
import logging
import threading
from typing import Dict, Optional, Any, Callable

from engines.hop_core import (
    SeededRng,
    HopEngineError,
    QuestionItem,
    EmergencyItem,
    generate_flight_brief,
    detect_weather_conditions,
    plan_sequence,
    resolve_mission,
    resolve_aircraft,
    create_briefing,
    resolve_go_no_go,
    submit_answer,
    card_expired,
    expire_card,
    acknowledge_emergency,
    advance,
    tick,
    pause_session,
    resume_session,
    current_item,
    debrief_summary,
    pick_transition,
    phase_bridge,
    emergency_transition,
)
from engines.mastery import MasteryStore

logger = logging.getLogger(__name__)


class HopGameLogic:
    """
    航段训练的核心业务逻辑

    设计原则：
    1. 所有方法接收 session_id，不依赖 request.sid
    2. 通过 socketio 参数发送结果，但不依赖 Flask 的全局对象
    3. 业务方法返回 bool 表示是否成功，引擎异常在这里记录后吞掉
    """

    def __init__(self, sessions: Dict, socketio, log_action_func, catalog,
                 mastery: Optional[MasteryStore] = None,
                 rng_factory: Callable[[], Any] = SeededRng):
        """
        初始化业务逻辑

        Args:
            sessions: 会话状态字典（引用）
            socketio: SocketIO 实例（用于发送事件和后台任务）
            log_action_func: 日志记录函数
            catalog: 题库（CatalogStore 或 CatalogSnapshot）
            mastery: 掌握度存储（可选）
            rng_factory: 每个会话的随机源工厂
        """
        self.sessions = sessions
        self.socketio = socketio
        self.log_action = log_action_func
        self.catalog = catalog
        self.mastery = mastery
        self.rng_factory = rng_factory
        self._lock = threading.RLock()

    # ==========================================
    # 航段生成
    # ==========================================

    def build_hop(self, mission: Optional[str], aircraft: Optional[str], rng=None) -> Dict[str, Any]:
        """
        生成简报并规划航段

        Args:
            mission: 任务剖面（未知时回退）
            aircraft: 机型（未知时回退）
            rng: 随机源（默认新建）

        Returns:
            dict: brief / plan / wx_conditions / mode / rng
        """
        rng = rng or self.rng_factory()
        brief = generate_flight_brief(rng)
        wx_conditions = detect_weather_conditions(brief.metar.decoded)
        plan = plan_sequence(mission, aircraft, wx_conditions, None, self.catalog, rng, tokens=brief.tokens)

        mission_name, mission_profile = resolve_mission(plan.mission)
        aircraft_code, aircraft_profile = resolve_aircraft(plan.aircraft)
        mode = {
            "mission": mission_name,
            "aircraft": aircraft_code,
            "missionLabel": mission_profile["label"],
            "aircraftLabel": aircraft_profile["label"],
        }
        return {"brief": brief, "plan": plan, "wx_conditions": wx_conditions, "mode": mode, "rng": rng}

    @staticmethod
    def hop_payload(hop: Dict[str, Any]) -> Dict[str, Any]:
        """GET /hop 和 hop_ready 共用的 JSON 结构"""
        return {
            "sequence": [item.to_dict() for item in hop["plan"].items],
            "brief": hop["brief"].to_dict(),
            "wxConditions": list(hop["wx_conditions"]),
            "mode": dict(hop["mode"]),
        }

    def create_hop(self, session_id: str, mission: Optional[str], aircraft: Optional[str],
                   sid: Optional[str] = None, log_file: Optional[str] = None,
                   start_time: Optional[float] = None) -> bool:
        """
        为一个会话生成航段，进入简报阶段

        Returns:
            bool: 是否创建成功
        """
        hop = self.build_hop(mission, aircraft)
        state = create_briefing(hop["plan"].items)

        with self._lock:
            self.sessions[session_id] = {
                "state": state,
                "brief": hop["brief"],
                "plan": hop["plan"],
                "wx_conditions": hop["wx_conditions"],
                "mode": hop["mode"],
                "rng": hop["rng"],
                "sid": sid,
                "log_file": log_file,
                "session_start_time": start_time,
                "clock_running": False,
            }

        self.log_action(session_id, "hop_created",
                        details={
                            "mode": hop["mode"],
                            "wx_conditions": hop["wx_conditions"],
                            "questions": hop["plan"].question_ids(),
                            "emergency": hop["plan"].emergency_id,
                            "bonus": hop["plan"].bonus_id,
                        },
                        phase="briefing")
        self.log_action(session_id, "brief_issued",
                        details={
                            "airport": hop["brief"].airport.icao,
                            "runway": hop["brief"].runway,
                            "callsign": hop["brief"].callsign,
                            "metar": hop["brief"].metar.raw,
                        },
                        phase="briefing")

        payload = self.hop_payload(hop)
        payload["state"] = state.to_dict()
        self._emit("hop_ready", payload, sid)
        return True

    # ==========================================
    # 起飞决策
    # ==========================================

    def go_no_go(self, session_id: str, wx_option: int, decision: str) -> bool:
        """
        提交 METAR 解码答案和起飞决策；开始飞行时启动时钟

        Returns:
            bool: 是否处理成功
        """
        hop = self.sessions.get(session_id)
        if hop is None:
            return False

        with self._lock:
            try:
                state = resolve_go_no_go(hop["state"], hop["brief"], wx_option, decision)
            except HopEngineError as e:
                logger.warning(f"[HopSession] {session_id} go/no-go 被拒绝: {e}")
                return False
            hop["state"] = state

        self.log_action(session_id, "go_no_go",
                        details={
                            "wx_option": wx_option,
                            "decision": decision,
                            "category": hop["brief"].metar.decoded.flight_category,
                            "status": state.status,
                            "svfr": state.svfr,
                        },
                        phase="preflight")

        self._emit("hop_state", {"state": state.to_dict()}, hop["sid"])
        if state.is_terminal:
            self._finish(session_id)
        else:
            self.start_clock(session_id)
        return True

    # ==========================================
    # 飞行中
    # ==========================================

    def submit_answer(self, session_id: str, option: int) -> bool:
        """
        对当前题目卡作答

        Returns:
            bool: 是否作答成功
        """
        hop = self.sessions.get(session_id)
        if hop is None:
            return False

        with self._lock:
            before = hop["state"]
            try:
                state, response = submit_answer(before, option)
            except HopEngineError as e:
                logger.warning(f"[HopSession] {session_id} 作答被拒绝: {e}")
                return False
            hop["state"] = state

        self._after_answer(session_id, current_item(before), state, response, expired=False)
        return True

    def acknowledge_emergency(self, session_id: str) -> bool:
        hop = self.sessions.get(session_id)
        if hop is None:
            return False

        with self._lock:
            before = hop["state"]
            try:
                state = acknowledge_emergency(before)
            except HopEngineError as e:
                logger.warning(f"[HopSession] {session_id} 应急确认被拒绝: {e}")
                return False
            hop["state"] = state

        self.log_action(session_id, "emergency_acknowledged",
                        details={
                            "emergency": state.active_emergency,
                            "clock_before": before.clock_remaining,
                            "clock_after": state.clock_remaining,
                            "risk_before": before.risk,
                            "risk_after": state.risk,
                        },
                        phase=current_item(before).phase)
        self._emit("hop_state", {"state": state.to_dict()}, hop["sid"])
        self._finish_if_terminal(session_id)
        return True

    def advance(self, session_id: str) -> bool:
        """通话卡继续"""
        hop = self.sessions.get(session_id)
        if hop is None:
            return False

        with self._lock:
            try:
                state = advance(hop["state"])
            except HopEngineError as e:
                logger.warning(f"[HopSession] {session_id} 无法继续: {e}")
                return False
            hop["state"] = state

        self._emit("hop_state", {"state": state.to_dict()}, hop["sid"])
        self._finish_if_terminal(session_id)
        return True

    def pause(self, session_id: str) -> bool:
        return self._toggle_pause(session_id, pause_session, "hop_paused")

    def resume(self, session_id: str) -> bool:
        return self._toggle_pause(session_id, resume_session, "hop_resumed")

    def _toggle_pause(self, session_id: str, transition, action: str) -> bool:
        hop = self.sessions.get(session_id)
        if hop is None:
            return False
        with self._lock:
            hop["state"] = transition(hop["state"])
            state = hop["state"]
        self.log_action(session_id, action, details={"clock_remaining": state.clock_remaining})
        self._emit("hop_state", {"state": state.to_dict()}, hop["sid"])
        return True

    # ==========================================
    # 时钟
    # ==========================================

    def tick(self, session_id: str, seconds: int = 1) -> bool:
        """
        推进 1 秒；SVFR 单卡倒计时到期时按答错处理

        Returns:
            bool: 会话是否仍在飞行中（时钟循环据此决定是否继续）
        """
        hop = self.sessions.get(session_id)
        if hop is None:
            return False

        with self._lock:
            state = tick(hop["state"], seconds)
            hop["state"] = state
            expired = None
            if card_expired(state):
                item = current_item(state)
                state, response = expire_card(state)
                hop["state"] = state
                expired = (item, response)

        if expired is not None:
            item, response = expired
            self._emit("card_expired", {"questionId": item.id, "state": state.to_dict()}, hop["sid"])
            self._after_answer(session_id, item, state, response, expired=True)
        elif state.is_terminal:
            if state.end_reason == "clock":
                self.log_action(session_id, "clock_out", details={"index": state.index})
            self._finish(session_id)

        return not hop["state"].is_terminal

    def start_clock(self, session_id: str):
        """每个航段只启动一个时钟循环，循环绑定到启动它的航段"""
        with self._lock:
            hop = self.sessions.get(session_id)
            if hop is None or hop.get("clock_running"):
                return
            hop["clock_running"] = True
        self.socketio.start_background_task(self.run_clock_loop, session_id, hop)

    def run_clock_loop(self, session_id: str, hop: Optional[Dict[str, Any]] = None):
        """1 秒时钟循环；会话结束、被移除或被新航段替换时退出"""
        if hop is None:
            hop = self.sessions.get(session_id)
        while hop is not None:
            self.socketio.sleep(1)
            with self._lock:
                if self.sessions.get(session_id) is not hop:
                    break
                if not self.tick(session_id):
                    break
        if hop is not None:
            hop["clock_running"] = False

    # ==========================================
    # 内部
    # ==========================================

    def _after_answer(self, session_id: str, item: QuestionItem, state, response, expired: bool):
        """作答后的日志、掌握度、过渡文本和结束处理"""
        if self.mastery is not None:
            self.mastery.record(response.question_id, response.is_correct)

        hop = self.sessions.get(session_id)
        if hop is None:
            # 作答后连接已断开
            return

        self.log_action(session_id, "card_expired" if expired else "answer",
                        details={
                            "question_id": response.question_id,
                            "selected_option": response.selected_option,
                            "is_correct": response.is_correct,
                            "risk_before": response.risk_before,
                            "risk_after": response.risk_after,
                            "was_bust": response.was_bust,
                        },
                        phase=response.phase)

        transition = None
        bridge = None
        if not state.is_terminal:
            rng = hop["rng"]
            emergency = self._active_emergency_item(state)
            if emergency is not None and isinstance(item, QuestionItem) and item.is_emergency:
                transition = emergency_transition(emergency.transition_texts, rng)
            if transition is None:
                transition = pick_transition(response.phase, response.is_correct, state.risk, rng)
            nxt = current_item(state)
            if nxt is not None and nxt.phase != response.phase:
                bridge = phase_bridge(response.phase)

        self._emit("answer_result", {
            "response": response.to_dict(),
            "transition": transition,
            "phaseBridge": bridge,
            "state": state.to_dict(),
        }, hop["sid"])

        self._finish_if_terminal(session_id)

    def _active_emergency_item(self, state) -> Optional[EmergencyItem]:
        if not state.active_emergency:
            return None
        for entry in state.sequence:
            if isinstance(entry, EmergencyItem) and entry.id == state.active_emergency:
                return entry
        return None

    def _finish_if_terminal(self, session_id: str):
        hop = self.sessions.get(session_id)
        if hop is not None and hop["state"].is_terminal:
            self._finish(session_id)

    def _finish(self, session_id: str):
        """bust 发 hop_bust，其余结束方式发 hop_debrief；每个会话只发一次"""
        with self._lock:
            hop = self.sessions.get(session_id)
            if hop is None or hop.get("finished"):
                return
            hop["finished"] = True
            state = hop["state"]

        summary = debrief_summary(state)
        if state.is_busted:
            self.log_action(session_id, "bust", details={"reason": state.end_reason, "risk": state.risk},
                            phase=summary["bustPhase"])
            self._emit("hop_bust", {"reason": state.end_reason, "debrief": summary, "state": state.to_dict()},
                       hop["sid"])
        else:
            self._emit("hop_debrief", {"debrief": summary, "state": state.to_dict()}, hop["sid"])

        self.log_action(session_id, "debrief", details=summary, phase="debrief")
        logger.info(f"[HopSession] {session_id} 结束: {state.status} ({state.end_reason}), "
                    f"{summary['correct']}/{summary['total']} 正确")

    def _emit(self, event: str, payload: Dict[str, Any], sid: Optional[str]):
        if sid:
            self.socketio.emit(event, payload, room=sid)
        else:
            self.socketio.emit(event, payload)

    # ==========================================
    # 查询 / 清理
    # ==========================================

    def get_state(self, session_id: str) -> Optional[Dict[str, Any]]:
        hop = self.sessions.get(session_id)
        if hop is None:
            return None
        return hop["state"].to_dict()

    def remove_session(self, session_id: str) -> bool:
        """断开连接时移除会话（时钟循环在下一秒自行退出）"""
        with self._lock:
            hop = self.sessions.pop(session_id, None)
        return hop is not None
