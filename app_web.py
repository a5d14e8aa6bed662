from flask import Flask, request, jsonify
from flask_socketio import SocketIO, emit
from sqlalchemy.exc import SQLAlchemyError
import time
import json
import os
import logging
from datetime import datetime

# 导入题库、判分和业务逻辑层
from data.catalog import CatalogStore, seed_catalog
from data.validate import assert_catalog_valid
from engines.grading import grade_responses
from engines.mastery import create_mastery_store
from game_logic import HopGameLogic
from config import (
    CATALOG_DATABASE_URL,
    SECRET_KEY,
    HOST,
    PORT,
    LOG_DIR,
    MASTERY_PATH,
    VALIDATE_ON_STARTUP,
    AUTO_SEED
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = SECRET_KEY
socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading')

sessions = {}

SIM_QUESTION_LIMIT = 50

# 题库、掌握度和业务逻辑层在第一次使用或 init_services 时创建
services = {
    "catalog": None,
    "mastery": None,
    "game_logic": None,
}

# ==========================================
# 0. 日志记录系统
# ==========================================

def log_action(session_id, action, details=None, phase=None):
    """
    记录会话操作到日志文件

    Args:
        session_id: 会话ID
        action: 操作类型 (hop_created, go_no_go, answer, emergency_acknowledged, bust, debrief, etc.)
        details: 操作详情 (dict)
        phase: 当前飞行阶段 (preflight, taxi_depart, enroute, arrival, debrief)
    """
    if session_id not in sessions:
        return

    hop = sessions[session_id]

    # 计算相对时间（从会话开始到现在的秒数）
    elapsed_time = 0
    if hop.get('session_start_time'):
        elapsed_time = time.time() - hop['session_start_time']

    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "elapsed_time": round(elapsed_time, 3),
        "session": session_id,
        "action": action,
        "details": details or {},
        "phase": phase,
        "risk": hop['state'].risk if hop.get('state') is not None else 0
    }

    # 追加写入到日志文件
    log_file = hop.get('log_file')
    if log_file:
        with open(log_file, 'a', encoding='utf-8') as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + '\n')


def init_services(catalog=None, mastery=None, validate=VALIDATE_ON_STARTUP, auto_seed=AUTO_SEED):
    """
    创建题库、掌握度存储和业务逻辑层

    Args:
        catalog: 题库（默认按 CATALOG_DATABASE_URL 连接）
        mastery: 掌握度存储（默认按 MASTERY_PATH 创建）
        validate: 是否做完整性检查（有缺陷时抛出 CatalogIntegrityError）
        auto_seed: 题库为空时是否自动写入
    """
    if catalog is None:
        catalog = CatalogStore(CATALOG_DATABASE_URL)
        if auto_seed and catalog.question_count() == 0:
            logger.info("[Catalog] 题库为空，使用静态表写入")
            seed_catalog(catalog)

    if validate:
        assert_catalog_valid(catalog)

    services["catalog"] = catalog
    services["mastery"] = mastery if mastery is not None else create_mastery_store(MASTERY_PATH)
    services["game_logic"] = HopGameLogic(sessions, socketio, log_action, catalog, services["mastery"])
    return services["game_logic"]


def get_game_logic() -> HopGameLogic:
    if services["game_logic"] is None:
        init_services()
    return services["game_logic"]


def get_catalog():
    get_game_logic()
    return services["catalog"]


# ==========================================
# 1. HTTP 接口
# ==========================================

@app.errorhandler(SQLAlchemyError)
def handle_catalog_error(e):
    """题库访问失败：通用 500，不重试"""
    logger.error(f"[Catalog] 查询失败: {e}")
    return jsonify({"error": "catalog unavailable"}), 500


@app.route('/hop')
def get_hop():
    """规划一个航段（每次请求都重新随机，不可缓存）"""
    hop = get_game_logic().build_hop(request.args.get('mission'), request.args.get('aircraft'))
    response = jsonify(HopGameLogic.hop_payload(hop))
    response.headers['Cache-Control'] = 'no-store'
    return response


@app.route('/sim', methods=['POST'])
def post_sim():
    """模拟考试判分"""
    data = request.get_json(silent=True) or {}
    responses = data.get('responses') if isinstance(data, dict) else None
    if not isinstance(responses, list):
        responses = []

    result = grade_responses(responses, get_catalog().answer_key())

    mastery = services["mastery"]
    if mastery is not None:
        for entry in result['results']:
            if entry['correctOption']:
                mastery.record(entry['questionId'], entry['isCorrect'])

    return jsonify(result)


@app.route('/sim', methods=['GET'])
def get_sim():
    """模拟考试题目（随机最多 50 道）"""
    questions = get_catalog().random_questions(SIM_QUESTION_LIMIT)
    return jsonify({"questions": [q.to_dict() for q in questions], "count": len(questions)})


@app.route('/questions')
def get_questions():
    """题库浏览：按 ID、章节或关键字"""
    section = request.args.get('section')
    section_filter = None
    if section not in (None, ''):
        try:
            section_filter = int(section)
        except ValueError:
            return jsonify({"error": "section must be an integer"}), 400

    questions = get_catalog().text_search(request.args.get('q', ''), section_filter)
    return jsonify({"questions": [q.to_dict() for q in questions], "count": len(questions)})


@app.route('/refs')
def get_refs():
    """题目出处"""
    question_id = (request.args.get('questionId') or '').strip()
    if not question_id:
        return jsonify({"error": "questionId required"}), 400

    references = get_catalog().get_references(question_id)
    if not references:
        return jsonify({"error": f"no references for {question_id}"}), 404
    return jsonify({"questionId": question_id, "references": [r.to_dict() for r in references]})


@app.route('/progress')
def get_progress():
    """掌握度汇总"""
    catalog = get_catalog()
    return jsonify(services["mastery"].summary(catalog.sections()))


@app.route('/health')
def health():
    try:
        get_catalog().ping()
    except SQLAlchemyError as e:
        logger.error(f"[Catalog] 健康检查失败: {e}")
        return jsonify({"status": "error", "database": "disconnected"}), 503
    return jsonify({"status": "ok", "database": "connected"})


# ==========================================
# 2. 航段会话 - Socket 事件
# ==========================================

def _session_id(data):
    return (data or {}).get('session_id') or request.sid


@socketio.on('join_hop')
def on_join_hop(data):
    data = data or {}
    session_id = _session_id(data)

    # 创建日志文件
    os.makedirs(LOG_DIR, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = f"hop_{session_id}_{timestamp}.jsonl"
    log_filepath = os.path.join(LOG_DIR, log_filename)

    # 写入会话开始日志
    with open(log_filepath, 'w', encoding='utf-8') as f:
        session_init = {
            "event": "session_created",
            "timestamp": datetime.now().isoformat(),
            "session": session_id,
            "log_file": log_filename
        }
        f.write(json.dumps(session_init, ensure_ascii=False) + '\n')

    try:
        get_game_logic().create_hop(session_id, data.get('mission'), data.get('aircraft'),
                                    sid=request.sid, log_file=log_filepath, start_time=time.time())
    except SQLAlchemyError as e:
        logger.error(f"[Catalog] 航段规划失败: {e}")
        emit('hop_error', {'error': 'catalog unavailable'})


@socketio.on('go_no_go')
def handle_go_no_go(data):
    data = data or {}
    try:
        wx_option = int(data.get('wx_option'))
    except (TypeError, ValueError):
        wx_option = 0
    if not get_game_logic().go_no_go(_session_id(data), wx_option, data.get('decision')):
        emit('hop_error', {'error': 'go/no-go rejected'})


@socketio.on('submit_answer')
def handle_submit_answer(data):
    data = data or {}
    try:
        option = int(data.get('option'))
    except (TypeError, ValueError):
        option = 0
    if not get_game_logic().submit_answer(_session_id(data), option):
        emit('hop_error', {'error': 'answer rejected'})


@socketio.on('acknowledge_emergency')
def handle_acknowledge(data):
    if not get_game_logic().acknowledge_emergency(_session_id(data)):
        emit('hop_error', {'error': 'no emergency to acknowledge'})


@socketio.on('advance')
def handle_advance(data):
    if not get_game_logic().advance(_session_id(data)):
        emit('hop_error', {'error': 'cannot advance'})


@socketio.on('pause_hop')
def handle_pause(data=None):
    get_game_logic().pause(_session_id(data))


@socketio.on('resume_hop')
def handle_resume(data=None):
    get_game_logic().resume(_session_id(data))


# --- 用户断开连接处理 ---
@socketio.on('disconnect')
def on_disconnect(*args):
    """断开连接时结束该连接持有的所有会话"""
    owned = [sid for sid, hop in sessions.items() if hop.get('sid') == request.sid]
    for session_id in owned:
        log_action(session_id, "disconnect",
                   details={"sid": request.sid, "status": sessions[session_id]['state'].status})
        get_game_logic().remove_session(session_id)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_services()
    print(f"启动服务器: http://{HOST}:{PORT}")
    socketio.run(app, debug=True, use_reloader=False, allow_unsafe_werkzeug=True, host=HOST, port=PORT)
