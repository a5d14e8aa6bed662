#!/usr/bin/env python3
"""
掌握度记录

MasteryStore 是外壳持有的持久化接口，引擎本身从不读写它
提供内存实现（测试 / 不落盘）和 JSON 文件实现
"""
import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Dict, Any, Mapping, Optional

logger = logging.getLogger(__name__)

WEAKEST_LIMIT = 10


class MasteryStore(ABC):
    """掌握度存储接口"""

    @abstractmethod
    def record(self, question_id: str, correct: bool) -> None:
        """记录一次判分结果"""

    @abstractmethod
    def stats(self) -> Dict[str, Dict[str, int]]:
        """题目 ID -> {attempts, correct}"""

    def summary(self, sections: Optional[Mapping[int, str]] = None) -> Dict[str, Any]:
        """
        掌握度汇总

        Args:
            sections: 章节号 -> 章节名，用于按章节聚合

        Returns:
            dict: questions / sections / weakest / totals
        """
        stats = self.stats()
        questions = {}
        for qid, s in stats.items():
            attempts = s.get("attempts", 0)
            questions[qid] = {
                "attempts": attempts,
                "correct": s.get("correct", 0),
                "accuracy": round(s.get("correct", 0) / attempts, 3) if attempts else 0.0,
            }

        by_section = {}
        for qid, q in questions.items():
            head = qid.split(".")[0]
            if not head.isdigit():
                continue
            number = int(head)
            entry = by_section.setdefault(number, {
                "section": number,
                "name": (sections or {}).get(number, ""),
                "attempts": 0,
                "correct": 0,
            })
            entry["attempts"] += q["attempts"]
            entry["correct"] += q["correct"]
        for entry in by_section.values():
            entry["accuracy"] = round(entry["correct"] / entry["attempts"], 3) if entry["attempts"] else 0.0

        attempted = [(qid, q) for qid, q in questions.items() if q["attempts"] > 0]
        attempted.sort(key=lambda pair: (pair[1]["accuracy"], -pair[1]["attempts"], pair[0]))
        weakest = [{"questionId": qid, **q} for qid, q in attempted[:WEAKEST_LIMIT]]

        total_attempts = sum(q["attempts"] for q in questions.values())
        total_correct = sum(q["correct"] for q in questions.values())

        return {
            "questions": questions,
            "sections": [by_section[k] for k in sorted(by_section)],
            "weakest": weakest,
            "totals": {
                "attempts": total_attempts,
                "correct": total_correct,
                "accuracy": round(total_correct / total_attempts, 3) if total_attempts else 0.0,
            },
        }


class InMemoryMasteryStore(MasteryStore):
    """进程内存储"""

    def __init__(self):
        self._stats: Dict[str, Dict[str, int]] = {}
        self._lock = threading.Lock()

    def record(self, question_id: str, correct: bool) -> None:
        with self._lock:
            entry = self._stats.setdefault(question_id, {"attempts": 0, "correct": 0})
            entry["attempts"] += 1
            if correct:
                entry["correct"] += 1

    def stats(self) -> Dict[str, Dict[str, int]]:
        with self._lock:
            return {qid: dict(s) for qid, s in self._stats.items()}


class JsonFileMasteryStore(InMemoryMasteryStore):
    """
    JSON 文件存储

    每次 record 后整体写回文件；文件损坏时从空记录开始
    """

    def __init__(self, path: str):
        super().__init__()
        self.path = path
        self._file_lock = threading.Lock()
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"[Mastery] 无法读取 {self.path}: {e}")
            return
        if isinstance(data, dict):
            self._stats = {
                str(qid): {"attempts": int(s.get("attempts", 0)), "correct": int(s.get("correct", 0))}
                for qid, s in data.items() if isinstance(s, dict)
            }

    def record(self, question_id: str, correct: bool) -> None:
        # 计数、快照和写盘在同一把锁内，文件内容总是最新一次的快照
        with self._file_lock:
            super().record(question_id, correct)
            snapshot = self.stats()
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, ensure_ascii=False, indent=2)


def create_mastery_store(path: Optional[str]) -> MasteryStore:
    """路径为空时使用内存存储"""
    if path:
        return JsonFileMasteryStore(path)
    return InMemoryMasteryStore()
