#!/usr/bin/env python3
"""
题库存储

SQLAlchemy 表结构 + 两种只读访问方式：
- CatalogStore: 连接字符串指定的数据库（生产）
- CatalogSnapshot: 内存快照，接口相同（测试 / 预取）

规划器只用 get_questions_by_phase / get_questions_by_ids，
其余查询服务于浏览、出处和模拟考试
"""
import logging
import random
import re
from typing import Dict, List, Optional, Sequence, Iterable

from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, create_engine, or_, func, text
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
from sqlalchemy.pool import StaticPool

from engines.hop_core.models import QuestionRecord, Reference
from engines.hop_core.utils import id_sort_key
from data.pstar_questions import SECTIONS, QUESTIONS, ANSWER_KEY, DOCUMENTS, REFERENCES

logger = logging.getLogger(__name__)

Base = declarative_base()

_EXACT_ID = re.compile(r"^\d+\.\d+$")
_SECTION_PREFIX = re.compile(r"^(\d+)\.?$")


def _escape_like(value: str) -> str:
    """LIKE 通配符按字面匹配"""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# ==========================================
# 表结构
# ==========================================

class Section(Base):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True)
    name = Column(String(128), nullable=False)

    questions = relationship("Question", back_populates="section")


class Question(Base):
    __tablename__ = "questions"

    id = Column(String(16), primary_key=True)           # "<section>.<n>"
    section_id = Column(Integer, ForeignKey("sections.id"), index=True, nullable=False)
    phase = Column(String(16), index=True, nullable=False)
    stem = Column(Text, nullable=False)
    option1 = Column(Text, nullable=False)
    option2 = Column(Text, nullable=False)
    option3 = Column(Text, nullable=False)
    option4 = Column(Text, nullable=False)
    correct_option = Column(Integer, nullable=False)    # 1-4，来自答案表
    risk_points = Column(Integer, nullable=False, default=1)
    is_critical = Column(Boolean, nullable=False, default=False)
    explanation = Column(Text, default="")
    flight_context = Column(Text, default="")            # 含 {callsign} 等 token

    section = relationship("Section", back_populates="questions")
    references = relationship("QuestionReference", back_populates="question", cascade="all, delete-orphan")


class DocumentMeta(Base):
    __tablename__ = "documents"

    doc_id = Column(String(32), primary_key=True)
    title = Column(Text, nullable=False)
    edition = Column(String(64), default="")
    publisher = Column(String(128), default="")


class QuestionReference(Base):
    __tablename__ = "question_references"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(String(16), ForeignKey("questions.id"), index=True, nullable=False)
    doc_id = Column(String(32), ForeignKey("documents.doc_id"), nullable=False)
    locator = Column(String(128), nullable=False)
    excerpt = Column(Text, default="")

    question = relationship("Question", back_populates="references")
    document = relationship("DocumentMeta")


def _to_record(row: Question) -> QuestionRecord:
    return QuestionRecord(
        id=row.id,
        stem=row.stem,
        options=(row.option1, row.option2, row.option3, row.option4),
        correct_option=row.correct_option,
        phase=row.phase,
        risk_points=row.risk_points,
        is_critical=bool(row.is_critical),
        explanation=row.explanation or "",
        section_name=row.section.name if row.section else "",
        flight_context=row.flight_context or "",
    )


def _sorted(records: Iterable[QuestionRecord]) -> List[QuestionRecord]:
    return sorted(records, key=lambda r: id_sort_key(r.id))


# ==========================================
# 数据库存储
# ==========================================

class CatalogStore:
    """
    基于 SQLAlchemy 的题库

    Args:
        url: 数据库连接字符串；内存 SQLite 使用 StaticPool 以便多线程共享同一连接
    """

    def __init__(self, url: str):
        self.url = url
        kwargs = {}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **kwargs)
        self.Session = sessionmaker(bind=self.engine)
        Base.metadata.create_all(self.engine)

    # ---------- 规划器使用 ----------

    def get_questions_by_phase(self, phase: str) -> List[QuestionRecord]:
        with self.Session() as session:
            rows = session.query(Question).filter(Question.phase == phase).all()
            return _sorted(_to_record(r) for r in rows)

    def get_questions_by_ids(self, ids: Sequence[str]) -> List[QuestionRecord]:
        if not ids:
            return []
        with self.Session() as session:
            rows = session.query(Question).filter(Question.id.in_(list(ids))).all()
            return _sorted(_to_record(r) for r in rows)

    # ---------- 浏览 / 出处 / 考试 ----------

    def text_search(self, query: str = "", section_filter: Optional[int] = None) -> List[QuestionRecord]:
        """
        题目检索

        query 为 "N.NN" 时按 ID 精确匹配；为 "N" 或 "N." 时按章节；
        其他情况在题干和选项中做不区分大小写的子串匹配
        """
        query = (query or "").strip()
        with self.Session() as session:
            q = session.query(Question)
            if section_filter is not None:
                q = q.filter(Question.section_id == section_filter)
            if query:
                prefix = _SECTION_PREFIX.match(query)
                if _EXACT_ID.match(query):
                    q = q.filter(Question.id == query)
                elif prefix:
                    q = q.filter(Question.section_id == int(prefix.group(1)))
                else:
                    pattern = f"%{_escape_like(query.lower())}%"
                    q = q.filter(or_(
                        func.lower(Question.stem).like(pattern, escape="\\"),
                        func.lower(Question.option1).like(pattern, escape="\\"),
                        func.lower(Question.option2).like(pattern, escape="\\"),
                        func.lower(Question.option3).like(pattern, escape="\\"),
                        func.lower(Question.option4).like(pattern, escape="\\"),
                    ))
            return _sorted(_to_record(r) for r in q.all())

    def get_references(self, question_id: str) -> List[Reference]:
        with self.Session() as session:
            rows = (session.query(QuestionReference)
                    .filter(QuestionReference.question_id == question_id)
                    .order_by(QuestionReference.id)
                    .all())
            return [
                Reference(
                    question_id=r.question_id,
                    doc_id=r.doc_id,
                    locator=r.locator,
                    excerpt=r.excerpt or "",
                    doc_title=r.document.title if r.document else "",
                )
                for r in rows
            ]

    def answer_key(self) -> Dict[str, int]:
        with self.Session() as session:
            return {qid: option for qid, option in session.query(Question.id, Question.correct_option)}

    def random_questions(self, limit: int = 50) -> List[QuestionRecord]:
        with self.Session() as session:
            rows = session.query(Question).order_by(func.random()).limit(limit).all()
            return [_to_record(r) for r in rows]

    def all_questions(self) -> List[QuestionRecord]:
        return self.text_search()

    def sections(self) -> Dict[int, str]:
        with self.Session() as session:
            return {s.id: s.name for s in session.query(Section).order_by(Section.id)}

    def all_references(self) -> List[Reference]:
        with self.Session() as session:
            rows = session.query(QuestionReference).order_by(QuestionReference.id).all()
            return [Reference(r.question_id, r.doc_id, r.locator, r.excerpt or "") for r in rows]

    def documents(self) -> Dict[str, Dict[str, str]]:
        with self.Session() as session:
            return {
                d.doc_id: {"title": d.title, "edition": d.edition or "", "publisher": d.publisher or ""}
                for d in session.query(DocumentMeta)
            }

    def question_count(self) -> int:
        with self.Session() as session:
            return session.query(func.count(Question.id)).scalar() or 0

    def ping(self) -> bool:
        """健康检查（连接失败时抛出 SQLAlchemyError）"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True


def seed_catalog(store: CatalogStore) -> int:
    """
    用静态表重建题库（先清空再写入）

    Returns:
        int: 写入的题目数
    """
    with store.Session() as session:
        session.query(QuestionReference).delete()
        session.query(Question).delete()
        session.query(DocumentMeta).delete()
        session.query(Section).delete()

        for number, name in SECTIONS.items():
            session.add(Section(id=number, name=name))
        for doc_id, meta in DOCUMENTS.items():
            session.add(DocumentMeta(doc_id=doc_id, title=meta["title"],
                                     edition=meta.get("edition", ""), publisher=meta.get("publisher", "")))
        session.flush()

        for q in QUESTIONS:
            options = q["options"]
            session.add(Question(
                id=q["id"],
                section_id=q["section"],
                phase=q["phase"],
                stem=q["stem"],
                option1=options[0],
                option2=options[1],
                option3=options[2],
                option4=options[3],
                correct_option=ANSWER_KEY.get(q["id"], 0),
                risk_points=q.get("risk", 1),
                is_critical=q.get("critical", False),
                explanation=q.get("explanation", ""),
                flight_context=q.get("context", ""),
            ))
        session.flush()

        for question_id, doc_id, locator, excerpt in REFERENCES:
            session.add(QuestionReference(question_id=question_id, doc_id=doc_id, locator=locator, excerpt=excerpt))

        session.commit()

    logger.info(f"[Catalog] 已写入 {len(QUESTIONS)} 道题目, {len(REFERENCES)} 条出处")
    return len(QUESTIONS)


# ==========================================
# 内存快照
# ==========================================

class CatalogSnapshot:
    """
    只读内存题库，接口与 CatalogStore 相同

    固定快照 + 固定种子即可复现规划结果
    """

    def __init__(self, questions: Sequence[QuestionRecord], references: Sequence[Reference] = (),
                 sections: Optional[Dict[int, str]] = None, documents: Optional[Dict[str, Dict[str, str]]] = None):
        self._questions = {q.id: q for q in questions}
        self._ordered = _sorted(self._questions.values())
        self._references = list(references)
        self._sections = dict(sections or {})
        self._documents = dict(documents or {})

    @classmethod
    def from_static(cls) -> "CatalogSnapshot":
        """由静态题库表构建（答案表写入 correct_option）"""
        questions = [
            QuestionRecord(
                id=q["id"],
                stem=q["stem"],
                options=tuple(q["options"]),
                correct_option=ANSWER_KEY.get(q["id"], 0),
                phase=q["phase"],
                risk_points=q.get("risk", 1),
                is_critical=q.get("critical", False),
                explanation=q.get("explanation", ""),
                section_name=SECTIONS.get(q["section"], ""),
                flight_context=q.get("context", ""),
            )
            for q in QUESTIONS
        ]
        references = [
            Reference(qid, doc_id, locator, excerpt, DOCUMENTS.get(doc_id, {}).get("title", ""))
            for qid, doc_id, locator, excerpt in REFERENCES
        ]
        return cls(questions, references, SECTIONS, DOCUMENTS)

    @classmethod
    def from_store(cls, store: CatalogStore) -> "CatalogSnapshot":
        """从数据库预取"""
        return cls(store.all_questions(), store.all_references(), store.sections(), store.documents())

    def get_questions_by_phase(self, phase: str) -> List[QuestionRecord]:
        return [q for q in self._ordered if q.phase == phase]

    def get_questions_by_ids(self, ids: Sequence[str]) -> List[QuestionRecord]:
        wanted = set(ids or [])
        return [q for q in self._ordered if q.id in wanted]

    def text_search(self, query: str = "", section_filter: Optional[int] = None) -> List[QuestionRecord]:
        query = (query or "").strip()
        results = self._ordered
        if section_filter is not None:
            results = [q for q in results if q.section_number == section_filter]
        if not query:
            return list(results)
        if _EXACT_ID.match(query):
            return [q for q in results if q.id == query]
        prefix = _SECTION_PREFIX.match(query)
        if prefix:
            return [q for q in results if q.section_number == int(prefix.group(1))]
        needle = query.lower()
        return [
            q for q in results
            if needle in q.stem.lower() or any(needle in o.lower() for o in q.options)
        ]

    def get_references(self, question_id: str) -> List[Reference]:
        return [r for r in self._references if r.question_id == question_id]

    def answer_key(self) -> Dict[str, int]:
        return {q.id: q.correct_option for q in self._ordered}

    def random_questions(self, limit: int = 50) -> List[QuestionRecord]:
        return random.sample(self._ordered, min(limit, len(self._ordered)))

    def all_questions(self) -> List[QuestionRecord]:
        return list(self._ordered)

    def all_references(self) -> List[Reference]:
        return list(self._references)

    def sections(self) -> Dict[int, str]:
        return dict(self._sections)

    def documents(self) -> Dict[str, Dict[str, str]]:
        return dict(self._documents)

    def question_count(self) -> int:
        return len(self._ordered)

    def ping(self) -> bool:
        return True
