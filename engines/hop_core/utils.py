#!/usr/bin/env python3
"""
工具函数集

模板 token 替换、静态表转换等辅助功能
"""
import re
from typing import Iterable, Mapping, Tuple

from .models import RadioLine

_TOKEN_PATTERN = re.compile(r"\{(callsign|runway|icao)\}")


def inject_tokens(text: str, tokens: Mapping[str, str]) -> str:
    """
    替换文本中的简报 token

    只识别 {callsign} {runway} {icao}，其他花括号原样保留；
    缺失的 token 也原样保留

    Args:
        text: 模板文本
        tokens: token 值

    Returns:
        str: 替换后的文本
    """
    if not text:
        return text or ""
    return _TOKEN_PATTERN.sub(lambda m: tokens.get(m.group(1), m.group(0)), text)


def inject_radio_lines(lines: Iterable, tokens: Mapping[str, str]) -> Tuple[RadioLine, ...]:
    """
    替换通话行中的 token

    Args:
        lines: RadioLine 或 (speaker, text) 元组

    Returns:
        Tuple[RadioLine, ...]: 替换后的通话行
    """
    result = []
    for line in lines:
        if isinstance(line, RadioLine):
            speaker, text = line.speaker, line.text
        else:
            speaker, text = line
        result.append(RadioLine(speaker=speaker, text=inject_tokens(text, tokens)))
    return tuple(result)


def dedupe(ids: Iterable[str]) -> list:
    """去重并保持原顺序"""
    seen = set()
    result = []
    for item in ids:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def id_sort_key(question_id: str) -> Tuple:
    """
    题目 ID 的自然排序键："2.10" 排在 "2.9" 之后

    非数字 ID（如 ROC-A 卡）排在数字 ID 之后
    """
    parts = question_id.split(".")
    if all(p.isdigit() for p in parts):
        return (0,) + tuple(int(p) for p in parts)
    return (1, question_id)
