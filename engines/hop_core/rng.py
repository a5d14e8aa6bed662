#!/usr/bin/env python3
"""
随机数接口

规划过程中的所有随机性（抽样、洗牌、概率判定）都通过注入的 rng 完成，
固定种子即可复现同一航段
"""
import random
from typing import Optional, List, Sequence, TypeVar

T = TypeVar("T")


class SeededRng:
    """
    基于 random.Random 的可复现随机源

    任何实现了 next() -> [0, 1) 浮点数的对象都可以代替它
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


def rand_int(rng, low: int, high: int) -> int:
    """
    闭区间 [low, high] 上的均匀整数

    Args:
        rng: 随机源
        low: 下界
        high: 上界（包含）

    Returns:
        int: 随机整数
    """
    if high <= low:
        return low
    return low + int(rng.next() * (high - low + 1))


def chance(rng, probability: float) -> bool:
    """以给定概率返回 True"""
    return rng.next() < probability


def choice(rng, items: Sequence[T]) -> T:
    """等概率取一个元素（空序列抛 IndexError）"""
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return items[int(rng.next() * len(items))]


def shuffle(rng, items: Sequence[T]) -> List[T]:
    """Fisher-Yates 洗牌，返回新列表"""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.next() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
