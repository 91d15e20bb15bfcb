"""
牌局配置相关类的实现
包含牌堆组成、洗牌参数和显示设置
"""

import random
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .card import detect_symbols
from .exceptions import InvalidArgumentError
from .types import (
    JOKERS_PER_DECK, DisplayMode, SuitSymbols, get_all_suits, get_standard_ranks,
)


@dataclass
class DisplayConfig:
    """
    显示配置
    symbols为None时根据输出流编码自动选择花色符号表
    """
    symbols: Optional[SuitSymbols] = None
    pile_mode: DisplayMode = DisplayMode.NO_SORT
    hand_mode: DisplayMode = DisplayMode.NO_SORT

    def resolve_symbols(self, stream: Optional[TextIO] = None) -> SuitSymbols:
        """
        返回实际使用的花色符号表

        Args:
            stream: 输出流, 默认为标准输出
        """
        if self.symbols is not None:
            return self.symbols
        stream = stream or sys.stdout
        return detect_symbols(getattr(stream, "encoding", None))


@dataclass
class GameConfig:
    """
    牌局配置类
    包含构造牌局和洗牌所需的全部参数
    """
    # 牌堆组成
    deck_count: int = 1                # 使用几副牌
    player_count: int = 2              # 玩家数
    include_jokers: bool = False       # 每副牌是否加入两张大小王

    # 洗牌设置
    shuffle_iterations: int = 1000     # 随机交换次数

    # 调试和测试设置
    random_seed: Optional[int] = None  # 随机种子，用于可重现的洗牌

    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        """验证配置的有效性"""
        if self.player_count < 1:
            raise InvalidArgumentError(f"玩家数必须大于0: {self.player_count}")

        if self.deck_count < 0:
            raise InvalidArgumentError(f"牌的副数不能为负数: {self.deck_count}")

        if self.shuffle_iterations < 0:
            raise InvalidArgumentError(f"洗牌次数不能为负数: {self.shuffle_iterations}")

    @property
    def shoe_size(self) -> int:
        """牌堆总张数"""
        per_deck = len(get_all_suits()) * len(get_standard_ranks())
        if self.include_jokers:
            per_deck += JOKERS_PER_DECK
        return per_deck * self.deck_count

    def create_rng(self) -> random.Random:
        """创建本局使用的随机数生成器"""
        return random.Random(self.random_seed)

    @classmethod
    def default_4_player(cls) -> 'GameConfig':
        """
        创建默认的4人配置
        一副牌，不含大小王，每人13张
        """
        return cls(deck_count=1, player_count=4, include_jokers=False)

    @classmethod
    def default_heads_up(cls) -> 'GameConfig':
        """
        创建默认的双人配置
        """
        return cls(deck_count=1, player_count=2, include_jokers=False)
