"""
核心基础组件模块
包含花色点数类型、扑克牌、牌组、配置和异常
"""

from .types import (
    Suit, Rank, SortOrder, DisplayMode, SuitSymbols, JOKER_SUIT, JOKERS_PER_DECK,
    get_all_suits, get_standard_ranks,
)
from .card import Card, detect_symbols, set_default_symbols, get_default_symbols
from .deck import Deck
from .config import GameConfig, DisplayConfig
from .exceptions import (
    PokerDeckError, InvalidArgumentError, IndexOutOfRangeError,
    CardNotHeldError, EmptyPileError,
)

__all__ = [
    # 类型
    'Suit', 'Rank', 'SortOrder', 'DisplayMode', 'SuitSymbols', 'JOKER_SUIT', 'JOKERS_PER_DECK',
    'get_all_suits', 'get_standard_ranks',

    # 卡牌相关
    'Card', 'Deck', 'detect_symbols', 'set_default_symbols', 'get_default_symbols',

    # 配置相关
    'GameConfig', 'DisplayConfig',

    # 异常类型
    'PokerDeckError', 'InvalidArgumentError', 'IndexOutOfRangeError',
    'CardNotHeldError', 'EmptyPileError',
]
