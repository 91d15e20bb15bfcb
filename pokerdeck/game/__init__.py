"""
牌局模块
包含公共牌堆与玩家手牌的管理
"""

from ..core.types import JOKER_SUIT, JOKERS_PER_DECK
from .poker_game import PokerGame, DEFAULT_SHUFFLE_ITERATIONS

__all__ = [
    'PokerGame', 'DEFAULT_SHUFFLE_ITERATIONS', 'JOKER_SUIT', 'JOKERS_PER_DECK',
]
