"""
扑克牌相关类型定义.

定义扑克牌的花色、点数、排序方式、显示模式以及花色符号表.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值越大花色越大: 黑桃 > 红桃 > 方块 > 梅花.
    """

    CLUB = 0       # 梅花
    DIAMOND = 1    # 方块
    HEART = 2      # 红桃
    SPADE = 3      # 黑桃


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    0 表示无牌, 1 为A, 11-13 为JQK, 14 为大小王.
    """

    NONE = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14


class SortOrder(Enum):
    """牌组排序方式"""
    RANK_FIRST = "rank_first"    # 点数优先降序, 同点数按花色降序
    SUIT_FIRST = "suit_first"    # 花色优先降序, 同花色按点数降序


class DisplayMode(Enum):
    """牌组显示模式, 只影响输出, 不改变存储顺序"""
    NO_SORT = "no-sort"
    SORT_BY_NUMBER = "sort-by-number"
    SORT_BY_SUIT = "sort-by-suit"
    RANK_ONLY = "rank-only"


class SuitSymbols(Enum):
    """
    花色符号表.

    不同终端的编码能力不同, 按目标环境选择:
    UNICODE 适用于UTF-8终端, CP437 适用于Windows控制台代码页437,
    ASCII 用于两者都不支持的环境.
    """

    UNICODE = "unicode"
    CP437 = "cp437"
    ASCII = "ascii"

    @property
    def glyphs(self) -> Dict[Suit, str]:
        """返回该符号表中每个花色对应的符号"""
        return _SYMBOL_TABLES[self]


_SYMBOL_TABLES: Dict[SuitSymbols, Dict[Suit, str]] = {
    SuitSymbols.UNICODE: {
        Suit.CLUB: "♣", Suit.DIAMOND: "♦",
        Suit.HEART: "♥", Suit.SPADE: "♠",
    },
    SuitSymbols.CP437: {
        Suit.CLUB: "\x05", Suit.DIAMOND: "\x04",
        Suit.HEART: "\x03", Suit.SPADE: "\x06",
    },
    SuitSymbols.ASCII: {
        Suit.CLUB: "C", Suit.DIAMOND: "D",
        Suit.HEART: "H", Suit.SPADE: "S",
    },
}


JOKERS_PER_DECK = 2
# 大小王的花色没有实际意义，只是占位
JOKER_SUIT = Suit.DIAMOND


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 从梅花到黑桃的四种花色
    """
    return list(Suit)


def get_standard_ranks() -> List[Rank]:
    """
    获取一副标准牌的点数.

    Returns:
        List[Rank]: 从A到K的13种点数, 不含无牌和大小王
    """
    return [rank for rank in Rank if Rank.ACE <= rank <= Rank.KING]
