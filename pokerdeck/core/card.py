"""
扑克牌数据结构.

定义不可变的Card类以及花色符号表的选择逻辑.
"""

import codecs
import logging
import sys
from dataclasses import dataclass
from typing import Dict, Optional

from .types import Suit, Rank, SuitSymbols

logger = logging.getLogger(__name__)

_SUIT_MASK = 0b11
_RANK_MASK = 0b1111

_RANK_LABELS: Dict[int, str] = {
    Rank.NONE: "",
    Rank.ACE: "A",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.JOKER: "JOKER",
}

# 为None时按标准输出的编码自动选择
_default_symbols: Optional[SuitSymbols] = None


def detect_symbols(encoding: Optional[str]) -> SuitSymbols:
    """
    根据输出编码选择花色符号表.

    Args:
        encoding: 输出流的编码名称, 如 "utf-8" 或 "cp437"

    Returns:
        SuitSymbols: 能表示四种花色的UNICODE表; cp437编码使用代码页符号; 其余使用ASCII
    """
    if not encoding:
        return SuitSymbols.ASCII
    try:
        name = codecs.lookup(encoding).name
    except LookupError:
        logger.debug(f"未知编码 {encoding}, 使用ASCII花色符号")
        return SuitSymbols.ASCII

    if name == "cp437":
        return SuitSymbols.CP437
    try:
        "".join(SuitSymbols.UNICODE.glyphs.values()).encode(name)
    except (UnicodeEncodeError, LookupError):
        return SuitSymbols.ASCII
    return SuitSymbols.UNICODE


def set_default_symbols(symbols: Optional[SuitSymbols]) -> None:
    """设置进程内默认的花色符号表, 传入None恢复按输出编码自动选择"""
    global _default_symbols
    _default_symbols = symbols


def get_default_symbols() -> SuitSymbols:
    """
    返回进程内默认的花色符号表.

    未显式设置时, 每次调用都根据当前标准输出的编码选择.
    """
    if _default_symbols is not None:
        return _default_symbols
    return detect_symbols(getattr(sys.stdout, "encoding", None))


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类, 按(花色, 点数)判等. 构造时不做校验,
    花色截取低2位, 点数截取低4位, 调用方负责传入有效值.

    Attributes:
        suit: 花色, 0-3
        rank: 点数, 0为无牌, 1-13为A到K, 14为大小王

    Examples:
        >>> card = Card(Suit.SPADE, Rank.ACE)
        >>> card.rank_label()
        'A'
        >>> str(Card(Suit.DIAMOND, Rank.JOKER))
        'JOKER'
    """

    suit: Suit = Suit.CLUB
    rank: int = Rank.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit(int(self.suit) & _SUIT_MASK))
        object.__setattr__(self, "rank", int(self.rank) & _RANK_MASK)

    @property
    def is_joker(self) -> bool:
        """是否为大小王"""
        return self.rank == Rank.JOKER

    def suit_symbol(self, symbols: Optional[SuitSymbols] = None) -> str:
        """
        返回花色符号.

        Args:
            symbols: 花色符号表, 为None时使用进程默认表

        Returns:
            str: 单个花色符号
        """
        table = symbols or get_default_symbols()
        return table.glyphs[self.suit]

    def rank_label(self) -> str:
        """
        返回点数的显示文字.

        Returns:
            str: 0为空串, 1为"A", 2-10为数字, 11-13为"J"/"Q"/"K", 14为"JOKER"
        """
        if self.rank in _RANK_LABELS:
            return _RANK_LABELS[self.rank]
        return str(self.rank)

    def equals(self, other: "Card") -> bool:
        """按花色和点数判断两张牌是否相同"""
        return self.suit == other.suit and self.rank == other.rank

    def format(self, symbols: Optional[SuitSymbols] = None) -> str:
        """
        返回扑克牌的显示字符串.

        Args:
            symbols: 花色符号表, 为None时使用进程默认表

        Returns:
            str: 大小王为"JOKER", 其余为"花色 点数", 点数右对齐占2位, 如"♠  A"
        """
        if self.is_joker:
            return self.rank_label()
        return f"{self.suit_symbol(symbols)} {self.rank_label():>2}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        try:
            rank_name = Rank(self.rank).name
        except ValueError:
            rank_name = str(self.rank)
        return f"Card({self.suit.name}, {rank_name})"
