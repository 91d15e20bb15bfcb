"""
牌组管理.

定义Deck类, 一个有序、可变的扑克牌序列. 下标0为牌底, 最后一张为牌顶.
提供入牌、出牌、按牌查找移除、排序、按花色筛选和多种显示模式.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .card import Card
from .exceptions import CardNotHeldError, EmptyPileError, IndexOutOfRangeError
from .types import DisplayMode, Rank, SortOrder, Suit, SuitSymbols

CARD_SEPARATOR = "  "
RANK_SEPARATOR = " "

# A 在排序中总是最大
_ACE_HIGH = Rank.JOKER + 1


def _rank_weight(card: Card) -> int:
    return _ACE_HIGH if card.rank == Rank.ACE else card.rank


def _rank_first_key(card: Card) -> Tuple[int, int]:
    return _rank_weight(card), card.suit


def _suit_first_key(card: Card) -> Tuple[int, int]:
    return card.suit, _rank_weight(card)


_SORT_KEYS: Dict[SortOrder, Callable[[Card], Tuple[int, int]]] = {
    SortOrder.RANK_FIRST: _rank_first_key,
    SortOrder.SUIT_FIRST: _suit_first_key,
}


class Deck:
    """
    表示一叠扑克牌(牌堆或手牌).

    牌的插入顺序有意义, 允许重复的牌(多副牌或两张大小王).
    显示模式只影响字符串输出, 不改变存储顺序.

    Attributes:
        _cards: 从牌底到牌顶的牌列表
        _display_mode: 当前显示模式

    Examples:
        >>> deck = Deck([Card(Suit.HEART, Rank.KING)])
        >>> deck.push(Card(Suit.SPADE, Rank.ACE))
        >>> deck.peek_top()
        Card(SPADE, ACE)
        >>> len(deck)
        2
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 display_mode: DisplayMode = DisplayMode.NO_SORT) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始的牌, 按从牌底到牌顶的顺序
            display_mode: 显示模式, 默认按存储顺序显示
        """
        self._cards: List[Card] = list(cards) if cards is not None else []
        self._display_mode = display_mode

    # === 基本操作 ===

    def push(self, card: Card) -> None:
        """将一张牌放到牌顶"""
        self._cards.append(card)

    def pop_top(self) -> Card:
        """
        移除并返回牌顶的牌.

        Returns:
            Card: 原牌顶的牌

        Raises:
            EmptyPileError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyPileError("牌组已空，无法取牌")
        return self._cards.pop()

    def peek_top(self) -> Card:
        """
        查看牌顶的牌但不移除.

        Raises:
            EmptyPileError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyPileError("牌组已空，无法查看牌顶")
        return self._cards[-1]

    def remove(self, card: Card) -> Card:
        """
        移除第一张与指定牌相同的牌, 用于玩家打出手中的某张牌.

        Args:
            card: 要移除的牌

        Returns:
            Card: 被移除的牌

        Raises:
            CardNotHeldError: 当牌组中没有这张牌时
        """
        for index, held in enumerate(self._cards):
            if held.equals(card):
                return self._cards.pop(index)
        raise CardNotHeldError(f"牌组中没有这张牌: {card!r}")

    def size(self) -> int:
        """返回牌数"""
        return len(self._cards)

    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cards):
            raise IndexOutOfRangeError(
                f"牌位置{index}超出范围(0-{len(self._cards) - 1})"
            )

    def at(self, index: int) -> Card:
        """
        返回指定位置的牌.

        Raises:
            IndexOutOfRangeError: 当位置不在[0, size)内时
        """
        self._check_index(index)
        return self._cards[index]

    def set_at(self, index: int, card: Card) -> None:
        """替换指定位置的牌"""
        self._check_index(index)
        self._cards[index] = card

    def swap(self, first: int, second: int) -> None:
        """交换两个位置的牌"""
        self._check_index(first)
        self._check_index(second)
        self._cards[first], self._cards[second] = self._cards[second], self._cards[first]

    def clear(self) -> List[Card]:
        """清空牌组, 按从牌底到牌顶的顺序返回移除的牌"""
        removed, self._cards = self._cards, []
        return removed

    @property
    def cards(self) -> List[Card]:
        """返回从牌底到牌顶的牌列表副本"""
        return list(self._cards)

    # === 排序与筛选 ===

    def sort(self, order: SortOrder = SortOrder.RANK_FIRST) -> None:
        """
        原地排序.

        RANK_FIRST: 点数降序(A最大), 同点数按花色降序(黑桃 > 红桃 > 方块 > 梅花).
        SUIT_FIRST: 花色降序, 同花色按点数降序(A最大).

        Args:
            order: 排序方式
        """
        self._cards.sort(key=_SORT_KEYS[order], reverse=True)

    def sorted_copy(self, order: SortOrder = SortOrder.RANK_FIRST) -> "Deck":
        """返回排序后的新牌组, 原牌组不变"""
        copy = Deck(self._cards, self._display_mode)
        copy.sort(order)
        return copy

    def subset_by_suit(self, suit: Suit) -> "Deck":
        """
        按花色筛选.

        Args:
            suit: 花色

        Returns:
            Deck: 保持原相对顺序的该花色所有牌
        """
        return Deck(card for card in self._cards if card.suit == suit)

    # === 显示 ===

    @property
    def display_mode(self) -> DisplayMode:
        """当前显示模式"""
        return self._display_mode

    def set_display_mode(self, mode: DisplayMode) -> None:
        """设置显示模式, 不改变存储顺序"""
        self._display_mode = mode

    def render(self, mode: Optional[DisplayMode] = None,
               symbols: Optional[SuitSymbols] = None) -> str:
        """
        按显示模式生成字符串.

        Args:
            mode: 显示模式, 为None时使用牌组当前的显示模式
            symbols: 花色符号表, 为None时使用进程默认表

        Returns:
            str: 牌组的显示字符串
        """
        renderer = _RENDERERS[mode or self._display_mode]
        return renderer(self, symbols)

    # === 魔术方法 ===

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __getitem__(self, index: int) -> Card:
        return self.at(index)

    def __setitem__(self, index: int, card: Card) -> None:
        self.set_at(index, card)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)}, display_mode={self._display_mode.name})"


def _render_cards(deck: Deck, symbols: Optional[SuitSymbols]) -> str:
    return CARD_SEPARATOR.join(card.format(symbols) for card in deck)


def _render_sorted_by_number(deck: Deck, symbols: Optional[SuitSymbols]) -> str:
    return _render_cards(deck.sorted_copy(SortOrder.RANK_FIRST), symbols)


def _render_rank_only(deck: Deck, symbols: Optional[SuitSymbols]) -> str:
    return RANK_SEPARATOR.join(card.rank_label() for card in deck)


def _render_sorted_by_suit(deck: Deck, symbols: Optional[SuitSymbols]) -> str:
    lines = []
    for suit in sorted(Suit, reverse=True):
        subset = deck.subset_by_suit(suit)
        symbol = Card(suit).suit_symbol(symbols)
        lines.append(f"{symbol}{CARD_SEPARATOR}{_render_rank_only(subset, symbols)}")
    return "\n".join(lines)


_RENDERERS: Dict[DisplayMode, Callable[[Deck, Optional[SuitSymbols]], str]] = {
    DisplayMode.NO_SORT: _render_cards,
    DisplayMode.SORT_BY_NUMBER: _render_sorted_by_number,
    DisplayMode.RANK_ONLY: _render_rank_only,
    DisplayMode.SORT_BY_SUIT: _render_sorted_by_suit,
}
