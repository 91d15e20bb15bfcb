"""
扑克牌局
管理一个公共牌堆和每位玩家的手牌，负责建牌、洗牌、发牌、摸牌、出牌和整理手牌
"""

import logging
import random
from typing import Optional, Tuple

from ..core.card import Card
from ..core.config import GameConfig
from ..core.deck import Deck
from ..core.exceptions import EmptyPileError, IndexOutOfRangeError, InvalidArgumentError
from ..core.types import (
    JOKER_SUIT, JOKERS_PER_DECK, Rank, SortOrder, get_all_suits, get_standard_ranks,
)

DEFAULT_SHUFFLE_ITERATIONS = 1000


class PokerGame:
    """
    扑克牌局

    职责：
    1. 按副数构造牌堆（可选加入大小王）
    2. 随机交换洗牌、轮流发牌、单张摸牌
    3. 玩家出牌，出过的牌放到桌面上
    4. 整理所有玩家手牌

    牌只在牌堆、手牌和桌面之间移动，构造后不会增加或减少。
    """

    def __init__(self, deck_count: int = 1, player_count: int = 2,
                 include_jokers: bool = False,
                 rng: Optional[random.Random] = None,
                 logger: Optional[logging.Logger] = None):
        """
        初始化牌局

        Args:
            deck_count: 放入牌堆的牌副数
            player_count: 玩家数，至少为1
            include_jokers: 每副牌是否加入两张大小王
            rng: 随机数生成器，用于可重现的洗牌结果
            logger: 可选的日志记录器

        Raises:
            InvalidArgumentError: 玩家数小于1或副数为负数时
        """
        if player_count < 1:
            raise InvalidArgumentError(f"玩家数不能为0: {player_count}")
        if deck_count < 0:
            raise InvalidArgumentError(f"牌的副数不能为负数: {deck_count}")

        self.logger = logger or logging.getLogger(__name__)
        self._rng = rng or random.Random()
        self._players = player_count
        self._pile = Deck()
        self._table = Deck()
        self._hands = [Deck() for _ in range(player_count)]

        for _ in range(deck_count):
            for suit in get_all_suits():
                for rank in get_standard_ranks():
                    self._pile.push(Card(suit, rank))
            if include_jokers:
                for _ in range(JOKERS_PER_DECK):
                    self._pile.push(Card(JOKER_SUIT, Rank.JOKER))

        self._shoe_size = self._pile.size()
        self.logger.debug(f"牌局初始化完成: {deck_count}副牌, {player_count}名玩家, "
                          f"大小王={'是' if include_jokers else '否'}, 共{self._shoe_size}张")

    @classmethod
    def from_config(cls, config: GameConfig,
                    logger: Optional[logging.Logger] = None) -> 'PokerGame':
        """根据配置创建牌局，并应用配置中的显示模式"""
        game = cls(
            deck_count=config.deck_count,
            player_count=config.player_count,
            include_jokers=config.include_jokers,
            rng=config.create_rng(),
            logger=logger,
        )
        game.pile.set_display_mode(config.display.pile_mode)
        for hand in game.hands:
            hand.set_display_mode(config.display.hand_mode)
        return game

    # === 属性 ===

    @property
    def players(self) -> int:
        """玩家数"""
        return self._players

    @property
    def pile(self) -> Deck:
        """公共牌堆"""
        return self._pile

    @property
    def table(self) -> Deck:
        """桌面上已打出的牌"""
        return self._table

    @property
    def hands(self) -> Tuple[Deck, ...]:
        """所有玩家的手牌"""
        return tuple(self._hands)

    @property
    def shoe_size(self) -> int:
        """构造时牌堆的总张数"""
        return self._shoe_size

    def card_count(self) -> int:
        """牌堆、手牌和桌面上的牌数总和，应始终等于shoe_size"""
        return self._pile.size() + self._table.size() + sum(hand.size() for hand in self._hands)

    def _check_player(self, player_index: int) -> None:
        if not 0 <= player_index < self._players:
            raise IndexOutOfRangeError(
                f"玩家编号{player_index}超出范围(0-{self._players - 1})"
            )

    def hand(self, player_index: int) -> Deck:
        """
        获取玩家的手牌

        Raises:
            IndexOutOfRangeError: 玩家编号超出范围时
        """
        self._check_player(player_index)
        return self._hands[player_index]

    # === 牌局操作 ===

    def shuffle(self, iterations: int = DEFAULT_SHUFFLE_ITERATIONS) -> None:
        """
        洗牌

        进行iterations次随机交换：每次先随机选位置a，再重复随机选位置b直到b不等于a，
        然后交换两张牌。这不是均匀洗牌，结果只是近似随机。

        Args:
            iterations: 交换次数

        Raises:
            EmptyPileError: 牌堆为空时
            InvalidArgumentError: 交换次数为负数时
        """
        if iterations < 0:
            raise InvalidArgumentError(f"洗牌次数不能为负数: {iterations}")
        size = self._pile.size()
        if size == 0:
            raise EmptyPileError("牌堆为空，无法洗牌")
        if size == 1:
            self.logger.debug("牌堆只有一张牌，跳过洗牌")
            return

        for _ in range(iterations):
            a = self._rng.randrange(size)
            b = self._rng.randrange(size)
            while a == b:
                b = self._rng.randrange(size)
            self._pile.swap(a, b)

        self.logger.debug(f"洗牌完成: {size}张牌, 交换{iterations}次")

    def draw(self, player_index: int) -> Card:
        """
        从牌堆顶摸一张牌给玩家

        Args:
            player_index: 玩家编号

        Returns:
            摸到的牌

        Raises:
            IndexOutOfRangeError: 玩家编号超出范围时
            EmptyPileError: 牌堆为空时
        """
        self._check_player(player_index)
        card = self._pile.pop_top()
        self._hands[player_index].push(card)
        self.logger.debug(f"玩家{player_index}摸牌: {card!r}")
        return card

    def play(self, player_index: int, card: Card) -> Card:
        """
        玩家打出一张牌，打出的牌放到桌面上

        Args:
            player_index: 玩家编号
            card: 要打出的牌

        Returns:
            打出的牌

        Raises:
            IndexOutOfRangeError: 玩家编号超出范围时
            CardNotHeldError: 玩家手中没有这张牌时
        """
        self._check_player(player_index)
        played = self._hands[player_index].remove(card)
        self._table.push(played)
        self.logger.debug(f"玩家{player_index}出牌: {played!r}")
        return played

    def deal(self, cards_per_player: int) -> int:
        """
        从牌堆顶轮流给每位玩家发牌，从0号玩家开始

        牌堆不够时发完为止，不报错。

        Args:
            cards_per_player: 每位玩家应发的张数

        Returns:
            实际发出的张数

        Raises:
            InvalidArgumentError: 张数为负数时
        """
        if cards_per_player < 0:
            raise InvalidArgumentError(f"发牌张数不能为负数: {cards_per_player}")

        total = cards_per_player * self._players
        dealt = 0
        player_index = 0
        while dealt < total and not self._pile.is_empty():
            self._hands[player_index].push(self._pile.pop_top())
            dealt += 1
            player_index = (player_index + 1) % self._players

        if dealt < total:
            self.logger.warning(f"牌堆不足: 应发{total}张, 实际发出{dealt}张")
        else:
            self.logger.debug(f"发牌完成: 每人{cards_per_player}张, 共{dealt}张")
        return dealt

    def sort_all_hands(self, order: SortOrder = SortOrder.RANK_FIRST) -> None:
        """整理所有玩家的手牌"""
        for hand in self._hands:
            hand.sort(order)

    def collect_cards(self) -> int:
        """
        收回桌面和所有手牌，依次放到牌堆顶，用于开始新的一轮

        Returns:
            收回的张数
        """
        collected = 0
        for source in [self._table, *self._hands]:
            for card in source.clear():
                self._pile.push(card)
                collected += 1
        self.logger.debug(f"收回{collected}张牌, 牌堆现有{self._pile.size()}张")
        return collected

    # === 魔术方法 ===

    def __getitem__(self, player_index: int) -> Deck:
        return self.hand(player_index)

    def __str__(self) -> str:
        return str(self._pile)

    def __repr__(self) -> str:
        return (f"PokerGame(players={self._players}, pile={self._pile.size()}, "
                f"table={self._table.size()}, shoe={self._shoe_size})")
