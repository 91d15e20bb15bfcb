"""
牌组(Deck)类单元测试
测试入牌出牌、按牌移除、排序、筛选和各种显示模式
"""

import pytest

from pokerdeck.core.card import Card
from pokerdeck.core.deck import Deck
from pokerdeck.core.exceptions import (
    CardNotHeldError, EmptyPileError, IndexOutOfRangeError, PokerDeckError,
)
from pokerdeck.core.types import JOKER_SUIT, DisplayMode, Rank, SortOrder, Suit, SuitSymbols


def make_deck(*cards):
    """用(花色, 点数)元组构造牌组"""
    return Deck(Card(suit, rank) for suit, rank in cards)


@pytest.mark.unit
class TestDeckBasics:
    """牌组基本操作测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.deck = make_deck(
            (Suit.CLUB, Rank.TWO),
            (Suit.HEART, Rank.KING),
            (Suit.SPADE, Rank.ACE),
        )

    def test_new_deck_is_empty(self):
        """测试空牌组"""
        deck = Deck()
        assert deck.size() == 0
        assert deck.is_empty()
        assert len(deck) == 0
        assert deck.display_mode is DisplayMode.NO_SORT

    def test_push_puts_card_on_top(self):
        """测试入牌放在牌顶"""
        card = Card(Suit.DIAMOND, Rank.FIVE)
        self.deck.push(card)
        assert self.deck.size() == 4
        assert self.deck.peek_top() == card
        assert self.deck[3] == card

    def test_pop_top_returns_top_card(self):
        """测试出牌从牌顶取"""
        card = self.deck.pop_top()
        assert card == Card(Suit.SPADE, Rank.ACE)
        assert self.deck.size() == 2
        assert self.deck.peek_top() == Card(Suit.HEART, Rank.KING)

    def test_peek_does_not_remove(self):
        """测试查看牌顶不移除"""
        assert self.deck.peek_top() == Card(Suit.SPADE, Rank.ACE)
        assert self.deck.size() == 3

    def test_empty_deck_pop_and_peek_raise(self):
        """测试空牌组出牌和查看抛出异常"""
        deck = Deck()
        with pytest.raises(EmptyPileError):
            deck.pop_top()
        with pytest.raises(EmptyPileError):
            deck.peek_top()
        # 同时是内置的IndexError
        with pytest.raises(IndexError):
            deck.pop_top()

    def test_remove_first_matching_card(self):
        """测试按牌移除第一张相同的牌"""
        joker = Card(Suit.DIAMOND, Rank.JOKER)
        deck = Deck([joker, Card(Suit.CLUB, Rank.TWO), joker])

        removed = deck.remove(Card(Suit.DIAMOND, Rank.JOKER))
        assert removed == joker
        assert deck.cards == [Card(Suit.CLUB, Rank.TWO), joker]

    def test_remove_missing_card_raises(self):
        """测试移除不存在的牌"""
        with pytest.raises(CardNotHeldError):
            self.deck.remove(Card(Suit.DIAMOND, Rank.NINE))
        with pytest.raises(LookupError):
            self.deck.remove(Card(Suit.SPADE, Rank.TWO))
        assert self.deck.size() == 3, "移除失败时牌组不应改变"

    def test_indexed_access(self):
        """测试按位置访问和替换"""
        assert self.deck.at(0) == Card(Suit.CLUB, Rank.TWO)
        self.deck[0] = Card(Suit.SPADE, Rank.TEN)
        assert self.deck[0] == Card(Suit.SPADE, Rank.TEN)
        self.deck.set_at(1, Card(Suit.HEART, Rank.THREE))
        assert self.deck.at(1) == Card(Suit.HEART, Rank.THREE)

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_indexed_access_out_of_range(self, index):
        """测试越界访问抛出异常"""
        with pytest.raises(IndexOutOfRangeError):
            self.deck.at(index)
        with pytest.raises(IndexOutOfRangeError):
            self.deck[index] = Card()
        with pytest.raises(PokerDeckError):
            self.deck[index]

    def test_swap(self):
        """测试交换两张牌"""
        self.deck.swap(0, 2)
        assert self.deck.cards == [
            Card(Suit.SPADE, Rank.ACE),
            Card(Suit.HEART, Rank.KING),
            Card(Suit.CLUB, Rank.TWO),
        ]
        with pytest.raises(IndexOutOfRangeError):
            self.deck.swap(0, 3)

    def test_cards_returns_copy(self):
        """测试cards属性返回副本"""
        cards = self.deck.cards
        cards.clear()
        assert self.deck.size() == 3

    def test_iteration_and_contains(self):
        """测试遍历和成员判断"""
        assert list(self.deck) == self.deck.cards
        assert Card(Suit.HEART, Rank.KING) in self.deck
        assert Card(Suit.HEART, Rank.QUEEN) not in self.deck

    def test_clear(self):
        """测试清空牌组"""
        removed = self.deck.clear()
        assert len(removed) == 3
        assert removed[-1] == Card(Suit.SPADE, Rank.ACE)
        assert self.deck.is_empty()

    def test_equality(self):
        """测试牌组判等"""
        same = make_deck(
            (Suit.CLUB, Rank.TWO),
            (Suit.HEART, Rank.KING),
            (Suit.SPADE, Rank.ACE),
        )
        assert self.deck == same
        same.pop_top()
        assert self.deck != same


@pytest.mark.unit
class TestDeckSorting:
    """牌组排序测试"""

    def test_rank_first_sort_ace_high(self):
        """测试点数优先排序，A最大，同点数按花色降序"""
        deck = make_deck(
            (Suit.CLUB, Rank.TWO),
            (Suit.DIAMOND, Rank.ACE),
            (Suit.SPADE, Rank.KING),
            (Suit.SPADE, Rank.ACE),
            (Suit.HEART, Rank.TEN),
            (Suit.CLUB, Rank.KING),
        )
        deck.sort(SortOrder.RANK_FIRST)
        assert deck == make_deck(
            (Suit.SPADE, Rank.ACE),
            (Suit.DIAMOND, Rank.ACE),
            (Suit.SPADE, Rank.KING),
            (Suit.CLUB, Rank.KING),
            (Suit.HEART, Rank.TEN),
            (Suit.CLUB, Rank.TWO),
        )

    def test_rank_first_is_default(self):
        """测试默认排序方式为点数优先"""
        deck = make_deck((Suit.SPADE, Rank.TWO), (Suit.CLUB, Rank.THREE))
        deck.sort()
        assert deck[0] == Card(Suit.CLUB, Rank.THREE)

    def test_joker_sorts_below_ace(self):
        """测试大小王排在A之下、K之上"""
        deck = make_deck(
            (Suit.HEART, Rank.KING),
            (Suit.DIAMOND, Rank.JOKER),
            (Suit.CLUB, Rank.ACE),
        )
        deck.sort()
        assert [card.rank for card in deck] == [Rank.ACE, Rank.JOKER, Rank.KING]

    def test_suit_first_sort(self):
        """测试花色优先排序"""
        deck = make_deck(
            (Suit.SPADE, Rank.TWO),
            (Suit.HEART, Rank.ACE),
            (Suit.SPADE, Rank.KING),
            (Suit.SPADE, Rank.ACE),
            (Suit.CLUB, Rank.THREE),
            (Suit.HEART, Rank.FOUR),
        )
        deck.sort(SortOrder.SUIT_FIRST)
        assert deck == make_deck(
            (Suit.SPADE, Rank.ACE),
            (Suit.SPADE, Rank.KING),
            (Suit.SPADE, Rank.TWO),
            (Suit.HEART, Rank.ACE),
            (Suit.HEART, Rank.FOUR),
            (Suit.CLUB, Rank.THREE),
        )

    def test_sorted_copy_leaves_original(self):
        """测试排序副本不影响原牌组"""
        deck = make_deck((Suit.CLUB, Rank.TWO), (Suit.SPADE, Rank.ACE))
        copy = deck.sorted_copy()
        assert copy[0] == Card(Suit.SPADE, Rank.ACE)
        assert deck[0] == Card(Suit.CLUB, Rank.TWO)

    def test_subset_by_suit(self):
        """测试按花色筛选保持原顺序且不修改原牌组"""
        deck = make_deck(
            (Suit.HEART, Rank.NINE),
            (Suit.SPADE, Rank.ACE),
            (Suit.HEART, Rank.TWO),
            (Suit.HEART, Rank.KING),
        )
        hearts = deck.subset_by_suit(Suit.HEART)
        assert [card.rank for card in hearts] == [Rank.NINE, Rank.TWO, Rank.KING]
        assert deck.size() == 4
        assert deck.subset_by_suit(Suit.CLUB).is_empty()


@pytest.mark.unit
class TestDeckDisplay:
    """牌组显示模式测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.deck = make_deck(
            (Suit.HEART, Rank.ACE),
            (Suit.SPADE, Rank.THREE),
            (Suit.HEART, Rank.KING),
            (Suit.CLUB, Rank.TEN),
        )

    def test_empty_deck_renders_empty(self):
        """测试空牌组显示为空串"""
        assert Deck().render(symbols=SuitSymbols.UNICODE) == ""
        assert Deck().render(DisplayMode.RANK_ONLY) == ""

    def test_no_sort_render(self):
        """测试按存储顺序显示，两个空格分隔"""
        assert self.deck.render(symbols=SuitSymbols.UNICODE) == "♥  A  ♠  3  ♥  K  ♣ 10"

    def test_sort_by_number_render_keeps_order(self):
        """测试按点数显示不改变存储顺序"""
        before = self.deck.cards
        text = self.deck.render(DisplayMode.SORT_BY_NUMBER, SuitSymbols.UNICODE)
        assert text == "♥  A  ♥  K  ♣ 10  ♠  3"
        assert self.deck.cards == before

    def test_rank_only_render(self):
        """测试只显示点数"""
        assert self.deck.render(DisplayMode.RANK_ONLY) == "A 3 K 10"

    def test_sort_by_suit_render(self):
        """测试按花色分行显示，黑桃在前"""
        text = self.deck.render(DisplayMode.SORT_BY_SUIT, SuitSymbols.UNICODE)
        assert text.split("\n") == [
            "♠  3",
            "♥  A K",
            "♦  ",
            "♣  10",
        ]

    def test_str_follows_display_mode(self, unicode_symbols):
        """测试字符串输出使用当前显示模式"""
        assert str(self.deck) == "♥  A  ♠  3  ♥  K  ♣ 10"

        self.deck.set_display_mode(DisplayMode.RANK_ONLY)
        assert self.deck.display_mode is DisplayMode.RANK_ONLY
        assert str(self.deck) == "A 3 K 10"

        self.deck.set_display_mode(DisplayMode.SORT_BY_NUMBER)
        assert str(self.deck) == "♥  A  ♥  K  ♣ 10  ♠  3"
        assert self.deck[0] == Card(Suit.HEART, Rank.ACE)

    def test_render_mode_argument_overrides(self, unicode_symbols):
        """测试render参数临时覆盖显示模式"""
        self.deck.set_display_mode(DisplayMode.SORT_BY_SUIT)
        assert self.deck.render(DisplayMode.RANK_ONLY) == "A 3 K 10"
        assert self.deck.display_mode is DisplayMode.SORT_BY_SUIT

    def test_joker_renders_in_deck(self):
        """测试牌组中的大小王显示"""
        deck = make_deck((Suit.DIAMOND, Rank.JOKER), (Suit.SPADE, Rank.TWO))
        assert deck.render(symbols=SuitSymbols.ASCII) == "JOKER  S  2"

    def test_joker_listed_under_placeholder_suit(self):
        """测试按花色显示时大小王出现在其占位花色(方块)一行"""
        deck = make_deck(
            (Suit.SPADE, Rank.ACE),
            (JOKER_SUIT, Rank.JOKER),
            (Suit.DIAMOND, Rank.FIVE),
        )
        text = deck.render(DisplayMode.SORT_BY_SUIT, SuitSymbols.ASCII)
        assert text == "S  A\nH  \nD  JOKER 5\nC  "
        assert deck.subset_by_suit(JOKER_SUIT).size() == 2

    def test_repr(self):
        """测试调试表示"""
        assert repr(self.deck) == "Deck(size=4, display_mode=NO_SORT)"
