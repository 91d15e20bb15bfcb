"""扑克牌堆演示程序.

构造一局牌，依次展示洗牌、发牌、整理手牌和出牌的结果。
"""

import argparse
import logging
import sys
from typing import List, Optional

from pokerdeck.core import (
    DisplayConfig, DisplayMode, GameConfig, PokerDeckError, SuitSymbols,
    set_default_symbols,
)
from pokerdeck.game import PokerGame


class PokerDemo:
    """演示程序.

    只通过PokerGame和Deck的公开接口完成全部演示步骤。
    """

    def __init__(self, config: GameConfig, cards_per_player: int = 13,
                 show_player: int = 2, show_card: int = 3,
                 logger: Optional[logging.Logger] = None):
        """初始化演示.

        Args:
            config: 牌局配置
            cards_per_player: 每人发牌张数
            show_player: 要展示并出牌的玩家编号
            show_card: 该玩家整理后手牌中要打出的牌的位置
            logger: 输出用的日志记录器
        """
        self.config = config
        self.cards_per_player = cards_per_player
        self.show_player = show_player
        self.show_card = show_card
        self.logger = logger or logging.getLogger(__name__)
        self.game = PokerGame.from_config(config, logger=self.logger)

    def _show_hands(self) -> None:
        for index, hand in enumerate(self.game.hands):
            self.logger.info(f"Player {index} {hand}")

    def run(self) -> None:
        """按顺序执行演示步骤."""
        game = self.game
        self.logger.info(str(game))

        game.shuffle(self.config.shuffle_iterations)
        self.logger.info(str(game))

        game.deal(self.cards_per_player)
        self._show_hands()

        self.logger.info("Sort")
        game.sort_all_hands()
        self._show_hands()

        hand = game[self.show_player]
        card = hand[self.show_card]
        self.logger.info(
            f"Player {self.show_player}, card {self.show_card}: {card} "
            f"Number:{card.rank} suit:{int(card.suit)}"
        )
        game.play(self.show_player, card)
        self.logger.info(f"Play {self.show_player}, {self.show_card}")
        self.logger.info(f"Player {self.show_player} {hand}")


def build_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器."""
    parser = argparse.ArgumentParser(description="扑克牌堆演示程序")
    parser.add_argument(
        "--decks",
        type=int,
        default=1,
        help="放入牌堆的牌副数"
    )
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help="玩家数"
    )
    parser.add_argument(
        "--jokers",
        action="store_true",
        help="每副牌加入两张大小王"
    )
    parser.add_argument(
        "--cards",
        type=int,
        default=13,
        help="每人发牌张数"
    )
    parser.add_argument(
        "--shuffles",
        type=int,
        default=1000,
        help="洗牌时的随机交换次数"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="随机种子，用于重现洗牌结果"
    )
    parser.add_argument(
        "--display",
        choices=[mode.value for mode in DisplayMode],
        default=DisplayMode.NO_SORT.value,
        help="手牌显示模式"
    )
    parser.add_argument(
        "--symbols",
        choices=["auto"] + [symbols.value for symbols in SuitSymbols],
        default="auto",
        help="花色符号表，auto根据终端编码选择"
    )
    parser.add_argument(
        "--show-player",
        type=int,
        default=2,
        help="展示并出牌的玩家编号"
    )
    parser.add_argument(
        "--show-card",
        type=int,
        default=3,
        help="该玩家要打出的牌的位置"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="输出调试日志"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """演示程序主入口."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stdout,
    )
    logger = logging.getLogger(__name__)

    symbols = None if args.symbols == "auto" else SuitSymbols(args.symbols)
    try:
        config = GameConfig(
            deck_count=args.decks,
            player_count=args.players,
            include_jokers=args.jokers,
            shuffle_iterations=args.shuffles,
            random_seed=args.seed,
            display=DisplayConfig(symbols=symbols, hand_mode=DisplayMode(args.display)),
        )
        set_default_symbols(config.display.resolve_symbols())
        PokerDemo(
            config,
            cards_per_player=args.cards,
            show_player=args.show_player,
            show_card=args.show_card,
            logger=logger,
        ).run()
    except PokerDeckError as e:
        logger.error(f"错误: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
