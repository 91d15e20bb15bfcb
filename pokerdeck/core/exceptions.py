"""
牌堆与手牌操作的异常定义
每种异常同时继承对应的内置异常, 调用方可以按任一类型捕获
"""


class PokerDeckError(Exception):
    """扑克牌库基础异常类"""
    pass


class InvalidArgumentError(PokerDeckError, ValueError):
    """参数无效异常, 例如玩家数为0"""
    pass


class IndexOutOfRangeError(PokerDeckError, IndexError):
    """玩家编号或牌位置超出范围异常"""
    pass


class CardNotHeldError(PokerDeckError, LookupError):
    """手牌中没有指定的牌"""
    pass


class EmptyPileError(PokerDeckError, IndexError):
    """从空牌堆取牌异常"""
    pass
