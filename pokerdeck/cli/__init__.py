"""扑克牌堆演示程序."""

from .demo import PokerDemo, build_parser, main

__all__ = ['PokerDemo', 'build_parser', 'main']
