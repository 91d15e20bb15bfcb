#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
扑克牌堆与手牌模型
提供平台独立的牌堆构造、洗牌、发牌、摸牌、出牌和手牌显示

模块结构：
- core: 核心基础组件（花色点数、卡牌、牌组、配置、异常）
- game: 牌局（公共牌堆与玩家手牌）
- cli: 演示程序
"""

__version__ = "0.3.0"

from .core import (
    Suit, Rank, SortOrder, DisplayMode, SuitSymbols,
    Card, Deck,
    GameConfig, DisplayConfig,
    detect_symbols, set_default_symbols, get_default_symbols,
    PokerDeckError, InvalidArgumentError, IndexOutOfRangeError,
    CardNotHeldError, EmptyPileError,
)

from .game import PokerGame

__all__ = [
    # 核心基础组件
    'Suit', 'Rank', 'SortOrder', 'DisplayMode', 'SuitSymbols',
    'Card', 'Deck',
    'GameConfig', 'DisplayConfig',
    'detect_symbols', 'set_default_symbols', 'get_default_symbols',
    'PokerDeckError', 'InvalidArgumentError', 'IndexOutOfRangeError',
    'CardNotHeldError', 'EmptyPileError',

    # 牌局
    'PokerGame',
]
