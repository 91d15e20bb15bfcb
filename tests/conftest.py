"""
pytest配置文件

提供测试共用的fixture：
- 固定的花色符号表
- 可重现的随机数生成器
- 常用的牌局
"""

import random
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from pokerdeck.core import SuitSymbols, set_default_symbols
from pokerdeck.game import PokerGame


@pytest.fixture
def unicode_symbols():
    """测试期间使用Unicode花色符号，结束后恢复为按输出编码自动选择"""
    set_default_symbols(SuitSymbols.UNICODE)
    yield SuitSymbols.UNICODE
    set_default_symbols(None)


@pytest.fixture
def auto_symbols():
    """测试期间按输出编码自动选择花色符号"""
    set_default_symbols(None)
    yield
    set_default_symbols(None)


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(20190101)


@pytest.fixture
def four_player_game(seeded_rng):
    """一副牌、四名玩家、不含大小王的牌局"""
    return PokerGame(1, 4, False, rng=seeded_rng)
