"""
机器人出拳策略测试
Bot Move Selection Tests
"""
from collections import Counter

import numpy as np
import pytest

from rps_game.game.game_logic import (
    Move, MoveSelector, RandomMoveSelector, ScriptedMoveSelector, BotFactory
)
from rps_game.utils.exceptions import GameException, ConfigurationException


def test_random_selector_only_returns_moves():
    bot = RandomMoveSelector(seed=1)
    for _ in range(50):
        assert bot.choose() in Move.all()


def test_random_selector_is_reproducible_with_seed():
    """相同种子得到相同出拳序列"""
    a = RandomMoveSelector(seed=42)
    b = RandomMoveSelector(seed=42)
    assert [a.choose() for _ in range(20)] == [b.choose() for _ in range(20)]


def test_random_selector_accepts_injected_generator():
    rng = np.random.default_rng(7)
    expected_rng = np.random.default_rng(7)
    bot = RandomMoveSelector(rng=rng)
    expected = [Move.all()[int(expected_rng.integers(3))] for _ in range(10)]
    assert [bot.choose() for _ in range(10)] == expected


def test_random_selector_is_roughly_uniform():
    """3000 次抽取中每种出拳大约各占三分之一"""
    bot = RandomMoveSelector(seed=2024)
    counts = Counter(bot.choose() for _ in range(3000))
    assert set(counts) == set(Move)
    for move in Move:
        assert 850 < counts[move] < 1150


def test_scripted_selector_replays_and_exhausts():
    bot = ScriptedMoveSelector(["scissors", Move.ROCK, "p"])
    assert bot.remaining == 3
    assert [bot.choose() for _ in range(3)] == [Move.SCISSORS, Move.ROCK, Move.PAPER]
    assert bot.remaining == 0
    with pytest.raises(GameException):
        bot.choose()


def test_scripted_selector_reset_replays_from_start():
    bot = ScriptedMoveSelector(["paper", "rock"])
    bot.choose()
    bot.choose()
    bot.reset()
    assert bot.remaining == 2
    assert bot.choose() is Move.PAPER


def test_random_selector_reset_keeps_generator():
    bot = RandomMoveSelector(seed=5)
    rng = bot._rng
    bot.reset()
    assert bot._rng is rng
    assert bot.choose() in Move.all()


def test_factory_creates_registered_selectors():
    assert isinstance(BotFactory.create("random", {"seed": 3}), RandomMoveSelector)
    assert isinstance(BotFactory.create("Scripted", {"moves": ["rock"]}), ScriptedMoveSelector)
    assert BotFactory.available() == ["random", "scripted"]


def test_factory_from_config_drops_unrelated_keys():
    bot = BotFactory.from_config({"strategy": "scripted", "seed": None, "moves": ["r"]})
    assert bot.choose() is Move.ROCK
    bot = BotFactory.from_config({"strategy": "random", "seed": 5, "moves": []})
    assert isinstance(bot, RandomMoveSelector)
    assert bot.seed == 5


def test_factory_rejects_unknown_strategy():
    with pytest.raises(ConfigurationException) as exc_info:
        BotFactory.create("psychic")
    assert exc_info.value.config_key == "bot.strategy"


def test_factory_rejects_bad_arguments():
    with pytest.raises(ConfigurationException):
        BotFactory.create("scripted", {})


def test_factory_register_requires_selector_subclass():
    with pytest.raises(TypeError):
        BotFactory.register("bogus", dict)

    class AlwaysRock(MoveSelector):
        def choose(self):
            return Move.ROCK

    BotFactory.register("always_rock", AlwaysRock)
    try:
        assert BotFactory.create("always_rock").choose() is Move.ROCK
    finally:
        BotFactory._selector_classes.pop("always_rock")
