import dataclasses

import pytest
from pytest import approx

import deathroll as dr
from deathroll import Player, Status


def test_start_game():
    state = dr.start_game(7)
    assert state.status is Status.IN_PROGRESS
    assert state.bound == 7
    assert state.active_player is Player.PLAYER_ONE
    assert state.loser is None
    assert state.log == (dr.Started(7),)


def test_not_started():
    state = dr.GameState()
    assert state.status is Status.NOT_STARTED
    assert state.loser is None
    assert state.log == ()


def test_non_terminal_roll():
    before = dr.start_game(10)
    after = dr.roll(before, dr.ScriptedDice([4]))
    assert after.status is Status.IN_PROGRESS
    assert after.bound == 4
    assert after.active_player is Player.PLAYER_TWO
    assert after.log == before.log + (dr.Rolled(Player.PLAYER_ONE, 4),)


def test_terminal_roll():
    before = dr.roll(dr.start_game(10), dr.ScriptedDice([6]))
    after = dr.roll(before, dr.ScriptedDice([1]))
    assert after.status is Status.FINISHED
    assert after.loser is Player.PLAYER_TWO
    assert after.winner is Player.PLAYER_ONE
    assert after.bound == 6
    assert after.active_player is Player.PLAYER_TWO
    assert len(after.log) == len(before.log) + 1


def test_rolling_the_bound_keeps_it():
    state = dr.roll(dr.start_game(5), dr.ScriptedDice([5]))
    assert state.bound == 5
    assert state.active_player is Player.PLAYER_TWO


def test_roll_leaves_old_state_untouched():
    before = dr.start_game(5)
    dr.roll(before, dr.ScriptedDice([3]))
    assert before == dr.start_game(5)


def test_scenario_three_then_one():
    dice = dr.ScriptedDice([3, 1])
    state = dr.start_game(5)
    bounds = [state.bound]
    state = dr.roll(state, dice)
    bounds.append(state.bound)
    state = dr.roll(state, dice)

    assert bounds == [5, 3]
    assert state.status is Status.FINISHED
    assert state.loser is Player.PLAYER_TWO
    assert [e.describe() for e in state.log] == [
        "Game started with a wager of 5g",
        "Player 1 rolled: 3",
        "Player 2 rolled: 1",
    ]


def test_scenario_immediate_one():
    state = dr.roll(dr.start_game(2), dr.ScriptedDice([1]))
    assert state.status is Status.FINISHED
    assert state.loser is Player.PLAYER_ONE
    assert state.winner is Player.PLAYER_TWO
    assert len(state.rolls) == 1


class TestInvariants:

    @pytest.mark.parametrize("seed", range(20))
    def test_random_games(self, seed):
        dice = dr.NumpyDice(seed=seed)
        state = dr.start_game(100)
        for i in range(10_000):
            if state.finished:
                break
            before = state
            state = dr.roll(state, dice)
            value = state.log[-1].value
            assert len(state.log) == len(before.log) + 1
            assert state.log[:-1] == before.log
            assert 1 <= value <= before.bound
            if value == 1:
                assert state.status is Status.FINISHED
                assert state.loser is before.active_player
                assert state.bound == before.bound
            else:
                assert state.status is Status.IN_PROGRESS
                assert state.bound == value
                assert state.active_player is before.active_player.other
        assert state.finished

    def test_play_out(self):
        state = dr.play_out(dr.start_game(50), dr.NumpyDice(seed=7))
        assert state.finished
        assert state.log[-1] == dr.Rolled(state.loser, 1)

    def test_loser_requires_finished(self):
        with pytest.raises(ValueError):
            dr.GameState(bound=5, status=Status.IN_PROGRESS, loser=Player.PLAYER_ONE)
        with pytest.raises(ValueError):
            dr.GameState(bound=5, status=Status.FINISHED)

    def test_frozen(self):
        state = dr.start_game(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.bound = 3


class TestNextRollProbability:

    def test_follows_bound(self):
        state = dr.roll(dr.start_game(10), dr.ScriptedDice([2]))
        assert dr.next_roll_lose_probability(state) == approx(0.5)
        assert dr.next_roll_lose_probability(dr.start_game(10)) == approx(0.9)


class TestGame:

    def test_restart_replaces_state(self):
        game = dr.Game(dr.ScriptedDice([1, 4]))
        game.start(5)
        game.roll()
        assert game.state.finished
        game.start(8)
        assert game.state == dr.start_game(8)
        game.roll()
        assert game.state.bound == 4

    def test_default_dice(self):
        game = dr.Game()
        game.start(5)
        state = game.roll()
        assert 1 <= state.log[-1].value <= 5
