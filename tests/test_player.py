from __future__ import annotations
import dataclasses

import pytest

from connect_four.core.player import Player, seat_players
from connect_four.errors import (
    DuplicateTokenError,
    InvalidPlayerNameError,
    InvalidTokenError,
    SetupError,
)
from connect_four.game.engine import GameEngine


def test_player_fields():
    p = Player("  Ann ", display="red", token="1")
    assert p.name == "Ann"
    assert p.display == "red"
    assert p.token == "1"


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_is_rejected(name):
    with pytest.raises(InvalidPlayerNameError):
        Player(name, display="red", token="1")


@pytest.mark.parametrize("token", ["", None, 1])
def test_bad_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        Player("Ann", display="red", token=token)


def test_player_is_read_only():
    p = Player("Ann", display="red", token="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.name = "Bob"


def test_display_is_passed_through_untouched():
    marker = object()
    assert Player("Ann", display=marker, token="1").display is marker


def test_seat_players_rejects_shared_token():
    a = Player("Ann", display="red", token="1")
    b = Player("Ben", display="yellow", token="1")
    with pytest.raises(DuplicateTokenError) as exc:
        seat_players(a, b)
    assert exc.value.token == "1"


def test_engine_refuses_duplicate_tokens():
    a = Player("Ann", display="red", token="X")
    b = Player("Ben", display="yellow", token="X")
    with pytest.raises(SetupError):
        GameEngine(a, b)


def test_seat_players_keeps_order():
    a = Player("Ann", display="red", token="1")
    b = Player("Ben", display="yellow", token="2")
    assert seat_players(a, b) == (a, b)
