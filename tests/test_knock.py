"""Tests for knocking, the last round and the empty draw pile."""

import pytest

from kaboo.engine import GameEvent, GamePhase, GameSession, InvalidStateError, Rank, Suit

from helpers import assert_cards_conserved, leave_one_in_draw_pile, put_on_top


def test_knock_passes_turn_and_starts_last_round(session, game, recorder):
    session.player_action_service.knock()

    assert game.last_round is True
    assert game.knock_initiator == 0
    assert game.current_player == 1
    assert game.phase == GamePhase.READY_TO_DRAW
    assert GameEvent.KNOCKED in recorder.names()
    assert GameEvent.TURN_ENDED in recorder.names()


def test_opponent_gets_exactly_one_more_turn(session, game, recorder):
    session.player_action_service.knock()
    put_on_top(game, Rank.TWO, Suit.HEARTS)
    session.player_action_service.draw_from_deck()
    session.game_service.discard_card()

    assert game.phase == GamePhase.FINISHED
    assert game.current_player == 1
    assert GameEvent.GAME_OVER in recorder.names()
    assert game.scores == [game.players[0].score(), game.players[1].score()]


def test_knock_by_second_player(session, game):
    actions = session.player_action_service
    put_on_top(game, Rank.TWO, Suit.HEARTS)
    actions.draw_from_deck()
    session.game_service.discard_card()
    actions.knock()
    assert game.knock_initiator == 1
    assert game.current_player == 0

    put_on_top(game, Rank.THREE, Suit.HEARTS)
    actions.draw_from_deck()
    session.game_service.discard_card()
    assert game.phase == GamePhase.FINISHED


def test_second_knock_is_ignored(session, game, recorder):
    actions = session.player_action_service
    actions.knock()
    knocks = recorder.names().count(GameEvent.KNOCKED)

    actions.knock()

    assert recorder.names().count(GameEvent.KNOCKED) == knocks
    assert game.knock_initiator == 0
    assert game.current_player == 1
    assert game.phase == GamePhase.READY_TO_DRAW


def test_knock_mid_turn_returns_drawn_card(session, game):
    drawn = put_on_top(game, Rank.FOUR, Suit.CLUBS)
    session.player_action_service.draw_from_deck()

    session.player_action_service.knock()

    assert game.players[0].drawn_card is None
    assert game.top_discard() is drawn
    assert game.current_player == 1
    assert_cards_conserved(game)


def test_knock_not_allowed_during_setup(session):
    with pytest.raises(InvalidStateError):
        session.player_action_service.knock()
    assert session.require_game().last_round is False


def test_last_round_is_never_reset(session, game):
    actions = session.player_action_service
    actions.knock()
    history = [game.last_round]
    put_on_top(game, Rank.SIX, Suit.HEARTS)
    actions.draw_from_deck()
    history.append(game.last_round)
    session.game_service.discard_card()
    history.append(game.last_round)
    assert history == [True, True, True]


def test_drawing_last_card_sets_last_round(session, game):
    leave_one_in_draw_pile(game)
    session.player_action_service.draw_from_deck()
    assert game.draw_pile == []
    assert game.last_round is True
    assert game.knock_initiator == -1


def test_empty_draw_pile_ends_game(session, game, recorder):
    leave_one_in_draw_pile(game)
    session.player_action_service.draw_from_deck()
    session.game_service.discard_card()

    assert game.phase == GamePhase.FINISHED
    assert game.current_player == 0
    assert "The draw pile is empty. The game ends now." in game.log
    assert GameEvent.GAME_OVER in recorder.names()
    assert GameEvent.TURN_ENDED not in recorder.names()
    assert_cards_conserved(game)


def test_empty_draw_pile_ends_game_during_knock_round(session, game):
    actions = session.player_action_service
    actions.knock()
    leave_one_in_draw_pile(game)
    actions.draw_from_deck()
    session.game_service.discard_card()
    assert game.phase == GamePhase.FINISHED


def test_draw_from_empty_deck_ends_game():
    session = GameSession(seed=5)
    session.game_service.start_new_game("Alice", "Bob")
    game = session.require_game()
    game.phase = GamePhase.READY_TO_DRAW
    game.discard_pile.extend(game.draw_pile)
    game.draw_pile.clear()

    session.player_action_service.draw_from_deck()

    assert game.phase == GamePhase.FINISHED
    assert game.last_round is True
