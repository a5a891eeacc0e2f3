"""Shared helpers for arranging decks and checking game invariants."""

from kaboo.engine import Card, GameSession, GameState, Rank, Suit


def find_card(game: GameState, rank: Rank, suit: Suit) -> Card:
    for card in game.all_cards():
        if card.rank == rank and card.suit == suit:
            return card
    raise AssertionError(f"{rank.value} of {suit.value} is not in the game")


def put_on_top(game: GameState, rank: Rank, suit: Suit) -> Card:
    """Move a card onto the draw pile; a dealt card trades places with the top card."""
    card = find_card(game, rank, suit)
    if any(c is card for c in game.draw_pile):
        game.draw_pile.remove(card)
        game.draw_pile.append(card)
        return card
    for player in game.players:
        pos = player.find(card)
        if pos is not None:
            row, col = pos
            player.hand[row][col] = game.draw_pile.pop()
            game.draw_pile.append(card)
            return card
    raise AssertionError(f"{card} is neither in the draw pile nor in a hand")


def leave_one_in_draw_pile(game: GameState) -> None:
    """Move all but the top draw card onto the discard pile."""
    top = game.draw_pile[-1]
    game.discard_pile.extend(game.draw_pile[:-1])
    game.draw_pile[:] = [top]


def start_playing(session: GameSession, current: int = 0) -> GameState:
    """Run the opening peek and hand the first turn to ``current``."""
    flow = session.game_service
    flow.show_starting_cards()
    flow.hide_starting_cards()
    flow.show_starting_cards()
    flow.hide_starting_cards()
    game = session.require_game()
    game.current_player = current
    return game


def assert_cards_conserved(game: GameState) -> None:
    cards = game.all_cards()
    assert len(cards) == 52
    assert len({id(card) for card in cards}) == 52
    assert len({(card.suit, card.rank) for card in cards}) == 52
