"""Game flow: setup, opening peek, turn hand-off, knock round and scoring."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from kaboo.engine.card import Card
from kaboo.engine.deck import create_deck
from kaboo.engine.errors import InvalidArgumentError, InvalidStateError
from kaboo.engine.events import GameEvent
from kaboo.engine.game_state import GamePhase, GameState, require_phase
from kaboo.engine.player import GRID_SIZE, Player

if TYPE_CHECKING:
    from kaboo.engine.session import GameSession

logger = logging.getLogger(__name__)

SHOWN_PHASES = (GamePhase.SHOW_CARDS, GamePhase.CONFIRM_QUEEN_SHOW)
PEEK_PHASES = (
    GamePhase.PLAY_QUEEN,
    GamePhase.PLAY_SEVEN_OR_EIGHT,
    GamePhase.PLAY_NINE_OR_TEN,
)


class GameFlowService:
    """Lifecycle operations that are not tied to a card choice."""

    def __init__(self, session: "GameSession"):
        self._session = session

    def start_new_game(self, name1: str, name2: str) -> GameState:
        """Create, populate and deal a new game; both names must be non-blank."""
        session = self._session
        if session.game is not None:
            raise InvalidStateError("A game is already running")
        for name in (name1, name2):
            if not name or not name.strip():
                raise InvalidArgumentError("Player name must not be blank")

        game = GameState(current_player=session.rng.randrange(2))
        session.game = game
        self.add_player(name1)
        self.add_player(name2)

        game.draw_pile = create_deck(session.rng)
        self._deal(game)
        game.discard_pile.clear()

        session.record(f"New game started. {game.current().name} begins.")
        session.notify(GameEvent.GAME_STARTED)
        return game

    def add_player(self, name: str) -> Player:
        game = self._session.require_game()
        require_phase(
            game, GamePhase.INITIALIZED, GamePhase.PLAYER_ADDITION, action="add_player"
        )
        if not name or not name.strip():
            raise InvalidArgumentError("Player name must not be blank")
        if len(game.players) >= 2:
            raise InvalidStateError("Two players are already registered")

        player = Player(name=name.strip())
        game.players.append(player)
        if len(game.players) == 1:
            game.phase = GamePhase.PLAYER_ADDITION
        else:
            game.phase = GamePhase.PLAYERS_ADDED
        self._session.record(f"Player {player.name} was added.")
        self._session.notify(GameEvent.PLAYERS_EDITED)
        return player

    def _deal(self, game: GameState) -> None:
        # Row-major, four cards to the first player, then four to the second.
        for player in game.players:
            for row in range(GRID_SIZE):
                for col in range(GRID_SIZE):
                    player.hand[row][col] = game.draw_pile.pop()

    def show_starting_cards(self) -> None:
        """Let the current player peek at their bottom row once."""
        game = self._session.require_game()
        if game.phase == GamePhase.PLAYERS_ADDED:
            next_phase = GamePhase.SHOW_STARTING_HANDS_1
        elif game.phase == GamePhase.REVEAL:
            next_phase = GamePhase.SHOW_STARTING_HANDS_2
        else:
            return

        player = game.current()
        bottom = player.bottom_row()
        player.starting_cards = list(bottom)
        for card in bottom:
            card.revealed = True
        game.phase = next_phase
        self._session.record(f"{player.name} looks at their starting cards.")
        self._session.notify(GameEvent.STARTING_CARDS_SHOWN, card1=bottom[0], card2=bottom[1])

    def hide_starting_cards(self) -> None:
        game = self._session.require_game()
        if game.phase not in (GamePhase.SHOW_STARTING_HANDS_1, GamePhase.SHOW_STARTING_HANDS_2):
            return

        for card in game.current().starting_cards:
            card.revealed = False

        if game.phase == GamePhase.SHOW_STARTING_HANDS_1:
            game.current_player = 1 - game.current_player
            game.phase = GamePhase.REVEAL
            self._session.record(f"{game.current().name} may now look at their cards.")
        else:
            game.log.clear()
            game.current_player = self._session.rng.randrange(2)
            game.phase = GamePhase.READY_TO_DRAW
            self._session.record(f"{game.current().name} takes the first turn.")
        self._session.notify(GameEvent.STARTING_CARDS_HIDDEN)

    def show_cards(self, card1: Card, card2: Optional[Card] = None) -> None:
        """Turn one or two cards face-up as a power card effect."""
        game = self._session.require_game()
        require_phase(game, *PEEK_PHASES, action="show_cards")

        card1.revealed = True
        if card2 is not None:
            card2.revealed = True
        extra = f" and {card2}" if card2 is not None else ""
        game.phase = GamePhase.SHOW_CARDS
        self._session.record(f"{game.current().name} sees {card1}{extra}.")
        self._session.notify(GameEvent.CARDS_SHOWN, card1=card1, card2=card2)

    def hide_cards(self) -> None:
        game = self._session.require_game()
        require_phase(game, *SHOWN_PHASES, action="hide_cards")

        for card in game.selected:
            card.revealed = False
        game.selected.clear()
        self._session.record(f"{game.current().name} covered the cards again.")
        self._session.notify(GameEvent.HIDE_CARDS)
        game.phase = GamePhase.END_TURN
        self.end_turn()

    def discard_card(self) -> None:
        """Put the freshly drawn deck card onto the discard pile and end the turn."""
        game = self._session.require_game()
        require_phase(
            game, GamePhase.POWER_CARD_DRAWN, GamePhase.POINT_CARD_DRAWN, action="discard_card"
        )
        player = game.current()
        card = player.drawn_card
        if card is None:
            raise InvalidStateError(f"{player.name} has no drawn card to discard")

        game.discard_pile.append(card)
        player.drawn_card = None
        self._session.record(f"{player.name} discarded {card}.")
        self._session.notify(GameEvent.CARD_DISCARDED, card=card)
        game.phase = GamePhase.END_TURN
        self.end_turn()

    def start_turn(self) -> None:
        game = self._session.require_game()
        require_phase(game, GamePhase.READY_TO_DRAW, action="start_turn")
        self._session.record(f"New turn: {game.current().name} to play.")
        self._session.notify(GameEvent.TURN_STARTED)

    def end_turn(self) -> None:
        """Hand the turn over, or finish the game.

        An empty draw pile ends the game at once, knock or no knock. After a
        knock, the game ends when play is about to return to the knocker, so
        the other player gets exactly one more turn.
        """
        game = self._session.require_game()
        require_phase(game, GamePhase.END_TURN, GamePhase.KNOCKED, action="end_turn")

        if not game.draw_pile:
            game.last_round = True
            game.phase = GamePhase.END_TURN
            self._session.record("The draw pile is empty. The game ends now.")
            self.game_over()
            return

        next_player = 1 - game.current_player
        if game.last_round and game.knock_initiator == next_player:
            game.phase = GamePhase.END_TURN
            self.game_over()
            return

        outgoing = game.current()
        if outgoing.drawn_card is not None:
            # Only reachable by knocking mid-turn; the card goes face-up on the pile.
            game.discard_pile.append(outgoing.drawn_card)
            outgoing.drawn_card = None
        for card in game.selected:
            card.revealed = False
        game.selected.clear()
        game.current_player = next_player
        game.phase = GamePhase.READY_TO_DRAW
        self._session.record(f"Turn over. {game.current().name} is up.")
        self._session.notify(GameEvent.TURN_ENDED)

    def game_over(self) -> None:
        """Score both hands; the strictly lower total wins."""
        game = self._session.require_game()
        require_phase(game, GamePhase.END_TURN, action="game_over")
        if not game.last_round:
            raise InvalidStateError("game_over requires the last round to have started")

        first, second = game.players
        first_score, second_score = first.score(), second.score()
        game.scores = [first_score, second_score]
        game.phase = GamePhase.FINISHED
        self._session.record(f"{first.name} has {first_score} points.")
        self._session.record(f"{second.name} has {second_score} points.")

        if first_score < second_score:
            game.winner = first
            self._session.notify(GameEvent.GAME_OVER, winner=first, score=first_score)
        elif second_score < first_score:
            game.winner = second
            self._session.notify(GameEvent.GAME_OVER, winner=second, score=second_score)
        else:
            self._session.record("It's a tie.")
            self._session.notify(GameEvent.GAME_OVER, winner=None, score=first_score)

    def quit(self) -> None:
        self._session.require_game()
        self._session.game = None
        logger.info("Game quit")
        self._session.notify(GameEvent.QUIT)

    def restart(self) -> None:
        self._session.require_game()
        self._session.game = None
        logger.info("Game restarted")
        self._session.notify(GameEvent.RESTART)
