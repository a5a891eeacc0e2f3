"""Player actions: the choices a player makes during their own turn."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from kaboo.engine.card import Card, Rank
from kaboo.engine.errors import InvalidArgumentError, InvalidStateError
from kaboo.engine.events import GameEvent
from kaboo.engine.game_state import (
    DRAW_PHASES,
    POWER_PHASES,
    SETUP_PHASES,
    GamePhase,
    GameState,
    require_phase,
)
from kaboo.engine.player import Player, Position

if TYPE_CHECKING:
    from kaboo.engine.session import GameSession

logger = logging.getLogger(__name__)

POWER_CARD_PHASES = {
    Rank.JACK: GamePhase.PLAY_JACK,
    Rank.QUEEN: GamePhase.PLAY_QUEEN,
    Rank.SEVEN: GamePhase.PLAY_SEVEN_OR_EIGHT,
    Rank.EIGHT: GamePhase.PLAY_SEVEN_OR_EIGHT,
    Rank.NINE: GamePhase.PLAY_NINE_OR_TEN,
    Rank.TEN: GamePhase.PLAY_NINE_OR_TEN,
}

SELECT_PHASES = DRAW_PHASES | POWER_PHASES
TWO_CARD_PHASES = (GamePhase.PLAY_JACK, GamePhase.PLAY_QUEEN)


class PlayerActionService:
    """In-turn actions of the current player.

    Every method checks phase and arguments before touching the game, so a
    rejected call leaves hands and piles as they were.
    """

    def __init__(self, session: "GameSession"):
        self._session = session

    @property
    def _flow(self):
        return self._session.game_service

    def current_player(self) -> Player:
        return self._session.require_game().current()

    def find_card_position_in_hand(self, player: Player, card: Card) -> Optional[Position]:
        return player.find(card)

    # -- drawing -----------------------------------------------------------

    def draw_from_deck(self) -> None:
        game = self._session.require_game()
        require_phase(game, GamePhase.READY_TO_DRAW, action="draw_from_deck")

        if not game.draw_pile:
            game.phase = GamePhase.END_TURN
            self._flow.end_turn()
            return

        player = game.current()
        card = game.draw_pile.pop()
        player.drawn_card = card
        game.phase = GamePhase.DRAW_FROM_DECK
        if card.is_power_card:
            game.phase = GamePhase.POWER_CARD_DRAWN
            self._session.record(f"{player.name} drew a power card ({card}) from the deck.")
        else:
            game.phase = GamePhase.POINT_CARD_DRAWN
            self._session.record(f"{player.name} drew a point card ({card}) from the deck.")

        if not game.draw_pile:
            game.last_round = True
        self._session.notify(GameEvent.CARD_DRAWN_FROM_DECK, card=card)

    def draw_from_pile(self) -> None:
        """Take the top discard; it can only be swapped into the own grid."""
        game = self._session.require_game()
        require_phase(game, GamePhase.READY_TO_DRAW, action="draw_from_pile")
        if not game.discard_pile:
            raise InvalidStateError("The discard pile is empty")

        player = game.current()
        card = game.discard_pile.pop()
        player.drawn_card = card
        game.phase = GamePhase.DRAW_FROM_PILE
        self._session.record(f"{player.name} took {card} from the discard pile.")
        self._session.notify(GameEvent.CARD_DRAWN_FROM_PILE, card=card)

    # -- power cards -------------------------------------------------------

    def play_power_card(self) -> None:
        game = self._session.require_game()
        require_phase(game, GamePhase.POWER_CARD_DRAWN, action="play_power_card")
        player = game.current()
        card = player.drawn_card
        if card is None or not card.is_power_card:
            raise InvalidArgumentError("The drawn card is not a power card")

        opponent = game.opponent()
        game.phase = POWER_CARD_PHASES[card.rank]
        if game.phase == GamePhase.PLAY_JACK:
            message = f"{player.name} plays {card}: blind swap with a card of {opponent.name}."
        elif game.phase == GamePhase.PLAY_QUEEN:
            message = f"{player.name} plays {card}: look at a card of {opponent.name} and maybe swap."
        elif game.phase == GamePhase.PLAY_SEVEN_OR_EIGHT:
            message = f"{player.name} plays {card}: look at an own card."
        else:
            message = f"{player.name} plays {card}: look at a card of {opponent.name}."

        game.discard_pile.append(card)
        player.drawn_card = None
        # Picks made for a swap do not carry over into the effect.
        game.selected.clear()
        self._session.record(message)
        self._session.notify(GameEvent.POWER_PLAYED, card=card)

    # -- selection ---------------------------------------------------------

    def select_card(self, card: Card) -> None:
        """Pick a card for the pending swap or power effect.

        Jack and queen take one own and one opponent card, in either order;
        picking another card of the same owner replaces the earlier pick.
        Nine/ten take one opponent card, seven/eight and the draw phases one
        own card.
        """
        game = self._session.require_game()
        if game.phase not in SELECT_PHASES:
            raise InvalidArgumentError(f"Selecting cards is not allowed in phase {game.phase.value}")
        player, opponent = game.current(), game.opponent()
        is_own, is_opponent = player.owns(card), opponent.owns(card)

        if game.phase in TWO_CARD_PHASES:
            if not (is_own or is_opponent):
                raise InvalidArgumentError("Choose one of your cards or one of your opponent's")
            if any(chosen is card for chosen in game.selected):
                return
            same_owner = player if is_own else opponent
            game.selected[:] = [c for c in game.selected if not same_owner.owns(c)]
            game.selected.append(card)
        elif game.phase == GamePhase.PLAY_NINE_OR_TEN:
            if not is_opponent:
                raise InvalidArgumentError("With a 9 or 10 you may only look at an opponent card")
            game.selected[:] = [card]
        else:
            if not is_own:
                raise InvalidArgumentError("You may only choose your own cards")
            game.selected[:] = [card]

        self._session.record(f"{player.name} selected a card.")
        self._session.notify(GameEvent.CARD_SELECTED, card=card)

    def _require_split_pair(self, game: GameState) -> None:
        selected = game.selected
        player, opponent = game.current(), game.opponent()
        if len(selected) != 2:
            raise InvalidArgumentError("Select exactly two cards")
        first, second = selected
        if not (
            (player.owns(first) and opponent.owns(second))
            or (player.owns(second) and opponent.owns(first))
        ):
            raise InvalidArgumentError("Select one own card and one opponent card")

    def _require_single(self, game: GameState, owner: Player, what: str) -> None:
        if len(game.selected) != 1:
            raise InvalidArgumentError("Select exactly one card")
        if not owner.owns(game.selected[0]):
            raise InvalidArgumentError(f"The selected card must be {what}")

    # -- resolving ---------------------------------------------------------

    def confirm_choice(self) -> None:
        """Resolve the current step of the drawn or played card."""
        game = self._session.require_game()
        flow = self._flow

        if game.phase == GamePhase.POWER_CARD_DRAWN:
            self.play_power_card()
            self._session.notify(GameEvent.CHOICE_CONFIRMED)
            return

        if game.phase == GamePhase.PLAY_QUEEN:
            self._require_split_pair(game)
            first, second = game.selected
            first.revealed = True
            second.revealed = True
            game.phase = GamePhase.CONFIRM_QUEEN_SHOW
            self._session.record(f"{game.current().name} sees {first} and {second}.")
            self._session.notify(GameEvent.CARDS_SHOWN, card1=first, card2=second)
            self._session.notify(GameEvent.CHOICE_CONFIRMED)
        elif game.phase == GamePhase.CONFIRM_QUEEN_SHOW:
            self.confirm_queen_swap()
            self._session.notify(GameEvent.CHOICE_CONFIRMED)
        elif game.phase in (GamePhase.PLAY_SEVEN_OR_EIGHT, GamePhase.PLAY_NINE_OR_TEN):
            if game.phase == GamePhase.PLAY_SEVEN_OR_EIGHT:
                self._require_single(game, game.current(), "one of your own")
            else:
                self._require_single(game, game.opponent(), "an opponent card")
            flow.show_cards(game.selected[0])
            self._session.notify(GameEvent.CHOICE_CONFIRMED)
            game.phase = GamePhase.END_TURN
            flow.end_turn()
        elif game.phase == GamePhase.PLAY_JACK:
            self._require_split_pair(game)
            self._locate_pair(game)
            self._session.record(f"{game.current().name} swaps blindly with the jack.")
            self.swap_card()
            self._session.notify(GameEvent.CHOICE_CONFIRMED)
        else:
            raise InvalidStateError(f"confirm_choice is not allowed in phase {game.phase.value}")

    def confirm_queen_swap(self) -> None:
        """Swap the two cards looked at with the queen, then end the turn."""
        game = self._session.require_game()
        require_phase(game, GamePhase.CONFIRM_QUEEN_SHOW, action="confirm_queen_swap")
        if len(game.selected) != 2:
            raise InvalidArgumentError("Select exactly two cards")
        own_pos, opp_pos = self._locate_pair(game)

        self._exchange(game, own_pos, opp_pos)
        for card in game.selected:
            card.revealed = False
        game.selected.clear()
        self._session.record(f"{game.current().name} swapped after looking with the queen.")
        self._session.notify(GameEvent.CARDS_SWAPPED)
        game.phase = GamePhase.END_TURN
        self._flow.end_turn()

    def cancel_power_effect(self) -> None:
        game = self._session.require_game()
        require_phase(game, GamePhase.CONFIRM_QUEEN_SHOW, action="cancel_power_effect")

        for card in game.selected:
            card.revealed = False
        game.selected.clear()
        self._session.record(f"{game.current().name} decided not to swap.")
        self._session.notify(GameEvent.HIDE_CARDS)
        game.phase = GamePhase.END_TURN
        self._flow.end_turn()

    def _locate_pair(self, game: GameState):
        player, opponent = game.current(), game.opponent()
        first, second = game.selected
        if player.owns(first):
            own_card, opp_card = first, second
        else:
            own_card, opp_card = second, first
        own_pos = self.find_card_position_in_hand(player, own_card)
        opp_pos = self.find_card_position_in_hand(opponent, opp_card)
        if own_pos is None or opp_pos is None:
            raise InvalidStateError("A selected card is no longer in a hand")
        return own_pos, opp_pos

    def _exchange(self, game: GameState, own_pos: Position, opp_pos: Position) -> None:
        player, opponent = game.current(), game.opponent()
        (row1, col1), (row2, col2) = own_pos, opp_pos
        player.hand[row1][col1], opponent.hand[row2][col2] = (
            opponent.hand[row2][col2],
            player.hand[row1][col1],
        )

    def swap_card(self) -> None:
        """Swap the drawn card into the own grid, or trade with the opponent.

        In the draw phases the selected own card is replaced by the drawn card
        and goes to the discard pile. With a jack or queen in play the two
        selected cards trade grid positions.
        """
        game = self._session.require_game()
        player = game.current()

        if game.phase in (
            GamePhase.POWER_CARD_DRAWN,
            GamePhase.POINT_CARD_DRAWN,
            GamePhase.DRAW_FROM_PILE,
        ):
            self._require_single(game, player, "one of your own")
            drawn = player.drawn_card
            if drawn is None:
                raise InvalidStateError(f"{player.name} has no drawn card to swap in")
            row, col = self.find_card_position_in_hand(player, game.selected[0])
            displaced = player.hand[row][col]
            player.hand[row][col] = drawn
            player.drawn_card = None
            displaced.revealed = False
            game.discard_pile.append(displaced)
            game.selected.clear()
            self._session.record(f"{player.name} swapped {drawn} in and discarded {displaced}.")
        elif game.phase in TWO_CARD_PHASES:
            self._require_split_pair(game)
            own_pos, opp_pos = self._locate_pair(game)
            self._exchange(game, own_pos, opp_pos)
            game.selected.clear()
            self._session.record(f"{player.name} swapped a card with {game.opponent().name}.")
        else:
            raise InvalidStateError(f"Swapping is not allowed in phase {game.phase.value}")

        self._session.notify(GameEvent.CARDS_SWAPPED)
        game.phase = GamePhase.END_TURN
        self._flow.end_turn()

    # -- knocking ----------------------------------------------------------

    def knock(self) -> None:
        """Announce the last round; the opponent gets one more turn."""
        game = self._session.require_game()
        if game.last_round:
            return
        if game.phase in SETUP_PHASES or game.phase == GamePhase.FINISHED:
            raise InvalidStateError(f"Knocking is not allowed in phase {game.phase.value}")

        game.knock_initiator = game.current_player
        game.last_round = True
        game.phase = GamePhase.KNOCKED
        self._session.record(f"{game.current().name} knocks! The game ends after this round.")
        self._session.notify(GameEvent.KNOCKED)
        self._flow.end_turn()
