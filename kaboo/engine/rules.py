"""Kaboo rules: legal actions per phase and dispatch onto the services."""

from dataclasses import dataclass
from typing import List, Union

from kaboo.engine.card import Card
from kaboo.engine.errors import InvalidStateError
from kaboo.engine.game_state import GamePhase, GameState
from kaboo.engine.session import GameSession


@dataclass
class ShowStartingCards:
    """Action: peek at the own bottom row before the game begins."""


@dataclass
class HideStartingCards:
    """Action: cover the starting cards again."""


@dataclass
class DrawFromDeck:
    """Action: draw the top card of the draw pile."""


@dataclass
class DrawFromPile:
    """Action: take the top card of the discard pile."""


@dataclass
class PlayPowerCard:
    """Action: use the effect of the drawn power card."""


@dataclass
class DiscardCard:
    """Action: discard the card drawn from the deck."""


@dataclass
class SelectCard:
    """Action: pick a card in a grid. owner is the player index."""

    card: Card
    owner: int
    row: int
    col: int


@dataclass
class SwapCard:
    """Action: swap the drawn card with the selected own card."""


@dataclass
class ConfirmChoice:
    """Action: resolve the selection for the current power card."""


@dataclass
class CancelPowerEffect:
    """Action: keep the cards in place after the queen peek."""


@dataclass
class HideCards:
    """Action: cover the peeked cards and end the turn."""


@dataclass
class Knock:
    """Action: announce the last round."""


Action = Union[
    ShowStartingCards,
    HideStartingCards,
    DrawFromDeck,
    DrawFromPile,
    PlayPowerCard,
    DiscardCard,
    SelectCard,
    SwapCard,
    ConfirmChoice,
    CancelPowerEffect,
    HideCards,
    Knock,
]


def _select_actions(state: GameState, owners: List[int]) -> List[Action]:
    """SelectCard for every unselected card in the given players' grids."""
    actions: List[Action] = []
    for owner in owners:
        for row, cards in enumerate(state.players[owner].hand):
            for col, card in enumerate(cards):
                if card is None or any(card is chosen for chosen in state.selected):
                    continue
                actions.append(SelectCard(card=card, owner=owner, row=row, col=col))
    return actions


def _has_split_pair(state: GameState) -> bool:
    if len(state.selected) != 2:
        return False
    first, second = state.selected
    me, other = state.current(), state.opponent()
    return (me.owns(first) and other.owns(second)) or (me.owns(second) and other.owns(first))


def get_legal_actions(session: GameSession) -> List[Action]:
    """Return all legal actions for the current player."""
    state = session.game
    if state is None or state.phase == GamePhase.FINISHED:
        return []

    me = state.current_player
    other = 1 - me
    phase = state.phase

    if phase in (GamePhase.PLAYERS_ADDED, GamePhase.REVEAL):
        return [ShowStartingCards()]
    if phase in (GamePhase.SHOW_STARTING_HANDS_1, GamePhase.SHOW_STARTING_HANDS_2):
        return [HideStartingCards()]

    actions: List[Action] = []
    if phase == GamePhase.READY_TO_DRAW:
        actions.append(DrawFromDeck())
        if state.discard_pile:
            actions.append(DrawFromPile())
        if not state.last_round:
            actions.append(Knock())
    elif phase in (GamePhase.POWER_CARD_DRAWN, GamePhase.POINT_CARD_DRAWN, GamePhase.DRAW_FROM_PILE):
        if phase == GamePhase.POWER_CARD_DRAWN:
            actions.append(PlayPowerCard())
        if phase != GamePhase.DRAW_FROM_PILE:
            actions.append(DiscardCard())
        actions.extend(_select_actions(state, [me]))
        if len(state.selected) == 1:
            actions.append(SwapCard())
    elif phase == GamePhase.PLAY_SEVEN_OR_EIGHT:
        actions.extend(_select_actions(state, [me]))
        if len(state.selected) == 1:
            actions.append(ConfirmChoice())
    elif phase == GamePhase.PLAY_NINE_OR_TEN:
        actions.extend(_select_actions(state, [other]))
        if len(state.selected) == 1:
            actions.append(ConfirmChoice())
    elif phase in (GamePhase.PLAY_JACK, GamePhase.PLAY_QUEEN):
        actions.extend(_select_actions(state, [me, other]))
        if _has_split_pair(state):
            actions.append(ConfirmChoice())
    elif phase == GamePhase.CONFIRM_QUEEN_SHOW:
        actions.extend([ConfirmChoice(), CancelPowerEffect()])
    elif phase == GamePhase.SHOW_CARDS:
        actions.append(HideCards())

    return actions


def describe_action(action: Action, viewer: int) -> str:
    """Short human-readable label for an action, from the viewer's side."""
    if isinstance(action, SelectCard):
        whose = "own" if action.owner == viewer else "opponent"
        return f"SELECT {whose} card at row {action.row + 1}, column {action.col + 1}"
    return type(action).__name__


def apply_action(session: GameSession, action: Action) -> GameState:
    """Apply an action to the session's game and return the state."""
    flow = session.game_service
    actions = session.player_action_service

    if isinstance(action, ShowStartingCards):
        flow.show_starting_cards()
    elif isinstance(action, HideStartingCards):
        flow.hide_starting_cards()
    elif isinstance(action, DrawFromDeck):
        actions.draw_from_deck()
    elif isinstance(action, DrawFromPile):
        actions.draw_from_pile()
    elif isinstance(action, PlayPowerCard):
        actions.play_power_card()
    elif isinstance(action, DiscardCard):
        flow.discard_card()
    elif isinstance(action, SelectCard):
        actions.select_card(action.card)
    elif isinstance(action, SwapCard):
        actions.swap_card()
    elif isinstance(action, ConfirmChoice):
        actions.confirm_choice()
    elif isinstance(action, CancelPowerEffect):
        actions.cancel_power_effect()
    elif isinstance(action, HideCards):
        flow.hide_cards()
    elif isinstance(action, Knock):
        actions.knock()
    else:
        raise InvalidStateError(f"Unknown action: {action!r}")

    return session.require_game()
