"""
Chump change game: the pot, and whether the user took it home.
"""
from dataclasses import dataclass

from .models import ChumpGame, ChumpGamePlayer

TOTAL = "total"
BREAKDOWN = "breakdown"


@dataclass
class ChumpResult:
    pot: float
    payout_to_user: float


def infer_input_mode(game):
    """A stored game entered as coins/cash reopens in breakdown mode."""
    if game is not None and (game.coins is not None or game.cash is not None):
        return BREAKDOWN
    return TOTAL


def chump_pot(game, input_mode=None):
    if game is None:
        return 0
    if input_mode is None:
        input_mode = infer_input_mode(game)
    if input_mode == BREAKDOWN:
        return (game.coins or 0) + (game.cash or 0)
    return game.pot or 0


def resolve_chump_game(game, input_mode=None):
    pot = chump_pot(game, input_mode)
    if game is None or not game.winner_name:
        return ChumpResult(pot=pot, payout_to_user=0)

    user = next((p for p in game.players if p.is_user), None)
    payout = pot if user is not None and game.winner_name == user.name else 0
    return ChumpResult(pot=pot, payout_to_user=payout)


def candidate_players(team_on_shift, user_name=None):
    """
    Everyone working the shift plus the user, first occurrence of each name wins.

    Names are compared exactly, so two people called "Sam" collapse into one.
    """
    names = []
    for members in (team_on_shift or {}).values():
        for member in members:
            if member.name and member.name not in names:
                names.append(member.name)
    if user_name and user_name not in names:
        names.append(user_name)
    return names


def toggle_player(game, name, user_name=None):
    game = game or ChumpGame()
    if any(p.name == name for p in game.players):
        players = [p for p in game.players if p.name != name]
    else:
        players = game.players + [ChumpGamePlayer(name, is_user=(name == user_name))]
    return ChumpGame(players, game.pot, game.coins, game.cash, game.winner_name)


def ensure_user_player(game, user_name):
    """Put the user in the game if nobody is flagged as the user yet."""
    if not user_name:
        return game
    game = game or ChumpGame()
    if any(p.is_user for p in game.players):
        return game
    if any(p.name == user_name for p in game.players):
        players = [ChumpGamePlayer(p.name, p.name == user_name) for p in game.players]
    else:
        players = game.players + [ChumpGamePlayer(user_name, is_user=True)]
    return ChumpGame(players, game.pot, game.coins, game.cash, game.winner_name)
