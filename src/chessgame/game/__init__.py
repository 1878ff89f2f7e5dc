"""Game management layer: session, players, outcome messages.

Quick start::

    from chessgame.game import GameSession, HumanPlayer

    session = GameSession()
    session.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    outcome = session.submit_move(12, 28)
"""

from chessgame.game.interfaces import GamePhase, IGameSession, IPlayer
from chessgame.game.messages import describe
from chessgame.game.player import HumanPlayer, RemotePlayer, parse_move_reply
from chessgame.game.session import GameEvents, GameSession

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameSession",
    "IPlayer",
    # Concrete
    "GameEvents",
    "GameSession",
    "HumanPlayer",
    "RemotePlayer",
    # Helpers
    "describe",
    "parse_move_reply",
]
