"""Endpoint families built on the transport runtime."""

from .account import AccountAPI
from .analysis import AnalysisAPI
from .board import BoardAPI, BotAPI
from .challenges import ChallengesAPI
from .fide import FideAPI
from .games import GamesAPI
from .messaging import MessagingAPI
from .openings import OpeningsAPI
from .pairings import PairingsAPI
from .puzzles import PuzzlesAPI
from .relations import RelationsAPI
from .simuls import SimulsAPI
from .tablebase import TablebaseAPI
from .tv import TvAPI
from .users import UsersAPI

__all__ = [
    "AccountAPI",
    "AnalysisAPI",
    "BoardAPI",
    "BotAPI",
    "ChallengesAPI",
    "FideAPI",
    "GamesAPI",
    "MessagingAPI",
    "OpeningsAPI",
    "PairingsAPI",
    "PuzzlesAPI",
    "RelationsAPI",
    "SimulsAPI",
    "TablebaseAPI",
    "TvAPI",
    "UsersAPI",
]
