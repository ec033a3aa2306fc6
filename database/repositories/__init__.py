from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.job import JobRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'JobRepository',
    'MatchRepository',
]
