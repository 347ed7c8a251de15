"""
Repositories Package - OSPA Scorer
ospa/repositories/__init__.py

Candidate record stores (local JSON file or Redis).
"""

from ospa.repositories.base import BaseCandidateStore
from ospa.repositories.json_store import JsonFileCandidateStore
from ospa.repositories.redis_store import RedisCandidateStore

__all__ = [
    "BaseCandidateStore",
    "JsonFileCandidateStore",
    "RedisCandidateStore",
]
