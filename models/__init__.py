"""Models for Word Scramble Bot - __init__ module."""
from models.db_models import Base, WordCache
from models.game import (
    Round,
    RejectionReason,
    Accepted,
    Rejected,
    ValidationOutcome,
)

__all__ = [
    "Base",
    "WordCache",
    "Round",
    "RejectionReason",
    "Accepted",
    "Rejected",
    "ValidationOutcome",
]
