from qbtrust.models.quarterback import Quarterback
from qbtrust.models.trust_snapshot import TrustSnapshot
from qbtrust.models.vote import Vote, VoteDirection

__all__ = [
    "Quarterback",
    "Vote",
    "VoteDirection",
    "TrustSnapshot",
]
