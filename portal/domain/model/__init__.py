"""Domain model entities for the class-resource portal."""

from portal.domain.model.account import Account
from portal.domain.model.award import AwardEvent, AwardPolicy
from portal.domain.model.comment import Comment
from portal.domain.model.content import ContentItem
from portal.domain.model.rank import RankProgress, RankTable, RankThreshold
from portal.domain.model.reaction import Reaction

__all__ = [
    "Account",
    "AwardEvent",
    "AwardPolicy",
    "Comment",
    "ContentItem",
    "RankProgress",
    "RankTable",
    "RankThreshold",
    "Reaction",
]
