"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .common import VoteInfo
from .delete_comment_votes import (
    DeleteCommentVotesRequest,
    DeleteCommentVotesResponse,
    DeleteCommentVotesUseCase,
)
from .list_votes import ListVotesRequest, ListVotesResponse, ListVotesUseCase
from .recompute_votes import (
    RecomputeVotesRequest,
    RecomputeVotesResponse,
    RecomputeVotesUseCase,
)
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "DeleteCommentVotesRequest",
    "DeleteCommentVotesResponse",
    "DeleteCommentVotesUseCase",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "RecomputeVotesRequest",
    "RecomputeVotesResponse",
    "RecomputeVotesUseCase",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
    "VoteInfo",
]
