"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .entity_deriver import Derivation, DerivedNames, EntityDeriver, collect_names
from .normalizer import NormalizerWriter, PassResult, PostIdMap, truncate_title
from .post_service import PostService
from .reference_resolver import ReferenceResolver
from .topic_service import TopicService
from .user_service import UserService
from .vote_list import split_vote_lists

__all__ = [
    "CommentService",
    "Derivation",
    "DerivedNames",
    "EntityDeriver",
    "NormalizerWriter",
    "PassResult",
    "PostIdMap",
    "PostService",
    "ReferenceResolver",
    "Service",
    "TopicService",
    "UserService",
    "collect_names",
    "split_vote_lists",
    "truncate_title",
]
