# Path joining utility
#
# This package joins path segments lexically and prints the result.
# Nothing here touches the filesystem; every function is a pure string transform.

from pathjoin.joiner import clean, join, join_request
from pathjoin.schemas import JoinRequest, JoinResult, PathStyle

__all__ = ["clean", "join", "join_request", "JoinRequest", "JoinResult", "PathStyle"]
