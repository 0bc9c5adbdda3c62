"""Allow-list authorization of paths before they are scanned."""

from .allow_list_policy import DEFAULT_POSIX_PREFIXES, AllowListPolicy, Platform
from .path_authorizer import PathAuthorizer

__all__ = ["AllowListPolicy", "DEFAULT_POSIX_PREFIXES", "PathAuthorizer", "Platform"]
