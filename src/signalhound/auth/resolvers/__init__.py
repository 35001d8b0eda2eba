"""Concrete token resolvers."""

from signalhound.auth.resolvers.env import EnvTokenResolver
from signalhound.auth.resolvers.gh_cli import GhCliTokenResolver
from signalhound.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
