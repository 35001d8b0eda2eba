"""Auth module public exports."""

from signalhound.auth.base import TokenResolver
from signalhound.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
