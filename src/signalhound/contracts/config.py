"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_PROJECT_ID = "PVT_kwDOAM_34M4AAThW"
DEFAULT_ORGANIZATION = "kubernetes"
DEFAULT_API_URL = "https://api.github.com/graphql"


class BoardConfig(BaseModel):
    project_id: str = DEFAULT_PROJECT_ID
    organization: str = DEFAULT_ORGANIZATION
    api_url: str = DEFAULT_API_URL
    auth: str = "env"
    token: str | None = None
    per_page: int = Field(default=100, ge=1, le=100)
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> BoardConfig:
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self

    @model_validator(mode="after")
    def validate_project_id(self) -> BoardConfig:
        if not self.project_id.strip():
            raise ValueError("project_id must be non-empty")
        return self
