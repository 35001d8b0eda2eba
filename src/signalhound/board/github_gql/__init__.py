"""GraphQL client for the GitHub API."""

from signalhound.board.github_gql.client import GitHubGraphQLClient

__all__ = ["GitHubGraphQLClient"]
