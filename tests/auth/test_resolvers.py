from __future__ import annotations

import asyncio
from typing import Any

import pytest

from signalhound.auth.resolvers.env import EnvTokenResolver
from signalhound.auth.resolvers.gh_cli import GhCliTokenResolver
from signalhound.auth.resolvers.static import StaticTokenResolver
from signalhound.contracts.exceptions import AuthenticationError


class _MockProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv("SIGNALHOUND_GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return monkeypatch


@pytest.mark.asyncio
async def test_env_resolver_prefers_signalhound_token(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SIGNALHOUND_GITHUB_TOKEN", "sh_tok")
    clean_env.setenv("GITHUB_TOKEN", "gh_tok")

    assert await EnvTokenResolver().resolve() == "sh_tok"


@pytest.mark.asyncio
async def test_env_resolver_falls_back_to_github_token(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SIGNALHOUND_GITHUB_TOKEN", "  ")
    clean_env.setenv("GITHUB_TOKEN", " gh_tok \n")

    assert await EnvTokenResolver().resolve() == "gh_tok"


@pytest.mark.asyncio
async def test_env_resolver_raises_when_unset(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(AuthenticationError, match="SIGNALHOUND_GITHUB_TOKEN or GITHUB_TOKEN"):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_resolver() -> None:
    assert await StaticTokenResolver(token=" tok ").resolve() == "tok"
    with pytest.raises(AuthenticationError):
        await StaticTokenResolver(token="   ").resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_returns_token(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        assert args == ("gh", "auth", "token", "--hostname", "github.com")
        return _MockProcess(returncode=0, stdout=b"tok_123\n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GhCliTokenResolver().resolve() == "tok_123"


@pytest.mark.asyncio
async def test_gh_cli_resolver_reports_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=1, stderr=b"not logged in")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="not logged in"):
        await GhCliTokenResolver(hostname="ghe.example.com").resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_raises_when_gh_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise OSError("gh missing")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="failed to run gh CLI"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_raises_on_empty_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=0, stdout=b"  \n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="empty token"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_reports_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise FileNotFoundError("gh")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="gh CLI not found"):
        await GhCliTokenResolver().resolve()


class _HangingProcess(_MockProcess):
    def __init__(self) -> None:
        super().__init__(returncode=0)
        self.killed = False

    async def communicate(self) -> tuple[bytes, bytes]:
        await asyncio.sleep(10)
        return b"", b""

    def kill(self) -> None:
        self.killed = True

    async def wait(self) -> int:
        return -9


@pytest.mark.asyncio
async def test_gh_cli_resolver_kills_hung_process(monkeypatch: pytest.MonkeyPatch) -> None:
    process = _HangingProcess()

    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _HangingProcess:
        return process

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="timed out"):
        await GhCliTokenResolver(timeout=0.01).resolve()
    assert process.killed


def test_resolvers_describe_their_source() -> None:
    assert EnvTokenResolver().source == "environment"
    assert GhCliTokenResolver().source == "gh-cli"
    assert StaticTokenResolver(token="t").source == "config"
