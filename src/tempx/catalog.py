"""Template repository listing backed by the GitHub REST API."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import console
from .errors import UpstreamListError

__all__ = [
    "GITHUB_API_URL",
    "PER_PAGE",
    "GitHubRepository",
    "TemplateCatalog",
    "TemplateInfo",
    "Templates",
    "format_updated_at",
]


LOGGER = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
PER_PAGE = 100

Opener = Callable[[urllib.request.Request], Any]


class GitHubRepository(BaseModel):
    """The subset of a GitHub repository record tempx relies on."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Repository name without the owner prefix.")
    is_template: bool = Field(False, description="Whether the repository is marked as a template.")
    clone_url: str | None = Field(None, description="HTTPS clone URL.")
    updated_at: datetime | None = Field(None, description="Last update timestamp.")


@dataclass(frozen=True, slots=True)
class TemplateInfo:
    clone_url: str
    updated_at: datetime | None = None


Templates = Dict[str, TemplateInfo]


def format_updated_at(value: datetime | None) -> str:
    """Render ``value`` as a local calendar date."""

    if value is None:
        return "unknown"
    return value.astimezone().date().isoformat()


def build_templates(repositories: Iterable[GitHubRepository]) -> Templates:
    """Keep the template repositories, keyed by name in listing order."""

    templates: Templates = {}
    for repository in repositories:
        if not repository.is_template:
            continue
        templates[repository.name] = TemplateInfo(
            clone_url=repository.clone_url or "",
            updated_at=repository.updated_at,
        )
    return templates


class TemplateCatalog:
    """List a user's template repositories.

    Only the first page of :data:`PER_PAGE` repositories is requested and no
    authentication is sent.
    """

    def __init__(self, opener: Opener | None = None, *, api_url: str = GITHUB_API_URL) -> None:
        self._opener = opener if opener is not None else urllib.request.urlopen
        self._api_url = api_url.rstrip("/")

    def repositories_url(self, username: str) -> str:
        query = urllib.parse.urlencode({"type": "all", "per_page": PER_PAGE})
        return f"{self._api_url}/users/{urllib.parse.quote(username)}/repos?{query}"

    def list_repositories(self, username: str) -> List[GitHubRepository]:
        """Fetch and validate the repository records for ``username``."""

        url = self.repositories_url(username)
        request = urllib.request.Request(url, headers={"Accept": "application/vnd.github+json"})
        LOGGER.debug("GET %s", url)
        try:
            with self._opener(request) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            raise UpstreamListError(f"GitHub responded with {exc.code} {exc.reason}") from exc
        except urllib.error.URLError as exc:
            raise UpstreamListError(f"could not reach GitHub: {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            detail = str(exc) or type(exc).__name__
            raise UpstreamListError(f"connection to GitHub failed: {detail}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UpstreamListError(f"invalid response from GitHub: {exc}") from exc

        if not isinstance(payload, list):
            raise UpstreamListError("unexpected response from GitHub: expected a list of repositories")

        try:
            return [GitHubRepository.model_validate(record) for record in payload]
        except ValidationError as exc:
            raise UpstreamListError(f"unexpected repository record from GitHub: {exc.errors()[0]['msg']}") from exc

    def load_templates(self, username: str) -> Templates:
        """Return ``name -> TemplateInfo`` for every template owned by ``username``.

        Raises :class:`UpstreamListError` when the listing cannot be fetched.
        """

        templates = build_templates(self.list_repositories(username))
        LOGGER.debug("found %d template(s) for %s", len(templates), username)
        if not templates:
            console.warning("No templates found for the specified user.")
        return templates
