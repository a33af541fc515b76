"""Session guard deciding whether a page request may proceed."""

from dataclasses import dataclass

from hoopcamp.auth.session import get_current_user
from hoopcamp.database.client import get_supabase_credentials

ROOT_PATH = "/"
AUTH_PATH = "/auth"


@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class RedirectTo:
    path: str


Decision = Allow | RedirectTo


def is_public(path: str) -> bool:
    """The landing page and everything under /auth are reachable signed-out."""
    return path == ROOT_PATH or path.startswith(AUTH_PATH)


def decide(path: str, has_session: bool) -> Decision:
    """Allow the request, or redirect unauthenticated requests to the auth page."""
    if not has_session and not is_public(path):
        return RedirectTo(AUTH_PATH)
    return Allow()


def guard_request(path: str) -> Decision:
    """Check the session for a request to ``path``.

    Raises:
        ConfigurationError: if the Supabase credentials are missing. The
            request must then fail as a whole rather than be let through.

    """
    get_supabase_credentials()
    has_session = get_current_user() is not None
    return decide(path, has_session)
