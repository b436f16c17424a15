"""Request-scoped holder for the session token carried in the cookie."""

from dataclasses import dataclass


@dataclass
class AuthSession:
    """Access token for the request being served.

    Providers update it on sign-in and sign-out; ``changed`` tells the
    presentation layer to rewrite the cookie.
    """

    access_token: str | None = None
    changed: bool = False

    def set_token(self, token: str) -> None:
        self.access_token = token
        self.changed = True

    def clear(self) -> None:
        if self.access_token is not None:
            self.access_token = None
            self.changed = True
