"""Abstract auth provider interface, the port for identity backends.

Each implementation is bound to the session of the request being served,
so none of the operations take a token argument.
"""

from abc import ABC, abstractmethod

from app.domain.entities import Identity


class AuthProvider(ABC):
    """Port — what the application layer needs from any auth backend."""

    @abstractmethod
    async def get_current_identity(self) -> Identity | None:
        """Return the identity of the current session, or None when there is none.

        A missing or expired session is not an error.

        Raises:
            AuthenticationError: If the auth backend could not be consulted.
        """
        ...

    @abstractmethod
    async def create_anonymous_identity(self) -> Identity:
        """Create an anonymous identity and attach it to the current session.

        Raises:
            AuthenticationError: If the identity could not be created.
        """
        ...

    @abstractmethod
    async def sign_out(self) -> None:
        """Terminate the current session.

        Raises:
            AuthenticationError: If the auth backend rejected the request.
        """
        ...
