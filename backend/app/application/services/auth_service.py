"""Application service (use case) for anonymous-by-default authentication."""

import logging

from app.application.interfaces import AuthProvider
from app.domain.entities import Identity, Result
from app.domain.exceptions import AuthErrorCode, AuthenticationError, ErrorKind

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates identity lookup, anonymous sign-in and sign-out.

    Every public operation returns a Result; ``resolve_identity`` is the
    raising variant used by other services.
    """

    def __init__(self, provider: AuthProvider):
        self._provider = provider

    async def resolve_identity(self) -> Identity:
        """Return the current identity, creating an anonymous one if there is none.

        Raises:
            AuthenticationError: If lookup or creation failed for any reason.
        """
        try:
            identity = await self._provider.get_current_identity()
            if identity is not None:
                return identity

            identity = await self._provider.create_anonymous_identity()
            logger.info("Created anonymous identity %s", identity.id)
            return identity
        except AuthenticationError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while resolving identity")
            raise AuthenticationError(AuthErrorCode.UNKNOWN_ERROR) from exc

    async def current_identity(self) -> Result[Identity | None]:
        """Look up the current identity without creating one."""
        try:
            return Result.ok(await self._provider.get_current_identity())
        except AuthenticationError as exc:
            return self._failure(exc)
        except Exception:
            logger.exception("Unexpected error while getting current identity")
            return self._failure(AuthenticationError(AuthErrorCode.UNKNOWN_ERROR))

    async def ensure_identity(self) -> Result[Identity]:
        try:
            return Result.ok(await self.resolve_identity())
        except AuthenticationError as exc:
            return self._failure(exc)

    async def sign_out(self) -> Result[None]:
        try:
            await self._provider.sign_out()
        except AuthenticationError as exc:
            return self._failure(exc)
        except Exception:
            logger.exception("Unexpected error while signing out")
            return self._failure(AuthenticationError(AuthErrorCode.UNKNOWN_ERROR))
        return Result.ok()

    @staticmethod
    def _failure(exc: AuthenticationError) -> Result:
        logger.warning("Authentication failed (%s): %s", exc.code.value, exc.message)
        return Result.fail(f"Authentication failed: {exc.message}", ErrorKind.AUTHENTICATION)
