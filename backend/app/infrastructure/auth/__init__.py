from .local_auth_provider import LocalAuthProvider, LocalIdentityStore
from .session import AuthSession
from .supabase_auth_provider import SupabaseAuthProvider

__all__ = [
    "AuthSession",
    "LocalAuthProvider",
    "LocalIdentityStore",
    "SupabaseAuthProvider",
]
