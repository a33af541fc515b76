"""Sign-in, sign-up and current-user lookup against Supabase Auth."""

from dataclasses import dataclass

from supabase import AuthError

from hoopcamp.database.client import get_supabase_client
from hoopcamp.database.records import Profile, Role
from hoopcamp.database.tables import TABLE_PROFILES
from hoopcamp.database.utils import load_record
from hoopcamp.errors import AuthenticationError

ROLES: tuple[Role, ...] = ("student", "coach")


@dataclass(frozen=True)
class SignUpResult:
    user_id: str
    role: Role
    needs_confirmation: bool


def _error_message(error: AuthError) -> str:
    return getattr(error, "message", None) or str(error) or "An error occurred"


def get_current_user():
    """Return the signed-in Supabase user, or None without a valid session."""
    client = get_supabase_client()
    try:
        response = client.auth.get_user()
    except AuthError as e:
        print(f"✗ Session rejected by auth provider: {_error_message(e)}")
        return None
    if response is None:
        return None
    return response.user


def load_profile(user_id: str) -> Profile | None:
    """Load the profile row belonging to an auth user."""
    return load_record(Profile, TABLE_PROFILES.name, user_id)


def get_current_profile() -> Profile | None:
    user = get_current_user()
    if user is None:
        return None
    return load_profile(user.id)


def sign_in(email: str, password: str) -> Profile | None:
    """Sign in with email and password and return the user's profile.

    Raises:
        AuthenticationError: if the credentials are rejected.

    """
    client = get_supabase_client()
    try:
        response = client.auth.sign_in_with_password({"email": email, "password": password})
    except AuthError as e:
        raise AuthenticationError(_error_message(e)) from e
    print(f"✓ Signed in {email}")
    return load_profile(response.user.id)


def sign_up(email: str, password: str, name: str, role: Role) -> SignUpResult:
    """Create an auth account; the profile row is created from the metadata.

    Raises:
        AuthenticationError: if the provider rejects the sign-up.

    """
    if role not in ROLES:
        raise AuthenticationError(f"Unknown role: {role}")
    client = get_supabase_client()
    try:
        response = client.auth.sign_up({
            "email": email,
            "password": password,
            "options": {"data": {"name": name, "role": role}},
        })
    except AuthError as e:
        raise AuthenticationError(_error_message(e)) from e
    if response.user is None:
        raise AuthenticationError("Sign-up did not return a user")

    print(f"✓ Signed up {email} as {role}")
    return SignUpResult(
        user_id=response.user.id,
        role=role,
        needs_confirmation=response.session is None,
    )


def sign_out() -> None:
    get_supabase_client().auth.sign_out()
