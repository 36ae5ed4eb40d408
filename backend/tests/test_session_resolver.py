"""
Tests for SessionResolver
"""
from sqlalchemy.exc import OperationalError

from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.session_resolver import SessionResolver
from conftest import ADMIN_ID, make_request


class _UnavailableProvider:
    def resolve_session(self, request):
        raise OperationalError("SELECT auth_sessions", {}, Exception("connection refused"))


def test_resolves_signed_in_profile(auth_provider, session_factory, seeded, make_session):
    """Test a valid cookie maps to the caller's profile row"""
    token = make_session(ADMIN_ID)
    resolver = SessionResolver(auth_provider, ProfileReader(session_factory))

    profile = resolver.get_my_profile(make_request(token=token))

    assert profile is not None
    assert profile.id == ADMIN_ID
    assert profile.role.value == "admin"


def test_no_cookie_means_no_profile(auth_provider, session_factory, seeded):
    """Test an anonymous request resolves to None"""
    resolver = SessionResolver(auth_provider, ProfileReader(session_factory))

    assert resolver.get_my_profile(make_request()) is None


def test_identity_without_profile(auth_provider, session_factory, seeded, make_session):
    """Test an authenticated user with no profile row resolves to None"""
    token = make_session("99999999-0000-0000-0000-000000000000")
    resolver = SessionResolver(auth_provider, ProfileReader(session_factory))

    assert resolver.get_my_profile(make_request(token=token)) is None


def test_profile_lookup_failure(auth_provider, broken_session_factory, seeded, make_session):
    """Test a failing profile query resolves to None instead of raising"""
    token = make_session(ADMIN_ID)
    resolver = SessionResolver(auth_provider, ProfileReader(broken_session_factory))

    assert resolver.get_my_profile(make_request(token=token)) is None


def test_auth_backend_failure(session_factory):
    """Test an unreachable auth backend resolves to None"""
    resolver = SessionResolver(_UnavailableProvider(), ProfileReader(session_factory))

    assert resolver.get_my_profile(make_request(token="anything")) is None
