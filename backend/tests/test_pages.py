"""
Tests for the server-rendered pages
"""
import re

import pytest

from cms_admin.api.deps import get_book_reader, get_post_reader
from cms_admin.services.book_reader import BookReader
from cms_admin.services.post_reader import PostReader
from conftest import ADMIN_ID, AUTHOR_ID


def _positions(html, *needles):
    return [html.index(needle) for needle in needles]


def test_home_lists_tasks_and_authors(admin_client):
    """Test the task board shows tasks newest first and only staff as assignees"""
    response = admin_client.get("/")

    assert response.status_code == 200
    html = response.text
    first, second, third = _positions(html, "New task", "Middle task", "Old task")
    assert first < second < third

    authors = re.findall(r'<ul class="authors">(.*?)</ul>', html, re.S)[0]
    assert "amina" in authors and "zaid" in authors
    assert "bilal" not in authors


def test_account_slot_shows_signed_in_profile(admin_client):
    """Test the layout shows the signed-in profile and a log-out form"""
    html = admin_client.get("/posts").text

    assert f'data-profile-id="{ADMIN_ID}"' in html
    assert '<span class="account-name">zaid</span>' in html
    assert 'action="/api/auth/signout"' in html


def test_posts_list(admin_client):
    """Test the post list is ordered by title"""
    html = admin_client.get("/posts").text

    first, second, third = _positions(html, "Adab of learning", "Règles de la zakat", "Zakat rules")
    assert first < second < third


def test_post_new_is_create_mode(admin_client):
    """Test /posts/new opens an empty form with categories and authors loaded"""
    response = admin_client.get("/posts/new")

    assert response.status_code == 200
    html = response.text
    assert 'class="post-form" data-mode="create"' in html
    assert "Aqida" in html and "Fiqh" in html
    assert f'value="{AUTHOR_ID}"' in html
    assert 'class="translations"' not in html


def test_post_edit_by_slug(admin_client):
    """Test an existing slug opens the form in edit mode with translations"""
    html = admin_client.get("/posts/zakat-rules").text

    assert 'data-mode="edit"' in html
    assert 'value="Zakat rules"' in html
    assert '<option value="1" selected>Fiqh</option>' in html
    assert 'href="/posts/regles-zakat"' in html
    assert "(original)" in html


def test_post_unknown_slug_is_create_mode(admin_client):
    """Test a slug with no row falls back to an empty form"""
    response = admin_client.get("/posts/not-written-yet")

    assert response.status_code == 200
    assert 'data-mode="create"' in response.text


def test_post_lookup_error_shows_message(app, admin_client, broken_session_factory):
    """Test a failed post read renders the fixed message and no form"""
    app.dependency_overrides[get_post_reader] = lambda: PostReader(broken_session_factory)

    response = admin_client.get("/posts/zakat-rules")

    assert response.status_code == 404
    assert "No post found." in response.text
    assert "post-form" not in response.text


def test_profiles_list(admin_client):
    """Test the profiles page lists every profile by email"""
    html = admin_client.get("/profiles").text

    positions = _positions(html, "amina@example.com", "bilal@example.com", "yusuf@example.com")
    assert positions == sorted(positions)


def test_profile_detail_with_roles(admin_client):
    """Test the profile form preselects the profile's role"""
    html = admin_client.get(f"/profiles/profile/{AUTHOR_ID}").text

    assert 'class="profile-form" data-mode="edit"' in html
    assert '<option value="2" selected>Author</option>' in html
    assert "Banned" in html


def test_profile_new(admin_client):
    """Test /profiles/profile/new renders the create form with roles"""
    html = admin_client.get("/profiles/profile/new").text

    assert 'class="profile-form" data-mode="create"' in html
    assert "Reader" in html


def test_book_detail_lists_programs(admin_client):
    """Test the book form lists its programs"""
    html = admin_client.get("/books/1").text

    assert 'class="book-form" data-mode="edit"' in html
    assert "Fiqh Program" in html
    assert "Arabic Program" in html


def test_book_lookup_error(app, admin_client, broken_session_factory):
    """Test a failed book read renders the fixed message"""
    app.dependency_overrides[get_book_reader] = lambda: BookReader(broken_session_factory)

    response = admin_client.get("/books/1")

    assert response.status_code == 404
    assert "No book found." in response.text


@pytest.mark.parametrize("path,message", [
    ("/books/matn", "No book found."),
    ("/roles/role/admin", "No role found."),
    ("/categories/category/fiqh", "No category found."),
    ("/types/video", "No type found."),
    ("/tags/hadith", "No tag found."),
    ("/posts/99999999999999999999", "No post found."),
    ("/books/99999999999999999999", "No book found."),
])
def test_non_numeric_ids_show_message(admin_client, path, message):
    """Test numeric-keyed pages reject non-numeric ids with their message"""
    response = admin_client.get(path)

    assert response.status_code == 404
    assert message in response.text


@pytest.mark.parametrize("path,form_class,mode", [
    ("/roles/role/1", "role-form", "edit"),
    ("/roles/role/new", "role-form", "create"),
    ("/categories/category/2", "category-form", "edit"),
    ("/categories/category/new", "category-form", "create"),
    ("/types/1", "type-form", "edit"),
    ("/types/new", "type-form", "create"),
    ("/tags/1", "tag-form", "edit"),
    ("/tags/new", "tag-form", "create"),
    ("/books/new", "book-form", "create"),
])
def test_detail_form_modes(admin_client, path, form_class, mode):
    """Test detail pages pick create or edit mode from the read result"""
    response = admin_client.get(path)

    assert response.status_code == 200
    assert f'class="{form_class}" data-mode="{mode}"' in response.text
