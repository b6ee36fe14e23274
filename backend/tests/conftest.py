from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest

sys.path.append(str(Path(__file__).resolve().parent))

from make_theme import create_app
from make_theme.context import CurrentUser, PluginCapabilities, ThemeContext
from make_theme.extensions import db
from make_theme.models.post import Post
from make_theme.models.post_meta import PostMeta
from make_theme.models.user import User
from make_theme.theme import Theme


@pytest.fixture
def context() -> ThemeContext:
    return ThemeContext(config={"MAKE_COMPATIBILITY_MODE": "full"})


@pytest.fixture
def theme_factory():
    """Build (not load) a theme for the given context settings."""

    def factory(
        config: Dict[str, Any] | None = None,
        capabilities: PluginCapabilities | None = None,
        caps: List[str] | None = None,
        post: Any = None,
        stored: Dict[str, Any] | None = None,
        view: str = "page",
    ) -> Theme:
        context = ThemeContext(
            config=config or {},
            capabilities=capabilities,
            user=CurrentUser(id="1", role="admin", capabilities=frozenset(caps or [])),
            post=post,
            view=view,
        )
        return Theme(context, stored or {})

    return factory


@pytest.fixture
def app() -> Iterator[Any]:
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Any) -> Any:
    return app.test_client()


def _create_user(email: str, password: str, role: str, caps: List[str]) -> User:
    user = User()
    user.email = email
    user.role = role
    user.capabilities = caps
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_headers(client: Any) -> Dict[str, str]:
    _create_user("admin@example.com", "secret", "admin", ["install_plugins", "update_plugins", "switch_themes"])
    response = client.post("/api/v1/auth/login", json={"email": "admin@example.com", "password": "secret"})
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def subscriber_headers(client: Any) -> Dict[str, str]:
    _create_user("reader@example.com", "secret", "subscriber", [])
    response = client.post("/api/v1/auth/login", json={"email": "reader@example.com", "password": "secret"})
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def builder_page(app: Any) -> Post:
    post = Post()
    post.title = "Home"
    post.post_type = "page"
    post.page_template = "template-builder.php"
    db.session.add(post)
    db.session.flush()

    meta = {
        "_ttfmake-section-ids": ["200", "100"],
        "_ttfmake:100:section-type": "text",
        "_ttfmake:100:id": "100",
        "_ttfmake:100:title": "Welcome",
        "_ttfmake:100:columns:1:title": "Left",
        "_ttfmake:200:section-type": "banner",
        "_ttfmake:200:id": "200",
        "_ttfmake:200:height": "480",
        "_ttfmake:300:section-type": "gallery",
        "unrelated": "value",
    }
    for key, value in meta.items():
        row = PostMeta()
        row.post_id = post.id
        row.meta_key = key
        row.meta_value = value
        db.session.add(row)

    db.session.commit()
    return post
