"""
Pytest configuration and shared fixtures
"""
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from flask_jwt_extended import create_access_token

from weave_content import create_app
from weave_content.client import ContentStoreClient
from weave_content.extensions import db as _db
from weave_content.models.user import User

API_BASE = "http://content.test/api"


class FlaskTestAdapter(BaseAdapter):
    """Routes requests made through a requests.Session into the Flask test client."""

    def __init__(self, app):
        super().__init__()
        self.client = app.test_client()
        self.calls = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        url = urlsplit(request.url)
        self.calls.append((request.method, url.path))

        resp = self.client.open(
            url.path,
            method=request.method,
            query_string=url.query,
            headers=dict(request.headers),
            data=request.body or b"",
        )

        response = requests.Response()
        response.status_code = resp.status_code
        response._content = resp.get_data()
        response.headers = CaseInsensitiveDict(dict(resp.headers))
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def app(tmp_path):
    """Fixture providing the app with a fresh in-memory database"""
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(email, role):
    user = User()
    user.email = email
    user.role = role
    user.set_password("correct horse battery staple")
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    return _make_user("admin@weavecp.com", "admin")


@pytest.fixture
def staff_user(app):
    return _make_user("staff@weavecp.com", "user")


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(identity=admin_user.id, additional_claims=admin_user.token_claims())
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff_headers(staff_user):
    token = create_access_token(identity=staff_user.id, additional_claims=staff_user.token_claims())
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def adapter(app):
    return FlaskTestAdapter(app)


@pytest.fixture
def api_client(adapter, admin_headers):
    """ContentStoreClient talking to the test app as an admin"""
    session = requests.Session()
    session.mount("http://content.test", adapter)
    api = ContentStoreClient(API_BASE, session=session)
    api.session.headers.update(admin_headers)
    return api


class OfflineAdapter(BaseAdapter):
    """Fails every request the way an unreachable API host does."""

    def send(self, request, **kwargs):
        raise requests.exceptions.ConnectionError(f"cannot reach {request.url}")

    def close(self):
        pass


@pytest.fixture
def offline_client():
    session = requests.Session()
    session.mount("http://content.test", OfflineAdapter())
    return ContentStoreClient(API_BASE, session=session)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "after.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 16)
    return path
