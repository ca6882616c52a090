import pytest

from travelhub import create_app
from travelhub.config import TestingConfig
from travelhub.models import db, User

EMAIL = 'asha@example.com'
PASSWORD = 'kanyakumari'


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.session.add(User(username='asha', email=EMAIL, password=PASSWORD, name='Asha'))
        db.session.commit()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in(client):
    response = client.post('/login', data={'email': EMAIL, 'password': PASSWORD})
    assert response.status_code == 302
    return client
