import os
import tempfile

# Keep test logs out of the working tree; must run before wordgrid is imported
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "wordgrid-test-logs"))

import pytest

from wordgrid import create_app
from wordgrid.config import TestingConfig
from wordgrid.engine import WordSource, apply_key
from wordgrid.models import GameSession, Grid
from wordgrid.services import GameService


def new_session(target="CRANE", max_attempts=6):
    return GameSession(target_word=target, grid=Grid.empty(max_attempts, len(target)))


def type_keys(session, keys, **kwargs):
    for key in keys:
        session = apply_key(session, key, **kwargs)
    return session


def guess(session, word, **kwargs):
    return type_keys(session, list(word) + ["ENTER"], **kwargs)


@pytest.fixture
def game_service():
    return GameService(WordSource(["CRANE"]), max_attempts=6)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig, game_service=game_service)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app, client):
    return app.socketio.test_client(app, flask_test_client=client)
