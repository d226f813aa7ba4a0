import os
import sys
import random
import tempfile
import pytest

# Ensure the project root (containing the `wordgame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep test logs out of the working tree
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordgame-test-logs'))

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.models.game import GameState, GameStatus, TwistAvailability
from wordgame.services.dictionary_validator import WordCheck, WordStatus
from wordgame.services.game_service import initialize_game_service
from wordgame.services.game_store import InMemoryGameStateStore
from wordgame.services.profanity_filter import ProfanityFilter
from wordgame.services.turn_resolver import TurnResolver


class FakeDictionary:
    """Dictionary double: every word is real unless listed otherwise."""

    def __init__(self, invalid=(), unavailable=()):
        self.invalid = set(invalid)
        self.unavailable = set(unavailable)
        self.calls = []

    def check(self, word):
        if word in self.invalid:
            return WordCheck(word, WordStatus.INVALID, f'Word "{word}" is not a real word.')
        if word in self.unavailable:
            return WordCheck(word, WordStatus.UNAVAILABLE, f'Timed out checking "{word}".')
        return WordCheck(word, WordStatus.VALID)

    def check_words(self, words):
        self.calls.append(list(words))
        return [self.check(word) for word in words]


BLOCKED_WORDS = ['darn', 'heck']


@pytest.fixture()
def store():
    return InMemoryGameStateStore()


@pytest.fixture()
def dictionary():
    return FakeDictionary()


@pytest.fixture()
def profanity_filter():
    return ProfanityFilter(BLOCKED_WORDS)


@pytest.fixture()
def resolver(store, dictionary, profanity_filter):
    return TurnResolver(store=store, dictionary=dictionary, profanity_filter=profanity_filter)


@pytest.fixture()
def make_game(store):
    """Seed a game into the store and return it."""
    counter = {'n': 0}

    def _make(current_words=('cat',), target_words=('rat',), status=GameStatus.ACTIVE,
              twists=None, turn_number=1):
        counter['n'] += 1
        state = GameState(
            game_id=f'game-{counter["n"]}',
            player_ids=['player_001'],
            target_words=list(target_words),
            current_words=list(current_words),
            turn_number=turn_number,
            game_status=status,
            available_twists=list(twists or []),
        )
        store.upsert(state)
        return state

    return _make


@pytest.fixture()
def limited_twists():
    return [
        TwistAvailability('LETTER_TWIST', 'Letter Twist', None),
        TwistAvailability('WORD_TWIST', 'Word Twist', 1),
        TwistAvailability('SPLIT', 'Split', 1),
        TwistAvailability('MERGE', 'Merge', 0),
    ]


@pytest.fixture()
def game_service(store, dictionary, profanity_filter):
    return initialize_game_service(
        TestingConfig,
        store=store,
        dictionary=dictionary,
        profanity_filter=profanity_filter,
        word_list=['cat', 'rat'],
        rng=random.Random(7),
    )


@pytest.fixture()
def flask_app(game_service):
    application, _ = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
