import pytest

from app import create_app
from utils.storage import MemStorage


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def app(storage):
    return create_app('testing', storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def portfolio_payload():
    return {
        'name': 'Ada',
        'shortBio': 'Engineer',
        'projects': [{'title': 'X', 'description': 'Y'}],
        'socialMedia': [],
    }


@pytest.fixture
def full_portfolio_payload():
    return {
        'name': 'Ada Lovelace',
        'shortBio': 'Analyst and metaphysician',
        'fullBio': 'Wrote the first published algorithm for the Analytical Engine.',
        'profilePicture': 'https://example.com/ada.png',
        'skills': 'Mathematics, Poetry, Algorithms',
        'interests': 'Engines,  Music,',
        'projects': [
            {
                'title': 'Note G',
                'description': 'Bernoulli numbers on the Analytical Engine',
                'image': 'https://example.com/note-g.png',
                'github': 'https://github.com/ada/note-g',
            },
            {'title': 'Translation', 'description': 'Menabrea memoir', 'image': '', 'github': ''},
        ],
        'socialMedia': [
            {'name': 'GitHub', 'url': 'https://github.com/ada'},
            {'name': 'Website', 'url': 'http://ada.example.org/about'},
        ],
        'contactEmail': 'ada@example.com',
    }
