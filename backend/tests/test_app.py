"""
Tests for the Flask score API.

The data access functions are patched where app.py imported them, so no
database is needed.
"""

import sys
import os
from datetime import datetime
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import app as score_app  # noqa: E402
from domain.errors import PersistenceUnavailable  # noqa: E402


@pytest.fixture
def client():
    score_app.app.config['TESTING'] = True
    with score_app.app.test_client() as test_client:
        yield test_client


class TestSaveScore:
    """Tests for POST /api/save-score."""

    @patch('app.save_score')
    @patch('app.ensure_score_table')
    def test_valid_submission(self, mock_ensure, mock_save, client):
        response = client.post('/api/save-score', json={'playerName': 'Al', 'score': 1000})

        assert response.status_code == 200
        assert response.get_json() == {'success': True, 'message': 'Score saved successfully'}
        mock_ensure.assert_called_once()
        mock_save.assert_called_once_with('Al', 1000)

    @pytest.mark.parametrize('payload,message', [
        ({'playerName': 'A', 'score': 10}, 'Player name must be between 2 and 20 characters'),
        ({'playerName': 'Al', 'score': 1001}, 'Score must be between 0 and 1000'),
        ({'score': 10}, 'Invalid input'),
        ({'playerName': 'Al', 'score': 'ten'}, 'Invalid input'),
    ])
    @patch('app.ensure_score_table')
    def test_invalid_submission_is_400(self, mock_ensure, payload, message, client):
        with patch('data_access.score_queries._score_repo') as mock_repo:
            response = client.post('/api/save-score', json=payload)

            assert response.status_code == 400
            assert message in response.get_json()['error']
            mock_repo.insert_score.assert_not_called()

    @patch('app.ensure_score_table')
    def test_non_json_body_is_400(self, mock_ensure, client):
        with patch('data_access.score_queries._score_repo') as mock_repo:
            response = client.post('/api/save-score', data='nonsense', content_type='text/plain')

            assert response.status_code == 400
            mock_repo.insert_score.assert_not_called()

    @patch('app.save_score', side_effect=PersistenceUnavailable('Database unavailable: down'))
    @patch('app.ensure_score_table')
    def test_database_failure_is_500(self, mock_ensure, mock_save, client):
        response = client.post('/api/save-score', json={'playerName': 'Al', 'score': 5})

        assert response.status_code == 500
        body = response.get_json()
        assert body['error'] == 'Failed to save score'
        assert 'down' in body['details']

    @patch('app.ensure_score_table', side_effect=RuntimeError('no connection'))
    def test_schema_failure_is_500(self, mock_ensure, client):
        response = client.post('/api/save-score', json={'playerName': 'Al', 'score': 5})
        assert response.status_code == 500


class TestLeaderboard:
    """Tests for GET /api/save-score."""

    @patch('app.get_leaderboard')
    @patch('app.ensure_score_table')
    def test_returns_rows(self, mock_ensure, mock_leaderboard, client):
        mock_leaderboard.return_value = [
            {'player_name': 'b', 'score': 200, 'created_at': datetime(2024, 1, 1, 9, 0)},
            {'player_name': 'c', 'score': 75, 'created_at': datetime(2024, 1, 2, 9, 0)},
            {'player_name': 'a', 'score': 50, 'created_at': None},
        ]

        response = client.get('/api/save-score')

        assert response.status_code == 200
        data = response.get_json()
        assert [row['score'] for row in data] == [200, 75, 50]
        assert data[0] == {'player_name': 'b', 'score': 200, 'created_at': '2024-01-01T09:00:00'}
        assert data[2]['created_at'] is None

    @patch('app.get_leaderboard', side_effect=RuntimeError('db down'))
    @patch('app.ensure_score_table')
    def test_failure_is_500(self, mock_ensure, mock_leaderboard, client):
        response = client.get('/api/save-score')
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to fetch leaderboard'}


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}
