from wordgame.models.game import GameStatus

SWAP_C_TO_R = {
    'type': 'LETTER_TWIST', 'targetWordIndex': 0,
    'details': {'twists': [{'type': 'SWAP', 'position': 0, 'from': 'c', 'to': 'r'}]}
}


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert b'running' in res.data


def test_create_game(client):
    res = client.post('/api/games')
    assert res.status_code == 201
    data = res.get_json()
    assert data['gameStatus'] == 'active'
    assert data['turnNumber'] == 1
    assert data['history'] == []
    assert len(data['currentWords']) == 1
    assert len(data['targetWords']) == 1
    assert data['currentWords'] != data['targetWords']
    assert {t['twistId'] for t in data['availableTwists']} == {'LETTER_TWIST', 'WORD_TWIST', 'SPLIT', 'MERGE'}


def test_get_game(client):
    game_id = client.post('/api/games').get_json()['gameId']
    res = client.get(f'/api/games/{game_id}')
    assert res.status_code == 200
    assert res.get_json()['gameId'] == game_id


def test_get_unknown_game(client):
    res = client.get('/api/games/nope')
    assert res.status_code == 404
    assert res.get_json()['errorMessage']['errorCode'] == 'GAME_NOT_FOUND'


def test_submit_valid_turn(client, make_game):
    game = make_game(current_words=['cat'], target_words=['dog'])

    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [SWAP_C_TO_R], 'finalWords': ['rat']})

    assert res.status_code == 200
    data = res.get_json()
    assert data['isValid'] is True
    assert data['updatedGameState']['currentWords'] == ['rat']
    assert data['updatedGameState']['turnNumber'] == 2
    assert data['updatedGameState']['history'][0]['turnNumber'] == 1


def test_submit_winning_turn(client, make_game):
    game = make_game(current_words=['sun', 'set'], target_words=['sunset'])

    res = client.post(f'/api/games/{game.game_id}/turns', json={
        'actions': [{'type': 'MERGE', 'details': {'mergeIndices': [0, 1]}}],
        'finalWords': ['sunset'],
    })

    assert res.status_code == 200
    assert res.get_json()['updatedGameState']['gameStatus'] == GameStatus.COMPLETED.value


def test_turn_for_unknown_game(client):
    res = client.post('/api/games/nope/turns', json={'actions': [], 'finalWords': ['cat']})
    assert res.status_code == 404
    body = res.get_json()
    assert body['isValid'] is False
    assert body['errorMessage']['errorCode'] == 'GAME_NOT_FOUND'


def test_malformed_turn_body(client, make_game):
    game = make_game()
    res = client.post(f'/api/games/{game.game_id}/turns', data='not json', content_type='application/json')
    assert res.status_code == 400
    assert res.get_json()['errorMessage']['errorCode'] == 'INVALID_INPUT'


def test_simulation_mismatch_response(client, make_game):
    game = make_game(current_words=['cat'])
    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [], 'finalWords': ['zzz']})
    assert res.status_code == 400
    assert res.get_json()['errorMessage']['errorCode'] == 'SIMULATION_MISMATCH'

    state = client.get(f'/api/games/{game.game_id}').get_json()
    assert state['turnNumber'] == 1
    assert state['currentWords'] == ['cat']


def test_invalid_word_response_names_word(client, make_game, dictionary):
    dictionary.invalid.add('cat')
    game = make_game(current_words=['cat'])

    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [], 'finalWords': ['cat']})

    assert res.status_code == 400
    error = res.get_json()['errorMessage']
    assert error['errorCode'] == 'INVALID_WORD'
    assert error['offendingWord'] == 'cat'


def test_profanity_response(client, make_game):
    game = make_game(current_words=['darn'])
    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [], 'finalWords': ['darn']})
    assert res.status_code == 400
    error = res.get_json()['errorMessage']
    assert error['errorCode'] == 'PROFANITY_DETECTED'
    assert error['offendingWord'] == 'darn'


def test_validator_outage_is_503(client, make_game, dictionary):
    dictionary.unavailable.add('cat')
    game = make_game(current_words=['cat'])
    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [], 'finalWords': ['cat']})
    assert res.status_code == 503
    assert res.get_json()['errorMessage']['errorCode'] == 'VALIDATOR_UNAVAILABLE'


def test_turn_on_completed_game(client, make_game):
    game = make_game(current_words=['rat'], target_words=['rat'], status=GameStatus.COMPLETED)
    res = client.post(f'/api/games/{game.game_id}/turns', json={'actions': [], 'finalWords': ['rat']})
    assert res.status_code == 400
    assert res.get_json()['errorMessage']['errorCode'] == 'GAME_NOT_ACTIVE'


def test_forfeit(client, make_game):
    game = make_game()
    res = client.post(f'/api/games/{game.game_id}/forfeit')
    assert res.status_code == 200
    assert res.get_json()['gameStatus'] == 'failed'

    res = client.post(f'/api/games/{game.game_id}/forfeit')
    assert res.status_code == 400


def test_health(client):
    res = client.get('/api/health')
    assert res.status_code == 200
    data = res.get_json()
    assert data['status'] == 'healthy'
    assert data['word_count'] == 2
