import pytest

from wordgame.models.actions import parse_actions
from wordgame.models.errors import IndexOutOfRange, InvalidAction, TwistExhausted
from wordgame.models.game import TwistAvailability
from wordgame.services.action_simulator import simulate
from wordgame.services.twist_ledger import TwistLedger


def letter(index, *twists):
    return {'type': 'LETTER_TWIST', 'targetWordIndex': index, 'details': {'twists': list(twists)}}


def add(letter_, position):
    return {'type': 'ADD', 'letter': letter_, 'position': position}


def drop(position):
    return {'type': 'DROP', 'position': position}


def swap(position, from_, to):
    return {'type': 'SWAP', 'position': position, 'from': from_, 'to': to}


def run(words, raw_actions, ledger=None):
    return simulate(words, parse_actions(raw_actions), ledger or TwistLedger())


def test_swap_replaces_matching_letter():
    assert run(['cat'], [letter(0, swap(0, 'c', 'r'))]) == ['rat']


def test_add_inserts_letter():
    assert run(['cat'], [letter(0, add('r', 1))]) == ['crat']
    assert run(['cat'], [letter(0, add('s', 3))]) == ['cats']


def test_inline_letter_twist_details():
    actions = [{'type': 'LETTER_TWIST', 'targetWordIndex': 0, 'details': {'type': 'DROP', 'position': 0}}]
    assert run(['scat'], actions) == ['cat']


def test_actions_apply_sequentially():
    actions = [
        letter(0, swap(0, 'c', 'r')),
        letter(0, add('s', 3)),
    ]
    assert run(['cat'], actions) == ['rats']


def test_twists_within_one_action_apply_in_order():
    assert run(['cat'], [letter(0, add('s', 0), swap(1, 'c', 'h'))]) == ['shat']


@pytest.mark.parametrize('word', ['cat', 'sunset', 'a', 'bread'])
@pytest.mark.parametrize('character', ['x', 'e'])
def test_add_then_drop_at_same_position_restores_word(word, character):
    for position in range(len(word) + 1):
        actions = [letter(0, add(character, position)), letter(0, drop(position))]
        assert run([word], actions) == [word]


@pytest.mark.parametrize('word', ['cat', 'sunset', 'bread'])
def test_swap_with_wrong_from_letter_always_fails(word):
    for position, actual in enumerate(word):
        wrong = 'z' if actual != 'z' else 'y'
        with pytest.raises(InvalidAction):
            run([word], [letter(0, swap(position, wrong, 'q'))])


def test_simulation_is_deterministic():
    actions = parse_actions([
        {'type': 'SPLIT', 'targetWordIndex': 0, 'details': {'splitIndex': 3}},
        letter(1, swap(0, 's', 'b')),
        {'type': 'MERGE', 'details': {'mergeIndices': [1, 0]}},
    ])
    first = simulate(['sunset'], actions, TwistLedger())
    second = simulate(['sunset'], actions, TwistLedger())
    assert first == second == ['betsun']


def test_split_replaces_word_with_two_halves():
    actions = [{'type': 'SPLIT', 'targetWordIndex': 1, 'details': {'splitIndex': 3}}]
    assert run(['a', 'sunset', 'b'], actions) == ['a', 'sun', 'set', 'b']


@pytest.mark.parametrize('split_index', [0, 3, -1, 7])
def test_split_index_must_be_interior(split_index):
    with pytest.raises(InvalidAction):
        run(['cat'], [{'type': 'SPLIT', 'targetWordIndex': 0, 'details': {'splitIndex': split_index}}])


def test_merge_concatenates_in_given_order_at_lowest_index():
    assert run(['sun', 'set'], [{'type': 'MERGE', 'details': {'mergeIndices': [0, 1]}}]) == ['sunset']
    assert run(['a', 'set', 'b', 'sun'], [{'type': 'MERGE', 'details': {'mergeIndices': [3, 1]}}]) == [
        'a', 'sunset', 'b'
    ]


def test_merge_shifts_later_indices_for_following_actions():
    actions = [
        {'type': 'MERGE', 'details': {'mergeIndices': [0, 1]}},
        letter(1, swap(0, 'd', 'm')),
    ]
    assert run(['sun', 'set', 'dog'], actions) == ['sunset', 'mog']


def test_merge_rejects_duplicates_and_single_index():
    with pytest.raises(InvalidAction):
        run(['sun', 'set'], [{'type': 'MERGE', 'details': {'mergeIndices': [0, 0]}}])
    with pytest.raises(InvalidAction):
        run(['sun', 'set'], [{'type': 'MERGE', 'details': {'mergeIndices': [0]}}])


def test_merge_out_of_range_index():
    with pytest.raises(IndexOutOfRange):
        run(['sun', 'set'], [{'type': 'MERGE', 'details': {'mergeIndices': [0, 2]}}])


def test_word_twist_replaces_word():
    actions = [{'type': 'WORD_TWIST', 'targetWordIndex': 0, 'details': {'targetSynonymAntonym': 'cold'}}]
    assert run(['hot'], actions) == ['cold']


def test_target_word_index_out_of_range():
    with pytest.raises(IndexOutOfRange) as exc:
        run(['cat'], [letter(1, add('s', 0))])
    assert exc.value.action_index == 0
    assert exc.value.word_index == 1


def test_later_action_sees_earlier_result_for_index_checks():
    actions = [
        {'type': 'MERGE', 'details': {'mergeIndices': [0, 1]}},
        letter(1, add('s', 0)),
    ]
    with pytest.raises(IndexOutOfRange) as exc:
        run(['sun', 'set'], actions)
    assert exc.value.action_index == 1


def test_add_position_out_of_bounds():
    with pytest.raises(InvalidAction):
        run(['cat'], [letter(0, add('s', 4))])


def test_drop_position_out_of_bounds():
    with pytest.raises(InvalidAction):
        run(['cat'], [letter(0, drop(3))])


def test_drop_emptying_word_is_invalid():
    with pytest.raises(InvalidAction):
        run(['a'], [letter(0, drop(0))])


def test_exhausted_twist_is_rejected():
    ledger = TwistLedger([TwistAvailability('SPLIT', 'Split', 1)])
    actions = [
        {'type': 'SPLIT', 'targetWordIndex': 0, 'details': {'splitIndex': 3}},
        {'type': 'SPLIT', 'targetWordIndex': 1, 'details': {'splitIndex': 1}},
    ]
    with pytest.raises(TwistExhausted) as exc:
        run(['sunset'], actions, ledger)
    assert exc.value.twist_id == 'SPLIT'
    assert exc.value.action_index == 1


def test_ledger_charged_once_per_action():
    ledger = TwistLedger([TwistAvailability('LETTER_TWIST', 'Letter Twist', 2)])
    run(['cat'], [letter(0, swap(0, 'c', 'r'), add('s', 3))], ledger)
    assert ledger.remaining('LETTER_TWIST') == 1


def test_failed_precondition_does_not_charge_ledger():
    ledger = TwistLedger([TwistAvailability('LETTER_TWIST', 'Letter Twist', 1)])
    with pytest.raises(InvalidAction):
        run(['cat'], [letter(0, swap(0, 'x', 'r'))], ledger)
    assert ledger.remaining('LETTER_TWIST') == 1


def test_inputs_are_not_mutated():
    words = ['sun', 'set']
    run(words, [{'type': 'MERGE', 'details': {'mergeIndices': [0, 1]}}])
    assert words == ['sun', 'set']
