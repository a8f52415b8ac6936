from enum import Enum
from uuid import UUID

import pytest

from casepaths import paths
from casepaths.casepath import compact_map
from casepaths.fn import Just, Left, Nothing, Right


class Color(Enum):
    RED = 1
    GREEN = 2


DEADBEEF = UUID('deadbeef-dead-beef-dead-beefdeadbeef')


@pytest.mark.parametrize(
    ('path', 'root', 'expected'),
    (
        pytest.param(paths.int_from_string, '42', Just(42), id='Int'),
        pytest.param(paths.int_from_string, '-7', Just(-7), id='Negative int'),
        pytest.param(paths.int_from_string, 'forty-two', Nothing, id='Not an int'),
        pytest.param(paths.int_from_string, '007', Nothing, id='Non canonical int'),
        pytest.param(paths.uuid_from_string, str(DEADBEEF), Just(DEADBEEF), id='UUID'),
        pytest.param(paths.uuid_from_string, 'deadbeef', Nothing, id='Not a UUID'),
        pytest.param(paths.literal('yes'), 'yes', Just(()), id='Literal'),
        pytest.param(paths.literal('yes'), 'no', Nothing, id='Other literal'),
        pytest.param(paths.first, [3, 1, 2], Just(3), id='First'),
        pytest.param(paths.first, [], Nothing, id='First of empty'),
        pytest.param(paths.first_where(lambda n: n % 2 == 0), [3, 1, 2], Just(2), id='First even'),
        pytest.param(paths.first_where(lambda n: n > 9), [3, 1, 2], Nothing, id='No match'),
        pytest.param(paths.key('a'), {'a': None}, Just(None), id='Key'),
        pytest.param(paths.key('b'), {'a': 1}, Nothing, id='Missing key'),
        pytest.param(paths.raw_value(Color), 2, Just(Color.GREEN), id='Raw value'),
        pytest.param(paths.raw_value(Color), 3, Nothing, id='Unknown raw value'),
        pytest.param(paths.success, Right(1), Just(1), id='Success'),
        pytest.param(paths.success, Left('boom'), Nothing, id='Not a success'),
        pytest.param(paths.failure, Left('boom'), Just('boom'), id='Failure'),
    ),
)
def test_extract(path, root, expected) -> None:
    assert path.extract(root) == expected


@pytest.mark.parametrize(
    ('path', 'value', 'expected'),
    (
        pytest.param(paths.int_from_string, 42, '42', id='Int'),
        pytest.param(paths.uuid_from_string, DEADBEEF, str(DEADBEEF), id='UUID'),
        pytest.param(paths.literal('yes'), (), 'yes', id='Literal'),
        pytest.param(paths.first, 3, [3], id='First'),
        pytest.param(paths.first_where(bool), 3, [3], id='First where'),
        pytest.param(paths.key('a'), 1, {'a': 1}, id='Key'),
        pytest.param(paths.raw_value(Color), Color.RED, 1, id='Raw value'),
        pytest.param(paths.left, 'boom', Left('boom'), id='Left'),
        pytest.param(paths.right, 1, Right(1), id='Right'),
    ),
)
def test_embed(path, value, expected) -> None:
    assert path.embed(value) == expected
    assert path.extract(path.embed(value)) == Just(value)


def test_composes_with_other_paths() -> None:
    # Arrange
    port = paths.key('port') >> paths.int_from_string
    configs = [{'port': '8080'}, {'host': 'localhost'}, {'port': 'http'}]

    # Act
    ports = list(compact_map(port, configs))

    # Assert
    assert ports == [8080]
    assert port.embed(443) == {'port': '443'}


def test_results_split_by_case() -> None:
    results = [Right(1), Left('boom'), Right(2)]

    assert list(compact_map(paths.success, results)) == [1, 2]
    assert list(compact_map(paths.failure, results)) == ['boom']


@pytest.mark.parametrize('string', ('yes', 'no', ''))
def test_literal_round_trips(string: str) -> None:
    # Arrange
    yes = paths.literal('yes')

    # Act
    match = yes.extract(string)

    # Assert
    assert yes.extract(yes.embed(())) == Just(())
    if match.is_present():
        assert yes.embed(match.value) == string
    else:
        assert string != 'yes'
