import pytest
from planetscale_dialect.client import Client, ExecutedQuery, connect
from planetscale_dialect.client import raise_for_error, response_value
from planetscale_dialect.exceptions import ExecutionError


def test_connect_threads_client_config(options, clients):
    client = connect(options)

    assert clients == [client]
    assert isinstance(client, Client)
    assert client.config['host'] == 'aws.connect.psdb.cloud'


def test_each_connect_builds_new_client(options, clients):
    assert connect(options) is not connect(options)
    assert len(clients) == 2


@pytest.mark.parametrize('response', [
    ExecutedQuery(rows=[]),
    {'rows': [], 'rowsAffected': 0},
    {'rows': [], 'error': None},
])
def test_no_error(response):
    raise_for_error(response)


def test_payload_error_wrapped():
    with pytest.raises(ExecutionError, match='target: test.-.primary: vttablet') as exc_info:
        raise_for_error({'error': {'message': 'target: test.-.primary: vttablet', 'code': 'UNKNOWN'}})
    assert exc_info.value.body['code'] == 'UNKNOWN'


def test_exception_error_reraised():
    error = RuntimeError('old client error')
    with pytest.raises(RuntimeError) as exc_info:
        raise_for_error(ExecutedQuery(error=error))
    assert exc_info.value is error


def test_response_value_reads_both_shapes():
    assert response_value(ExecutedQuery(rows_affected=2), 'rows_affected', 'rowsAffected') == 2
    assert response_value({'rowsAffected': 3}, 'rows_affected', 'rowsAffected') == 3
    assert response_value({}, 'rows', default=[]) == []
