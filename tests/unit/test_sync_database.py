"""
Tests for SyncDatabase forwarding and wrapping, using a recording adapter.
"""
import numpy as np
import pandas as pd
import pytest
from dbfacade import NoRowsError, Row, RowOptions, Rows, SyncAdapter
from dbfacade import SyncDatabase, TypeMismatchError


def test_adapter_protocol(sync_adapter_factory):
    adapter = sync_adapter_factory()
    assert isinstance(adapter, SyncAdapter)
    assert SyncDatabase(adapter).adapter is adapter


def test_query(sync_adapter_factory):
    adapter = sync_adapter_factory(rows=[[1, 'a'], [2, 'b'], [3, 'c']])
    db = SyncDatabase(adapter)

    params = [10]
    rows = db.query('select id, name from t where id < ?', params)

    assert isinstance(rows, Rows)
    assert rows.count() == 3
    assert [row.string(1) for row in rows] == ['a', 'b', 'c']
    assert adapter.calls == [('query', 'select id, name from t where id < ?', [10])]
    assert adapter.calls[0][2] is params


def test_params_default_and_tuple(sync_adapter_factory):
    adapter = sync_adapter_factory(rows=[])
    db = SyncDatabase(adapter)
    db.query('select 1')
    db.query('select ?', (5,))
    assert [call[2] for call in adapter.calls] == [[], [5]]


def test_array_params(sync_adapter_factory):
    """numpy arrays and pandas Series are accepted as parameter sequences"""
    adapter = sync_adapter_factory(rows=[[1]], execute_result=2)
    db = SyncDatabase(adapter)

    assert db.query('select ?, ?', np.array([1, 2])).count() == 1
    assert db.execute('update t set a = ? where b = ?', pd.Series([1, 2])) == 2
    assert [call[2] for call in adapter.calls] == [[1, 2], [1, 2]]
    assert all(isinstance(call[2], list) for call in adapter.calls)


def test_query_one_returns_first_row_only(sync_adapter_factory):
    for data in ([[7, 'x']], [[7, 'x'], [8, 'y']]):
        db = SyncDatabase(sync_adapter_factory(rows=data))
        row = db.query_one('select id, name from t', [])
        assert isinstance(row, Row)
        assert row == Row((7, 'x'))
        assert row.bigint(0) == 7
        assert row.string(1) == 'x'


def test_query_one_empty(sync_adapter_factory):
    db = SyncDatabase(sync_adapter_factory(rows=[]))
    assert db.query_one('select 1', []) is None


def test_query_one_or_raise(sync_adapter_factory):
    db = SyncDatabase(sync_adapter_factory(rows=[[7, 'x']]))
    assert db.query_one_or_raise('select 1', []).number(0) == 7

    db = SyncDatabase(sync_adapter_factory(rows=[]))
    with pytest.raises(NoRowsError) as excinfo:
        db.query_one_or_raise('select * from settings where key = ?', ['theme'])
    assert excinfo.value.statement == 'select * from settings where key = ?'
    assert isinstance(excinfo.value, LookupError)
    assert str(excinfo.value) == 'Query did not return any rows'


def test_execute_passthrough(sync_adapter_factory):
    sentinel = object()
    adapter = sync_adapter_factory(execute_result=sentinel)
    db = SyncDatabase(adapter)

    params = ['Diana', 40]
    result = db.execute('insert into t (name, value) values (?, ?)', params)

    assert result is sentinel
    assert adapter.calls == [('execute', 'insert into t (name, value) values (?, ?)', params)]
    assert adapter.calls[0][2] is params


@pytest.mark.parametrize('method', ['query', 'query_one', 'query_one_or_raise', 'execute'])
def test_adapter_errors_propagate_unchanged(sync_adapter_factory, method):
    error = RuntimeError('connection lost')
    db = SyncDatabase(sync_adapter_factory(error=error))
    with pytest.raises(RuntimeError) as excinfo:
        getattr(db, method)('select 1', [])
    assert excinfo.value is error


def test_options(sync_adapter_factory):
    adapter = sync_adapter_factory(rows=[[1]])
    db = SyncDatabase(adapter, RowOptions(strict_index=False))
    assert db.options == RowOptions(strict_index=False)
    assert db.query_one('select 1').get(3) is None

    strict = SyncDatabase(adapter)
    with pytest.raises(IndexError):
        strict.query_one('select 1').get(3)


def test_type_mismatch_after_query(sync_adapter_factory):
    db = SyncDatabase(sync_adapter_factory(rows=[[1]]))
    row = db.query_one_or_raise('select 1')
    with pytest.raises(TypeMismatchError):
        row.boolean(0)


def test_query_logging(sync_adapter_factory, caplog):
    db = SyncDatabase(sync_adapter_factory(rows=[[1], [2]]))
    db.query('select id from t', [])
    assert 'query SQL:\nselect id from t' in caplog.text
    assert 'query returned 2 row(s)' in caplog.text


if __name__ == '__main__':
    __import__('pytest').main([__file__])
