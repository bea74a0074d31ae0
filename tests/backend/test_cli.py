import json
import logging

import pytest
import yaml

from leafwalker_lib.cli import main, parse_key_path, parse_value, render


DOC = """\
a: hash
or:
  - array
  - ref
with:
  arbitrary: nesting
"""


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    # keep a stray ./leafwalker.yml out of the tests and undo logging setup
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def doc(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text(DOC, encoding='utf-8')
    return p


def _load(p):
    return yaml.safe_load(p.read_text(encoding='utf-8'))


def test_parse_helpers():
    assert parse_key_path('', '.') == []
    assert parse_key_path('or.0', '.') == ['or', '0']
    assert parse_key_path('a/b', '/') == ['a', 'b']
    assert parse_value('42') == 42
    assert parse_value('text') == 'text'
    assert parse_value('[1, 2]') == [1, 2]
    assert parse_value('a: b: c') == 'a: b: c'
    assert render('x') == 'x'
    assert render(None) == 'null'
    assert render(['a']) == '["a"]'


def test_each(doc, capsys):
    assert main(['each', str(doc)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ['a : hash', 'or 0 : array', 'or 1 : ref', 'with arbitrary : nesting']


def test_keys_and_values(doc, capsys):
    assert main(['keys', str(doc)]) == 0
    assert capsys.readouterr().out.splitlines() == ['a', 'or.0', 'or.1', 'with.arbitrary']
    assert main(['--separator', '/', 'keys', str(doc)]) == 0
    assert capsys.readouterr().out.splitlines() == ['a', 'or/0', 'or/1', 'with/arbitrary']
    assert main(['values', str(doc)]) == 0
    assert capsys.readouterr().out.splitlines() == ['hash', 'array', 'ref', 'nesting']


def test_min_depth_option(doc, capsys):
    assert main(['--min-depth', '2', 'values', str(doc)]) == 0
    assert capsys.readouterr().out.splitlines() == ['array', 'ref', 'nesting']


def test_config_file_in_working_directory(doc, tmp_path, capsys):
    (tmp_path / 'leafwalker.yml').write_text("separator: ':'\nmin_depth: 2\n", encoding='utf-8')
    assert main(['keys', str(doc)]) == 0
    assert capsys.readouterr().out.splitlines() == ['or:0', 'or:1', 'with:arbitrary']


def test_fetch(doc, capsys):
    assert main(['fetch', str(doc), 'or.1']) == 0
    assert capsys.readouterr().out.strip() == 'ref'
    assert main(['fetch', str(doc), 'or']) == 0
    assert json.loads(capsys.readouterr().out) == ['array', 'ref']


def test_fetch_through_leaf_is_error(doc, capsys):
    assert main(['fetch', str(doc), 'a.b']) == 2
    assert 'Error:' in capsys.readouterr().err


def test_store_writes_document(doc):
    assert main(['store', str(doc), 'with.arbitrary', '42']) == 0
    assert main(['store', str(doc), 'or.2', 'more']) == 0
    data = _load(doc)
    assert data['with']['arbitrary'] == 42
    assert data['or'] == ['array', 'ref', 'more']
    assert list(data) == ['a', 'or', 'with']


def test_store_refuses_to_autovivify(doc, capsys):
    before = doc.read_text(encoding='utf-8')
    assert main(['store', str(doc), 'x.y', '1']) == 2
    assert 'autovivify' in capsys.readouterr().err
    assert doc.read_text(encoding='utf-8') == before


def test_delete(doc, capsys):
    assert main(['delete', str(doc), 'a']) == 0
    assert capsys.readouterr().out.strip() == 'hash'
    assert 'a' not in _load(doc)
    assert main(['delete', str(doc), 'a']) == 1


def test_delete_from_sequence_is_error(doc, capsys):
    assert main(['delete', str(doc), 'or.0']) == 2
    assert 'sequence' in capsys.readouterr().err
    assert _load(doc)['or'] == ['array', 'ref']


def test_exists(doc):
    assert main(['exists', str(doc), 'or.1']) == 0
    assert main(['exists', str(doc), 'or.5']) == 1
    assert main(['exists', str(doc), 'x.y.z']) == 1
    assert main(['exists', str(doc), '']) == 0


def test_json_document_round_trip(tmp_path, capsys):
    p = tmp_path / 'doc.json'
    p.write_text(json.dumps([{'foo': 'bar'}]), encoding='utf-8')
    assert main(['fetch', str(p), '0.foo']) == 0
    assert capsys.readouterr().out.strip() == 'bar'
    assert main(['store', str(p), '0.foo', 'baz']) == 0
    assert json.loads(p.read_text(encoding='utf-8')) == [{'foo': 'baz'}]


def test_missing_document(tmp_path, capsys):
    assert main(['each', str(tmp_path / 'absent.yml')]) == 2
    assert 'not found' in capsys.readouterr().err


def test_unparseable_document(tmp_path, capsys):
    p = tmp_path / 'bad.json'
    p.write_text('{not json', encoding='utf-8')
    assert main(['each', str(p)]) == 2
    assert 'Cannot parse' in capsys.readouterr().err


def test_store_value_the_format_cannot_hold(tmp_path, capsys):
    p = tmp_path / 'd.json'
    p.write_text('{"a": 1}', encoding='utf-8')
    # a bare date parses as datetime.date, which JSON cannot represent
    assert main(['store', str(p), 'a', '2020-01-01']) == 2
    assert 'cannot write' in capsys.readouterr().err
    assert json.loads(p.read_text(encoding='utf-8')) == {'a': 1}
    assert sorted(f.name for f in tmp_path.iterdir()) == ['d.json']
