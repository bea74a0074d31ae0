import pytest

from leafwalker_lib.serializer import JSONSerializer, YAMLSerializer, get_serializer, serializer_for_path


def test_get_serializer_by_name():
    assert isinstance(get_serializer('json'), JSONSerializer)
    assert isinstance(get_serializer('YAML'), YAMLSerializer)
    with pytest.raises(ValueError):
        get_serializer('pickle')


@pytest.mark.parametrize("name, expected", [
    ('doc.json', JSONSerializer),
    ('doc.yml', YAMLSerializer),
    ('doc.YAML', YAMLSerializer),
    ('doc.txt', YAMLSerializer),
])
def test_serializer_for_path(tmp_path, name, expected):
    assert isinstance(serializer_for_path(tmp_path / name), expected)


def test_yaml_serializer_keeps_key_order():
    data = {'z': 1, 'a': [1, 2], 'm': {'k': None}}
    text = YAMLSerializer().dump(data).decode('utf-8')
    assert text.index('z:') < text.index('a:') < text.index('m:')
    assert YAMLSerializer().load(text.encode('utf-8')) == data


def test_json_serializer_loads_nested_document():
    doc = b'{"a": "hash", "or": ["array", "ref"], "with": {"arbitrary": "nesting"}}'
    data = JSONSerializer().load(doc)
    assert data['or'] == ['array', 'ref']
    assert JSONSerializer().dump(data).endswith(b"\n")
