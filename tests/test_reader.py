"""Tests for the JSON tree format."""
import json

import pytest

from treeid.data.tree import Branch, Leaf, annotate, enumerate_paths
from treeid.data.reader import (
    parse_data, parse_annotated, parse_file, parse_dir,
    dump_tree, dump_annotated, dump_paths)


EXAMPLE_JSON = {
    'tag': 'Branch', 'value': 'a',
    'left': {'tag': 'Branch', 'value': 'b', 'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}},
    'right': {'tag': 'Branch', 'value': 'c',
              'left': {'tag': 'Leaf'},
              'right': {'tag': 'Branch', 'value': 'd', 'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}}},
}


def test_parse_example():
    tree = parse_data(EXAMPLE_JSON)
    assert tree == Branch('a', Branch('b', Leaf(), Leaf()), Branch('c', Leaf(), Branch('d', Leaf(), Leaf())))
    assert dump_tree(tree) == EXAMPLE_JSON


def test_parse_leaf():
    assert parse_data({'tag': 'Leaf'}) == Leaf()


def test_values_are_arbitrary_json():
    data = {'tag': 'Branch', 'value': {'x': [1, 2]}, 'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}}
    assert parse_data(data).value == {'x': [1, 2]}


def test_dump_annotated():
    annotated, _ = annotate(parse_data(EXAMPLE_JSON))
    dumped = dump_annotated(annotated)
    assert dumped['id'] == 3
    assert dumped['left']['id'] == 0
    assert dumped['right']['right'] == {'tag': 'Branch', 'value': 'd', 'id': 1,
                                        'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}}
    assert parse_annotated(dumped) == annotated


def test_dump_paths():
    dumped = dump_paths(enumerate_paths(parse_data(EXAMPLE_JSON)))
    assert dumped['path'] == ''
    assert dumped['right']['right']['path'] == 'RR'


@pytest.mark.parametrize('data', [
    {'tag': 'Node'},
    {'value': 1},
    {'tag': 'Branch', 'value': 1, 'left': {'tag': 'Leaf'}},
    {'tag': 'Branch', 'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}},
    {'tag': 'Branch', 'value': 1, 'left': [], 'right': {'tag': 'Leaf'}},
])
def test_malformed_trees_rejected(data):
    with pytest.raises(ValueError):
        parse_data(data)


@pytest.mark.parametrize('idx', [-1, 'x', 1.5, True])
def test_invalid_ids_rejected(idx):
    with pytest.raises(ValueError):
        parse_annotated({'tag': 'Branch', 'value': 1, 'id': idx, 'left': {'tag': 'Leaf'}, 'right': {'tag': 'Leaf'}})


def test_parse_file(tmp_path):
    file = tmp_path / 'tree.json'
    file.write_text(json.dumps(EXAMPLE_JSON))
    assert parse_file(str(file)) == parse_data(EXAMPLE_JSON)


def test_parse_dir_skips_failures(tmp_path, capsys):
    (tmp_path / 'good.json').write_text(json.dumps(EXAMPLE_JSON))
    (tmp_path / 'bad.json').write_text(json.dumps({'tag': 'Nope'}))
    (tmp_path / 'broken.json').write_text('{')
    (tmp_path / 'sub').mkdir()

    parsed = dict(parse_dir(str(tmp_path), strict=False))
    assert list(parsed) == ['good.json']
    assert 'Failed' in capsys.readouterr().out

    with pytest.raises(ValueError):
        list(parse_dir(str(tmp_path), strict=True))
