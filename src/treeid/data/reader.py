from .tree import TreeBase, Branch, Leaf
from json import load
from os import listdir, path
from typing import Any, Iterator, Callable


def parse_dir(directory: str, strict: bool) -> Iterator[tuple[str, TreeBase[Any]]]:
    for file in sorted(listdir(directory)):
        if not path.isfile(path.join(directory, file)):
            continue
        print(f'Parsing {file}')
        try:
            yield file, parse_file(path.join(directory, file))
        except ValueError as e:
            if strict:
                raise e
            print(f'\tFailed: {e}.')
            continue


def parse_file(filepath: str) -> TreeBase[Any]:
    with open(filepath, 'r') as f:
        return parse_data(load(f))


def parse_data(json: dict) -> TreeBase[Any]:
    return _parse(json, lambda node: _get(node, 'value'))


def parse_annotated(json: dict) -> TreeBase[tuple[Any, int]]:
    def value(node: dict) -> tuple[Any, int]:
        idx = _get(node, 'id')
        if not isinstance(idx, int) or isinstance(idx, bool) or idx < 0:
            raise ValueError(f'Invalid id {idx!r}')
        return _get(node, 'value'), idx
    return _parse(json, value)


def _parse(json: dict, value: Callable[[dict], Any]) -> TreeBase[Any]:
    if not isinstance(json, dict):
        raise ValueError(f'Expected a JSON object, got {type(json).__name__}')
    match _get(json, 'tag'):
        case 'Leaf':
            return Leaf()
        case 'Branch':
            return Branch(
                value=value(json),
                left=_parse(_get(json, 'left'), value),
                right=_parse(_get(json, 'right'), value))
        case tag:
            raise ValueError(f'Unknown tag {tag}')


def _get(json: dict, key: str) -> Any:
    try:
        return json[key]
    except KeyError:
        raise ValueError(f'Missing key {key!r}') from None


def dump_tree(tree: TreeBase[Any]) -> dict:
    return _dump(tree, lambda value: {'value': value})


def dump_annotated(tree: TreeBase[tuple[Any, int]]) -> dict:
    return _dump(tree, lambda pair: {'value': pair[0], 'id': pair[1]})


def dump_paths(tree: TreeBase[tuple[Any, str]]) -> dict:
    return _dump(tree, lambda pair: {'value': pair[0], 'path': pair[1]})


def _dump(tree: TreeBase[Any], fields: Callable[[Any], dict]) -> dict:
    match tree:
        case Branch(value, left, right):
            return {'tag': 'Branch', **fields(value), 'left': _dump(left, fields), 'right': _dump(right, fields)}
        case Leaf():
            return {'tag': 'Leaf'}
        case _:
            raise ValueError(f'Unknown tree node {tree!r}')
