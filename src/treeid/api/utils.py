from json import load, dumps
from os.path import splitext
from typing import IO, Any

from .schemas import AnnotateResponse, Policy
from ..data.tree import TreeBase, annotate, enumerate_paths
from ..data.reader import dump_annotated, dump_paths


class Logger:
    def __init__(self, stdout: IO[str], log: str):
        self.stdout = stdout
        self.log = log

    def write(self, obj: Any) -> None:
        with open(self.log, 'a') as f:
            f.write(f'{obj}')
        self.stdout.write(f'{obj}')

    def flush(self):
        self.stdout.flush()


def read_json(file):
    with open(file, 'r') as f:
        return load(f)


def write_json(obj: Any, file: str) -> None:
    with open(file, 'w') as f:
        f.write(dumps(obj, indent=4, ensure_ascii=False))


def output_name(name: str, taken: set[str]) -> str:
    stem, ext = splitext(name)
    candidate, i = name, 1
    while candidate in taken:
        candidate, i = f'{stem}.{i}{ext}', i + 1
    return candidate


def annotate_with(tree: TreeBase[Any], start_id: int, policy: Policy) -> AnnotateResponse:
    match policy:
        case 'sequential':
            annotated, next_id = annotate(tree, start_id)
            return AnnotateResponse(tree=dump_annotated(annotated), next_id=next_id)
        case 'path':
            return AnnotateResponse(tree=dump_paths(enumerate_paths(tree)), next_id=start_id)
        case _:
            raise ValueError(f'Unrecognized policy {policy}')
