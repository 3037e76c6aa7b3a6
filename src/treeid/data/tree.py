from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Callable
from dataclasses import dataclass

T = TypeVar('T')
S = TypeVar('S')


class TreeBase(ABC, Generic[T]):
    def __init__(self):
        raise ValueError("Can't instantiate abstract class TreeBase")

    @abstractmethod
    def depth(self) -> int: ...

    @abstractmethod
    def size(self) -> int: ...


@dataclass(frozen=True)
class Branch(TreeBase[T]):
    value: T
    left: TreeBase[T]
    right: TreeBase[T]

    def depth(self) -> int: return 1 + max(self.left.depth(), self.right.depth())
    def size(self) -> int: return 1 + self.left.size() + self.right.size()


@dataclass(frozen=True)
class Leaf(TreeBase[T]):
    def depth(self) -> int: return 0
    def size(self) -> int: return 0


Annotated = TreeBase[tuple[T, int]]


def annotate(tree: TreeBase[T], start_id: int = 0) -> tuple[Annotated[T], int]:
    """
    Pairs every branch value with a sequential identifier, assigned in post-order.

    Leaves consume no identifier. A tree with N branches receives the identifiers
    `start_id, ..., start_id + N - 1`, and the returned counter is the next unused one.
    """
    if start_id < 0:
        raise ValueError(f'Identifiers must be non-negative, got start_id={start_id}')

    def go(_tree: TreeBase[T], start: int) -> tuple[Annotated[T], int]:
        match _tree:
            case Leaf():
                return _tree, start
            case Branch(value, left, right):
                new_left, mid = go(left, start)
                new_right, end = go(right, mid)
                return Branch((value, end), new_left, new_right), end + 1
            case _:
                raise ValueError(f'Unknown tree node {_tree!r}')
    return go(tree, start_id)


def annotate_iterative(tree: TreeBase[T], start_id: int = 0) -> tuple[Annotated[T], int]:
    """Same as `annotate`, but with an explicit stack instead of recursion."""
    if start_id < 0:
        raise ValueError(f'Identifiers must be non-negative, got start_id={start_id}')

    counter = start_id
    done: list[Annotated[T]] = []
    # (node, children already on `done`)
    todo: list[tuple[TreeBase[T], bool]] = [(tree, False)]
    while todo:
        node, expanded = todo.pop()
        match node:
            case Leaf():
                done.append(node)
            case Branch(value, _, _) if expanded:
                new_right = done.pop()
                new_left = done.pop()
                done.append(Branch((value, counter), new_left, new_right))
                counter += 1
            case Branch(_, left, right):
                todo.extend(((node, True), (right, False), (left, False)))
            case _:
                raise ValueError(f'Unknown tree node {node!r}')
    return done.pop(), counter


def enumerate_paths(tree: TreeBase[T]) -> TreeBase[tuple[T, str]]:
    """Labels every branch with its route from the root, e.g. 'LR' for the right child of the left child."""
    def go(_tree: TreeBase[T], path: str) -> TreeBase[tuple[T, str]]:
        match _tree:
            case Branch(value, left, right): return Branch((value, path), go(left, path + 'L'), go(right, path + 'R'))
            case Leaf(): return _tree
            case _: raise ValueError(f'Unknown tree node {_tree!r}')
    return go(tree, '')


def tree_map(f: Callable[[T], S], tree: TreeBase[T]) -> TreeBase[S]:
    match tree:
        case Branch(value, left, right): return Branch(f(value), tree_map(f, left), tree_map(f, right))
        case Leaf(): return tree
        case _: raise ValueError(f'Unknown tree node {tree!r}')


def tree_zip(left: TreeBase[T], right: TreeBase[S]) -> TreeBase[tuple[T, S]]:
    match left, right:
        case Branch(v1, l1, r1), Branch(v2, l2, r2): return Branch((v1, v2), tree_zip(l1, l2), tree_zip(r1, r2))
        case Leaf(), Leaf(): return Leaf()
        case _: raise ValueError('Trees differ in shape')


def flatten(tree: TreeBase[T]) -> list[T]:
    match tree:
        case Branch(value, left, right): return [value, *flatten(left), *flatten(right)]
        case Leaf(): return []
        case _: raise ValueError(f'Unknown tree node {tree!r}')


def identifiers(tree: Annotated[T]) -> list[int]:
    match tree:
        case Branch(tuple((_, int() as idx)), left, right): return [*identifiers(left), *identifiers(right), idx]
        case Branch(value, _, _): raise ValueError(f'Tree is not annotated: branch value {value!r} is not a (value, id) pair')
        case Leaf(): return []
        case _: raise ValueError(f'Unknown tree node {tree!r}')


def strip(tree: TreeBase[tuple[T, S]]) -> TreeBase[T]:
    return tree_map(lambda pair: pair[0], tree)


def depth(tree: TreeBase[T]) -> int: return tree.depth()
def size(tree: TreeBase[T]) -> int: return tree.size()
