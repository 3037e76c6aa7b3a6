"""
 Writes random JSON trees to a directory, for trying out `treeid annotate` on a batch of files.
"""
from random import Random

from treeid.data.tree import TreeBase, Branch, Leaf


def random_tree(rng: Random, num_branches: int) -> TreeBase[int]:
    if num_branches == 0:
        return Leaf()
    on_left = rng.randrange(num_branches)
    return Branch(
        value=rng.randrange(100),
        left=random_tree(rng, on_left),
        right=random_tree(rng, num_branches - 1 - on_left))


def main(output_directory: str, num_files: int, max_branches: int, seed: int):
    from os import makedirs, path
    from tqdm import tqdm
    from treeid.api.utils import write_json
    from treeid.data.reader import dump_tree

    makedirs(output_directory, exist_ok=True)
    rng = Random(seed)
    for i in tqdm(range(num_files)):
        tree = random_tree(rng, rng.randint(0, max_branches))
        write_json(dump_tree(tree), path.join(output_directory, f'tree{i}.json'))


def parse_args():
    import argparse
    parser = argparse.ArgumentParser(description='Generate random JSON trees')
    parser.add_argument('-out', type=str, required=True, help='Directory to write trees to')
    parser.add_argument('--num_files', type=int, default=10, help='Number of trees')
    parser.add_argument('--max_branches', type=int, default=20, help='Upper bound on branches per tree')
    parser.add_argument('--seed', type=int, default=0, help='Random seed')
    return parser.parse_args()


if __name__ == '__main__':
    args = parse_args()
    main(output_directory=args.out, num_files=args.num_files, max_branches=args.max_branches, seed=args.seed)
