def main(
    files: list[str],
    start_id: int,
    policy: str,
    out: str | None,
    log_path: str | None,
    continue_ids: bool,
    strict: bool = False,
):
    import sys
    from json import dumps
    from os import makedirs, path
    from tqdm import tqdm
    from .utils import Logger, annotate_with, write_json, output_name
    from ..data.reader import parse_file, parse_dir

    def read(file: str):
        if path.isdir(file):
            yield from parse_dir(file, strict=strict)
            return
        try:
            yield path.basename(file), parse_file(file)
        except ValueError as e:
            if strict:
                raise e
            print(f'{file}\n\tFailed: {e}.')

    stdout = sys.stdout
    if log_path is not None:
        sys.stdout = Logger(stdout, log_path)

    try:
        if out is not None:
            makedirs(out, exist_ok=True)

        next_id, count, written = start_id, 0, set()
        for file in (tqdm(files) if out is not None else files):
            for name, tree in read(file):
                response = annotate_with(
                    tree,
                    start_id=next_id if continue_ids else start_id,
                    policy=policy)
                next_id, count = response.next_id, count + 1
                if out is None:
                    print(f'{name} (next id: {response.next_id})')
                    print(dumps(response.tree, indent=4, ensure_ascii=False))
                else:
                    name = output_name(name, written)
                    written.add(name)
                    write_json(response.model_dump(), path.join(out, name))
                    print(f'{name} (next id: {response.next_id})')
        print(f'Annotated {count} file(s); next id: {next_id}.')
    finally:
        sys.stdout.flush()
        sys.stdout = stdout
