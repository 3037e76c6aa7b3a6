from argparse import ArgumentParser, ArgumentTypeError


def non_negative(value: str) -> int:
    if (number := int(value)) < 0:
        raise ArgumentTypeError(f'expected a non-negative integer, got {value}')
    return number


def main():
    parser = ArgumentParser(prog='treeid')
    subparsers = parser.add_subparsers(dest='command', required=True)

    annotate_parser = subparsers.add_parser('annotate', help='Assign identifiers to the nodes of JSON tree files')
    annotate_parser.add_argument('-files', type=str, nargs='+', required=True, help='Paths to JSON tree files or directories of them')
    annotate_parser.add_argument('--start_id', type=non_negative, default=0, help='First identifier to assign')
    annotate_parser.add_argument('--policy', type=str, choices=('sequential', 'path'), default='sequential', help='Identifier scheme')
    annotate_parser.add_argument('--out', type=str, default=None, help='Directory to write annotated files to (prints if omitted)')
    annotate_parser.add_argument('--log_path', type=str, default=None, help='Also append all output to this file')
    annotate_parser.add_argument('--continue_ids', action='store_true', help='Keep identifiers unique across all files')
    annotate_parser.add_argument('--strict', action='store_true', help='Stop at the first unreadable file instead of skipping it')

    serve_parser = subparsers.add_parser('serve', help='Start the annotation server')
    serve_parser.add_argument('--host', type=str, default='127.0.0.1', help='Server host address')
    serve_parser.add_argument('--port', type=int, default=5000, help='Server port')

    query_parser = subparsers.add_parser('query', help='Annotate a JSON tree file through a running server')
    query_parser.add_argument('-file', type=str, required=True, help='Path to a JSON tree file')
    query_parser.add_argument('--start_id', type=non_negative, default=0, help='First identifier to assign')
    query_parser.add_argument('--policy', type=str, choices=('sequential', 'path'), default='sequential', help='Identifier scheme')
    query_parser.add_argument('--host', type=str, default='127.0.0.1', help='Server host address')
    query_parser.add_argument('--port', type=int, default=5000, help='Server port')

    args = parser.parse_args()

    match args.command:
        case 'annotate':
            from .annotate import main
            main(
                files=args.files,
                start_id=args.start_id,
                policy=args.policy,
                out=args.out,
                log_path=args.log_path,
                continue_ids=args.continue_ids,
                strict=args.strict,
            )
        case 'serve':
            from .serve import main
            main(
                host=args.host,
                port=args.port
            )
        case 'query':
            from .query import main
            main(
                file=args.file,
                start_id=args.start_id,
                policy=args.policy,
                host=args.host,
                port=args.port,
            )
        case _:
            raise ValueError(f'Unrecognized command {args.command}')
