import sys

from interp_zpm import InterpZpm
from zpm_errors import SourceReadFailure, ZpmError

SOURCE_SUFFIX = ".zpm"

usage = f"Usage: zpm <filename{SOURCE_SUFFIX}>"


def read_source(path) -> list[str]:
    # read everything up front: a bad file must not run half a program
    try:
        # only \n, \r and \r\n end a line, unlike str.splitlines
        with open(path, encoding="utf-8", newline=None) as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadFailure(path, e) from e


def run_file(path):
    return InterpZpm().interp(read_source(path))


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or not args[0].endswith(SOURCE_SUFFIX):
        print(usage)
        return 2

    try:
        run_file(args[0])
    except SourceReadFailure as e:
        print(e)
        return 1
    except ZpmError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
