import sys

from interp_zpm import InterpZpm
from parser import ZpmParser
from zpm import read_source


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "examples/loops.zpm"
    lines = read_source(path)
    print("\n".join(lines))

    zp = ZpmParser()
    stmts = [zp.parse_line(line) for line in lines]
    print("statements:")
    for s in stmts:
        print("\t", repr(s))
    print("source:\n>>>>>\n" + "\n".join(map(str, stmts)), "\n<<<<<\n")

    print("execution:")
    store = InterpZpm().interp(lines)
    print("\nstore:\t", store.snapshot())


if __name__ == "__main__":
    main()
