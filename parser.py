import io
import re
from functools import lru_cache

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from zpm_ast import Assign, Print, Repeat, Stmt
from zpm_errors import MalformedStatement

# One physical line is one statement. Tokens are whitespace separated, so the
# only terminals are "anything but whitespace" plus the few keywords.
grammar = r"""
%import common.WS

TOKEN: /\S+/
PARENS: /\(.*\)/
_FOR: /FOR(?!\S)/
_REST: /.+/

assign: TOKEN TOKEN TOKEN ";"?

print: "PRINT" PARENS ";"?

repeat: _FOR TOKEN body "ENDFOR" _REST?

body: TOKEN*

%ignore WS
"""

count_literal = re.compile(r"[0-9]+")

body_separator = " ; "


class ZpmTransformer(Transformer):
    assign = lambda self, n: Assign(str(n[0]), str(n[1]), str(n[2]).removesuffix(";"))
    # everything between the outer parentheses is the name
    print = lambda self, n: Print(str(n[0])[1:-1].strip())
    body = lambda self, n: [str(t) for t in n]
    # whatever follows the first ENDFOR is ignored
    repeat = lambda self, n: (str(n[0]), n[1])


def split_body(tokens):
    """Re-join the body tokens and cut them into statement sources on " ; "."""
    return [s.strip() for s in " ".join(tokens).split(body_separator)]


class ZpmParser:
    def __init__(self):
        self.lark = Lark(
            grammar,
            parser="lalr",
            start=["assign", "print", "repeat"],
            transformer=ZpmTransformer(),
        )

    # statements are immutable, so a FOR body is parsed once however often it runs
    @lru_cache(maxsize=None)
    def parse_line(self, line: str) -> Stmt:
        line = line.strip()
        try:
            if line.startswith("FOR"):
                count, body = self.lark.parse(line, start="repeat")
                return self.parse_repeat(line, count, body)
            if line.startswith("PRINT"):
                return self.lark.parse(line, start="print")
            return self.lark.parse(line, start="assign")
        except UnexpectedInput as e:
            raise MalformedStatement(line) from e

    def parse_repeat(self, line, count, body) -> Repeat:
        if count_literal.fullmatch(count) is None:
            raise MalformedStatement(line)
        # body statements are parsed when they first run, so FOR 0 never looks at them
        return Repeat(int(count), tuple(split_body(body)))

    def parse(self, source: str) -> list[Stmt]:
        return [self.parse_line(line.rstrip("\r\n")) for line in io.StringIO(source, newline=None)]
