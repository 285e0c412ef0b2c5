from dataclasses import dataclass


@dataclass(frozen=True)
class IntegerValue:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class TextValue:
    value: str

    def __str__(self):
        return self.value


Value = IntegerValue | TextValue


@dataclass(frozen=True)
class Assign:
    name: str
    op: str
    operand: str

    def __str__(self):
        return f"{self.name} {self.op} {self.operand}"


@dataclass(frozen=True)
class Print:
    name: str

    def __str__(self):
        return f"PRINT({self.name})"


@dataclass(frozen=True)
class Repeat:
    """
    FOR <count> <body> ENDFOR, all on one line.
    `body` holds the source of each body statement; each is parsed on its
    first run and the parsed statement is replayed `count` times.
    """

    count: int
    body: tuple[str, ...]

    def __str__(self):
        return f"FOR {self.count} {' ; '.join(self.body)} ENDFOR"


Stmt = Assign | Print | Repeat
