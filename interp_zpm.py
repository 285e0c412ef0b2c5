from parser import ZpmParser
from utils import add64, in_int64, is_int_literal, mul64, sub64
from zpm_ast import Assign, IntegerValue, Print, Repeat, TextValue, Value
from zpm_errors import (
    InvalidOperand,
    TypeMismatch,
    UninitializedVariable,
    UnsupportedOperator,
    UnsupportedTextOperation,
)
from zpm_store import VariableStore

compound_ops = {"+=": add64, "-=": sub64, "*=": mul64}


class InterpZpm:
    def __init__(self, parser: ZpmParser | None = None):
        self.parser = parser or ZpmParser()

    def resolve(self, token: str, store: VariableStore) -> Value:
        # literals win over variables of the same name
        if is_int_literal(token):
            v = int(token)
            if not in_int64(v):
                raise InvalidOperand(token, "Integer literal out of range")
            return IntegerValue(v)
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            return TextValue(token[1:-1])
        if token in store:
            return store.get(token)
        raise InvalidOperand(token)

    def interp_compound(self, op, current: Value, value: Value) -> Value:
        match (current, value):
            case (IntegerValue(l), IntegerValue(r)):
                return IntegerValue(compound_ops[op](l, r))
            case (TextValue(l), TextValue(r)) if op == "+=":
                return TextValue(l + r)
            case (TextValue(), TextValue()):
                raise UnsupportedTextOperation(op, current, value)
            case _:
                raise TypeMismatch(op, current, value)

    def interp_stmt(self, s, store: VariableStore):
        match s:
            case Assign(name, "=", operand):
                store.define(name, self.resolve(operand, store))
            case Assign(name, op, operand) if op in compound_ops:
                if name not in store:
                    raise UninitializedVariable(name)
                current = store.get(name)
                value = self.resolve(operand, store)
                store.define(name, self.interp_compound(op, current, value))
            case Assign(_, op, _):
                raise UnsupportedOperator(op)
            case Print(name):
                print(f"{name} = {store.get(name)}", end="\n")
            case Repeat(count, body):
                for _ in range(count):
                    for src in body:
                        self.interp_line(src, store)
            case _:
                raise Exception("error in interp_stmt, unexpected " + repr(s))

    def interp_stmts(self, ss, store: VariableStore):
        for s in ss:
            self.interp_stmt(s, store)

    def interp_line(self, line: str, store: VariableStore):
        self.interp_stmt(self.parser.parse_line(line), store)

    def interp(self, lines, store: VariableStore | None = None) -> VariableStore:
        """
        Runs the program one line at a time against `store` (a fresh one by default).
        Each line is parsed only once the previous one has executed, so the
        first error stops the run with earlier output already printed.
        """
        store = store if store is not None else VariableStore()
        for line in lines:
            self.interp_line(line, store)
        return store
