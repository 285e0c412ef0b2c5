class ZpmError(Exception):
    """Base class of every error that aborts a Z+- run."""


class UninitializedVariable(ZpmError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Variable {name} is not initialized.")


class InvalidOperand(ZpmError):
    def __init__(self, token, reason="Invalid value or uninitialized variable"):
        self.token = token
        super().__init__(f"{reason}: {token}")


class MalformedStatement(InvalidOperand):
    def __init__(self, line):
        super().__init__(line, "Malformed statement")


class TypeMismatch(ZpmError):
    def __init__(self, op, left, right):
        self.op = op
        super().__init__(
            f"Type mismatch for {op}: {type(left).__name__} and {type(right).__name__}"
        )


class UnsupportedOperator(ZpmError):
    def __init__(self, op):
        self.op = op
        super().__init__(f"Unsupported operator: {op}")


class UnsupportedTextOperation(TypeMismatch, UnsupportedOperator):
    # -= and *= between two text values: reported as either kind
    def __init__(self, op, left, right):
        self.op = op
        ZpmError.__init__(self, f"Type mismatch or unsupported operation: {op}")


class SourceReadFailure(ZpmError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Error reading file: {reason}")
