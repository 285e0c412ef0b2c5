from zpm_ast import Value
from zpm_errors import UninitializedVariable


class VariableStore:
    """Single global namespace of a Z+- run. Variables are never removed."""

    def __init__(self):
        self._vars: dict[str, Value] = {}

    def define(self, name: str, value: Value):
        self._vars[name] = value

    def get(self, name: str) -> Value:
        try:
            return self._vars[name]
        except KeyError:
            raise UninitializedVariable(name) from None

    def contains(self, name: str) -> bool:
        return name in self._vars

    def snapshot(self) -> dict[str, Value]:
        return dict(self._vars)

    def __contains__(self, name):
        return self.contains(name)

    def __iter__(self):
        return iter(self._vars)

    def __len__(self):
        return len(self._vars)

    def __repr__(self):
        return f"VariableStore({self._vars!r})"
