from zpm_ast import Assign, IntegerValue, Print, Repeat, TextValue


def test_value_str():
    assert str(IntegerValue(-3)) == "-3"
    assert str(TextValue("a b")) == "a b"
    assert str(TextValue("")) == ""


def test_value_equality():
    assert IntegerValue(1) == IntegerValue(1)
    assert IntegerValue(1) != TextValue("1")


def test_stmt_str():
    body = ("x = 1", "x += 1", "PRINT(x)")
    assert str(Repeat(3, body)) == "FOR 3 x = 1 ; x += 1 ; PRINT(x) ENDFOR"
    assert str(Print("y")) == "PRINT(y)"
    assert str(Assign("s", "=", '"hi"')) == 's = "hi"'
