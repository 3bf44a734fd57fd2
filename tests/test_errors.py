import pytest

from jclass.errors import ClassFileError


def test_str_is_message():
    err = ClassFileError("bad constant tag")
    assert str(err) == "bad constant tag"
    assert err.msg == "bad constant tag"


def test_can_be_raised_and_caught_as_exception():
    err = ClassFileError("not a class file")
    assert str(err) == "not a class file"
    with pytest.raises(Exception, match="not a class file") as exc_info:
        raise err
    assert exc_info.value is err
    assert exc_info.value.msg == "not a class file"


def test_message_survives_chaining():
    inner = ValueError("inner")
    err = ClassFileError(f"outer: {inner}")
    assert str(err) == "outer: inner"
    assert err.msg == "outer: inner"
    with pytest.raises(ClassFileError) as exc_info:
        raise err from inner
    caught = exc_info.value
    assert caught.msg == "outer: inner"
    assert caught.__cause__ is inner
    assert str(caught.__cause__) == "inner"