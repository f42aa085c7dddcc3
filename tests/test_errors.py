"""测试异常信息"""

from src.plaintext_filters.align.errors import (
    FormatError,
    InvalidArgumentType,
    InvalidInputType,
    MissingArgument,
    display_value,
)


def test_display_value():
    """测试值的 JSON 展示"""
    assert display_value("abc") == '"abc"'
    assert display_value(None) == "null"
    assert display_value({"a": "notice", "b": 124.0}) == '{"a": "notice", "b": 124.0}'
    assert display_value(["x", 1]) == '["x", 1]'


def test_invalid_input_type_message():
    """测试输入类型错误信息"""
    err = InvalidInputType("center", ["a"])
    
    assert isinstance(err, FormatError)
    assert isinstance(err, TypeError)
    assert err.filter_name == "center"
    assert err.value == ["a"]
    assert str(err) == (
        'Filter `center` was called on an incorrect value: got `["a"]` '
        'but expected a text or number'
    )


def test_missing_argument_message():
    """测试缺少参数错误信息"""
    err = MissingArgument("left_align", "length")
    
    assert isinstance(err, FormatError)
    assert isinstance(err, ValueError)
    assert err.argument == "length"
    assert str(err) == "Filter `left_align` expected an arg called `length`"


def test_invalid_argument_type_message():
    """测试参数类型错误信息"""
    err = InvalidArgumentType("right_align", "length", "20")
    
    assert isinstance(err, FormatError)
    assert isinstance(err, TypeError)
    assert err.argument == "length"
    assert err.value == "20"
    assert str(err) == (
        'Filter `right_align` received an incorrect type for arg `length`: '
        'got `"20"` but expected a non-negative integer'
    )
