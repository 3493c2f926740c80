from tmsu.text import tokenize


def test_simple():
    assert tokenize("one two three") == ["one", "two", "three"]


def test_quoted():
    assert tokenize("one 'two three' four") == ["one", "two three", "four"]


def test_double_quoted():
    assert tokenize('one "two three" four') == ["one", "two three", "four"]


def test_single_quote_inside_double_quoted():
    assert tokenize("one \"two 'three'\" four") == ["one", "two 'three'", "four"]


def test_double_quote_inside_single_quoted():
    assert tokenize("one 'two \"three\"' four") == ["one", 'two "three"', "four"]


def test_escaped_single_quote():
    assert tokenize(r"one\'s 'two\'s three\'s' four\'s") == ["one's", "two's three's", "four's"]


def test_escaped_double_quote():
    assert tokenize(r'one\"s "two\"s three\"s" four\"s') == ['one"s', 'two"s three"s', 'four"s']


def test_complex():
    assert tokenize("'one' \"two three\" four 'five \"six\" seven' \"eight\"") == [
        "one",
        "two three",
        "four",
        'five "six" seven',
        "eight",
    ]


def test_unknown_escape_keeps_backslash():
    assert tokenize(r"a\b") == [r"a\b"]


def test_escaped_space_joins_words():
    assert tokenize(r"two\ words") == ["two words"]


def test_empty_input_yields_no_tokens():
    assert tokenize("   \t ") == []