import pytest

from replline.analyzer import AnalysisError, analyze, get_end_part
from replline.completer import Completer
from replline.tokenizer import TextType, Token, tokenize

WORDS = ["apple", "apply", "banana"]


class FakeObject:
    def __init__(self, props, completer=True):
        self.props = props
        self.completer = Completer(props) if completer else None

    def get(self, name):
        return self.props[name]

    def get_completer(self):
        return self.completer


class FakeScope:
    def __init__(self, variables, completer=True):
        self.variables = variables
        self.completer = Completer(WORDS) if completer else None

    def read_var(self, name):
        return self.variables[name]


@pytest.fixture
def scope():
    inner = FakeObject({"price": 1, "prize": 2})
    outer = FakeObject({"inner": inner, "count": 3})
    bare = FakeObject({"x": 1}, completer=False)
    return FakeScope({"outer": outer, "num": 5, "bare": bare})


def test_end_part_of_property_chain():
    assert get_end_part(tokenize("var = obj.prop")) == ["prop", "obj"]


def test_end_part_of_plain_variable():
    assert get_end_part(tokenize("var2 = var1")) == ["var1"]


@pytest.mark.parametrize("source", ["", "obj.", "1 + 2", "x = "])
def test_end_part_none(source):
    assert get_end_part(tokenize(source)) is None


def test_end_part_stops_at_space():
    assert get_end_part(tokenize("a b")) == ["b"]


def test_end_part_stops_at_repeated_type():
    tokens = [Token(TextType.VARIABLE, "a"), Token(TextType.VARIABLE, "b")]
    assert get_end_part(tokens) == ["b"]
    assert get_end_part(tokenize("a..b")) == ["b"]


def test_variable_completion(scope):
    result = analyze(tokenize("x = ap"), scope)
    assert sorted("ap" + r for r in result) == ["apple", "apply"]


def test_empty_line_gives_no_candidates(scope):
    assert analyze(tokenize(""), scope) == []


def test_property_completion(scope):
    result = analyze(tokenize("outer.inner.pri"), scope)
    assert sorted("pri" + r for r in result) == ["price", "prize"]


def test_single_level_property_completion(scope):
    result = analyze(tokenize("outer.co"), scope)
    assert result == ["unt"]


def test_non_object_variable(scope):
    with pytest.raises(AnalysisError):
        analyze(tokenize("num.x"), scope)


def test_non_object_property(scope):
    with pytest.raises(AnalysisError):
        analyze(tokenize("outer.count.x"), scope)


def test_missing_variable(scope):
    with pytest.raises(AnalysisError):
        analyze(tokenize("missing.x"), scope)


def test_missing_property(scope):
    with pytest.raises(AnalysisError):
        analyze(tokenize("outer.missing.x"), scope)


def test_object_without_completer(scope):
    with pytest.raises(AnalysisError):
        analyze(tokenize("bare.x"), scope)


def test_scope_without_completer():
    with pytest.raises(AnalysisError):
        analyze(tokenize("ap"), FakeScope({}, completer=False))