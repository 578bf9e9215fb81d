import pytest

from arborette import Leaf, BufferSink, InvalidArgumentError


def test_leaf_emits_exactly_its_label():
    out = BufferSink()
    leaf = Leaf("L1", sink=out)
    leaf.perform_action()
    assert out.lines == ["L1"]


def test_leaf_emits_once_per_call():
    out = BufferSink()
    leaf = Leaf("x", sink=out)
    leaf.perform_action()
    leaf.perform_action()
    assert out.lines == ["x", "x"]


def test_label_is_read_only():
    leaf = Leaf("fixed", sink=BufferSink())
    with pytest.raises(AttributeError):
        leaf.label = "other"  # type: ignore[misc]
    assert leaf.label == "fixed"


def test_empty_label_allowed():
    out = BufferSink()
    Leaf("", sink=out).perform_action()
    assert out.lines == [""]


def test_none_label_rejected():
    with pytest.raises(InvalidArgumentError):
        Leaf(None)  # type: ignore[arg-type]


def test_non_string_label_rejected():
    with pytest.raises(InvalidArgumentError):
        Leaf(42)  # type: ignore[arg-type]


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        Leaf(None)  # type: ignore[arg-type]


def test_default_sink_prints_to_stdout(capsys):
    Leaf("[L1] :smile:").perform_action()
    assert capsys.readouterr().out == "[L1] :smile:\n"
