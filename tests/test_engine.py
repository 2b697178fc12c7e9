"""Tests for funkdigen.engine (run configuration and generate())."""
import pytest

from funkdigen.codes.rotation import RotationTest
from funkdigen.engine import (
    GeneratorConfig,
    OutputMode,
    Strategy,
    check_size,
    generate,
    iter_codes,
    renderer,
)


# --- configuration ---

def test_default_config():
    config = GeneratorConfig()
    assert config.connected is False
    assert config.output is OutputMode.DIGRAPH6
    assert config.rotation is RotationTest.NAIVE
    assert config.strategy is Strategy.SUCCESSOR
    config.validate()


def test_loopless_internal_rejected():
    config = GeneratorConfig(output=OutputMode.INTERNAL, loopless=True)
    with pytest.raises(ValueError):
        config.validate()


def test_dfs_requires_connected():
    with pytest.raises(ValueError):
        GeneratorConfig(strategy=Strategy.DFS).validate()
    GeneratorConfig(connected=True, strategy=Strategy.DFS).validate()


def test_check_size():
    check_size(0)
    check_size(255)
    with pytest.raises(ValueError):
        check_size(256)
    with pytest.raises(ValueError):
        check_size(-1)


def test_config_is_frozen():
    config = GeneratorConfig()
    with pytest.raises(AttributeError):
        config.connected = True


# --- generate ---

def test_generate_counts_without_sink():
    assert generate(4) == 19
    assert generate(4, GeneratorConfig(connected=True)) == 9


def test_generate_n0():
    assert generate(0) == 1
    assert generate(0, GeneratorConfig(connected=True)) == 0


def test_generate_digraph6_lines():
    lines = []
    assert generate(1, sink=lines.append) == 1
    assert lines == ["&@_"]


def test_generate_connected_digraph6():
    lines = []
    generate(2, GeneratorConfig(connected=True), sink=lines.append)
    assert lines == ["&AW", "&Ag"]


def test_generate_loopless():
    lines = []
    generate(2, GeneratorConfig(connected=True, loopless=True), sink=lines.append)
    assert lines == ["&AW", "&AG"]


def test_generate_internal():
    lines = []
    generate(2, GeneratorConfig(output=OutputMode.INTERNAL), sink=lines.append)
    assert lines == ["[[[1]], [[1]]]", "[[[1], [1]]]", "[[[2, 1]]]"]


def test_generate_silent_never_calls_sink():
    lines = []
    assert generate(3, GeneratorConfig(output=OutputMode.SILENT), sink=lines.append) == 7
    assert lines == []


@pytest.mark.parametrize("rotation", list(RotationTest))
def test_generate_dfs_matches_successor(rotation):
    a = GeneratorConfig(connected=True, rotation=rotation)
    b = GeneratorConfig(connected=True, rotation=rotation, strategy=Strategy.DFS)
    for n in range(7):
        assert generate(n, a) == generate(n, b)
        assert set(iter_codes(n, a)) == set(iter_codes(n, b))


def test_generate_rejects_bad_config():
    with pytest.raises(ValueError):
        generate(3, GeneratorConfig(loopless=True, output=OutputMode.INTERNAL))
    with pytest.raises(ValueError):
        generate(300)


def test_renderer_silent_is_none():
    assert renderer(GeneratorConfig(output=OutputMode.SILENT)) is None


def test_output_deterministic():
    first, second = [], []
    generate(5, sink=first.append)
    generate(5, sink=second.append)
    assert first == second
    assert len(set(first)) == len(first) == 47
