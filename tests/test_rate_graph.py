import pytest

from ConversionErrors import MalformedLineError, MalformedRateError
from RateGraph import RateGraph
from RateLine import RateLine


TRIPLES = [("m", "cm", 100.0), ("cm", "mm", 10.0), ("in", "cm", 2.54), ("kg", "g", 1000.0)]


def test_declared_and_inverse_rates():
    graph = RateGraph.build(TRIPLES)
    for unit1, unit2, rate in TRIPLES:
        assert graph.rate(unit1, unit2) == rate
        assert graph.rate(unit2, unit1) == 1 / rate


def test_every_neighbour_is_a_unit():
    graph = RateGraph.build(TRIPLES)
    for unit in graph:
        for neighbour in graph.neighbours(unit):
            assert neighbour in graph
            assert graph.has_edge(neighbour, unit)


def test_units_and_len():
    graph = RateGraph.build(TRIPLES)
    assert set(graph.units()) == {"m", "cm", "mm", "in", "kg", "g"}
    assert len(graph) == 6
    assert "cm" in graph
    assert "CM" not in graph


def test_empty_build():
    graph = RateGraph.build([])
    assert len(graph) == 0
    assert graph.units() == []


def test_neighbours_keep_declaration_order():
    graph = RateGraph.build(TRIPLES)
    assert list(graph.neighbours("cm")) == ["m", "mm", "in"]


def test_later_declaration_overwrites_pair():
    graph = RateGraph.build([("m", "cm", 10.0), ("cm", "m", 0.01)])
    assert graph.rate("cm", "m") == 0.01
    assert graph.rate("m", "cm") == 100.0


def test_build_accepts_rate_lines():
    graph = RateGraph.build([RateLine("m", "cm", 100.0, 1)])
    assert graph.rate("cm", "m") == 0.01


def test_build_rejects_bad_rates():
    with pytest.raises(MalformedRateError) as excinfo:
        RateGraph.build([("m", "cm", 100.0), ("kg", "g", 0.0)])
    assert excinfo.value.line_number == 2

    with pytest.raises(MalformedRateError):
        RateGraph.build([("m", "cm", None)])

    with pytest.raises(MalformedRateError):
        RateGraph.build([("m", "cm", float("nan"))])


def test_build_rejects_empty_unit():
    with pytest.raises(MalformedLineError):
        RateGraph.build([("", "cm", 100.0)])


def test_from_lines_skips_blank_lines():
    graph = RateGraph.from_lines(["m;cm;100", "", "   ", "cm;mm;10", ""])
    assert set(graph.units()) == {"m", "cm", "mm"}


def test_from_lines_aborts_on_malformed_line():
    with pytest.raises(MalformedLineError) as excinfo:
        RateGraph.from_lines(["m;cm;100", "cm;mm", "kg;g;1000"])
    assert excinfo.value.line_number == 2


def test_from_lines_aborts_on_malformed_rate():
    with pytest.raises(MalformedRateError) as excinfo:
        RateGraph.from_lines(["m;cm;100", "", "cm;mm;ten"])
    assert excinfo.value.line_number == 3


def test_graph_is_read_only():
    graph = RateGraph.build(TRIPLES)
    with pytest.raises(TypeError):
        graph.neighbours("m")["km"] = 0.001

    rates = graph.as_dict()
    rates["m"]["cm"] = 1.0
    assert graph.rate("m", "cm") == 100.0


def test_build_rejects_short_triple():
    with pytest.raises(MalformedLineError) as excinfo:
        RateGraph.build([("m", "cm", 100.0), ("cm", "mm")])
    assert excinfo.value.line_number == 2


def test_rate_with_infinite_inverse_is_rejected():
    with pytest.raises(MalformedRateError) as excinfo:
        RateGraph.build([("m", "cm", 100.0), ("a", "b", 1e-320)])
    assert excinfo.value.line_number == 2

    with pytest.raises(MalformedRateError) as excinfo:
        RateGraph.from_lines(["m;cm;100", "a;b;1e-320"])
    assert excinfo.value.line_number == 2


def test_tiny_rate_with_finite_inverse_is_kept():
    graph = RateGraph.build([("a", "b", 1e-300)])
    assert graph.rate("a", "b") == 1e-300
    assert graph.rate("b", "a") == 1 / 1e-300


def test_rate_from_unit_to_itself_is_rejected():
    with pytest.raises(MalformedLineError) as excinfo:
        RateGraph.build([("m", "cm", 100.0), ("m", "m", 2.0)])
    assert excinfo.value.line_number == 2

    with pytest.raises(MalformedLineError) as excinfo:
        RateGraph.from_lines(["m;cm;100", "", "cm; cm ;1"])
    assert excinfo.value.line_number == 3
