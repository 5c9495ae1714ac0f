"""
Pytest configuration and shared fixtures for the unit converter tests.
"""
import pytest

from RateGraph import RateGraph
from UnitConvertor import UnitConvertor


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real UNIT_* variables out of every test and undo anything a .env file sets."""
    for name in ("UNIT_RATES_SOURCE", "UNIT_RATES_DELIMITER", "UNIT_ROUTE_STRATEGY", "UNIT_RATES_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def length_graph():
    return RateGraph.build([("m", "cm", 100.0), ("cm", "mm", 10.0)])


@pytest.fixture
def split_graph():
    """Two components with no rate between them."""
    return RateGraph.build([("m", "cm", 100.0), ("kg", "g", 1000.0)])


@pytest.fixture
def unit_convertor():
    return UnitConvertor(RateGraph.build([
        ("m", "cm", 100.0),
        ("cm", "mm", 10.0),
        ("km", "m", 1000.0),
        ("in", "cm", 2.54),
        ("kg", "g", 1000.0),
    ]))


@pytest.fixture
def rates_file(tmp_path):
    path = tmp_path / "rates.txt"
    path.write_text("m;cm;100\ncm;mm;10\nkg;g;1000\n", encoding="utf-8")
    return path


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def fake_response():
    return FakeResponse
