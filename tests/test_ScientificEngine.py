import math

import pytest

from Calculator import ScientificEngine
from Calculator import error as E


def test_recognised_functions():
    assert ScientificEngine.FUNCTIONS == ("sin", "cos", "tan", "sqrt", "log", "ln")
    assert ScientificEngine.is_function("ln")
    assert not ScientificEngine.is_function("exp")
    assert not ScientificEngine.is_function("SIN")


@pytest.mark.parametrize(
    "name, argument, expected",
    [
        ("sin", 90.0, 1.0),
        ("cos", 180.0, -1.0),
        ("tan", 0.0, 0.0),
        ("sqrt", 0.0, 0.0),
        ("sqrt", 2.25, 1.5),
        ("log", 0.01, -2.0),
        ("ln", math.e ** 2, 2.0),
    ],
)
def test_apply_function(name, argument, expected):
    assert ScientificEngine.apply_function(name, argument) == pytest.approx(expected, abs=1e-12)


def test_trig_uses_degrees():
    assert ScientificEngine.apply_function("sin", 30.0) == pytest.approx(0.5)
    assert ScientificEngine.apply_function("sin", math.pi) != pytest.approx(0.0, abs=1e-6)


def test_domain_errors_keep_position():
    with pytest.raises(E.DomainError) as excinfo:
        ScientificEngine.apply_function("sqrt", -4.0, position=7)
    assert excinfo.value.position == 7

    with pytest.raises(E.DomainError):
        ScientificEngine.apply_function("log", 0.0)
    with pytest.raises(E.DomainError) as excinfo:
        ScientificEngine.apply_function("ln", -1.0)
    assert "Natural" in excinfo.value.message


def test_unknown_function():
    with pytest.raises(E.UnknownFunctionError) as excinfo:
        ScientificEngine.apply_function("exp", 1.0, position=3)
    assert excinfo.value.name == "exp"
    assert excinfo.value.position == 3


def test_power():
    assert ScientificEngine.power(2.0, 10.0) == 1024.0
    assert ScientificEngine.power(-2.0, 3.0) == -8.0
    assert ScientificEngine.power(4.0, 0.5) == 2.0
    assert ScientificEngine.power(10.0, 400.0) == math.inf
    assert ScientificEngine.power(-10.0, 400.0) == math.inf
    assert ScientificEngine.power(-10.0, 401.0) == -math.inf
    assert ScientificEngine.power(0.0, -1.0) == math.inf
    assert ScientificEngine.power(-0.0, -3.0) == -math.inf
    assert ScientificEngine.power(-0.0, -2.0) == math.inf
    assert math.isnan(ScientificEngine.power(-8.0, 1 / 3))
