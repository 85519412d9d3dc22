# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Test driver for package 'rationalnum' (conversions)."""
import json
import math
from fractions import Fraction

import pytest

from rationalnum import InvalidArgument, Rational


@pytest.mark.parametrize("value",
                         ("17.8",
                          "9223372036854775807",
                          "14/900"),
                         ids=("compact", "large", "fraction"))
def test_true(value):
    q = Rational(value)
    assert q
    assert not q.is_zero()


@pytest.mark.parametrize("value", (None, "0.0000", (0, -999999999)),
                         ids=("None", "0", "0/-999999999"))
def test_false(value):
    if isinstance(value, tuple):
        q = Rational(*value)
    else:
        q = Rational(value)
    assert not q
    assert q.is_zero()


@pytest.mark.parametrize(("num", "den", "result"),
                         ((10, 1, True),
                          (10, 2, True),
                          (15, 3, True),
                          (0, 1, True),
                          (3, 2, False),
                          (-7, 4, False)),
                         ids=("10/1", "10/2", "15/3", "0/1", "3/2", "-7/4"))
def test_is_integer(num, den, result):
    assert Rational(num, den).is_integer() is result


@pytest.mark.parametrize("value",
                         ("0.000",
                          "-17.03",
                          Fraction(9 ** 19, 10 ** 17),
                          Fraction(-19, 4000)),
                         ids=("zero", "compact", "large", "fraction"))
def test_int(value):
    f = Fraction(value)
    q = Rational(value)
    assert int(f) == int(q)


@pytest.mark.parametrize("value",
                         ("0.00000",
                          17,
                          "-33000.17",
                          Fraction(9 ** 19, 10 ** 17),
                          Fraction(-19, 400000)),
                         ids=("zero", "int", "compact", "large", "fraction"))
@pytest.mark.parametrize("func",
                         (math.trunc, math.floor, math.ceil),
                         ids=("trunc", "floor", "ceil"))
def test_math_funcs(func, value):
    f = Fraction(value)
    q = Rational(value)
    assert func(f) == func(q)


@pytest.mark.parametrize(("num", "den"),
                         ((17, 1),
                          (9 ** 19, 10 ** 17),
                          (-190, 400000),
                          (5, 4)),
                         ids=("compact", "large", "fraction", "5/4"))
def test_to_float(num, den):
    f = Fraction(num, den)
    q = Rational(num, den)
    assert float(f) == float(q)


@pytest.mark.parametrize("value",
                         ("0.00000",
                          17,
                          "-33000.17",
                          Fraction(9 ** 19, 10 ** 17),
                          Fraction(-19, 400000)),
                         ids=("zero", "int", "compact", "large", "fraction"))
def test_as_integer_ratio(value):
    f = Fraction(value)
    q = Rational(value)
    assert q.as_integer_ratio() == (f.numerator, f.denominator)
    assert q.as_fraction() == f


@pytest.mark.parametrize(("value", "str_"),
                         ((None, "0/1"),
                          (15, "15/1"),
                          ("17.50", "35/2"),
                          ("-20.7e-3", "-207/10000"),
                          ((5, 4), "5/4"),
                          ((6, 8), "3/4"),
                          ((3, -4), "-3/4"),
                          ("-287/8290", "-287/8290")),
                         ids=lambda p: str(p))
def test_str(value, str_):
    if isinstance(value, tuple):
        q = Rational(*value)
    else:
        q = Rational(value)
    assert str(q) == str_
    assert Rational.from_str(str(q)) == q


@pytest.mark.parametrize(("value", "repr_"),
                         ((None, "Rational(0)"),
                          ("15", "Rational(15)"),
                          ("15.000", "Rational(15)"),
                          ("15.400", "Rational(77, 5)"),
                          ("-20.7e-3", "Rational(-207, 10000)"),
                          (887 * 10 ** 14, "Rational(887" + "0" * 14 + ")"),
                          ("27/63", "Rational(3, 7)"),
                          ("-287/8290", "Rational(-287, 8290)")),
                         ids=lambda p: str(p))
def test_repr(value, repr_):
    q = Rational(value)
    assert repr(q) == repr_


@pytest.mark.parametrize(("value", "places", "pct"),
                         (((1, 2), 2, "50.00%"),
                          ((1, 10000), 2, "0.01%"),
                          ((10000, 1), 2, "1,000,000.00%"),
                          ((3, 8), 1, "37.5%"),
                          ((-1, 4), 0, "-25%"),
                          ((2, 3), 3, "66.667%")),
                         ids=("1/2", "1/10000", "10000", "3/8", "-1/4",
                              "2/3"))
def test_to_percentage(value, places, pct):
    q = Rational(*value)
    assert q.to_percentage(places) == pct


def test_to_percentage_dflt_places():
    assert Rational(1, 8).to_percentage() == "12.50%"


@pytest.mark.parametrize("places", (-1, 1.5, "2"),
                         ids=("-1", "1.5", "'2'"))
def test_to_percentage_wrong_places(places):
    with pytest.raises(ValueError):
        Rational(1, 8).to_percentage(places)


@pytest.mark.parametrize(("pct", "ratio"),
                         (("75%", Fraction(3, 4)),
                          ("50", Fraction(1, 2)),
                          (" 12.5 % ", Fraction(1, 8)),
                          ("5%", Fraction(1, 20)),
                          ("-20%", Fraction(-1, 5)),
                          ("0%", Fraction(0)),
                          ("1,000,000.00%", Fraction(10000)),
                          ("0.01%", Fraction(1, 10000)),
                          ("37.5%", Fraction(3, 8)),
                          ("-1,250.5%", Fraction(-2501, 200))),
                         ids=("75%", "no-sign", "blanks", "5%", "-20%", "0%",
                              "thousands-sep", "0.01%", "37.5%",
                              "neg-thousands-sep"))
def test_from_percentage(pct, ratio):
    q = Rational.from_percentage(pct)
    assert q.as_fraction() == ratio


@pytest.mark.parametrize("pct", ("", "%", "abc%", "12.5%%", "1/2%", "1,5%",
                                 "12,34%", ",100%", "1,0000%"),
                         ids=("empty", "sign-only", "letters",
                              "double-sign", "fraction", "bad-grouping",
                              "decimal-comma", "leading-comma",
                              "long-group"))
def test_from_percentage_wrong_format(pct):
    with pytest.raises(InvalidArgument):
        Rational.from_percentage(pct)


def test_from_percentage_wrong_type():
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        Rational.from_percentage(0.5)


@pytest.mark.parametrize(("value", "pct", "result"),
                         ((100, "10%", "110/1"),
                          (200, "25%", "250/1"),
                          (80, "12.5", "90/1"),
                          (Rational(1, 3), "50%", "1/2")),
                         ids=("100+10%", "200+25%", "80+12.5", "1/3+50%"))
def test_increase_by_percentage(value, pct, result):
    q = Rational(value)
    assert str(q.increase_by_percentage(pct)) == result


@pytest.mark.parametrize(("value", "pct", "result"),
                         ((200, "25%", "150/1"),
                          (100, "10%", "90/1"),
                          (Rational(1, 3), "50%", "1/6")),
                         ids=("200-25%", "100-10%", "1/3-50%"))
def test_decrease_by_percentage(value, pct, result):
    q = Rational(value)
    assert str(q.decrease_by_percentage(pct)) == result


@pytest.mark.parametrize(("num", "den"),
                         ((3, 4), (-3, 4), (5, 1), (0, 1)),
                         ids=("3/4", "-3/4", "5", "0"))
def test_as_dict(num, den):
    q = Rational(num, den)
    assert q.as_dict() == {'numerator': num, 'denominator': den}
    assert Rational.from_dict(q.as_dict()) == q
    assert json.loads(q.to_json()) == q.as_dict()
    assert Rational.from_json(q.to_json()) == q


@pytest.mark.parametrize(("mapping", "str_"),
                         (({'numerator': 6, 'denominator': 8}, "3/4"),
                          ({'numerator': 3, 'denominator': -4}, "-3/4"),
                          ({'numerator': "10", 'denominator': " 4"}, "5/2"),
                          ({'numerator': 4.0, 'denominator': 2}, "2/1"),
                          ({'numerator': 1, 'denominator': 2, 'x': 3},
                           "1/2")),
                         ids=("unreduced", "neg-den", "str", "float",
                              "extra-key"))
def test_from_dict(mapping, str_):
    assert str(Rational.from_dict(mapping)) == str_


@pytest.mark.parametrize(("mapping", "msg"),
                         (({'numerator': 3}, "Mapping must contain"),
                          ({'denominator': 3}, "Mapping must contain"),
                          ([3, 4], "Mapping must contain"),
                          ({'numerator': "abc", 'denominator': 3},
                           "Numerator must be an integer or numeric value"),
                          ({'numerator': 1.5, 'denominator': 3},
                           "Numerator must be an integer or numeric value"),
                          ({'numerator': 3, 'denominator': None},
                           "Denominator must be an integer or numeric value"),
                          ({'numerator': 3, 'denominator': True},
                           "Denominator must be an integer or numeric value"),
                          ({'numerator': 3, 'denominator': 0},
                           "Denominator cannot be zero")),
                         ids=("no-denominator", "no-numerator", "list",
                              "num-str", "num-float", "den-None",
                              "den-bool", "den-zero"))
def test_from_dict_invalid(mapping, msg):
    with pytest.raises(InvalidArgument) as excinfo:
        Rational.from_dict(mapping)
    assert msg in str(excinfo.value)


@pytest.mark.parametrize(("text", "msg"),
                         (("{invalid json}", "Invalid JSON"),
                          ('"3/4"', "JSON must decode to an object"),
                          ('[3, 4]', "JSON must decode to an object"),
                          ('{"numerator": 3}', "Mapping must contain")),
                         ids=("invalid", "string", "array", "missing-key"))
def test_from_json_invalid(text, msg):
    with pytest.raises(InvalidArgument) as excinfo:
        Rational.from_json(text)
    assert msg in str(excinfo.value)


def test_from_json_extra_fields():
    q = Rational.from_json('{"numerator": 3, "denominator": 4, '
                           '"currency": "EUR"}')
    assert str(q) == "3/4"
