import pytest

from linkchain.polynomial import Polynomial, Term, main


def test_str_format():
    assert str(Polynomial([(5, 3), (4, 2), (2, 1)])) == "5x^3+4x^2+2x^1"


def test_empty_str():
    assert str(Polynomial()) == ""


def test_add_term_appends():
    poly = Polynomial()
    poly.add_term(3, 2)
    poly.add_term(1, 0)
    assert list(poly) == [Term(3, 2), Term(1, 0)]
    assert len(poly) == 2


def test_source_example_sum():
    p = Polynomial([(5, 3), (4, 2), (2, 1)])
    q = Polynomial([(3, 3), (2, 2), (4, 0)])
    assert list(p + q) == [Term(8, 3), Term(6, 2), Term(2, 1), Term(4, 0)]


def test_addition_commutes():
    p = Polynomial([(5, 3), (4, 2), (2, 1)])
    q = Polynomial([(3, 3), (2, 2), (4, 0)])
    assert p + q == q + p


def test_add_empty_is_identity():
    p = Polynomial([(1, 4), (2, 1)])
    assert p + Polynomial() == p
    assert Polynomial() + p == p


def test_disjoint_powers_merge_in_order():
    p = Polynomial([(1, 5), (1, 1)])
    q = Polynomial([(2, 3), (2, 0)])
    assert [t.power for t in p + q] == [5, 3, 1, 0]
    assert len(p + q) == len(p) + len(q)


def test_operands_unchanged():
    p = Polynomial([(1, 2)])
    q = Polynomial([(1, 2)])
    p + q
    assert list(p) == [Term(1, 2)]
    assert list(q) == [Term(1, 2)]


def test_add_non_polynomial():
    with pytest.raises(TypeError):
        Polynomial([(1, 1)]) + 3


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "First polynomial:5x^3+4x^2+2x^1"
    assert lines[1] == "Second polynomial:3x^3+2x^2+4x^0"
    assert lines[2] == "8x^3+6x^2+2x^1+4x^0"