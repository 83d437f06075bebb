import pytest
import numpy as np
from buchberger import utils
from buchberger.monomial import Monomial
from buchberger.term import Term
from buchberger.polynomial import Polynomial
from buchberger.ordering import lex

x = Monomial({'x': 1})
y = Monomial({'y': 1})
z = Monomial({'z': 1})
xy = Monomial({'x': 1, 'y': 1})
x2 = Monomial({'x': 2})
one = Monomial.one()
order = lex('x', 'y', 'z')

def test_combines_like_terms():
    p = Polynomial([Term(2., xy), Term(3., xy), Term(1., x), Term(4., y)])
    assert len(p) == 3
    assert p == Polynomial([Term(5., xy), Term(1., x), Term(4., y)])
    assert dict(zip(p.monomials, p.coeff)) == {xy: 5., x: 1., y: 4.}

def test_removes_zero_terms():
    p = Polynomial([Term(1., x), Term(2., y), Term(-2., y), Term(0., z), Term(1.)])
    assert p.monomials == (x, one)
    assert np.allclose(p.coeff, [1., 1.])

def test_near_cancellation():
    #Sums below global_accuracy are dropped, sums above are kept
    p = Polynomial([Term(1., x), Term(-1. + 1.e-9, x), Term(1., y)])
    assert p.monomials == (x, y)
    assert abs(p.coeff[0] - 1.e-9) < 1.e-15
    q = Polynomial([Term(1., x), Term(-1. + 1.e-11, x), Term(1., y)])
    assert q.monomials == (y,)
    assert (Polynomial([Term(1., x)]) - Polynomial([Term(1. - 1.e-11, x)])).is_zero

def test_epsilon_is_shared(monkeypatch):
    monkeypatch.setattr(utils, 'global_accuracy', 1.e-8)
    p = Polynomial([Term(1., x), Term(-1. + 1.e-9, x), Term(1., y)])
    assert p.monomials == (y,)
    assert Term(1.e-9, x).is_zero
    assert Polynomial([Term(1., x)]) == Polynomial([Term(1. + 1.e-9, x)])

def test_canonical_order():
    p = Polynomial([Term(1.), Term(2., y), Term(3., x2), Term(4., xy)])
    q = Polynomial([Term(4., xy), Term(1.), Term(3., x2), Term(2., y)])
    assert p.monomials == (x2, xy, y, one)
    assert p.monomials == q.monomials
    assert p == q
    assert hash(p) == hash(q)

def test_zero_polynomial():
    zero = Polynomial()
    assert zero.is_zero
    assert len(zero) == 0
    assert not zero
    assert zero.coeff.shape == (0,)
    assert Polynomial.constant(0.).is_zero
    assert zero.lead_term(order) == Term.zero()
    assert zero.lead_monomial(order) == one
    assert zero.lead_coeff(order) == 0.
    assert str(zero) == '0'

def test_constant():
    p = Polynomial.constant(5.)
    assert not p.is_zero
    assert p.monomials == (one,)
    assert p.coeff[0] == 5.

def test_lead_term():
    p = Polynomial([Term(2., x2), Term(3., xy), Term(1., y)])
    assert p.lead_term(order) == Term(2., x2)
    assert p.lead_monomial(order) == x2
    assert p.lead_coeff(order) == 2.
    #The lead term depends on the ordering
    q = Polynomial([Term(3., x), Term(5., Monomial({'y': 2}))])
    assert q.lead_monomial(lex('x', 'y')) == x
    assert q.lead_monomial(lex('y', 'x')) == Monomial({'y': 2})
    assert q.lead_monomial(['y', 'x']) == Monomial({'y': 2})

def test_add_and_subtract():
    p1 = Polynomial([Term(3., x), Term(2.)])
    p2 = Polynomial([Term(1., x), Term(2., y), Term(2.)])
    assert p1 + p2 == Polynomial([Term(4., x), Term(2., y), Term(4.)])
    assert p1 - p2 == Polynomial([Term(2., x), Term(-2., y)])
    assert p1 + Polynomial() == p1
    assert (p1 - p1).is_zero
    assert p1 + 1 == Polynomial([Term(3., x), Term(3.)])
    assert 1 - p1 == Polynomial([Term(-3., x), Term(-1.)])
    assert -p1 == Polynomial([Term(-3., x), Term(-2.)])

def test_multiply():
    p = Polynomial([Term(2., x), Term(3., y)])
    product = p*Term(4., z)
    assert product == Polynomial([Term(8., Monomial({'x': 1, 'z': 1})), Term(12., Monomial({'y': 1, 'z': 1}))])
    assert p.scale(5.) == Polynomial([Term(10., x), Term(15., y)])
    assert 5*p == p.scale(5.)
    assert p.scale(0.).is_zero
    assert p.mon_mult(x) == Polynomial([Term(2., x2), Term(3., xy)])
    assert p*x == p.mon_mult(x)
    #(x + 1)(x - 1) = x^2 - 1
    assert Polynomial('x + 1')*Polynomial('x - 1') == Polynomial('x^2 - 1')

def test_equality_and_hash():
    p1 = Polynomial([Term(1., x), Term(2., y)])
    p2 = Polynomial([Term(2., y), Term(1. + 1.e-12, x)])
    assert p1 == p2
    assert hash(p1) == hash(p2)
    assert p1 != Polynomial([Term(1., x), Term(2.1, y)])
    assert p1 != Polynomial([Term(1., x)])
    assert p1 != None
    assert len({p1, p2, Polynomial()}) == 2
    #The hash is the sum of the term hashes
    assert hash(p1) == sum(hash(t) for t in p1)

def test_immutable():
    p = Polynomial([Term(1., x)])
    with pytest.raises(ValueError):
        p.coeff[0] = 2.

def test_from_pairs():
    p = Polynomial.from_pairs([(1., {'x': 2, 'y': 1}), (-1., {})])
    assert p == Polynomial([Term(1., Monomial({'x': 2, 'y': 1})), Term(-1.)])
    with pytest.raises(ValueError):
        Polynomial([1., 2.])

def test_from_string():
    p = Polynomial('3x^2*y - 2.5y + 1')
    assert p == Polynomial([Term(3., Monomial({'x': 2, 'y': 1})), Term(-2.5, y), Term(1.)])
    assert Polynomial('x*x + -x') == Polynomial([Term(1., x2), Term(-1., x)])
    assert Polynomial('x - x').is_zero
    assert p.variables == ('x', 'y')
    with pytest.raises(ValueError):
        Polynomial('x^ + 1')

def test_evaluate_at():
    p = Polynomial('x^2*y - 1')
    assert p.evaluate_at({'x': 2., 'y': 3.}) == 11.
    assert p.evaluate_at({'x': 1., 'y': 1., 'z': 7.}) == 0
    assert Polynomial().evaluate_at({}) == 0
    with pytest.raises(ValueError):
        p.evaluate_at({'x': 1.})

def test_str():
    p = Polynomial('2x^2*y - x + 3')
    assert str(p) == '2x^2*y - x + 3'
    assert Polynomial(str(p)) == p
    assert repr(Polynomial('x - 1')) == "Polynomial('x - 1')"
