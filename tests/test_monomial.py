import pytest
import itertools
from buchberger.monomial import Monomial

def test_constructor_drops_zero_exponents():
    m = Monomial({'x': 2, 'y': 0, 'z': 1})
    assert m.variables == ('x', 'z')
    assert m.exponent('x') == 2
    assert m.exponent('y') == 0
    assert m.as_dict() == {'x': 2, 'z': 1}
    assert m == Monomial([('z', 1), ('x', 2)])

def test_bad_exponents():
    with pytest.raises(ValueError):
        Monomial({'x': -1})
    with pytest.raises(ValueError):
        Monomial({'x': 1.5})
    with pytest.raises(ValueError):
        Monomial({1: 2})

def test_one():
    one = Monomial.one()
    assert one.is_one()
    assert one.degree == 0
    assert one.exps == ()
    assert one == Monomial({'x': 0})
    assert str(one) == '1'

def test_degree():
    assert Monomial({'x': 2, 'y': 3}).degree == 5

def test_multiply():
    a = Monomial({'x': 1, 'y': 2})
    b = Monomial({'y': 1, 'z': 3})
    c = Monomial({'x': 4})
    assert a*b == Monomial({'x': 1, 'y': 3, 'z': 3})
    assert a*b == b*a
    assert (a*b)*c == a*(b*c)
    assert a.mon_mult(Monomial.one()) == a

def test_divide():
    a = Monomial({'x': 3, 'y': 2})
    b = Monomial({'x': 1, 'y': 2})
    assert a.divide(b) == Monomial({'x': 2})
    assert a.divide(a) == Monomial.one()
    assert b.divide(a) is None
    assert a.divide(Monomial({'z': 1})) is None
    assert b.divides(a)
    assert not a.divides(b)

def test_divide_undoes_multiply():
    monomials = [Monomial(), Monomial({'x': 1}), Monomial({'x': 2, 'y': 1}), Monomial({'y': 3, 'z': 1})]
    for a, b in itertools.product(monomials, repeat=2):
        assert (a*b).divide(b) == a

def test_lcm():
    a = Monomial({'x': 3, 'y': 1})
    b = Monomial({'x': 1, 'y': 2, 'z': 1})
    assert Monomial.lcm(a, b) == Monomial({'x': 3, 'y': 2, 'z': 1})
    assert a.lcm(b) == b.lcm(a)
    assert a.lcm(a) == a
    assert Monomial.one().lcm(a) == a
    assert a.divides(a.lcm(b)) and b.divides(a.lcm(b))

def test_relatively_prime():
    assert Monomial({'x': 2}).is_relatively_prime(Monomial({'y': 1}))
    assert not Monomial({'x': 2, 'y': 1}).is_relatively_prime(Monomial({'y': 1}))
    assert Monomial().is_relatively_prime(Monomial({'x': 1}))

def test_storage_order():
    #Degree first, then exponents by variable name
    x2 = Monomial({'x': 2})
    xy = Monomial({'x': 1, 'y': 1})
    y2 = Monomial({'y': 2})
    z3 = Monomial({'z': 3})
    assert z3 > x2 > xy > y2 > Monomial.one()
    assert sorted([y2, z3, Monomial.one(), xy, x2]) == [Monomial.one(), y2, xy, x2, z3]
    assert x2 >= x2 and x2 <= x2
    assert not x2 < x2

def test_hash():
    assert hash(Monomial({'x': 1, 'y': 2})) == hash(Monomial([('y', 2), ('x', 1), ('z', 0)]))
    assert len({Monomial({'x': 1}), Monomial({'x': 1}), Monomial({'y': 1})}) == 2

def test_str():
    assert str(Monomial({'x': 2, 'y': 1})) == 'x^2*y'
    assert repr(Monomial({'x': 2})) == "Monomial({'x': 2})"
