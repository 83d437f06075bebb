"""
Monomials over named variables.

A monomial is stored as a tuple of (variable, exponent) pairs sorted by
variable name, with no zero exponents. The comparison operators give the
degree-then-name storage order used to keep polynomial terms canonical.
They are not a monomial ordering in the Groebner sense, see ordering.py
for that.
"""

class Monomial(object):
    '''
    An immutable product of variable powers, without a coefficient.

    Parameters
    ----------
    exponents : mapping or iterable of (str, int) pairs, optional
        The exponent of each variable. Zero exponents are dropped and
        missing variables have exponent 0. Defaults to the monomial 1.

    Attributes
    ----------
    exps : tuple
        The (variable, exponent) pairs sorted by variable name.
    degree : int
        The total degree.
    '''
    __slots__ = ('exps', 'degree', '_dict', '_hash')

    def __init__(self, exponents=()):
        if hasattr(exponents, 'items'):
            exponents = exponents.items()
        collected = dict()
        for var, exp in exponents:
            if not isinstance(var, str):
                raise ValueError('Variable names must be strings, got {!r}'.format(var))
            if int(exp) != exp:
                raise ValueError('Exponent of {} must be an integer, got {!r}'.format(var, exp))
            exp = int(exp)
            if exp < 0:
                raise ValueError('Exponent of {} must be non-negative, got {}'.format(var, exp))
            collected[var] = collected.get(var, 0) + exp
        self.exps = tuple(sorted((var, exp) for var, exp in collected.items() if exp > 0))
        self.degree = sum(exp for _, exp in self.exps)
        self._dict = dict(self.exps)
        self._hash = hash(self.exps)

    @classmethod
    def one(cls):
        '''The identity monomial, with every exponent 0.'''
        return cls()

    @property
    def variables(self):
        return tuple(var for var, _ in self.exps)

    def exponent(self, var):
        return self._dict.get(var, 0)

    def as_dict(self):
        return dict(self.exps)

    def is_one(self):
        return not self.exps

    def mon_mult(self, other):
        '''
        Multiplies two monomials by adding their exponents.
        '''
        exps = dict(self._dict)
        for var, exp in other.exps:
            exps[var] = exps.get(var, 0) + exp
        return Monomial(exps)

    def __mul__(self, other):
        if isinstance(other, Monomial):
            return self.mon_mult(other)
        return NotImplemented

    def divides(self, other):
        '''
        parameters
        ----------
        other : Monomial
            the monomial dividend

        returns
        -------
        boolean
            true if self divides other, false otherwise
        '''
        return all(other.exponent(var) >= exp for var, exp in self.exps)

    def divide(self, other):
        '''Finds the quotient self / other.

        Parameters
        ----------
        other : Monomial
            The divisor.

        Returns
        -------
        Monomial or None
            The quotient, or None when other does not divide self.
        '''
        if not other.divides(self):
            return None
        exps = dict(self._dict)
        for var, exp in other.exps:
            exps[var] -= exp
        return Monomial(exps)

    def lcm(self, other):
        '''Finds the least common multiple, the exponent-wise maximum.

        Works both as ``a.lcm(b)`` and ``Monomial.lcm(a, b)``.
        '''
        exps = dict(self._dict)
        for var, exp in other.exps:
            exps[var] = max(exps.get(var, 0), exp)
        return Monomial(exps)

    def is_relatively_prime(self, other):
        '''True if the two monomials share no variable, so their lcm is their product.'''
        return not set(self._dict).intersection(other._dict)

    def _compare(self, other):
        '''
        Degree first, then the exponents of the variables in ascending name order.
        '''
        if self.degree != other.degree:
            return -1 if self.degree < other.degree else 1
        for var in sorted(set(self._dict).union(other._dict)):
            a, b = self.exponent(var), other.exponent(var)
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.exps == other.exps

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        return self._compare(other) < 0

    def __gt__(self, other):
        return self._compare(other) > 0

    def __le__(self, other):
        return self._compare(other) <= 0

    def __ge__(self, other):
        return self._compare(other) >= 0

    #Makes monomials hashable so they can go in a set or be dictionary keys
    def __hash__(self):
        return self._hash

    def __str__(self):
        if not self.exps:
            return '1'
        return '*'.join(var if exp == 1 else '{}^{}'.format(var, exp) for var, exp in self.exps)

    def __repr__(self):
        return 'Monomial({!r})'.format(self._dict)
