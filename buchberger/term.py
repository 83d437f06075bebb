import numbers
from buchberger import utils
from buchberger.monomial import Monomial

class Term(object):
    '''
    A real coefficient times a monomial.

    A coefficient smaller than utils.global_accuracy in magnitude makes the
    term zero, and every zero term is stored as 0 * 1.

    Parameters
    ----------
    coeff : float
    monomial : Monomial, optional
        Defaults to the monomial 1.
    '''
    __slots__ = ('coeff', 'monomial')

    def __init__(self, coeff, monomial=None):
        if not isinstance(coeff, numbers.Real):
            raise ValueError('Term coefficients must be real numbers, got {!r}'.format(coeff))
        if monomial is None:
            monomial = Monomial.one()
        if utils.is_zero(coeff):
            self.coeff = 0.
            self.monomial = Monomial.one()
        else:
            self.coeff = float(coeff)
            self.monomial = monomial

    @classmethod
    def zero(cls):
        return cls(0.)

    @property
    def is_zero(self):
        return utils.is_zero(self.coeff)

    @property
    def is_unit(self):
        '''True if the coefficient is 1 up to global_accuracy.'''
        return utils.is_zero(self.coeff - 1.)

    def __mul__(self, other):
        '''
        Multiplies by a scalar, a Monomial or another Term. The coefficient and
        the monomial are combined separately.
        '''
        if isinstance(other, Term):
            return Term(self.coeff*other.coeff, self.monomial*other.monomial)
        elif isinstance(other, Monomial):
            return Term(self.coeff, self.monomial*other)
        elif isinstance(other, numbers.Real):
            return Term(self.coeff*other, self.monomial)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return Term(-self.coeff, self.monomial)

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return utils.is_zero(self.coeff - other.coeff) and self.monomial == other.monomial

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # Coefficients are rounded to hash_precision places. Two equal terms on
        # either side of a rounding boundary, like 0.1234565 + 1e-12 and
        # 0.1234565 - 1e-12, get different hashes.
        return hash((utils.round_for_hash([self.coeff])[0], self.monomial))

    def __str__(self):
        if self.is_zero:
            return '0'
        if self.monomial.is_one():
            return '{:g}'.format(self.coeff)
        if self.is_unit:
            return str(self.monomial)
        if utils.is_zero(self.coeff + 1.):
            return '-' + str(self.monomial)
        return '{:g}{}'.format(self.coeff, self.monomial)

    def __repr__(self):
        return 'Term({!r}, {!r})'.format(self.coeff, self.monomial)
