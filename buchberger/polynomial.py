import numbers
import numpy as np
from buchberger import utils
from buchberger.monomial import Monomial
from buchberger.term import Term
from buchberger.ordering import as_ordering, monomial_key

class Polynomial(object):
    '''
    A sparse multivariate polynomial with real coefficients.

    Every polynomial is normalized when it is made: terms with the same
    monomial are added together, sums that are zero up to
    utils.global_accuracy are dropped, and the remaining terms are kept in
    descending degree-then-name order. Polynomials are never changed after
    that, all the operations return new ones.

    Attributes
    ----------
    monomials : tuple of Monomial
        The monomials of the nonzero terms in storage order.
    coeff : ndarray
        The coefficients matching monomials. Read only.
    terms : tuple of Term
        The nonzero terms in storage order.
    is_zero : bool
        True for the zero polynomial, which has no terms.

    Parameters
    ----------
    terms : iterable of Term, or str
        The terms to add up. A string is parsed with utils.make_poly_terms,
        so Polynomial('x^2*y - 1') works.

    Methods
    -------
    lead_term
        The term with the largest monomial under an ordering.
    lead_monomial
        The monomial of the lead_term.
    lead_coeff
        The coefficient of the lead_term.
    scale
        Multiplies every coefficient by a scalar.
    mon_mult
        Multiplies by a monomial.
    evaluate_at
        Evaluates the polynomial at a point.
    '''
    def __init__(self, terms=()):
        if isinstance(terms, str):
            terms = [Term(c, Monomial(exps)) for c, exps in utils.make_poly_terms(terms)]
        combined = dict()
        for term in terms:
            if not isinstance(term, Term):
                raise ValueError('Polynomials are made from Terms, got {!r}'.format(term))
            if term.is_zero:
                continue
            combined[term.monomial] = combined.get(term.monomial, 0.) + term.coeff

        monomials = list(combined)
        coeff = np.array([combined[m] for m in monomials], dtype=float)
        keep = utils.clean_zeros_from_array(coeff)
        monomials = [m for m, k in zip(monomials, keep) if k]
        coeff = coeff[keep]

        order = sorted(range(len(monomials)), key=lambda i: monomials[i], reverse=True)
        self.monomials = tuple(monomials[i] for i in order)
        self.coeff = coeff[order] if order else np.zeros(0)
        self.coeff.flags.writeable = False
        self.terms = tuple(Term(float(c), m) for c, m in zip(self.coeff, self.monomials))
        self._lead_terms = dict()

    @classmethod
    def from_pairs(cls, pairs):
        '''
        Makes a polynomial from (coefficient, exponents) pairs, where
        exponents maps variable names to powers.

        Polynomial.from_pairs([(1., {'x': 2, 'y': 1}), (-1., {})]) is x^2*y - 1.
        '''
        return cls(Term(c, Monomial(exps)) for c, exps in pairs)

    @classmethod
    def constant(cls, c):
        return cls([Term(c)])

    @property
    def is_zero(self):
        return len(self.monomials) == 0

    @property
    def variables(self):
        '''The names of all the variables that appear, sorted.'''
        return tuple(sorted(set(var for m in self.monomials for var in m.variables)))

    def lead_term(self, ordering):
        '''
        The term whose monomial is largest under ordering. The zero
        polynomial gives the zero term, so division code does not need a
        special case for it.
        '''
        if self.is_zero:
            return Term.zero()
        ordering = as_ordering(ordering)
        lead = self._lead_terms.get(ordering)
        if lead is None:
            key = monomial_key(ordering)
            lead = max(self.terms, key=lambda t: key(t.monomial))
            self._lead_terms[ordering] = lead
        return lead

    def lead_monomial(self, ordering):
        return self.lead_term(ordering).monomial

    def lead_coeff(self, ordering):
        return self.lead_term(ordering).coeff

    def __add__(self, other):
        if isinstance(other, numbers.Real):
            other = Polynomial.constant(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(self.terms + other.terms)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, numbers.Real):
            other = Polynomial.constant(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(self.terms + tuple(-t for t in other.terms))

    def __rsub__(self, other):
        return (-self).__add__(other)

    def __neg__(self):
        return Polynomial(-t for t in self.terms)

    def scale(self, scalar):
        '''
        Multiplies every coefficient by scalar. Scaling by 0 gives the zero polynomial.
        '''
        return Polynomial(t*scalar for t in self.terms)

    def mon_mult(self, monomial):
        '''
        Multiplies the polynomial by a monomial.
        '''
        return Polynomial(t*monomial for t in self.terms)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        elif isinstance(other, Monomial):
            return self.mon_mult(other)
        elif isinstance(other, Term):
            return Polynomial(t*other for t in self.terms)
        elif isinstance(other, Polynomial):
            return Polynomial(s*t for s in self.terms for t in other.terms)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def evaluate_at(self, point):
        '''
        Evaluates the polynomial at the given point.

        Parameters
        ----------
        point : mapping
            The value of each variable.

        Returns
        -------
        value : float or complex
            Value of the polynomial at the point, 0 if it is within global_accuracy of 0.
        '''
        missing = [var for var in self.variables if var not in point]
        if missing:
            raise ValueError('Cannot evaluate polynomial in {} at point {}, missing {}'\
            .format(self.variables, point, missing))
        if self.is_zero:
            return 0
        mon_values = np.array([np.prod([point[var]**exp for var, exp in m.exps]) for m in self.monomials])
        value = np.dot(self.coeff, mon_values)
        if abs(value) < utils.global_accuracy:
            return 0
        return value

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __eq__(self, other):
        '''
        check the monomials are the same and the coefficients agree up to global_accuracy.
        '''
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.monomials != other.monomials:
            return False
        return bool(np.all(np.abs(self.coeff - other.coeff) < utils.global_accuracy))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # Sum of the term hashes, see Term.__hash__. Equal polynomials whose
        # coefficients straddle a rounding boundary of hash_precision can still
        # hash differently.
        return sum(hash((c, m)) for c, m in zip(utils.round_for_hash(self.coeff), self.monomials))

    def __str__(self):
        if self.is_zero:
            return '0'
        out = str(self.terms[0])
        for t in self.terms[1:]:
            if t.coeff > 0:
                out += ' + ' + str(t)
            else:
                out += ' - ' + str(-t)
        return out

    def __repr__(self):
        return 'Polynomial({!r})'.format(str(self))
