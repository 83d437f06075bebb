"""
S-polynomials, division by a basis, monic normalization and the Groebner
basis check built from them.
"""
import itertools
from buchberger import utils
from buchberger.polynomial import Polynomial
from buchberger.term import Term
from buchberger.ordering import as_ordering

def _cancel_lead(p, q, scalar, monomial, lead):
    '''
    Computes p - scalar*monomial*q, where the two sides have the same lead
    term. The lead monomial is dropped outright instead of trusting the
    subtraction to land within global_accuracy of 0.
    '''
    terms = [t for t in p.terms if t.monomial != lead]
    for t in q.terms:
        m = t.monomial*monomial
        if m != lead:
            terms.append(Term(-scalar*t.coeff, m))
    return Polynomial(terms)

def s_polynomial(f, g, ordering):
    '''Calculates the S-polynomial of f and g.

    With LT(f) = c_f*m_f, LT(g) = c_g*m_g and L = lcm(m_f, m_g) this is
    (L/m_f)/c_f * f - (L/m_g)/c_g * g. Both sides have lead term L, which
    cancels.

    Parameters
    ----------
    f, g : Polynomial
    ordering : MonomialOrdering or sequence of variable names

    Returns
    -------
    Polynomial
        The S-polynomial. Zero if f or g is zero.
    '''
    ordering = as_ordering(ordering)
    if f.is_zero or g.is_zero:
        return Polynomial()
    lt_f = f.lead_term(ordering)
    lt_g = g.lead_term(ordering)
    lcm = lt_f.monomial.lcm(lt_g.monomial)
    f_diff = lcm.divide(lt_f.monomial)
    g_diff = lcm.divide(lt_g.monomial)

    f_part = Polynomial(Term(t.coeff/lt_f.coeff, t.monomial*f_diff) for t in f.terms)
    return _cancel_lead(f_part, g, 1./lt_g.coeff, g_diff, lcm)

def reduce(f, basis, ordering):
    '''Divides f by the polynomials in basis, looking only at lead terms.

    The first polynomial in basis whose lead monomial divides the lead
    monomial of the remainder is used to cancel that lead term, and the
    scan starts over from the beginning of basis. This stops as soon as
    nothing divides the lead monomial of the remainder. Lower terms are never
    looked at, so the remainder can still have terms that basis could
    reduce. See normal_form for the full division.

    Parameters
    ----------
    f : Polynomial
        The dividend.
    basis : iterable of Polynomial
        The divisors, in the order they should be tried. Zero polynomials are skipped.
    ordering : MonomialOrdering or sequence of variable names

    Returns
    -------
    Polynomial
        The remainder.
    '''
    ordering = as_ordering(ordering)
    basis = [g for g in basis if not g.is_zero]
    remainder = f
    reduction_occurred = True
    while not remainder.is_zero and reduction_occurred:
        reduction_occurred = False
        lt = remainder.lead_term(ordering)
        for g in basis:
            lt_g = g.lead_term(ordering)
            quotient = lt.monomial.divide(lt_g.monomial)
            if quotient is not None:
                remainder = _cancel_lead(remainder, g, lt.coeff/lt_g.coeff, quotient, lt.monomial)
                reduction_occurred = True
                break
    return remainder

def normal_form(f, basis, ordering):
    '''Fully divides f by the polynomials in basis.

    Same as reduce, except that an irreducible lead term is moved to the
    result and the division carries on with the rest of the terms. The
    result has no term divisible by a lead monomial of basis.
    '''
    ordering = as_ordering(ordering)
    basis = [g for g in basis if not g.is_zero]
    remainder = list()
    p = f
    while not p.is_zero:
        lt = p.lead_term(ordering)
        for g in basis:
            lt_g = g.lead_term(ordering)
            quotient = lt.monomial.divide(lt_g.monomial)
            if quotient is not None:
                p = _cancel_lead(p, g, lt.coeff/lt_g.coeff, quotient, lt.monomial)
                break
        else:
            remainder.append(lt)
            p = Polynomial(t for t in p.terms if t.monomial != lt.monomial)
    return Polynomial(remainder)

def make_monic(p, ordering):
    '''
    Divides p by its lead coefficient. The zero polynomial, and anything with
    a lead coefficient that is zero up to global_accuracy, gives the zero
    polynomial. A polynomial that is already monic is returned as is.
    '''
    ordering = as_ordering(ordering)
    if p.is_zero:
        return p
    lc = p.lead_coeff(ordering)
    if utils.is_zero(lc):
        return Polynomial()
    if utils.is_zero(lc - 1.):
        return p
    return p.scale(1./lc)

def is_groebner_basis(basis, ordering, verbose=False):
    '''Checks whether basis is a Groebner basis.

    Every S-polynomial of two nonzero elements has to reduce to zero against
    the basis itself.

    Parameters
    ----------
    basis : iterable of Polynomial
    ordering : MonomialOrdering or sequence of variable names
    verbose : bool
        Prints the first pair that fails.

    Returns
    -------
    bool
    '''
    ordering = as_ordering(ordering)
    G = [g for g in basis if not g.is_zero]
    for i, j in itertools.combinations(range(len(G)), 2):
        s = s_polynomial(G[i], G[j], ordering)
        r = reduce(s, G, ordering)
        if not r.is_zero:
            if verbose:
                print("Pair ({}, {}) fails".format(G[i], G[j]))
                print("S-polynomial -", s)
                print("Remainder -", r)
            return False
    return True
