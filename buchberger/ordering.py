"""
Monomial orderings.

An ordering is anything with a ``variables`` tuple (highest priority first)
and a ``compare(a, b)`` method returning -1, 0 or 1. Only the lexicographic
ordering is implemented. Graded or weighted orderings can be added as new
classes with the same two members, nothing has to inherit from anything.

The ordering only looks at the variables it was built from. Exponents of
any other variable are ignored, so two different monomials can compare
equal if the priority list does not cover all of their variables.
"""
import functools
from typing import Protocol, runtime_checkable

@runtime_checkable
class MonomialOrdering(Protocol):
    '''
    The capability every monomial ordering provides.
    '''
    variables: tuple

    def compare(self, a, b):
        ...

class LexOrdering(object):
    '''
    Lexicographic order with a variable priority list.

    Monomials are compared on the exponent of the first variable, then the
    second, and so on. With x > y this gives x^2 > xy > x > y^2 > y > 1.

    Parameters
    ----------
    variables : iterable of str
        The variables from highest to lowest priority.
    '''
    name = 'lex'

    def __init__(self, variables):
        if isinstance(variables, str):
            variables = (variables,)
        self.variables = tuple(variables)
        for var in self.variables:
            if not isinstance(var, str):
                raise ValueError('Variable names must be strings, got {!r}'.format(var))

    def key(self, monomial):
        '''
        The exponents in priority order. Comparing these tuples is the same as
        comparing the monomials.
        '''
        return tuple(monomial.exponent(var) for var in self.variables)

    def compare(self, a, b):
        '''
        Returns
        -------
        int
            -1 if a < b, 0 if they agree on every variable in the list, 1 if a > b.
        '''
        for var in self.variables:
            i, j = a.exponent(var), b.exponent(var)
            if i != j:
                return -1 if i < j else 1
        return 0

    __call__ = compare

    def __eq__(self, other):
        if not isinstance(other, LexOrdering):
            return NotImplemented
        return self.variables == other.variables

    def __hash__(self):
        return hash((self.name, self.variables))

    def __repr__(self):
        return 'LexOrdering({})'.format(list(self.variables))

def lex(*variables):
    '''Shortcut for LexOrdering, as in lex('x', 'y', 'z').'''
    return LexOrdering(variables)

def as_ordering(ordering):
    '''
    Accepts either an ordering or a plain sequence of variable names, which
    is taken to mean the lexicographic order with that priority.
    '''
    if isinstance(ordering, LexOrdering) or isinstance(ordering, MonomialOrdering):
        return ordering
    return LexOrdering(ordering)

def monomial_key(ordering):
    '''
    A sort key for monomials under the given ordering.
    '''
    if hasattr(ordering, 'key'):
        return ordering.key
    return functools.cmp_to_key(ordering.compare)
