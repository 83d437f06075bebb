"""
Buchberger's algorithm.

solve runs three steps:
    1. Drop the zero polynomials and put every pair of the rest in a queue.
    2. Pop pairs until the queue is empty. Reduce the S-polynomial of each
       pair by the current basis. A nonzero remainder joins the basis and is
       paired with everything that was already there.
    3. Make everything monic, then keep reducing each element by the others
       until nothing changes. This leaves the reduced Groebner basis.
"""
from collections import deque
import itertools
import warnings
from buchberger import utils
from buchberger.polynomial import Polynomial
from buchberger.ordering import as_ordering, monomial_key
from buchberger.operations import s_polynomial, reduce, normal_form, make_monic

def solve(polys, ordering, reduced=True, tail_reduce=False, use_criteria=False, max_pairs=None, verbose=False):
    '''
    The main function. Builds the pair queue, runs the pair loop until no
    pair is left, and then reduces the result.

    Parameters
    ----------
    polys : iterable of Polynomial
        Polynomials that generate the ideal. Zero polynomials are ignored.
    ordering : MonomialOrdering or sequence of variable names
        A plain sequence like ['x', 'y'] means lex order with x > y. It should
        rank every variable that appears in polys.
    reduced : bool
        Default is True. If False the basis is returned as the pair loop left it.
    tail_reduce : bool
        Default is False. If True the final step divides with normal_form,
        which also reduces the lower terms, instead of reduce.
    use_criteria : bool
        Default is False. If True pairs whose lead monomials have no common
        variable are skipped, since their S-polynomials always reduce to zero.
    max_pairs : int, optional
        Raise PairLimitExceeded instead of processing more than this many pairs.
    verbose : bool
        Prints the progress.

    Returns
    -------
    tuple of Polynomial
        The Groebner basis, sorted by lead monomial from smallest to largest.
        Empty if every input polynomial was zero.
    '''
    ordering = as_ordering(ordering)
    polys = list(polys)
    if not all(isinstance(p, Polynomial) for p in polys):
        raise ValueError('Bad polynomials in list')

    basis = [p for p in polys if not p.is_zero]
    if not basis:
        return tuple()
    check_ordering(basis, ordering)

    pairs = initialize_pairs(basis)
    if verbose:
        print("Num Polys -", len(basis))
        print("Num Pairs -", len(pairs))

    basis = saturate(basis, pairs, ordering, use_criteria=use_criteria, max_pairs=max_pairs, verbose=verbose)
    if not reduced:
        return tuple(basis)
    return tuple(reduce_groebner_basis(basis, ordering, tail_reduce=tail_reduce, verbose=verbose))

def check_ordering(polys, ordering):
    '''
    Warns when some polynomial uses a variable the ordering does not rank.
    Those exponents are ignored when comparing monomials, so lead terms and
    the basis can be wrong. The computation still goes ahead.

    Returns
    -------
    list of str
        The variables that are missing from the ordering.
    '''
    ranked = set(ordering.variables)
    missing = sorted(set(var for p in polys for var in p.variables) - ranked)
    if missing:
        warnings.warn("The ordering {} does not rank the variables {}. They are ignored when comparing "
                      "monomials, so the result may not be a Groebner basis.".format(ordering, missing),
                      utils.OrderingWarning)
    return missing

def initialize_pairs(basis):
    '''
    Every unordered pair of the basis, first to last, in a FIFO queue.
    '''
    return deque(itertools.combinations(basis, 2))

def saturate(basis, pairs, ordering, use_criteria=False, max_pairs=None, verbose=False):
    '''
    The pair loop. Grows basis in place until every pair in the queue has
    been processed, then returns it.

    Parameters
    ----------
    basis : list of Polynomial
        The current basis. New remainders are appended to it.
    pairs : deque
        Pairs of polynomials still to be processed. New pairs go on the right.
    ordering : MonomialOrdering
    use_criteria : bool
        Skip pairs with relatively prime lead monomials.
    max_pairs : int, optional
        The most pairs to take off the queue.
    verbose : bool
        Prints every new basis element.

    Returns
    -------
    basis : list of Polynomial
    '''
    processed = 0
    while pairs:
        p, q = pairs.popleft()
        if max_pairs is not None and processed >= max_pairs:
            raise utils.PairLimitExceeded("Processed {} pairs with {} still waiting and a basis of {} polynomials"\
                                          .format(processed, len(pairs) + 1, len(basis)))
        processed += 1

        # Relative Prime check: If the lead monomials have no common variable the S-polynomial reduces to 0
        if use_criteria and p.lead_monomial(ordering).is_relatively_prime(q.lead_monomial(ordering)):
            continue

        h = reduce(s_polynomial(p, q, ordering), basis, ordering)
        if not h.is_zero:
            pairs.extend((g, h) for g in basis)
            basis.append(h)
            if verbose:
                print("New polynomial #{} - {}".format(len(basis), h))
    if verbose:
        print("Processed {} pairs".format(processed))
    return basis

def sort_basis(basis, ordering):
    '''
    Sorts polynomials by lead monomial under ordering, smallest first. Ties
    are broken by the terms themselves so the order is always the same.
    '''
    ordering = as_ordering(ordering)
    key = monomial_key(ordering)
    return sorted(basis, key=lambda p: (key(p.lead_monomial(ordering)), tuple(zip(p.monomials, p.coeff.tolist()))))

def reduce_groebner_basis(basis, ordering, tail_reduce=False, verbose=False):
    '''
    Turns a Groebner basis into the reduced one.

    Everything is made monic and sorted. Then each polynomial in turn is
    divided by the others and made monic again. Ones that divide to zero
    are redundant and are removed right away, so the polynomials after them
    are divided by what is left. This repeats until a pass changes nothing.

    Parameters
    ----------
    basis : iterable of Polynomial
    ordering : MonomialOrdering or sequence of variable names
    tail_reduce : bool
        Divide with normal_form instead of reduce.
    verbose : bool
        Prints the basis size after each pass.

    Returns
    -------
    list of Polynomial
        Monic, distinct and sorted by lead monomial.
    '''
    ordering = as_ordering(ordering)
    divide = normal_form if tail_reduce else reduce

    current = [make_monic(p, ordering) for p in basis if not p.is_zero]
    current = sort_basis([p for p in current if not p.is_zero], ordering)

    changed = True
    i = 1 #Tracks what pass we are on.
    while changed:
        previous = current
        working = list(current)
        idx = 0
        while idx < len(working):
            others = working[:idx] + working[idx+1:]
            reduced_p = make_monic(divide(working[idx], others, ordering), ordering)
            if reduced_p.is_zero:
                del working[idx]
            else:
                working[idx] = reduced_p
                idx += 1

        unique = list()
        for p in working:
            if p not in unique:
                unique.append(p)
        current = sort_basis(unique, ordering)
        changed = current != previous
        if verbose:
            print("Reduction pass #{} - {} polynomials".format(i, len(current)))
        i += 1
    return current
