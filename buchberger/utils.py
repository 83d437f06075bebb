# A collection of constants and helpers shared by the Buchberger modules
import re
import numpy as np

#What we determine to be zero throughout the code
global_accuracy = 1.e-10
#Number of decimals kept when hashing coefficients, so that equal polynomials hash the same.
hash_precision = 6

class OrderingWarning(Warning):
    pass

class PairLimitExceeded(Exception):
    """Raised when the Buchberger loop processes more critical pairs than
    the caller allowed.

    Attributes
    ----------
    message : str
        A message describing the error that occurred.
    """

    def __init__(self, message):
        super(PairLimitExceeded, self).__init__(message)
        self.message = message

def is_zero(value):
    '''Checks whether a coefficient is numerically zero.

    Parameters
    ----------
    value : float

    Returns
    -------
    bool
        True if the magnitude of value is below global_accuracy.
    '''
    return abs(value) < global_accuracy

def clean_zeros_from_array(array, accuracy=None):
    '''Finds the entries of a coefficient array that are not numerically zero.

    Parameters
    ----------
    array : numpy array
    accuracy : float, optional
        Values with magnitude less than this count as 0. Defaults to global_accuracy.

    Returns
    -------
    mask : numpy array of bools
        True where the entry is kept.
    '''
    if accuracy is None:
        accuracy = global_accuracy
    return np.abs(array) >= accuracy

def round_for_hash(array):
    '''Rounds coefficients to hash_precision decimals so that floating point
    jitter below that precision does not change a hash.

    Parameters
    ----------
    array : array-like of floats

    Returns
    -------
    tuple of floats
    '''
    #Adding 0. turns -0. into 0.
    return tuple(float(c) for c in np.round(np.asarray(array, dtype=float), hash_precision) + 0.)

_COEFF = re.compile(r'^(\d+\.?\d*|\.\d+)?(.*)$')
_FACTOR = re.compile(r'^([A-Za-z_][A-Za-z_0-9]*)(?:\^(\d+))?$')

def _parse_monomial(monomial):
    '''
    Splits one signless term like '2.5x^2*y' into its coefficient and a
    dictionary of exponents.
    '''
    coefficientString, rest = _COEFF.match(monomial).groups()
    if coefficientString is None:
        coefficient = 1.
    else:
        coefficient = float(coefficientString)
    if rest.startswith('*'):
        if coefficientString is None:
            raise ValueError('Bad term {!r}: nothing before the *'.format(monomial))
        rest = rest[1:]
    exponents = dict()
    if rest == '':
        if coefficientString is None:
            raise ValueError('Bad term {!r}'.format(monomial))
        return coefficient, exponents
    for factor in rest.split('*'):
        match = _FACTOR.match(factor)
        if match is None:
            raise ValueError('Bad factor {!r} in term {!r}'.format(factor, monomial))
        var, power = match.groups()
        power = 1 if power is None else int(power)
        exponents[var] = exponents.get(var, 0) + power
    return coefficient, exponents

def make_poly_terms(inputString):
    '''
    Takes a string input of a polynomial and returns the (coefficient, exponents) pairs of its terms.
    Useful for writing test systems without building every monomial by hand.

    All strings must be of the following syntax. Ex. '3x^2*y - 2.1y^2*z + -14.73'

    1. Spaces are ignored.
    2. Terms are separated by '+' or '-'. Consecutive signs combine, so '+-' is the same as '-'.
    3. A coefficient comes first and may be followed by a '*'. A missing coefficient is 1.
    4. All variables inside a term are separated by a '*'. Variable names are identifiers like x, y1 or alpha.
    5. The power of a variable in a term is given following a '^' sign.
    6. Scientific notation for coefficients is not supported.

    Parameters
    ----------
    inputString : str

    Returns
    -------
    list of (float, dict) tuples
        One pair per term, in the order they appear.
    '''
    s = ''.join(inputString.split())
    if s == '':
        raise ValueError('Cannot make a polynomial from an empty string!')
    terms = list()
    sign = 1
    pending = False
    for piece in re.split(r'([+-])', s):
        if piece == '+':
            pending = True
        elif piece == '-':
            sign = -sign
            pending = True
        elif piece != '':
            coefficient, exponents = _parse_monomial(piece)
            terms.append((sign*coefficient, exponents))
            sign = 1
            pending = False
    if pending:
        raise ValueError('Polynomial string {!r} ends with a sign'.format(inputString))
    return terms
