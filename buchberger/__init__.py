from buchberger.monomial import Monomial
from buchberger.term import Term
from buchberger.polynomial import Polynomial
from buchberger.ordering import MonomialOrdering, LexOrdering, lex
from buchberger.operations import s_polynomial, reduce, normal_form, make_monic, is_groebner_basis
from buchberger.groebner_basis import solve
from buchberger.utils import OrderingWarning, PairLimitExceeded
