# from the buchberger library
from buchberger import Polynomial, LexOrdering, solve, is_groebner_basis

# Example 1: x^2*y - 1 and x*y^2 - x with lex order x > y

ordering = LexOrdering(['x', 'y'])

f1 = Polynomial.from_pairs([(1., {'x': 2, 'y': 1}), (-1., {})])
f2 = Polynomial.from_pairs([(1., {'x': 1, 'y': 2}), (-1., {'x': 1})])
print("Initial basis F: [ {}, {} ]".format(f1, f2))

G = solve([f1, f2], ordering, verbose=True)
print("\nComputed Groebner basis G:")
for g in G:
    print("-", g)
print("Is a Groebner basis:", is_groebner_basis(G, ordering))


# Example 2: Same system written as strings, also reducing the lower terms

G = solve([Polynomial('x^2*y - 1'), Polynomial('x*y^2 - x')], ['x', 'y'], tail_reduce=True)
print("\nReduced Groebner basis G:")
for g in G:
    print("-", g)


# Example 3: Three variables

F = [Polynomial('x + y + z - 1'), Polynomial('x - y'), Polynomial('y - z')]
G = solve(F, ['x', 'y', 'z'], tail_reduce=True)
print("\nLinear system basis:")
for g in G:
    print("-", g)
