import sys

from epidemictools.io.matrix import parse_matrix
from epidemictools.spread.dp import build_probability_table
from epidemictools.spread.states import single_vertex_state

# Probability of full infection from vertex 0 as the number of days grows.
matrix = sys.argv[1] if len(sys.argv) > 1 else "011,101,110"
days = int(sys.argv[2]) if len(sys.argv) > 2 else 30

g = parse_matrix(matrix)
table = build_probability_table(g, days, 0.10)
start = single_vertex_state(0)
for t, row in enumerate(table):
    print(f"{t:3d}  {row[start]:.6f}")
