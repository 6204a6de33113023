from epidemictools.external.nauty import geng_graphs
from epidemictools.io.matrix import format_matrix
from epidemictools.search.target import solve_catalog

# Requires nauty's geng in PATH. All connected graphs on 8 vertices (11117 of them).
best = solve_catalog(
    geng_graphs(8, connected=True),
    target=0.70,
    rate=0.10,
    days=30,
    algorithm="dp",
    total=11117,
    report_every=500,
)
if best is None:
    print("no solution within tolerance")
else:
    print(f"v={best.probability:.10g} (candidate {best.index}, origin {best.origin})")
    print(format_matrix(best.graph))
