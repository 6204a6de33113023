from .nauty import (
    NAUTY_GENG,
    nauty_available,
    geng_g6,
    geng_graphs,
)

__all__ = [
    "NAUTY_GENG",
    "nauty_available",
    "geng_g6",
    "geng_graphs",
]
