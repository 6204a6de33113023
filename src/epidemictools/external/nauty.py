from __future__ import annotations

import os
import shutil
import subprocess
from typing import Iterator

from epidemictools.errors import CatalogReadError, GraphFormatError, InvalidCatalogEntryError, SizeExceededError
from epidemictools.graph.adjacency import MAX_VERTICES, Graph
from epidemictools.io.graph6 import g6_to_graph


NAUTY_GENG = os.environ.get("NAUTY_GENG", "geng")


def nauty_available() -> bool:
    """Returns True iff geng appears runnable."""
    return shutil.which(NAUTY_GENG) is not None


# ---------------------------------------------------------------------------
# Graph generation (geng)
# ---------------------------------------------------------------------------

def geng_g6(n: int, *, connected: bool = True) -> Iterator[str]:
    """Stream graph6 strings from nauty's geng.

    Parameters
    ----------
    n : int
        Number of vertices, at most MAX_VERTICES.
    connected : bool
        Only connected graphs (-c).

    The geng process is killed if the stream is abandoned before the end.
    """
    if n > MAX_VERTICES:
        raise SizeExceededError(f"matrix size is too large: {n} > {MAX_VERTICES}")
    if not nauty_available():
        raise CatalogReadError(
            "nauty not available (need 'geng' in PATH, or set NAUTY_GENG)."
        )

    cmd = [NAUTY_GENG, "-q", "-g"]
    if connected:
        cmd.append("-c")
    cmd.append(str(n))

    try:
        p = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except OSError as e:
        raise CatalogReadError(f"cannot run {NAUTY_GENG}: {e}") from e

    with p:
        assert p.stdout is not None
        try:
            for line in p.stdout:
                s = line.strip()
                if not s or s.startswith(">"):
                    continue
                yield s
        except BaseException:
            p.kill()
            raise
        err = p.stderr.read() if p.stderr is not None else ""

    if p.returncode != 0:
        raise CatalogReadError(
            f"geng failed for n={n} with return code {p.returncode}: {err.strip()}"
        )


def geng_graphs(n: int, *, connected: bool = True) -> Iterator[Graph]:
    """Same as geng_g6, decoded into Graph objects."""
    stream = geng_g6(n, connected=connected)
    try:
        for i, g6 in enumerate(stream, start=1):
            try:
                yield g6_to_graph(g6)
            except GraphFormatError as e:
                raise InvalidCatalogEntryError(str(e), source="geng", lineno=i, line=g6) from e
    finally:
        stream.close()
