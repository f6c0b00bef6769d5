import numpy as np


def component_format(x) -> str:
    """Shortest text that reads back as the same float32.

    Non-finite values come out as ``nan``, ``inf`` and ``-inf``.
    """
    return str(np.float32(x))


def tuple_format(values) -> str:
    return "(" + ", ".join(component_format(v) for v in values) + ")"
