"""Example: a handful of springs between random points, tension scaled."""

import logging

import numpy as np

import springplot as sp
from springplot.logging_config import setup_logging

setup_logging(logging.DEBUG)

rng = np.random.default_rng(2)
rows = 6
data = {
    "x": rng.uniform(0, 10, rows),
    "y": rng.uniform(0, 10, rows),
    "xend": rng.uniform(0, 10, rows),
    "yend": rng.uniform(0, 10, rows),
    "tension": sp.rescale_tension(rng.uniform(0, 5, rows)),
}

sp.spring(
    data,
    diameter=0.5,
    title="Random Springs",
    filename="random-springs.svg",
)
