"""Example: draw springs on an existing axes alongside other artists."""

import numpy as np

import springplot as sp

fig, ax = sp.figure()

anchors = np.array([[0.0, 0.0], [4.0, 3.0], [8.0, 0.0]])
ax.scatter(anchors[:, 0], anchors[:, 1], color=sp.COLORS["text"], zorder=3)

layer = sp.SpringLayer(diameter=0.4, tension=0.5, color=sp.COLOR_CYCLE[1])
layer.draw(ax, {
    "x": anchors[:-1, 0],
    "y": anchors[:-1, 1],
    "xend": anchors[1:, 0],
    "yend": anchors[1:, 1],
})
ax.set_aspect("equal")

sp.save(fig, "custom-axes.svg")
