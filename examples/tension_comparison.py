"""Example: same endpoints, three tensions, one legend entry each."""

import springplot as sp

tensions = {"loose": 1.5, "default": 0.75, "tight": 0.3}

series = {
    label: {
        "x": [0.0],
        "y": [i * 2.0],
        "xend": [10.0],
        "yend": [i * 2.0],
        "tension": [t],
    }
    for i, (label, t) in enumerate(tensions.items())
}

sp.spring(
    series,
    title="Spring Tension",
    xlabel="Distance",
    filename="spring-tension.svg",
)
