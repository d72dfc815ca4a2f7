import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from morsetree import Branch, GrowthAutomaton, TreeConfig


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def config() -> TreeConfig:
    return TreeConfig(
        branch_angle=40.0,
        length_decay=0.72,
        width_decay=0.8,
        min_length=10.0,
        min_width=0.6,
        clearance=2.0,
    )


@pytest.fixture
def root() -> Branch:
    return Branch(x1=350.0, y1=500.0, x2=350.0, y2=380.0,
                  angle=-90.0, length=120.0, width=6.0, parent=None)


@pytest.fixture
def automaton(config: TreeConfig, root: Branch) -> GrowthAutomaton:
    return GrowthAutomaton(config, root)
