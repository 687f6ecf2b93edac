import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ScriptedSource:
    """sample() 호출마다 미리 정해둔 값을 돌려주는 난수원"""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.calls = []

    def sample(self, population, k):
        self.calls.append((tuple(population), k))
        return list(self.draws.pop(0))


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def seeded_rng():
    return random.Random(20240601)


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
