import pytest

from HandData import HandData

# Pixel-space (x, y, z) landmarks as reported by the hand tracker at 640x480.
OPEN_PALM = [
    (320.0, 400.0, 0.0),
    (280.0, 380.0, -5.0), (250.0, 350.0, -8.0), (230.0, 320.0, -10.0), (215.0, 295.0, -12.0),
    (290.0, 300.0, -3.0), (285.0, 250.0, -5.0), (282.0, 220.0, -6.0), (280.0, 195.0, -7.0),
    (320.0, 295.0, -2.0), (320.0, 240.0, -4.0), (320.0, 205.0, -5.0), (320.0, 180.0, -6.0),
    (350.0, 300.0, -3.0), (355.0, 250.0, -5.0), (358.0, 220.0, -6.0), (360.0, 198.0, -7.0),
    (378.0, 315.0, -4.0), (388.0, 275.0, -6.0), (394.0, 252.0, -7.0), (398.0, 232.0, -8.0),
]

FIST = [
    (320.0, 400.0, 0.0),
    (285.0, 380.0, -5.0), (265.0, 355.0, -10.0), (275.0, 335.0, -15.0), (295.0, 325.0, -18.0),
    (295.0, 305.0, -3.0), (290.0, 275.0, -15.0), (300.0, 295.0, -20.0), (305.0, 315.0, -18.0),
    (320.0, 300.0, -2.0), (318.0, 270.0, -15.0), (325.0, 292.0, -20.0), (328.0, 312.0, -18.0),
    (345.0, 305.0, -3.0), (345.0, 278.0, -14.0), (348.0, 298.0, -18.0), (350.0, 315.0, -16.0),
    (368.0, 318.0, -4.0), (370.0, 295.0, -12.0), (370.0, 310.0, -15.0), (368.0, 325.0, -13.0),
]


def make_hand(landmarks, handedness="Right", timestamp=1.0):
    hand = HandData()
    hand.landmarks = list(landmarks)
    hand.handedness = handedness
    hand.visible = True
    hand.timestamp = timestamp
    return hand


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def open_palm():
    return list(OPEN_PALM)


@pytest.fixture
def fist():
    return list(FIST)


@pytest.fixture
def open_hand():
    return make_hand(OPEN_PALM)


@pytest.fixture
def fist_hand():
    return make_hand(FIST)


@pytest.fixture
def clock():
    return FakeClock()
