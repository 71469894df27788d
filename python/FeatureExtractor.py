import math
from typing import List, Sequence

from Angles import EPSILON, FINGER_JOINTS, Point, compute_finger_angles, extract_point, flatten_finger_angles
from GestureErrors import InvalidInputError

NUM_LANDMARKS = 21
PALM = 0
FINGERTIP_INDICES = (4, 8, 12, 16, 20)

# Feature vector layout: positions, then joint angles, then fingertip distances.
# Changing the order or sizes changes which features the matcher weights.
FEATURE_LAYOUT_VERSION = 1
POSITION_FEATURES = NUM_LANDMARKS * 3
ANGLE_FEATURES = sum(len(joints) for joints in FINGER_JOINTS.values())
DISTANCE_FEATURES = len(FINGERTIP_INDICES) * (len(FINGERTIP_INDICES) - 1) // 2
FEATURE_LENGTH = POSITION_FEATURES + ANGLE_FEATURES + DISTANCE_FEATURES


# ==========================================
# 1. MATH & GEOMETRY (Pure Functions)
# ==========================================
def vec_dist(a: Point, b: Point) -> float:
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def to_points(landmarks) -> List[Point]:
    """Convert a hand pose into 21 (x, y, z) tuples."""
    if landmarks is None:
        raise InvalidInputError("No landmarks given")
    try:
        points = [extract_point(lm) for lm in landmarks]
    except ValueError as e:
        raise InvalidInputError(str(e)) from e
    if len(points) != NUM_LANDMARKS:
        raise InvalidInputError(
            f"Expected {NUM_LANDMARKS} landmarks, got {len(points)}"
        )
    return points


def hand_scale(points: Sequence[Point]) -> float:
    """Largest side of the x/y bounding box."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return max(max(xs) - min(xs), max(ys) - min(ys))


def normalize_landmarks(landmarks) -> List[Point]:
    """
    Express every landmark relative to the palm base, divided by the hand's
    bounding-box size. z uses the same factor as x/y.
    A pose whose bounding box has zero size normalizes to all-zero points.
    """
    points = to_points(landmarks)
    palm = points[PALM]
    scale = hand_scale(points)

    if scale <= EPSILON:
        print("[PY] Degenerate hand pose (zero bounding box), using zero features.")
        return [(0.0, 0.0, 0.0) for _ in points]

    return [
        ((p[0] - palm[0]) / scale, (p[1] - palm[1]) / scale, (p[2] - palm[2]) / scale)
        for p in points
    ]


def fingertip_distances(normalized: Sequence[Point]) -> List[float]:
    distances = []
    for i in range(len(FINGERTIP_INDICES)):
        for j in range(i + 1, len(FINGERTIP_INDICES)):
            distances.append(
                vec_dist(normalized[FINGERTIP_INDICES[i]], normalized[FINGERTIP_INDICES[j]])
            )
    return distances


# ==========================================
# 2. FEATURE VECTOR
# ==========================================
def extract_features(landmarks) -> List[float]:
    """
    Build the feature vector for one hand pose.

    Layout (FEATURE_LENGTH values):
        - 63 normalized positions, landmark order, x/y/z per landmark
        - 15 joint angles in radians, thumb..pinky, base to tip
        - 10 fingertip distances, pairs (4,8), (4,12) ... (16,20)

    Raises InvalidInputError unless exactly 21 landmarks are given.
    """
    normalized = normalize_landmarks(landmarks)

    features: List[float] = []
    for point in normalized:
        features.extend(point)

    features.extend(flatten_finger_angles(compute_finger_angles(normalized)))
    features.extend(fingertip_distances(normalized))
    return features
