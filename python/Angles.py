import math
from typing import Dict, List, MutableMapping, Sequence, Tuple, Union

WRIST = 0

# Landmark indices for each finger, base knuckle to tip.
FINGER_INDICES: Dict[str, Tuple[int, int, int, int]] = {
    "thumb": (1, 2, 3, 4),
    "index": (5, 6, 7, 8),
    "middle": (9, 10, 11, 12),
    "ring": (13, 14, 15, 16),
    "pinky": (17, 18, 19, 20),
}

FINGER_ORDER: Tuple[str, ...] = ("thumb", "index", "middle", "ring", "pinky")

EPSILON = 1e-9

Point = Tuple[float, float, float]
LandmarkLike = Union[Sequence[float], MutableMapping[str, float]]


def _build_finger_joints() -> Dict[str, Tuple[Tuple[int, int, int], ...]]:
    # Each chain is anchored at the wrist so every finger yields three
    # (previous, joint, next) triples: base knuckle plus the two finger joints.
    joints = {}
    for finger in FINGER_ORDER:
        chain = (WRIST,) + FINGER_INDICES[finger]
        joints[finger] = tuple(
            (chain[i], chain[i + 1], chain[i + 2]) for i in range(len(chain) - 2)
        )
    return joints


FINGER_JOINTS: Dict[str, Tuple[Tuple[int, int, int], ...]] = _build_finger_joints()


def extract_point(entry: Union[LandmarkLike, object]) -> Point:
    if hasattr(entry, "x") and hasattr(entry, "y") and hasattr(entry, "z"):
        return (float(entry.x), float(entry.y), float(entry.z))
    if isinstance(entry, dict):
        return (float(entry.get("x", 0.0)), float(entry.get("y", 0.0)), float(entry.get("z", 0.0)))
    if isinstance(entry, (list, tuple)) and len(entry) >= 3:
        return (float(entry[0]), float(entry[1]), float(entry[2]))
    raise ValueError("Unsupported landmark format; expected object with x,y,z or sequence of 3 values.")


def _vec(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _length(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def compute_angle(a: Point, b: Point, c: Point) -> float:
    """Angle ABC in radians at joint B, in [0, pi].

    Returns 0.0 when either arm of the angle has zero length.
    """
    v1 = _vec(a, b)
    v2 = _vec(c, b)
    len1 = _length(v1)
    len2 = _length(v2)
    if len1 <= EPSILON or len2 <= EPSILON:
        return 0.0

    cosine = _dot(v1, v2) / (len1 * len2)
    cosine = max(min(cosine, 1.0), -1.0)
    return math.acos(cosine)


def compute_finger_angles(
    points: Sequence[Point],
    finger_definitions: Dict[str, Tuple[Tuple[int, int, int], ...]] = None,
) -> Dict[str, List[float]]:
    if not points:
        return {}

    fingers = finger_definitions or FINGER_JOINTS
    result: Dict[str, List[float]] = {}
    for finger, joints in fingers.items():
        result[finger] = [
            compute_angle(points[a], points[b], points[c]) for a, b, c in joints
        ]
    return result


def flatten_finger_angles(angles: Dict[str, List[float]]) -> List[float]:
    """Flatten per-finger angles in thumb..pinky order."""
    flat: List[float] = []
    for finger in FINGER_ORDER:
        flat.extend(angles.get(finger, []))
    return flat
