# GestureMatcher.py
import math
import threading
from typing import Dict, List, Optional, Sequence, Tuple

from GestureErrors import DimensionMismatchError, InvalidInputError

UNKNOWN_LABEL = "Unknown"

DEFAULT_SIMILARITY_THRESHOLD = 0.65
DEFAULT_TAIL_WEIGHT = 2.0
DEFAULT_TAIL_LENGTH = 20


def to_percent(score: float) -> int:
    """Similarity score as a rounded percentage (half up), never below 0."""
    return max(0, int(math.floor(score * 100 + 0.5)))


def format_match(label: str, confidence: int) -> str:
    return f"{label} ({confidence}% confidence)"


class GestureMatcher:
    """
    Nearest-neighbour matcher over named feature vectors.

    Stored gestures are kept in insertion order; on equal similarity the
    gesture registered first wins.
    """

    def __init__(self, cfg=None):
        self.cfg = {
            "matcher": {
                "similarity_threshold": DEFAULT_SIMILARITY_THRESHOLD,
                "tail_weight": DEFAULT_TAIL_WEIGHT,
                "tail_length": DEFAULT_TAIL_LENGTH,
            },
        }
        self._gestures: Dict[str, List[float]] = {}
        self._lock = threading.RLock()
        self._inference_active = False
        self.update_config(cfg)

    def update_config(self, cfg):
        if cfg:
            for k, v in cfg.items():
                if isinstance(v, dict):
                    self.cfg.setdefault(k, {}).update(v)
                else:
                    self.cfg[k] = v

        m = self.cfg.get("matcher", {})
        self.similarity_threshold = float(
            m.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD)
        )
        self.tail_weight = float(m.get("tail_weight", DEFAULT_TAIL_WEIGHT))
        self.tail_length = max(0, int(m.get("tail_length", DEFAULT_TAIL_LENGTH)))

    # ------------------------------------------------------------
    # store
    # ------------------------------------------------------------
    def train(self, name: str, vector: Sequence[float]) -> str:
        """Store `vector` under `name`, replacing any gesture with that name."""
        clean = (name or "").strip()
        if not clean:
            raise InvalidInputError("Please enter a gesture name")
        if not vector:
            raise InvalidInputError("Cannot train gesture from an empty feature vector")

        with self._lock:
            self._gestures[clean] = [float(v) for v in vector]
        return clean

    def remove(self, name: str) -> bool:
        with self._lock:
            removed = self._gestures.pop(name, None) is not None
            if not self._gestures:
                self._inference_active = False
        return removed

    def clear_all(self) -> None:
        with self._lock:
            self._gestures.clear()
            self._inference_active = False

    def names(self) -> List[str]:
        with self._lock:
            return list(self._gestures)

    def get(self, name: str) -> Optional[List[float]]:
        with self._lock:
            vector = self._gestures.get(name)
            return list(vector) if vector is not None else None

    def __len__(self):
        with self._lock:
            return len(self._gestures)

    def __contains__(self, name):
        with self._lock:
            return name in self._gestures

    # ------------------------------------------------------------
    # inference switch
    # ------------------------------------------------------------
    @property
    def inference_active(self) -> bool:
        return self._inference_active

    def start_inference(self) -> bool:
        with self._lock:
            if not self._gestures:
                print("[Matcher] Please train some gestures first!")
                self._inference_active = False
                return False
            self._inference_active = True
            return True

    def stop_inference(self) -> None:
        self._inference_active = False

    # ------------------------------------------------------------
    # scoring
    # ------------------------------------------------------------
    def similarity(self, a: Sequence[float], b: Sequence[float]) -> float:
        """
        1 minus the weighted mean absolute difference of two vectors.
        The last `tail_length` features (angles and fingertip distances in the
        standard layout) count `tail_weight` times. Result is not clamped.
        """
        if len(a) != len(b):
            raise DimensionMismatchError(len(a), len(b))
        if not a:
            return 0.0

        tail_start = len(a) - self.tail_length
        total_diff = 0.0
        total_weight = 0.0
        for i, (x, y) in enumerate(zip(a, b)):
            weight = self.tail_weight if i >= tail_start else 1.0
            total_diff += abs(x - y) * weight
            total_weight += weight

        if total_weight <= 0:
            return 0.0
        return 1.0 - total_diff / total_weight

    def match(self, query: Sequence[float]) -> Tuple[str, int]:
        """
        Returns (label, confidence_percent) for the best stored gesture.
        The label is UNKNOWN_LABEL unless the best similarity is strictly above
        the threshold.
        """
        with self._lock:
            candidates = list(self._gestures.items())

        best_name = None
        best_score = 0.0
        for name, features in candidates:
            try:
                score = self.similarity(query, features)
            except DimensionMismatchError as e:
                print(f"[Matcher] Skipping '{name}': {e}")
                score = 0.0
            if score > best_score:
                best_score = score
                best_name = name

        confidence = to_percent(best_score)
        if best_name is not None and best_score > self.similarity_threshold:
            return best_name, confidence
        return UNKNOWN_LABEL, confidence
