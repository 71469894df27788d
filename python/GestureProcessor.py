import time
from typing import Callable, List, NamedTuple, Optional, Tuple

from GestureErrors import InvalidInputError
from GestureMatcher import GestureMatcher, format_match
from HandFeatures import HandFeatureExtractor

TRAINING = "training"
INFERENCE = "inference"
MODES = (TRAINING, INFERENCE)


class CaptureResult(NamedTuple):
    ok: bool
    name: Optional[str]
    message: str


class StatusMessage(NamedTuple):
    text: str
    level: str  # "info" / "error"
    expires_at: float


# ==========================================
# PROCESSING CORE
# ==========================================
class GestureProcessor:
    """
    Training/inference session around a GestureMatcher.

    Training mode captures snapshots of the current hand under a name;
    inference mode matches every frame against the stored gestures.
    Events (dicts) are handed to `publish`, typically NetworkBridge.send_event.
    """

    def __init__(
        self,
        cfg=None,
        matcher: Optional[GestureMatcher] = None,
        publish: Optional[Callable[[dict], object]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cfg = {"session": {"status_seconds": 3.0}}
        self.matcher = matcher if matcher is not None else GestureMatcher()
        self.feature_extractor = HandFeatureExtractor()
        self.publish = publish
        self.clock = clock

        self.mode = TRAINING
        self.prediction_text = ""
        self._status: Optional[StatusMessage] = None
        self.update_config(cfg)

    def update_config(self, cfg):
        if cfg:
            for k, v in cfg.items():
                if isinstance(v, dict):
                    self.cfg.setdefault(k, {}).update(v)
                else:
                    self.cfg[k] = v
            self.matcher.update_config(cfg)
        self.status_seconds = float(self.cfg.get("session", {}).get("status_seconds", 3.0))

    # ------------------------------------------------------------
    # status / events
    # ------------------------------------------------------------
    def _set_status(self, text: str, level: str) -> None:
        self._status = StatusMessage(text, level, self.clock() + self.status_seconds)
        prefix = "[PY] ERROR:" if level == "error" else "[PY]"
        print(prefix, text)

    @property
    def status(self) -> Optional[StatusMessage]:
        """Latest status message, or None once it has expired."""
        if self._status is not None and self.clock() >= self._status.expires_at:
            self._status = None
        return self._status

    def display_text(self) -> str:
        status = self.status
        if status is not None:
            return f"Error: {status.text}" if status.level == "error" else status.text
        if self.mode == INFERENCE:
            return self.prediction_text
        return ""

    def _emit(self, event: dict) -> None:
        if self.publish is None:
            return
        try:
            self.publish(event)
        except OSError as e:
            print("[PY] Failed to publish event:", e)

    @property
    def gestures(self) -> List[str]:
        return self.matcher.names()

    # ------------------------------------------------------------
    # modes
    # ------------------------------------------------------------
    def set_mode(self, mode: str) -> bool:
        if mode not in MODES:
            raise InvalidInputError(f"Unknown mode '{mode}', expected one of {MODES}")

        if mode == TRAINING:
            self.matcher.stop_inference()
            self.prediction_text = ""
        elif not self.matcher.start_inference():
            self._set_status("Please train some gestures first!", "error")
            return False

        if mode != self.mode:
            self.mode = mode
            self._emit({"event": "mode_changed", "mode": mode})
        return True

    def toggle_mode(self) -> bool:
        return self.set_mode(INFERENCE if self.mode == TRAINING else TRAINING)

    def _fall_back_if_empty(self) -> None:
        if self.mode == INFERENCE and not self.matcher.inference_active:
            self.set_mode(TRAINING)

    # ------------------------------------------------------------
    # training
    # ------------------------------------------------------------
    def _fail(self, message: str) -> CaptureResult:
        self._set_status(message, "error")
        return CaptureResult(False, None, message)

    def capture(self, name: str, hands) -> CaptureResult:
        """Store the first hand in `hands` under `name`."""
        if not (name or "").strip():
            return self._fail("Please enter a gesture name")

        hand = hands[0] if hands else None
        if hand is None or hand.landmarks is None:
            return self._fail("No hand detected! Please show your hand clearly.")

        features = self.feature_extractor.process_hand(hand)
        if features is None:
            return self._fail("Failed to capture gesture")

        try:
            stored = self.matcher.train(name, features)
        except InvalidInputError as e:
            return self._fail(str(e))

        message = f"Captured gesture: {stored}"
        self._set_status(message, "info")
        self._emit({"event": "gesture_captured", "name": stored, "gestures": self.gestures})
        return CaptureResult(True, stored, message)

    def delete(self, name: str) -> bool:
        if not self.matcher.remove(name):
            return False
        self._set_status(f"Deleted gesture: {name}", "info")
        self._emit({"event": "gesture_deleted", "name": name, "gestures": self.gestures})
        self._fall_back_if_empty()
        return True

    def clear(self) -> None:
        self.matcher.clear_all()
        self._set_status("All gestures cleared", "info")
        self._emit({"event": "gestures_cleared"})
        self._fall_back_if_empty()

    # ------------------------------------------------------------
    # inference
    # ------------------------------------------------------------
    def process_hands(self, hands) -> Optional[Tuple[str, int]]:
        """
        Match the first hand of this frame.
        Returns (label, confidence) in inference mode when a hand is visible,
        otherwise None.
        """
        if self.mode != INFERENCE or not self.matcher.inference_active:
            return None

        hand = hands[0] if hands else None
        if hand is None or hand.landmarks is None:
            self.prediction_text = "No hand detected"
            return None

        features = self.feature_extractor.process_hand(hand)
        if features is None:
            return None

        label, confidence = self.matcher.match(features)
        hand.gesture = label
        hand.confidence = confidence
        self.prediction_text = f"Detected Gesture: {format_match(label, confidence)}"
        self._emit(
            {
                "event": "prediction",
                "label": label,
                "confidence": confidence,
                "handedness": hand.handedness,
                "timestamp": hand.timestamp,
            }
        )
        return label, confidence
