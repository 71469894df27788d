import mediapipe as mp
from HandData import HandData


class HandTracker:
    def __init__(
        self,
        cfg,
    ):
        self.cfg = cfg
        tcfg = cfg.get("tracker", {})

        # Single-hand matcher: only the first detected hand is ever used.
        self.mp_hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            model_complexity=tcfg.get("model_complexity", 1),
            min_detection_confidence=tcfg.get("min_detection_confidence", 0.5),
            min_tracking_confidence=tcfg.get("min_tracking_confidence", 0.5),
            max_num_hands=1,
        )

    def process_frame(self, frame_rgb, timestamp, frame_size):
        """
        Process an RGB frame.
        Returns a list with at most one HandData whose landmarks are
        (x, y, z) tuples in pixel space; z shares the x scale.
        frame_size: (width, height) of the frame.
        """
        result = self.mp_hands.process(frame_rgb)
        hands = []

        if not result.multi_hand_landmarks:
            return hands

        width, height = frame_size
        lm = result.multi_hand_landmarks[0]
        h = HandData()
        h.raw_landmarks = lm
        h.landmarks = [(p.x * width, p.y * height, p.z * width) for p in lm.landmark]
        if result.multi_handedness:
            h.handedness = result.multi_handedness[0].classification[0].label
        h.visible = True
        h.timestamp = timestamp
        hands.append(h)

        return hands

    def close(self):
        self.mp_hands.close()
