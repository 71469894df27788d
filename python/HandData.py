class HandData:
    """
    Simple container for per-hand data that flows between modules.
    """

    def __init__(self):
        # raw mediapipe landmark object (for drawing)
        self.raw_landmarks = None

        # list of 21 (x, y, z) tuples in pixel space
        self.landmarks = None

        # "Left" / "Right"
        self.handedness = "Unknown"

        # boolean flag
        self.visible = False

        # timing
        self.timestamp = 0.0  # absolute time (seconds)

        # feature vector computed per frame
        self.features = None

        # match result
        self.gesture = "none"
        self.confidence = 0

    def to_dict(self):
        """Serialize to JSON-friendly dict."""
        return {
            "handedness": self.handedness,
            "visible": self.visible,
            "gesture": self.gesture,
            "confidence": self.confidence,
            "landmarks": [list(p) for p in self.landmarks] if self.landmarks else [],
            "timestamp": self.timestamp,
        }
