from typing import List, Optional

from FeatureExtractor import extract_features
from GestureErrors import InvalidInputError


class HandFeatureExtractor:
    """
    Computes the gesture feature vector for each hand.
    Stores results back on the provided HandData objects.
    """

    def process(self, hands) -> None:
        for hand in hands:
            self.process_hand(hand)

    def process_hand(self, hand) -> Optional[List[float]]:
        if hand is None or hand.landmarks is None:
            return None
        try:
            hand.features = extract_features(hand.landmarks)
        except InvalidInputError as e:
            print(f"[PY] Skipping hand features: {e}")
            hand.features = None
        return hand.features
