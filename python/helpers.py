import math

import cv2

from Angles import FINGER_INDICES, FINGER_JOINTS, WRIST, compute_finger_angles
from GestureProcessor import INFERENCE

JOINT_COLOR = (0, 0, 255)
JOINT_OUTLINE = (255, 255, 255)
BONE_COLOR = (0, 0, 255)
TEXT_COLOR = (0, 255, 0)
ERROR_COLOR = (68, 68, 255)
INFO_COLOR = (68, 255, 68)


# ---------- debug drawing ----------
def draw_hand_debug(frame, hand_data):
    """
    Draw joints and the five wrist-to-tip finger chains for a single hand.
    Expects pixel-space landmarks on hand_data.landmarks.
    """
    if frame is None or hand_data is None or not hand_data.landmarks:
        return

    lm = hand_data.landmarks
    for indices in FINGER_INDICES.values():
        chain = (WRIST,) + indices
        for a, b in zip(chain, chain[1:]):
            cv2.line(
                frame,
                (int(lm[a][0]), int(lm[a][1])),
                (int(lm[b][0]), int(lm[b][1])),
                BONE_COLOR,
                2,
            )

    for x, y, _ in lm:
        cv2.circle(frame, (int(x), int(y)), 5, JOINT_COLOR, -1)
        cv2.circle(frame, (int(x), int(y)), 5, JOINT_OUTLINE, 1)


def draw_joint_angle_labels(
    frame,
    hand_data,
    color=(0, 255, 255),
    font_scale=0.35,
    thickness=1,
):
    """
    Draw bend angles (degrees) next to each joint used as an angle feature.
    """
    if frame is None or hand_data is None or not hand_data.landmarks:
        return

    lm = hand_data.landmarks
    angles = compute_finger_angles(lm)

    for finger_name, joints in FINGER_JOINTS.items():
        finger_angles = angles.get(finger_name, [])
        for joint_idx, (_, target_idx, _) in enumerate(joints):
            if joint_idx >= len(finger_angles):
                continue
            x = int(lm[target_idx][0])
            y = int(lm[target_idx][1])
            text = f"{math.degrees(finger_angles[joint_idx]):.0f}"

            (tw, th), baseline = cv2.getTextSize(
                text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, thickness
            )
            box_pt1 = (x, y - th - baseline - 2)
            box_pt2 = (x + tw + 2, y + baseline + 2)
            cv2.rectangle(frame, box_pt1, box_pt2, (0, 0, 0), -1)
            cv2.putText(
                frame,
                text,
                (x + 1, y + 1),
                cv2.FONT_HERSHEY_SIMPLEX,
                font_scale,
                color,
                thickness,
                cv2.LINE_AA,
            )


def _put_line(frame, text, org, color, scale=0.6):
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), 3, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, 1, cv2.LINE_AA)


def draw_status(frame, processor, name_buffer="", help_text=None):
    """Overlay mode, gesture list, name input and prediction/status text."""
    if frame is None:
        return

    h = frame.shape[0]
    x0, y0, dy = 10, 25, 24

    _put_line(frame, f"Mode: {processor.mode}", (x0, y0), TEXT_COLOR)
    gestures = ", ".join(processor.gestures) or "-"
    _put_line(frame, f"Gestures: {gestures}", (x0, y0 + dy), TEXT_COLOR, 0.5)
    if processor.mode != INFERENCE:
        _put_line(frame, f"Name: {name_buffer}_", (x0, y0 + 2 * dy), TEXT_COLOR)

    status = processor.status
    if status is not None:
        color = ERROR_COLOR if status.level == "error" else INFO_COLOR
    else:
        color = TEXT_COLOR
    text = processor.display_text()
    if text:
        _put_line(frame, text, (x0, h - 45), color, 0.7)

    if help_text:
        _put_line(frame, help_text, (x0, h - 15), TEXT_COLOR, 0.4)
