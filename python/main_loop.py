import os
import time
import cv2
import threading
from queue import Queue, Empty
from collections import deque

from Config import DEFAULT_CONFIG, ConfigWatcher
from GestureProcessor import GestureProcessor
from HandTracker import HandTracker
from KeyControls import HELP_TEXT, KeyControls
from Network import NetworkBridge
from helpers import draw_hand_debug, draw_joint_angle_labels, draw_status


# --------------------------------------------------------
# Queue for latest frame only (overwrite when full)
# --------------------------------------------------------
FRAME_QUEUE_MAX = 1


# --------------------------------------------------------
# CAPTURE THREAD
# --------------------------------------------------------
def capture_thread(frame_queue, stop_event, cfg):
    camera_cfg = cfg.get("camera", {})
    width = camera_cfg.get("frame_width", 640)
    height = camera_cfg.get("frame_height", 480)

    cap = cv2.VideoCapture(camera_cfg.get("index", 0))
    if not cap.isOpened():
        print("[PY] ERROR: Cannot open camera")
        stop_event.set()
        return
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

    tracker = HandTracker(cfg)
    fps_times = deque(maxlen=cfg.get("debug", {}).get("fps_window", 20))
    current_fps = 0.0

    print("[PY] Capture thread started.")

    while not stop_event.is_set():
        ok, frame = cap.read()
        if not ok:
            time.sleep(0.01)
            continue

        now = time.time()
        fps_times.append(now)
        if len(fps_times) > 1:
            current_fps = (len(fps_times) - 1) / (fps_times[-1] - fps_times[0])

        # Convert frame → RGB for MediaPipe
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        frame_h, frame_w = frame.shape[:2]
        hands = tracker.process_frame(rgb, now, (frame_w, frame_h))

        # Keep only the newest sample
        if frame_queue.full():
            try:
                frame_queue.get_nowait()
            except Empty:
                pass
        frame_queue.put((frame, hands, now, current_fps))

    tracker.close()
    cap.release()
    print("[PY] Capture thread exiting.")


# --------------------------------------------------------
# RECOGNITION THREAD
# --------------------------------------------------------
def recognition_thread(frame_queue, stop_event, cfg_watcher):
    current_cfg = cfg_watcher.get_config()

    net_cfg = current_cfg.get("network", {})
    network = None
    if net_cfg.get("enabled", True):
        network = NetworkBridge(net_cfg.get("host", "127.0.0.1"), net_cfg.get("port", 5555))

    processor = GestureProcessor(
        current_cfg, publish=network.send_event if network else None
    )
    controls = KeyControls(processor)

    debug_cfg = current_cfg.get("debug", {})
    window = debug_cfg.get("window_name", "Gesture Snapshot")
    cv2.namedWindow(window, cv2.WINDOW_NORMAL)

    print("[PY] Recognition thread started.")

    while not stop_event.is_set():
        try:
            frame, hands, timestamp, fps = frame_queue.get(timeout=0.1)
        except Empty:
            continue

        if cfg_watcher.check_reload():
            current_cfg = cfg_watcher.get_config()
            processor.update_config(current_cfg)
            debug_cfg = current_cfg.get("debug", {})

        if network:
            network.update()

        processor.process_hands(hands)

        if debug_cfg.get("draw_landmarks", True):
            for h in hands:
                draw_hand_debug(frame, h)
                if debug_cfg.get("draw_angles", False):
                    draw_joint_angle_labels(frame, h)
        draw_status(frame, processor, controls.name_buffer, HELP_TEXT)
        if debug_cfg.get("show_fps", False):
            cv2.putText(
                frame,
                f"FPS: {fps:.1f}",
                (frame.shape[1] - 120, 25),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.6,
                (255, 255, 0),
                2,
            )

        cv2.imshow(window, frame)
        if not controls.handle_key(cv2.waitKey(1) & 0xFF, hands):
            stop_event.set()
            break

    if network:
        network.close()
    cv2.destroyAllWindows()
    print("[PY] Recognition thread exiting.")


# --------------------------------------------------------
# MAIN ENTRY
# --------------------------------------------------------
def main(config_path="config.json", overrides=None):
    if not os.path.exists(config_path):
        print(f"[PY] WARNING: config '{config_path}' not found, using defaults.")
    cfg_watcher = ConfigWatcher(config_path, DEFAULT_CONFIG, overrides)
    cfg = cfg_watcher.get_config()

    frame_queue = Queue(maxsize=FRAME_QUEUE_MAX)
    stop_event = threading.Event()

    # --------------- start threads ----------------
    cap_thread = threading.Thread(
        target=capture_thread, args=(frame_queue, stop_event, cfg), daemon=True
    )
    rec_thread = threading.Thread(
        target=recognition_thread,
        args=(frame_queue, stop_event, cfg_watcher),
        daemon=True,
    )

    cap_thread.start()
    rec_thread.start()

    # Keep main thread alive
    try:
        while not stop_event.is_set():
            time.sleep(0.1)
    except KeyboardInterrupt:
        stop_event.set()

    cap_thread.join(timeout=1.0)
    rec_thread.join(timeout=1.0)

    print("[PY] Shutdown complete.")


if __name__ == "__main__":
    main()
