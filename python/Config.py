import copy
import json
import os
import time

DEFAULT_CONFIG = {
    "camera": {"index": 0, "frame_width": 640, "frame_height": 480},
    "tracker": {
        "model_complexity": 1,
        "min_detection_confidence": 0.5,
        "min_tracking_confidence": 0.5,
    },
    "matcher": {"similarity_threshold": 0.65, "tail_weight": 2.0, "tail_length": 20},
    "session": {"status_seconds": 3.0},
    "network": {"enabled": True, "host": "127.0.0.1", "port": 5555},
    "debug": {
        "draw_landmarks": True,
        "draw_angles": False,
        "show_fps": False,
        "window_name": "Gesture Snapshot",
    },
}


def merge_config(base, override):
    """Return a copy of `base` with `override` merged in one section deep."""
    merged = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k].update(v)
        else:
            merged[k] = v
    return merged


def load_config(path="config.json"):
    if not os.path.exists(path):
        print(f"[PY] config '{path}' not found, using defaults.")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print("[PY] Failed to load config:", e)
        return {}


class ConfigWatcher:
    """
    Holds the effective configuration: `defaults`, then the JSON file, then
    `overrides`. The file is re-read when its mtime changes.
    Usage:
        watcher = ConfigWatcher("config.json", DEFAULT_CONFIG)
        cfg = watcher.get_config()        # initial load
        # later, once per frame:
        if watcher.check_reload():
            cfg = watcher.get_config()
    """

    def __init__(self, path="config.json", defaults=None, overrides=None, min_check_interval=0.5):
        self.path = path
        self.defaults = defaults or {}
        self.overrides = overrides or {}
        self._cfg = {}
        self._mtime = None
        self._last_checked = 0.0
        self._min_check_interval = min_check_interval  # seconds between checks
        self._reload()

    def _reload(self):
        file_cfg = {}
        if os.path.exists(self.path):
            self._mtime = os.path.getmtime(self.path)
            file_cfg = load_config(self.path)
        self._cfg = merge_config(merge_config(self.defaults, file_cfg), self.overrides)

    def get_config(self):
        return self._cfg

    def check_reload(self):
        """
        Call frequently; the file is only stat'ed every min_check_interval seconds.
        A missing file keeps the current config.
        Returns True when the effective config changed.
        """
        now = time.time()
        if now - self._last_checked < self._min_check_interval:
            return False
        self._last_checked = now

        try:
            if not os.path.exists(self.path):
                return False
            if os.path.getmtime(self.path) == self._mtime:
                return False
        except OSError as e:
            print("[ConfigWatcher] check_reload error:", e)
            return False

        print(f"[ConfigWatcher] Detected {self.path} change, reloading...")
        previous = self._cfg
        self._reload()
        return self._cfg != previous
