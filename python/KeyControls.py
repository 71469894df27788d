from GestureProcessor import TRAINING

KEY_NONE = (-1, 255)
KEY_ESC = 27
KEY_TAB = 9
KEY_CAPTURE = (10, 13, 32)  # Enter / Space
KEY_BACKSPACE = (8, 127)
KEY_CTRL_D = 4
KEY_CTRL_L = 12

HELP_TEXT = (
    "type name | Enter/Space: capture | Tab: mode | "
    "Ctrl+D: delete name | Ctrl+L: clear | Esc: quit"
)


class KeyControls:
    """
    Turns cv2.waitKey codes into session actions.
    Printable keys edit the gesture-name buffer while in training mode.
    """

    def __init__(self, processor, max_name_length=32):
        self.processor = processor
        self.max_name_length = max_name_length
        self.name_buffer = ""

    def handle_key(self, key, hands) -> bool:
        """Apply one key press. Returns False when the user asked to quit."""
        if key in KEY_NONE:
            return True
        if key == KEY_ESC:
            return False

        if key == KEY_TAB:
            self.processor.toggle_mode()
        elif key == KEY_CTRL_L:
            self.processor.clear()
        elif key == KEY_CTRL_D:
            if self.processor.delete(self.name_buffer.strip()):
                self.name_buffer = ""
        elif self.processor.mode != TRAINING:
            return True
        elif key in KEY_CAPTURE:
            result = self.processor.capture(self.name_buffer, hands)
            if result.ok:
                self.name_buffer = ""
        elif key in KEY_BACKSPACE:
            self.name_buffer = self.name_buffer[:-1]
        elif 32 < key < 127 and len(self.name_buffer) < self.max_name_length:
            self.name_buffer += chr(key)
        return True
