"""Base class for things that react to keyboard and mouse events."""


class Control:
    """Receives input events; every handler does nothing unless overridden."""

    def on_key_down(self, key_code: int) -> None:
        """Called when a keyboard key is pressed."""

    def on_key_up(self, key_code: int) -> None:
        """Called when a keyboard key is released."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is pressed at window position (mx, my)."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is released at window position (mx, my)."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Called when the mouse moves to window position (mx, my)."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Called when the mouse wheel scrolls by ``delta`` at (mx, my)."""