# "SPEED UP!" banner timing
BANNER_MS = 1000
FADE_MS = 300   # tail end of the banner fades out


class SpeedBanner:
    """Shows the speed-up banner for BANNER_MS after each pulse from the engine."""

    def __init__(self, duration_ms: int = BANNER_MS, fade_ms: int = FADE_MS):
        self.duration_ms = duration_ms
        self.fade_ms = min(fade_ms, duration_ms)
        self.shown_at = None

    def trigger(self, now_ms: int):
        self.shown_at = now_ms

    def reset(self):
        """Hide the banner, e.g. on restart."""
        self.shown_at = None

    def update(self, now_ms: int, pulse: bool):
        if pulse:
            self.trigger(now_ms)
        elif self.shown_at is not None and now_ms - self.shown_at >= self.duration_ms:
            self.shown_at = None

    def visible(self, now_ms: int) -> bool:
        if self.shown_at is None:
            return False
        return 0 <= now_ms - self.shown_at < self.duration_ms

    def alpha(self, now_ms: int) -> int:
        """0-255 opacity for the banner surface."""
        if not self.visible(now_ms):
            return 0
        remaining = self.duration_ms - (now_ms - self.shown_at)
        if self.fade_ms <= 0 or remaining >= self.fade_ms:
            return 255
        return int(remaining / self.fade_ms * 255)
