"""Terminal preview for frames, drawn with ANSI true-color escape codes."""

import sys
import logging
from collections import deque
from typing import List

from .canvas_config import CanvasConfig
from .framebuffer import FrameBuffer


class LogCapture(logging.Handler):
    """Logging handler that captures the last N log messages."""

    def __init__(self, maxlen=10):
        super().__init__()
        self.log_lines = deque(maxlen=maxlen)
        self.formatter = logging.Formatter('%(asctime)s.%(msecs)03d - %(name)s - %(message)s', datefmt='%H:%M:%S')

    def emit(self, record):
        try:
            msg = self.format(record)
            self.log_lines.append(msg)
        except Exception:
            self.handleError(record)


class TerminalDisplayTarget:
    """
    Show a FrameBuffer in the terminal.

    Uses the alternate screen buffer and writes each frame in a single call.
    Rows are emitted in buffer order, so logical y=0 ends up at the bottom.
    Alpha is flattened: fully transparent pixels show as black.
    """

    def __init__(self, config: CanvasConfig, use_half_blocks: bool = True, show_logs: bool = True, log_lines: int = 10, stream=None):
        """
        Initialize terminal display target.

        Args:
            config: Canvas dimensions; box_size sets how many terminal
                    columns each pixel spans
            use_half_blocks: If True, use Unicode half-blocks (▀) to pack
                           two pixel rows into one terminal line
            show_logs: If True, show recent log lines below the frame
            log_lines: Number of recent log lines to show
            stream: Text stream to write to (default sys.stdout)
        """
        self.config = config
        self.width = config.width
        self.height = config.height
        self.use_half_blocks = use_half_blocks
        self.show_logs = show_logs
        self.stream = stream if stream is not None else sys.stdout
        self._initialized = False

        self.log_capture = None
        if self.show_logs:
            self.log_capture = LogCapture(maxlen=log_lines)
            logging.getLogger().addHandler(self.log_capture)

    @property
    def chars_per_pixel(self) -> int:
        return self.config.box_size

    def initialize(self):
        """Enter alternate screen, hide cursor."""
        if self._initialized:
            return

        self.stream.write('\x1b[?1049h')
        self.stream.write('\x1b[?25l')
        self.stream.write('\x1b[2J')
        self.stream.flush()

        self._initialized = True

    def display(self, frame: FrameBuffer):
        """Write one frame to the terminal."""
        if not self._initialized:
            self.initialize()

        self.stream.write(self.render(frame))
        self.stream.flush()

    def render(self, frame: FrameBuffer) -> str:
        """Build the escape-code text for one frame without writing it."""
        out: List[str] = ['\x1b[H']

        if self.use_half_blocks:
            self._render_half_blocks(frame, out)
        else:
            self._render_full_blocks(frame, out)

        if self.show_logs and self.log_capture:
            self._render_log_section(out)

        return ''.join(out)

    @staticmethod
    def _flatten(pixel):
        r, g, b, a = (int(c) for c in pixel)
        if a == 0:
            return 0, 0, 0
        return r, g, b

    def _render_full_blocks(self, frame: FrameBuffer, out: List[str]):
        rows = frame.rows()
        cell = ' ' * self.chars_per_pixel

        for row in rows:
            for pixel in row:
                r, g, b = self._flatten(pixel)
                out.append(f'\x1b[48;2;{r};{g};{b}m{cell}')
            out.append('\x1b[0m\n')

    def _render_half_blocks(self, frame: FrameBuffer, out: List[str]):
        rows = frame.rows()
        cell = '▀' * self.chars_per_pixel

        for y in range(0, self.height, 2):
            for x in range(self.width):
                r1, g1, b1 = self._flatten(rows[y, x])
                if y + 1 < self.height:
                    r2, g2, b2 = self._flatten(rows[y + 1, x])
                    # Foreground is the upper pixel, background the lower one
                    out.append(f'\x1b[38;2;{r1};{g1};{b1}m\x1b[48;2;{r2};{g2};{b2}m{cell}')
                else:
                    out.append(f'\x1b[38;2;{r1};{g1};{b1}m{cell}')
            out.append('\x1b[0m\n')

    def _render_log_section(self, out: List[str]):
        out.append('\x1b[0m\n')

        terminal_width = self.width * self.chars_per_pixel
        for log_line in self.log_capture.log_lines:
            if len(log_line) > terminal_width:
                out.append(log_line[:terminal_width])
            else:
                out.append(log_line)
                out.append(' ' * (terminal_width - len(log_line)))
            out.append('\n')

    def shutdown(self):
        """Show cursor, exit alternate screen."""
        if self.log_capture:
            logging.getLogger().removeHandler(self.log_capture)
            self.log_capture = None

        if not self._initialized:
            return

        self.stream.write('\x1b[?25h')
        self.stream.write('\x1b[?1049l')
        self.stream.flush()

        self._initialized = False

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
