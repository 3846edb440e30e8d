"""Interactive demo: line, circle, rectangle and sprite following a cursor moved with the arrow keys."""

import argparse
import logging
import math
import queue
import sys
import threading
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pixel_engine import (CanvasConfig, Circle, Color, FrameBuffer, Line, Point,
                          Rectangle, Sprite, SpriteLoadError,
                          TerminalDisplayTarget, clear_background, draw_all)

logging.basicConfig(
    filename="/tmp/pixel_engine_demo.log",
    level=logging.DEBUG,
    format="%(asctime)s.%(msecs)03d - %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

BACKGROUND = Color.from_u8(0x00, 0x00, 0x55)
CURSOR_STEP = 2


def input_thread(input_queue):
    """Background thread for input handling."""
    try:
        import termios
        import tty

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)

        try:
            tty.setcbreak(fd)

            while True:
                ch = sys.stdin.read(1)

                # Handle arrow keys (escape sequences)
                if ch == "\x1b":
                    ch2 = sys.stdin.read(1)
                    if ch2 == "[":
                        ch3 = sys.stdin.read(1)
                        if ch3 == "A":
                            input_queue.put("UP")
                        elif ch3 == "B":
                            input_queue.put("DOWN")
                        elif ch3 == "C":
                            input_queue.put("RIGHT")
                        elif ch3 == "D":
                            input_queue.put("LEFT")
                elif ch == "q":
                    input_queue.put("QUIT")
                    break
                elif ch == "s":
                    input_queue.put("SNAPSHOT")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    except Exception as exc:
        logger.warning(f"Keyboard input unavailable: {exc}")


def build_shapes(config: CanvasConfig, cursor: Point, sprite):
    """Shapes for one frame, rebuilt from the cursor position."""
    center = Point(config.width // 2, config.height // 2)
    radius = int(math.hypot(cursor.x - center.x, cursor.y - center.y))

    shapes = [
        Line(center, cursor, Color.from_u8(255, 255, 255)),
        Circle(center, radius, Color.from_u8(255, 255, 255)),
        Rectangle(
            Point(10, 10),
            Point(100, 10),
            Point(cursor.x + 90, cursor.y),
            cursor,
            Color.from_u8(255, 0, 0),
        ),
    ]
    if sprite is not None:
        shapes.append(sprite.at(cursor))
    return shapes


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=64)
    parser.add_argument("--height", type=int, default=48)
    parser.add_argument("--box-size", type=int, default=2, help="terminal columns per pixel")
    parser.add_argument("--sprite", type=Path, help="image drawn at the cursor")
    parser.add_argument("--fps", type=int, default=30)
    args = parser.parse_args()

    config = CanvasConfig(width=args.width, height=args.height, box_size=args.box_size)

    # Decoded once; each frame reuses the pixels at the cursor
    sprite = None
    if args.sprite is not None:
        try:
            sprite = Sprite(args.sprite, Point(0, 0))
        except SpriteLoadError as exc:
            print(f"{exc}: {exc.__cause__}", file=sys.stderr)
            sys.exit(1)

    storage = bytearray(config.frame_size)
    frame = FrameBuffer(config, storage)
    cursor = Point(config.width // 4, config.height // 4)
    frame_duration = 1.0 / args.fps

    input_queue = queue.Queue()
    has_input = sys.stdin.isatty()
    if has_input:
        threading.Thread(target=input_thread, args=(input_queue,), daemon=True).start()

    logger.info(f"Demo started: {config.width}x{config.height}, box size {config.box_size}")

    with TerminalDisplayTarget(config, use_half_blocks=True) as display:
        try:
            while True:
                frame_start = time.time()

                if has_input:
                    try:
                        while True:
                            key = input_queue.get_nowait()

                            if key == "QUIT":
                                return
                            elif key == "SNAPSHOT":
                                frame.save(f"/tmp/pixel_engine_{int(frame_start)}.png")
                            elif key == "UP":
                                cursor = Point(cursor.x, cursor.y + CURSOR_STEP)
                            elif key == "DOWN":
                                cursor = Point(cursor.x, cursor.y - CURSOR_STEP)
                            elif key == "RIGHT":
                                cursor = Point(cursor.x + CURSOR_STEP, cursor.y)
                            elif key == "LEFT":
                                cursor = Point(cursor.x - CURSOR_STEP, cursor.y)
                    except queue.Empty:
                        pass

                clear_background(frame, BACKGROUND)
                draw_all(frame, build_shapes(config, cursor, sprite))
                display.display(frame)

                elapsed = time.time() - frame_start
                sleep_time = max(0, frame_duration - elapsed)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            print("\nShutting down...")


if __name__ == "__main__":
    main()
