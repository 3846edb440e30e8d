#!/usr/bin/env python3
"""Test TerminalDisplayTarget escape-code output."""

import io
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pixel_engine import (CanvasConfig, Color, FrameBuffer, Point,
                          TerminalDisplayTarget)

RED = Color.from_u8(255, 0, 0)
GREEN = Color.from_u8(0, 255, 0)


def make_frame():
    config = CanvasConfig(width=2, height=2, box_size=1)
    frame = FrameBuffer(config, bytearray(config.frame_size))
    # Top-left red, bottom-left green, right column transparent
    frame.set_pixel(Point(0, 1), RED)
    frame.set_pixel(Point(0, 0), GREEN)
    return config, frame


def test_full_blocks_top_row_first():
    config, frame = make_frame()
    target = TerminalDisplayTarget(config, use_half_blocks=False, show_logs=False)
    text = target.render(frame)
    lines = text[len('\x1b[H'):].split('\n')
    assert lines[0].startswith('\x1b[48;2;255;0;0m ')
    assert '\x1b[48;2;0;0;0m ' in lines[0]
    assert lines[1].startswith('\x1b[48;2;0;255;0m ')


def test_half_blocks_pack_two_rows():
    config, frame = make_frame()
    target = TerminalDisplayTarget(config, use_half_blocks=True, show_logs=False)
    text = target.render(frame)
    assert '\x1b[38;2;255;0;0m\x1b[48;2;0;255;0m▀' in text
    assert text.count('\n') == 1


def test_box_size_widens_pixels():
    config = CanvasConfig(width=1, height=1, box_size=3)
    frame = FrameBuffer(config, bytearray(config.frame_size))
    target = TerminalDisplayTarget(config, use_half_blocks=False, show_logs=False)
    assert '\x1b[48;2;0;0;0m   \x1b[0m' in target.render(frame)


def test_display_and_shutdown_write_screen_codes():
    config, frame = make_frame()
    stream = io.StringIO()
    with TerminalDisplayTarget(config, show_logs=False, stream=stream) as target:
        target.display(frame)
    out = stream.getvalue()
    assert out.startswith('\x1b[?1049h')
    assert out.endswith('\x1b[?1049l')


def test_log_lines_shown_and_handler_removed():
    config = CanvasConfig(width=80, height=2, box_size=1)
    frame = FrameBuffer(config, bytearray(config.frame_size))
    target = TerminalDisplayTarget(config, use_half_blocks=False, log_lines=2, stream=io.StringIO())
    root = logging.getLogger()
    assert target.log_capture in root.handlers

    old_level = root.level
    root.setLevel(logging.INFO)
    try:
        logging.getLogger("pixel_engine.test").info("hello frame")
    finally:
        root.setLevel(old_level)

    assert "pixel_engine.test - hello frame" in target.render(frame)

    capture = target.log_capture
    target.shutdown()
    assert capture not in root.handlers
