#!/usr/bin/env python3
"""Test Polygon and Rectangle outlines."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pixel_engine import Color, Line, Point, Polygon, Rectangle
from frame_helpers import new_frame, painted

RED = Color.from_u8(255, 0, 0)
SQUARE = [Point(10, 10), Point(20, 10), Point(20, 20), Point(10, 20)]


def square_perimeter():
    return {
        Point(x, y)
        for x in range(10, 21)
        for y in range(10, 21)
        if x in (10, 20) or y in (10, 20)
    }


def test_square_draws_all_four_edges():
    frame, _ = new_frame()
    Polygon(SQUARE, RED).draw(frame)
    assert painted(frame) == square_perimeter()
    assert len(painted(frame)) == 40


def test_closing_edge_is_drawn():
    closed, _ = new_frame()
    Polygon(SQUARE, RED).draw(closed)

    open_outline, _ = new_frame()
    for p1, p2 in zip(SQUARE, SQUARE[1:]):
        Line(p1, p2, RED).draw(open_outline)

    assert painted(closed) != painted(open_outline)
    assert painted(closed) - painted(open_outline) == {Point(10, y) for y in range(11, 20)}


def test_two_points_degenerate_to_a_line():
    poly, _ = new_frame()
    Polygon([Point(3, 4), Point(15, 9)], RED).draw(poly)
    line, _ = new_frame()
    Line(Point(3, 4), Point(15, 9), RED).draw(line)
    assert painted(poly) == painted(line)


def test_single_vertex_and_empty():
    frame, storage = new_frame()
    Polygon([], RED).draw(frame)
    assert storage == bytearray(len(storage))

    Polygon([Point(7, 7)], RED).draw(frame)
    assert painted(frame) == {Point(7, 7)}


def test_vertex_order_is_preserved():
    square, _ = new_frame()
    Polygon(SQUARE, RED).draw(square)

    bowtie, _ = new_frame()
    Polygon([SQUARE[0], SQUARE[2], SQUARE[1], SQUARE[3]], RED).draw(bowtie)

    assert painted(square) != painted(bowtie)
    assert Point(15, 15) in painted(bowtie)
    assert Point(15, 15) not in painted(square)


def test_off_canvas_vertices_are_clipped():
    frame, storage = new_frame(width=16, height=16)
    Polygon([Point(-10, -10), Point(40, -10), Point(40, 40)], RED).draw(frame)
    assert len(storage) == 16 * 16 * 4
    assert all(0 <= p.x < 16 and 0 <= p.y < 16 for p in painted(frame))
    # Only the diagonal closing edge crosses the canvas
    assert painted(frame) == {Point(i, i) for i in range(16)}


def test_rectangle_matches_polygon():
    rect, _ = new_frame()
    Rectangle(*SQUARE, RED).draw(rect)
    poly, _ = new_frame()
    Polygon(SQUARE, RED).draw(poly)
    assert rect.data.tobytes() == poly.data.tobytes()


def test_color_setter_and_vertices_kept():
    poly = Polygon(SQUARE, RED)
    poly.color = Color.from_u8(0, 0, 200)
    frame, _ = new_frame()
    poly.draw(frame)
    assert frame.get_pixel(Point(15, 10)) == Color(0, 0, 200, 255)
    assert list(poly.points) == SQUARE
