"""Polygon triangulation by ear clipping, with hole support and z-order hashing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

__all__ = ["earcut"]

# Inputs larger than this many vertices use the z-order hash for ear checks.
_HASH_THRESHOLD = 80


class _Node:
    __slots__ = ("i", "x", "y", "prev", "next", "z", "prev_z", "next_z", "steiner")

    def __init__(self, i: int, x: float, y: float) -> None:
        self.i = i
        self.x = x
        self.y = y
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None
        self.z = 0
        self.prev_z: Optional[_Node] = None
        self.next_z: Optional[_Node] = None
        self.steiner = False


def _area(p: _Node, q: _Node, r: _Node) -> float:
    """Signed area of a triangle."""
    return (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)


def _equals(p1: _Node, p2: _Node) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def _point_in_triangle(ax, ay, bx, by, cx, cy, px, py) -> bool:
    return (
        (cx - px) * (ay - py) - (ax - px) * (cy - py) >= 0
        and (ax - px) * (by - py) - (bx - px) * (ay - py) >= 0
        and (bx - px) * (cy - py) - (cx - px) * (by - py) >= 0
    )


def _intersects(p1: _Node, q1: _Node, p2: _Node, q2: _Node) -> bool:
    if (_equals(p1, q1) and _equals(p2, q2)) or (_equals(p1, q2) and _equals(p2, q1)):
        return True
    return (_area(p1, q1, p2) > 0) != (_area(p1, q1, q2) > 0) and (
        _area(p2, q2, p1) > 0
    ) != (_area(p2, q2, q1) > 0)


def _intersects_polygon(a: _Node, b: _Node) -> bool:
    p = a
    while True:
        if (
            p.i != a.i
            and p.next.i != a.i
            and p.i != b.i
            and p.next.i != b.i
            and _intersects(p, p.next, a, b)
        ):
            return True
        p = p.next
        if p is a:
            return False


def _locally_inside(a: _Node, b: _Node) -> bool:
    if _area(a.prev, a, a.next) < 0:
        return _area(a, b, a.next) >= 0 and _area(a, a.prev, b) >= 0
    return _area(a, b, a.prev) < 0 or _area(a, a.next, b) < 0


def _middle_inside(a: _Node, b: _Node) -> bool:
    p = a
    inside = False
    px = (a.x + b.x) / 2
    py = (a.y + b.y) / 2
    while True:
        nxt = p.next
        if (
            (p.y > py) != (nxt.y > py)
            and nxt.y != p.y
            and px < (nxt.x - p.x) * (py - p.y) / (nxt.y - p.y) + p.x
        ):
            inside = not inside
        p = nxt
        if p is a:
            return inside


def _is_valid_diagonal(a: _Node, b: _Node) -> bool:
    return (
        a.next.i != b.i
        and a.prev.i != b.i
        and not _intersects_polygon(a, b)
        and _locally_inside(a, b)
        and _locally_inside(b, a)
        and _middle_inside(a, b)
    )


def _remove_node(p: _Node) -> None:
    p.next.prev = p.prev
    p.prev.next = p.next
    if p.prev_z is not None:
        p.prev_z.next_z = p.next_z
    if p.next_z is not None:
        p.next_z.prev_z = p.prev_z


def _insert_node(i: int, point: Sequence[float], last: Optional[_Node]) -> _Node:
    p = _Node(i, float(point[0]), float(point[1]))
    if last is None:
        p.prev = p
        p.next = p
    else:
        p.next = last.next
        p.prev = last
        last.next.prev = p
        last.next = p
    return p


def _split_polygon(a: _Node, b: _Node) -> _Node:
    """Link two vertices with a bridge, splitting or merging rings."""
    a2 = _Node(a.i, a.x, a.y)
    b2 = _Node(b.i, b.x, b.y)
    an = a.next
    bp = b.prev

    a.next = b
    b.prev = a

    a2.next = an
    an.prev = a2

    b2.next = a2
    a2.prev = b2

    bp.next = b2
    b2.prev = bp

    return b2


def _get_leftmost(start: _Node) -> _Node:
    p = start
    leftmost = start
    while True:
        if p.x < leftmost.x:
            leftmost = p
        p = p.next
        if p is start:
            return leftmost


def _filter_points(start: _Node, end: Optional[_Node] = None) -> _Node:
    """Remove collinear and duplicate points."""
    if end is None:
        end = start
    p = start
    while True:
        again = False
        if not p.steiner and (_equals(p, p.next) or _area(p.prev, p, p.next) == 0):
            _remove_node(p)
            p = end = p.prev
            if p is p.next:
                break
            again = True
        else:
            p = p.next
        if not again and p is end:
            break
    return end


def _sort_linked(lst: _Node) -> _Node:
    """Merge sort of a list linked through next_z, ordered by z."""
    in_size = 1
    while True:
        p = lst
        lst = None
        tail = None
        num_merges = 0

        while p is not None:
            num_merges += 1
            q = p
            p_size = 0
            for _ in range(in_size):
                p_size += 1
                q = q.next_z
                if q is None:
                    break
            q_size = in_size

            while p_size > 0 or (q_size > 0 and q is not None):
                if p_size == 0:
                    e = q
                    q = q.next_z
                    q_size -= 1
                elif q_size == 0 or q is None:
                    e = p
                    p = p.next_z
                    p_size -= 1
                elif p.z <= q.z:
                    e = p
                    p = p.next_z
                    p_size -= 1
                else:
                    e = q
                    q = q.next_z
                    q_size -= 1

                if tail is not None:
                    tail.next_z = e
                else:
                    lst = e
                e.prev_z = tail
                tail = e

            p = q

        tail.next_z = None
        if num_merges <= 1:
            return lst
        in_size *= 2


class _Earcut:
    def __init__(self) -> None:
        self.indices: list[int] = []
        self.vertices = 0
        self.hashing = False
        self.min_x = 0.0
        self.min_y = 0.0
        self.inv_size = 0.0

    def run(self, rings: Sequence[Sequence[Sequence[float]]]) -> list[int]:
        if not rings:
            return self.indices

        threshold = _HASH_THRESHOLD
        for ring in rings:
            if threshold < 0:
                break
            threshold -= len(ring)

        outer = self._linked_list(rings[0], clockwise=True)
        if outer is None:
            return self.indices

        if len(rings) > 1:
            outer = self._eliminate_holes(rings, outer)

        self.hashing = threshold < 0
        if self.hashing:
            p = outer.next
            min_x = max_x = p.x
            min_y = max_y = p.y
            while True:
                min_x = min(min_x, p.x)
                min_y = min(min_y, p.y)
                max_x = max(max_x, p.x)
                max_y = max(max_y, p.y)
                p = p.next
                if p is outer:
                    break
            self.min_x = min_x
            self.min_y = min_y
            size = max(max_x - min_x, max_y - min_y)
            self.inv_size = 1.0 / size if size != 0.0 else 0.0

        self._earcut_linked(outer)
        return self.indices

    def _linked_list(self, ring: Sequence[Sequence[float]], clockwise: bool) -> Optional[_Node]:
        points = list(ring)
        total = 0.0
        for current, previous in zip(points, points[-1:] + points[:-1]):
            total += (float(previous[0]) - float(current[0])) * (
                float(current[1]) + float(previous[1])
            )

        last: Optional[_Node] = None
        base = self.vertices
        if clockwise == (total > 0):
            for offset, point in enumerate(points):
                last = _insert_node(base + offset, point, last)
        else:
            for offset in reversed(range(len(points))):
                last = _insert_node(base + offset, points[offset], last)

        if last is not None and _equals(last, last.next):
            _remove_node(last)
            last = last.next

        self.vertices += len(points)
        return last

    def _earcut_linked(self, ear: Optional[_Node], pass_: int = 0) -> None:
        if ear is None:
            return

        if not pass_ and self.hashing:
            self._index_curve(ear)

        stop = ear
        while ear.prev is not ear.next:
            prev = ear.prev
            nxt = ear.next

            if self._is_ear_hashed(ear) if self.hashing else self._is_ear(ear):
                self.indices.extend((prev.i, ear.i, nxt.i))
                _remove_node(ear)
                ear = nxt.next
                stop = nxt.next
                continue

            ear = nxt
            if ear is stop:
                if not pass_:
                    self._earcut_linked(_filter_points(ear), 1)
                elif pass_ == 1:
                    ear = self._cure_local_intersections(ear)
                    self._earcut_linked(ear, 2)
                elif pass_ == 2:
                    self._split_earcut(ear)
                break

    @staticmethod
    def _is_ear(ear: _Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if _area(a, b, c) >= 0:
            return False
        p = ear.next.next
        while p is not ear.prev:
            if (
                _point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and _area(p.prev, p, p.next) >= 0
            ):
                return False
            p = p.next
        return True

    def _is_ear_hashed(self, ear: _Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if _area(a, b, c) >= 0:
            return False

        min_tx = min(a.x, b.x, c.x)
        min_ty = min(a.y, b.y, c.y)
        max_tx = max(a.x, b.x, c.x)
        max_ty = max(a.y, b.y, c.y)

        min_z = self._z_order(min_tx, min_ty)
        max_z = self._z_order(max_tx, max_ty)

        p = ear.next_z
        while p is not None and p.z <= max_z:
            if (
                p is not ear.prev
                and p is not ear.next
                and _point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and _area(p.prev, p, p.next) >= 0
            ):
                return False
            p = p.next_z

        p = ear.prev_z
        while p is not None and p.z >= min_z:
            if (
                p is not ear.prev
                and p is not ear.next
                and _point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and _area(p.prev, p, p.next) >= 0
            ):
                return False
            p = p.prev_z

        return True

    def _cure_local_intersections(self, start: _Node) -> _Node:
        p = start
        while True:
            a = p.prev
            b = p.next.next
            if (
                not _equals(a, b)
                and _intersects(a, p, p.next, b)
                and _locally_inside(a, b)
                and _locally_inside(b, a)
            ):
                self.indices.extend((a.i, p.i, b.i))
                _remove_node(p)
                _remove_node(p.next)
                p = start = b
            p = p.next
            if p is start:
                return p

    def _split_earcut(self, start: _Node) -> None:
        a = start
        while True:
            b = a.next.next
            while b is not a.prev:
                if a.i != b.i and _is_valid_diagonal(a, b):
                    c = _split_polygon(a, b)
                    a = _filter_points(a, a.next)
                    c = _filter_points(c, c.next)
                    self._earcut_linked(a)
                    self._earcut_linked(c)
                    return
                b = b.next
            a = a.next
            if a is start:
                return

    def _eliminate_holes(self, rings, outer: _Node) -> _Node:
        queue = []
        for ring in rings[1:]:
            lst = self._linked_list(ring, clockwise=False)
            if lst is not None:
                if lst is lst.next:
                    lst.steiner = True
                queue.append(_get_leftmost(lst))
        queue.sort(key=lambda node: node.x)

        for hole in queue:
            self._eliminate_hole(hole, outer)
            outer = _filter_points(outer, outer.next)
        return outer

    @staticmethod
    def _eliminate_hole(hole: _Node, outer: _Node) -> None:
        bridge = _Earcut._find_hole_bridge(hole, outer)
        if bridge is not None:
            b = _split_polygon(bridge, hole)
            _filter_points(b, b.next)

    @staticmethod
    def _find_hole_bridge(hole: _Node, outer: _Node) -> Optional[_Node]:
        p = outer
        hx = hole.x
        hy = hole.y
        qx = float("-inf")
        m: Optional[_Node] = None

        while True:
            nxt = p.next
            if hy <= p.y and hy >= nxt.y and nxt.y != p.y:
                x = p.x + (hy - p.y) * (nxt.x - p.x) / (nxt.y - p.y)
                if hx >= x > qx:
                    qx = x
                    if x == hx:
                        if hy == p.y:
                            return p
                        if hy == nxt.y:
                            return nxt
                    m = p if p.x < nxt.x else nxt
            p = nxt
            if p is outer:
                break

        if m is None:
            return None
        if hx == qx:
            return m.prev

        stop = m
        tan_min = float("inf")
        mx = m.x
        my = m.y
        p = m.next
        while p is not stop:
            if (
                hx >= p.x >= mx
                and hx != p.x
                and _point_in_triangle(
                    hx if hy < my else qx, hy, mx, my, qx if hy < my else hx, hy, p.x, p.y
                )
            ):
                tan_cur = abs(hy - p.y) / (hx - p.x)
                if (tan_cur < tan_min or (tan_cur == tan_min and p.x > m.x)) and _locally_inside(
                    p, hole
                ):
                    m = p
                    tan_min = tan_cur
            p = p.next

        return m

    def _index_curve(self, start: _Node) -> None:
        p = start
        while True:
            p.z = p.z if p.z else self._z_order(p.x, p.y)
            p.prev_z = p.prev
            p.next_z = p.next
            p = p.next
            if p is start:
                break
        p.prev_z.next_z = None
        p.prev_z = None
        _sort_linked(p)

    def _z_order(self, x_: float, y_: float) -> int:
        x = int(32767.0 * (x_ - self.min_x) * self.inv_size)
        y = int(32767.0 * (y_ - self.min_y) * self.inv_size)

        x = (x | (x << 8)) & 0x00FF00FF
        x = (x | (x << 4)) & 0x0F0F0F0F
        x = (x | (x << 2)) & 0x33333333
        x = (x | (x << 1)) & 0x55555555

        y = (y | (y << 8)) & 0x00FF00FF
        y = (y | (y << 4)) & 0x0F0F0F0F
        y = (y | (y << 2)) & 0x33333333
        y = (y | (y << 1)) & 0x55555555

        return x | (y << 1)


def earcut(rings: Sequence[Sequence[Sequence[float]]]) -> list[int]:
    """Triangulate a polygon.

    ``rings`` holds the outer ring followed by any holes, each a sequence of
    ``(x, y)`` points. Returns vertex indices, three per triangle, numbering the
    points of all rings consecutively in the order given.
    """
    return _Earcut().run(rings)