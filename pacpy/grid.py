# grid.py
# Static tile map: walls, pellets, empty floor. Occupancy queries and the
# two mutations the game needs (eat a pellet, refill the board).

from collections import deque, namedtuple
from enum import Enum

from pacpy.config import COLS, ROWS, TILE


class Tile(Enum):
    PELLET = 0
    WALL = 1
    EMPTY = 2


class MapFormatError(ValueError):
    """Raised when a map description does not match the declared layout."""


Point = namedtuple("Point", ["x", "y"])

_CHARS = {"0": Tile.PELLET, "1": Tile.WALL, "2": Tile.EMPTY}

# TILE MAP LEGEND: 0 = pellet, 1 = wall, 2 = empty (no pellet)
DEFAULT_MAP = (
    "1111111111111111111111111111",
    "1000000000000000000000000001",
    "1011110111111101111110111101",
    "1020000100000101000010000201",
    "1011101110111101110111011101",
    "1000100000100000000100001001",
    "1110101110111111110111010111",
    "1000001000000000000100000001",
    "1011111011111111111011111101",
    "1000000010001100001000000001",
    "1111111010110111011111111111",
    "1000000010000000001000000001",
    "1011111110111111111011111101",
    "1000000000000000000000000001",
    "1011111111110111111111111101",
    "1000000000000000000000000001",
    "1011110111111111111011111101",
    "1000000000100000000000000001",
    "1111111110111111101111111111",
    "1000000000000000000000000001",
    "1011111111110111111111111101",
    "1000000000000100000000000001",
    "1011111111110111111111111101",
    "1000000000000000000000000001",
    "1011111011111111111011111101",
    "1000000010000000001000000001",
    "1111101110110111010111110111",
    "1000000000100000000100000001",
    "1011111110111111111011111101",
    "1000000000000000000000000001",
    "1011111111111111111111111101",
    "1000000000000000000000000001",
    "1011111111111111111111111101",
    "1000000000000000000000000001",
    "1111111111111111111111111111",
)


def parse_map(raw_rows, cols=COLS, rows=ROWS):
    """Turn map strings into a row-major list of Tile rows.

    Fails fast on anything that does not match the declared size or alphabet.
    """
    raw_rows = list(raw_rows)
    if len(raw_rows) != rows:
        raise MapFormatError(f"expected {rows} rows, got {len(raw_rows)}")
    tiles = []
    for y, line in enumerate(raw_rows):
        if len(line) != cols:
            raise MapFormatError(f"row {y}: expected {cols} columns, got {len(line)}")
        row = []
        for x, ch in enumerate(line):
            if ch not in _CHARS:
                raise MapFormatError(f"row {y}, column {x}: unknown tile {ch!r}")
            row.append(_CHARS[ch])
        tiles.append(row)
    return tiles


class Grid:
    def __init__(self, tiles, tile_size: int = TILE):
        self.tiles = [list(row) for row in tiles]
        self.rows = len(self.tiles)
        self.cols = len(self.tiles[0]) if self.rows else 0
        self.tile = tile_size
        self.width = self.cols * tile_size
        self.height = self.rows * tile_size
        self.pellets_remaining = self.count(Tile.PELLET)

    @classmethod
    def from_rows(cls, raw_rows, tile_size: int = TILE):
        raw_rows = list(raw_rows)
        cols = len(raw_rows[0]) if raw_rows else 0
        return cls(parse_map(raw_rows, cols=cols, rows=len(raw_rows)), tile_size)

    @classmethod
    def default(cls, tile_size: int = TILE):
        return cls(parse_map(DEFAULT_MAP), tile_size)

    def in_bounds(self, tx: int, ty: int) -> bool:
        return 0 <= tx < self.cols and 0 <= ty < self.rows

    def tile_at(self, tx: int, ty: int) -> Tile:
        if not self.in_bounds(tx, ty):
            return Tile.WALL
        return self.tiles[ty][tx]

    def is_wall(self, tx: int, ty: int) -> bool:
        # outside the map counts as wall
        return self.tile_at(tx, ty) is Tile.WALL

    def tile_of(self, px: float, py: float) -> Point:
        # floor division rounds toward -inf, so x = -1 lands in tile -1
        return Point(int(px // self.tile), int(py // self.tile))

    def tile_center(self, t: int) -> float:
        return t * self.tile + self.tile / 2

    def count(self, kind: Tile) -> int:
        return sum(1 for row in self.tiles for v in row if v is kind)

    def consume_pellet(self, tx: int, ty: int) -> bool:
        if self.tile_at(tx, ty) is not Tile.PELLET:
            return False
        self.tiles[ty][tx] = Tile.EMPTY
        self.pellets_remaining -= 1
        return True

    def refill(self):
        """Put a pellet on every floor tile. Walls are left alone."""
        for row in self.tiles:
            for x, v in enumerate(row):
                if v is not Tile.WALL:
                    row[x] = Tile.PELLET
        self.pellets_remaining = self.count(Tile.PELLET)


# -----------------------
# Reachability (BFS over floor tiles)
# -----------------------
def neighbors_of(pt, grid):
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        nx, ny = pt.x + dx, pt.y + dy
        if not grid.is_wall(nx, ny):
            yield Point(nx, ny)


def reachable_from(start, grid):
    """Return set of Points reachable from start through non-wall tiles."""
    start = Point(*start)
    if grid.is_wall(start.x, start.y):
        return set()
    q = deque([start])
    seen = {start}
    while q:
        u = q.popleft()
        for v in neighbors_of(u, grid):
            if v not in seen:
                seen.add(v); q.append(v)
    return seen


def unreachable_floor(start, grid):
    """Floor tiles (pellet or empty) the player can never walk to from start."""
    reachable = reachable_from(start, grid)
    return [Point(x, y)
            for y in range(grid.rows)
            for x in range(grid.cols)
            if not grid.is_wall(x, y) and Point(x, y) not in reachable]
