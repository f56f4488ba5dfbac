"""Generates random starting layouts for the local searches."""

from __future__ import annotations

import random

from backend.models.grid import Coord, Grid, GridError


class LayoutGenerator:
    """Builds random grids by scattering obstacles."""

    @staticmethod
    def random_coord(width: int, height: int, rng: random.Random) -> Coord:
        return (rng.randrange(width), rng.randrange(height))

    @staticmethod
    def scatter(
        width: int, height: int, obstacles: int, rng: random.Random
    ) -> list[bool]:
        """Drop *obstacles* on independently chosen cells.

        Hitting a cell that is already blocked is a no-op, so the realized
        count may be lower than requested.
        """
        if not 0 <= obstacles < width * height:
            raise GridError(
                f"Cannot place {obstacles} obstacles on a {width}×{height} grid "
                f"and keep a cell free for the start."
            )
        flags = [False] * (width * height)
        for _ in range(obstacles):
            x, y = LayoutGenerator.random_coord(width, height, rng)
            flags[y * width + x] = True
        return flags

    @staticmethod
    def generate(
        width: int, height: int, obstacles: int, rng: random.Random
    ) -> Grid:
        """Random obstacles, then a start drawn among the free cells."""
        flags = LayoutGenerator.scatter(width, height, obstacles, rng)
        while True:
            x, y = LayoutGenerator.random_coord(width, height, rng)
            if not flags[y * width + x]:
                return Grid(width, height, flags, (x, y))

    @staticmethod
    def generate_anywhere(
        width: int, height: int, obstacles: int, rng: random.Random
    ) -> Grid:
        """Random obstacles and a start drawn among all cells.

        An obstacle that lands under the start is removed.
        """
        flags = LayoutGenerator.scatter(width, height, obstacles, rng)
        x, y = LayoutGenerator.random_coord(width, height, rng)
        flags[y * width + x] = False
        return Grid(width, height, flags, (x, y))
