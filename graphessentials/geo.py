"""Geolocation: infer missing vertex coordinates from their neighbours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import MutableSequence, Sequence

from graphessentials.graph import Graph
from graphessentials.operators import ParallelForEach, parallel_for
from graphessentials.timing import Timer

#: Marker for an unknown latitude or longitude.
INVALID = math.nan

#: Mean radius of the earth in kilometres.
EARTH_RADIUS_KM = 6371.0


@dataclass
class Coordinates:
    """Latitude and longitude in degrees; unknown values are NaN."""

    latitude: float = INVALID
    longitude: float = INVALID

    @property
    def is_valid(self) -> bool:
        return not (math.isnan(self.latitude) or math.isnan(self.longitude))


def radians(a: float) -> float:
    """Degrees to radians."""
    return a * math.pi / 180


def degrees(a: float) -> float:
    """Radians to degrees."""
    return a * 180 / math.pi


def _neighbor_edges(graph: Graph, v: int) -> range:
    start = graph.starting_edge(v)
    return range(start, start + graph.number_of_neighbors(v))


def mean(
    graph: Graph, coordinates: Sequence[Coordinates], length: int, v: int
) -> Coordinates:
    """Sum of the valid neighbour coordinates of ``v`` divided by ``length``."""
    latitude = 0.0
    longitude = 0.0
    for e in _neighbor_edges(graph, v):
        point = coordinates[graph.destination_vertex(e)]
        if point.is_valid:
            latitude += point.latitude
            longitude += point.longitude
    return Coordinates(latitude / length, longitude / length)


def midpoint(p1: Coordinates, p2: Coordinates) -> Coordinates:
    """Midpoint of two points on a sphere."""
    lat1, lon1 = radians(p1.latitude), radians(p1.longitude)
    lat2, lon2 = radians(p2.latitude), radians(p2.longitude)

    bx = math.cos(lat2) * math.cos(lon2 - lon1)
    by = math.cos(lat2) * math.sin(lon2 - lon1)

    latitude = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by * by),
    )
    longitude = lon1 + math.atan2(by, math.cos(lat1) + bx)
    return Coordinates(degrees(latitude), degrees(longitude))


def haversine(
    n: Coordinates, centre: Coordinates, radius: float = EARTH_RADIUS_KM
) -> float:
    """Approximate great-circle distance between two points, in ``radius`` units."""
    n_lat, n_lon = radians(n.latitude), radians(n.longitude)
    c_lat, c_lon = radians(centre.latitude), radians(centre.longitude)

    lat = c_lat - n_lat
    lon = c_lon - n_lon

    a = math.sin(lat / 2) ** 2 + math.cos(n_lat) * math.cos(c_lat) * math.sin(
        lon / 2
    ) ** 2
    c = 2 * math.asin(math.sqrt(min(1.0, max(0.0, a))))
    return radius * c


def spatial_median(
    graph: Graph,
    length: int,
    coordinates: MutableSequence[Coordinates],
    v: int,
    dinv: MutableSequence[float],
    max_iter: int = 1000,
    eps: float = 1e-3,
) -> None:
    """Set ``coordinates[v]`` to the spatial median of its valid neighbours.

    ``dinv`` receives the inverse haversine distance of every examined edge.
    """
    edges = _neighbor_edges(graph, v)
    y = mean(graph, coordinates, length, v)
    iteration = 0

    while True:
        iteration += 1
        total = 0.0
        nonzeros = 0
        valid: list[tuple[int, Coordinates]] = []

        for e in edges:
            point = coordinates[graph.destination_vertex(e)]
            if not point.is_valid:
                continue
            distance = haversine(point, y)
            dinv[e] = 0.0 if distance == 0 else 1 / distance
            if distance != 0:
                nonzeros += 1
            total += dinv[e]
            valid.append((e, point))

        t_lat = 0.0
        t_lon = 0.0
        if total:
            for e, point in valid:
                weight = dinv[e] / total
                t_lat += weight * point.latitude
                t_lon += weight * point.longitude

        num_zeros = len(valid) - nonzeros
        if num_zeros == 0:
            y1 = Coordinates(t_lat, t_lon)
        elif num_zeros == len(valid):
            coordinates[v] = Coordinates(y.latitude, y.longitude)
            return
        else:
            r_lat = (t_lat - y.latitude) * total
            r_lon = (t_lon - y.longitude) * total
            r = math.hypot(r_lat, r_lon)
            rinv = 1.0 if r == 0 else num_zeros / r
            keep = max(0.0, 1 - rinv)
            pull = min(1.0, rinv)
            y1 = Coordinates(
                keep * t_lat + pull * y.latitude,
                keep * t_lon + pull * y.longitude,
            )

        shift = math.hypot(y.latitude - y1.latitude, y.longitude - y1.longitude)
        if shift < eps or iteration > max_iter:
            coordinates[v] = y1
            return

        y = y1


def _spatial_center(
    graph: Graph,
    coordinates: MutableSequence[Coordinates],
    v: int,
    dinv: MutableSequence[float],
    spatial_iterations: int,
) -> None:
    if coordinates[v].is_valid:
        return

    neighbors = [
        point
        for point in (
            coordinates[graph.destination_vertex(e)] for e in _neighbor_edges(graph, v)
        )
        if point.is_valid
    ]

    if len(neighbors) == 1:
        only = neighbors[0]
        coordinates[v] = Coordinates(only.latitude, only.longitude)
    elif len(neighbors) == 2:
        coordinates[v] = midpoint(neighbors[0], neighbors[1])
    elif len(neighbors) > 2:
        spatial_median(graph, len(neighbors), coordinates, v, dinv, spatial_iterations)
    else:
        coordinates[v] = Coordinates()


def run(
    graph: Graph,
    coordinates: MutableSequence[Coordinates],
    total_iterations: int,
    spatial_iterations: int = 1000,
) -> float:
    """Fill in unknown coordinates over ``total_iterations`` passes.

    Each pass places every unknown vertex at its only known neighbour, the
    midpoint of two, or the spatial median of more. Returns elapsed
    milliseconds.
    """
    if total_iterations < 0 or spatial_iterations < 0:
        raise ValueError("iteration counts must be non-negative")
    if len(coordinates) < graph.number_of_vertices:
        raise ValueError("coordinates must hold one entry per vertex")

    dinv = [0.0] * graph.number_of_edges
    timer = Timer()
    timer.start()
    for _ in range(total_iterations):
        parallel_for(
            graph,
            lambda v: _spatial_center(graph, coordinates, v, dinv, spatial_iterations),
            ParallelForEach.VERTEX,
        )
    return timer.end()