# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Graph helpers built on DisjointSet."""

from typing import Iterable, NamedTuple, Tuple
from unionfind.disjoint_set import DisjointSet


class Edge(NamedTuple):
    weight: float
    u: int
    v: int


def connected_components(
    size: int, edges: Iterable[Tuple[int, int]]
) -> Tuple[Tuple[int, ...], ...]:
    dj = DisjointSet(size)
    for u, v in edges:
        dj.union(u, v)
    return dj.sorted()


# https://en.wikipedia.org/wiki/Kruskal%27s_algorithm
def spanning_forest(size: int, edges: Iterable[Edge]) -> Tuple[Edge, ...]:
    """Minimum spanning forest by Kruskal's algorithm.

    Equal weights keep their input order.
    """
    dj = DisjointSet(size)
    forest = []
    for edge in sorted((Edge(*e) for e in edges), key=lambda e: e.weight):
        if dj.union(edge.u, edge.v):
            forest.append(edge)
    return tuple(forest)
