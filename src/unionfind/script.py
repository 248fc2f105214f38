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

"""Operation scripts: one operation per line, e.g. 'union 1 2'.

'#' starts a comment, blank lines are skipped.
"""

from absl import logging
from importlib import resources
from typing import Any, Callable, Dict, Generator, Iterable, NamedTuple, Tuple
from unionfind.disjoint_set import DisjointSet


_DEMO_SCRIPT_FILE = "demo.txt"

# name => number of int arguments
_ARITY = {
    "union": 2,
    "connected": 2,
    "find": 1,
    "sets": 0,
    "count": 0,
}


class Operation(NamedTuple):
    name: str
    args: Tuple[int, ...] = ()
    line_number: int = 0


class Result(NamedTuple):
    operation: Operation
    value: Any


def parse(lines: Iterable[str]) -> Tuple[Operation, ...]:
    operations = []
    for line_number, line in enumerate(lines, start=1):
        tokens = line.split("#", 1)[0].split()
        if not tokens:
            continue
        name, *args = tokens
        if name not in _ARITY:
            raise ValueError(f"Line {line_number}: unknown operation '{name}'")
        if len(args) != _ARITY[name]:
            raise ValueError(
                f"Line {line_number}: '{name}' takes {_ARITY[name]} args,"
                f" got {len(args)}"
            )
        try:
            int_args = tuple(int(a) for a in args)
        except ValueError:
            raise ValueError(f"Line {line_number}: non-integer argument in {args}")
        operations.append(Operation(name, int_args, line_number))
    return tuple(operations)


def demo() -> Tuple[Operation, ...]:
    return parse(
        resources.files("unionfind.data")
        .joinpath(_DEMO_SCRIPT_FILE)
        .read_text()
        .splitlines()
    )


_APPLY: Dict[str, Callable[..., Any]] = {
    "union": DisjointSet.union,
    "connected": DisjointSet.connected,
    "find": DisjointSet.find,
    "sets": DisjointSet.sorted,
    "count": lambda dj: dj.component_count,
}
assert _APPLY.keys() == _ARITY.keys()


def run(
    dj: DisjointSet, operations: Iterable[Operation]
) -> Generator[Result, None, None]:
    for op in operations:
        value = _APPLY[op.name](dj, *op.args)
        logging.debug("line %d: %s%s => %s", op.line_number, op.name, op.args, value)
        yield Result(op, value)


def format_result(result: Result) -> str:
    op = result.operation
    tokens = (op.name,) + tuple(str(a) for a in op.args)
    return " ".join(tokens + ("->", str(result.value)))
