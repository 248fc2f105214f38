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

"""Replays union-find operation scripts.

Each script runs against a fresh DisjointSet sized by the config; with no
scripts the built-in demo runs.

    unionfind --size 6 ops.txt
    unionfind --config run.toml --print_sets ops.txt more_ops.txt
"""

from absl import app
from absl import flags
from absl import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple
from unionfind import config
from unionfind import script
from unionfind import util
from unionfind.disjoint_set import DisjointSet


FLAGS = flags.FLAGS


flags.DEFINE_string("config", None, "TOML config file; flags override its values.")
flags.DEFINE_string(
    "log_level",
    "INFO",
    "The threshold for what messages will be logged. One of DEBUG, INFO, WARN, "
    "ERROR, or FATAL.",
)


Script = Tuple[str, Tuple[script.Operation, ...]]


def _scripts(argv: Sequence[str]) -> Tuple[Script, ...]:
    if not argv:
        return (("<demo>", script.demo()),)
    return tuple((name, script.parse(util.read_lines(name))) for name in argv)


def _format_sets(dj: DisjointSet) -> str:
    return " ".join("{" + ",".join(str(e) for e in s) + "}" for s in dj.sorted())


def replay(
    run_config: config.RunConfig, scripts: Sequence[Script], print
) -> Tuple[DisjointSet, ...]:
    results = []
    for name, operations in scripts:
        logging.info("Replaying %s, %d operations", name, len(operations))
        dj = DisjointSet(run_config.size)
        for result in script.run(dj, operations):
            print(script.format_result(result))
        if run_config.print_sets:
            print(_format_sets(dj))
        results.append(dj)
    return tuple(results)


def _run(argv):
    logging.set_verbosity(FLAGS.log_level)

    config_file: Optional[Path] = Path(FLAGS.config) if FLAGS.config else None
    run_config = config.load(config_file)
    scripts = _scripts(argv[1:])

    with util.file_printer(run_config.output_file) as print:
        replay(run_config, scripts, print)


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
