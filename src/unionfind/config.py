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

from absl import flags
from importlib import resources
from pathlib import Path
import toml
from typing import Any, MutableMapping, NamedTuple, Optional


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"


# we use None as a sentinel for flag not set; RunConfig class has the actual defaults.
# CLI flags override config file (which overrides default RunConfig).
flags.DEFINE_integer("size", None, "Number of elements, ids are 0..size-1.")
flags.DEFINE_string("output_file", None, "Output filename ('-' means stdout).")
flags.DEFINE_bool(
    "print_sets", None, "Whether to print the final partition after each script."
)


class RunConfig(NamedTuple):
    size: int = 10
    output_file: str = "-"
    print_sets: bool = False

    def validate(self):
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            raise ValueError(f"'size' must be an integer, got {self.size!r}")
        if not isinstance(self.print_sets, bool):
            raise ValueError(f"'print_sets' must be a bool, got {self.print_sets!r}")
        if self.size < 0:
            raise ValueError("'size' must be zero or positive")
        return self


def write(dest: Path, config: RunConfig):
    toml_cfg = {
        "size": config.size,
        "output_file": config.output_file,
        "print_sets": config.print_sets,
    }
    dest.write_text(toml.dumps(toml_cfg))


def _resolve_config(config_file: Optional[Path] = None) -> MutableMapping[str, Any]:
    if config_file is None:
        return toml.loads(
            resources.files("unionfind.data").joinpath(_DEFAULT_CONFIG_FILE).read_text()
        )
    return toml.load(config_file)


_DEFAULT_CONFIG = RunConfig()


def _pop_flag(config: MutableMapping[str, Any], name: str) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, name)
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def load(config_file: Optional[Path] = None) -> RunConfig:
    config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    size = _pop_flag(config, "size")
    output_file = str(_pop_flag(config, "output_file"))
    print_sets = _pop_flag(config, "print_sets")

    if config:
        raise ValueError(f"Unexpected config: {config}")

    return RunConfig(
        size=size,
        output_file=output_file,
        print_sets=print_sets,
    ).validate()
