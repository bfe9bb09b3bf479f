# rtop

A terminal system monitor in the spirit of `top`, `htop` and `btop`. It shows
CPU load, memory and swap use, mounted disks, network traffic and the busiest
processes, and redraws the screen at a fixed interval.

## Installation

```
pip install .
```

## Usage

```
rtop
```

The monitor takes over the whole terminal until you press `q`.

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `-c`, `--config` | Path to a TOML configuration file | none |
| `-i`, `--interval` | Refresh interval in milliseconds (non-negative integer) | `1000` |
| `-v`, `--view` | `basic`, `detailed`, `process-focus`, `system-focus` | `basic` |
| `-t`, `--theme` | `default`, `dark`, `light`, `custom` | `default` |
| `-f`, `--filter` | Process filter | none |
| `-V`, `--version` | Print the version and exit | |

`--interval`, `--view`, `--theme` and `--filter` are checked and parsed, but
the running monitor does not use them: its refresh interval and theme come
from the configuration (see below), and it always starts in the default view.

### Keys

| Key | Action |
| --- | --- |
| `q` | Quit |
| `c` | Cycle the colour theme: default, dark, light, custom, then default again |
| `g` | From the default view go to the graph view; from any other view go to the default view |
| `1` | Default view: CPU, memory, disk and network panels above the process table |
| `2` | Graph view: CPU, memory and network history charts, and the process table |
| `3` | CPU focus |
| `4` | Memory focus |
| `5` | Compact view: two columns |

The status bar at the bottom lists these keys and the name of the current view.

## Configuration

The configuration is looked up in this order:

1. The file given with `--config`, if it exists. If it cannot be read or
   parsed, an error is printed to standard error and the search goes on.
2. `rtop/config.toml` in your user configuration directory. A file that does
   not parse is skipped silently.
3. The built-in defaults.

A configuration file must contain every field. A complete file with the
default values:

```toml
update_interval = 1000   # milliseconds
theme = "default"        # default, dark, light or custom (any other name gives default)
sort_by = "cpu"          # "cpu"; any other value sorts processes by memory
filters = []

[layout]
show_cpu = true
show_memory = true
show_network = true
show_disk = true
show_process_details = true
```

The `show_cpu`, `show_memory`, `show_disk` and `show_network` switches apply
to the default view only.

## Using it from Python

```python
from rtop.config import Config
from rtop.system import SystemState
from rtop.widgets import format_bytes

state = SystemState()
state.update()
print(state.cpu.average_usage, format_bytes(state.memory.total_memory))

for proc in state.processes.sorted_by_memory(5):
    print(proc.pid, proc.name, proc.memory_usage)

Config().save("config.toml")
```

The metric classes (`CpuState`, `MemoryState`, `DiskState`, `ProcessList`,
`NetworkState`) accept a sampler or provider callable, so they can be fed
data other than the live system's.

## What it does not do

- The `filters` setting and the `--filter` option do not filter the process
  list; every process is shown, in the order set by `sort_by`.
- Processes cannot be selected, signalled or killed from the screen.
- `show_process_details` is read and saved but changes nothing on screen.
- Only TOML configuration files are read.

## Development

```
pip install -e ".[test]"
pytest
```