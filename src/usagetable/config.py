"""Settings for usagetable.

Three-layer resolution (highest priority wins):
  1. CLI flags - explicit on the command line
  2. Project config - .usagetable.json in the working directory or above
  3. Global config - ~/.usagetable/config.json (or --config PATH)

Once `usagetable render opts.json --layout two-up --save` has run, later
renders in the same project pick the layout up without flags.
"""

import json
import os
from pathlib import Path

from usagetable.lib.log_lib import get_output

PROJECT_CONFIG_NAME = ".usagetable.json"

# Keys that can be stored in config files
SETTING_KEYS = ["layout", "program", "hang_indent"]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.usagetable/)."""
    return Path.home() / ".usagetable"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .usagetable.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning {} when missing or malformed."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        get_output().emit(0, "config: ignoring malformed {path}: {err}",
                          channel='config', path=path, err=e)
        return {}
    if not isinstance(data, dict):
        get_output().emit(0, "config: ignoring {path}: top level is not an object",
                          channel='config', path=path)
        return {}
    return data


def load_global_config(path=None):
    """Load the global config file (or an explicit --config path)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .usagetable.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None, start_dir=None):
    """Resolve settings using three-layer precedence.

    For each key, checks (in order):
      1. CLI args (argparse namespace attribute, None = not given)
      2. Project .usagetable.json
      3. Global config (args.config if set, else ~/.usagetable/config.json)

    JSON files may spell keys with '-' or '_'.

    Returns a dict with resolved values (None when unset everywhere).
    """
    if keys is None:
        keys = SETTING_KEYS

    out = get_output()
    project_cfg, project_path = load_project_config(start_dir)
    global_path = getattr(args, "config", None)
    global_cfg = load_global_config(global_path)

    layers = [
        ("project", project_cfg),
        ("global", global_cfg),
    ]

    resolved = {}
    for key in keys:
        arg_key = key.replace("-", "_")
        json_keys = [arg_key, arg_key.replace("_", "-")]

        cli_val = getattr(args, arg_key, None)
        if cli_val is not None:
            resolved[arg_key] = cli_val
            out.emit(2, "config: {key} = {val!r} (command line)",
                     channel='config', key=arg_key, val=cli_val)
            continue

        resolved[arg_key] = None
        for source, cfg in layers:
            value = next((cfg[k] for k in json_keys if cfg.get(k) is not None), None)
            if value is not None:
                resolved[arg_key] = value
                where = project_path if source == "project" else (global_path or "global config")
                out.emit(2, "config: {key} = {val!r} ({where})",
                         channel='config', key=arg_key, val=value, where=where)
                break

    return resolved


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Merge data into .usagetable.json in project_dir (default: cwd)."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    existing = load_json(target)
    existing.update({k: v for k, v in data.items() if v is not None})
    with open(target, "w", encoding="utf-8") as f:
        json.dump(existing, f, indent=2)
        f.write("\n")
    return target

