"""Option declaration files.

A declaration file is the explicit, static description of a program's
options that the help screen is built from:

    {
      "program": "cat",
      "summary": ["Concatenate FILE(s), or standard input, to standard output."],
      "parameters": ["Files whose contents to display"],
      "footer": ["Copyright(c) 2017"],
      "options": [
        {"names": ["-A", "--show-all"], "description": "equivalent to -vET"},
        {"names": ["--help"], "description": "display this help and exit"},
        {"names": ["--debug"], "description": "internal", "hidden": true}
      ]
    }

Optional top-level keys: "synopsis" (bool, default true) and "sort"
(bool, default true).
"""

import json
from pathlib import Path

from usagetable.lib.help_lib import OptionRegistry, OptionSpec, UsageSpec
from usagetable.lib.log_lib import get_output, trace
from usagetable.lib.table_lib import ConfigurationError

_OPTION_KEYS = {"names", "description", "hidden"}


def _string_list(value, what, source):
    """Accept a string or a list of strings."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ConfigurationError(f"{source}: '{what}' must be a string or a list of strings")


def _flag(value, what, source):
    if not isinstance(value, bool):
        raise ConfigurationError(f"{source}: '{what}' must be true or false")
    return value


def parse_option(entry, source="<declaration>", index=0):
    """Build an OptionSpec from one "options" entry."""
    where = f"{source}: option #{index + 1}"
    if not isinstance(entry, dict):
        raise ConfigurationError(f"{where} must be an object")
    unknown = set(entry) - _OPTION_KEYS
    if unknown:
        raise ConfigurationError(f"{where} has unknown key(s): {', '.join(sorted(unknown))}")
    if "names" not in entry:
        raise ConfigurationError(f"{where} has no 'names'")

    names = _string_list(entry["names"], "names", where)
    description = _string_list(entry.get("description", ""), "description", where)
    hidden = _flag(entry.get("hidden", False), "hidden", where)
    try:
        return OptionSpec(names, description, hidden=hidden)
    except ConfigurationError as e:
        raise ConfigurationError(f"{where}: {e}") from None


def parse_declaration(data, source="<declaration>"):
    """Turn a decoded declaration document into (UsageSpec, OptionRegistry).

    Raises:
        ConfigurationError: If the document is not a valid declaration
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: top level must be an object")

    options = data.get("options", [])
    if not isinstance(options, list):
        raise ConfigurationError(f"{source}: 'options' must be a list")

    registry = OptionRegistry()
    for i, entry in enumerate(options):
        option = parse_option(entry, source, i)
        try:
            registry.register(option)
        except ConfigurationError as e:
            raise ConfigurationError(f"{source}: option #{i + 1}: {e}") from None

    program = data.get("program", "<main class>")
    if not isinstance(program, str):
        raise ConfigurationError(f"{source}: 'program' must be a string")

    usage = UsageSpec(
        program_name=program,
        summary=_string_list(data.get("summary", []), "summary", source),
        footer=_string_list(data.get("footer", []), "footer", source),
        parameters=_string_list(data.get("parameters", []), "parameters", source),
        show_synopsis=_flag(data.get("synopsis", True), "synopsis", source),
        sort_options=_flag(data.get("sort", True), "sort", source),
    )
    return usage, registry


@trace
def load_declaration(path):
    """Load a declaration file.

    Args:
        path: Path to the JSON declaration

    Returns:
        (UsageSpec, OptionRegistry)

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Declaration file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path}: invalid JSON ({e})") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read declaration file {path}: {e}") from None

    usage, registry = parse_declaration(data, source=str(path))
    get_output().emit(1, "declaration: {n} option(s) from {path} ({hidden} hidden)",
                      channel='declaration', n=len(registry), path=path,
                      hidden=registry.hidden_count)
    return usage, registry
