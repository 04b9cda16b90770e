"""Option defaults loaded from / saved to JSON or CSV settings files."""
from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Any, Iterable

SETTINGS_FLAGS = ("--settings", "--save-settings")


def add_settings_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--settings",
        dest="settings_path",
        default=None,
        help="Load option defaults from a settings file (json or csv).",
    )
    parser.add_argument(
        "--save-settings",
        dest="save_settings_path",
        default=None,
        help="Save the effective option values to a settings file (json or csv).",
    )


def split_settings_args(
    argv: Iterable[str],
) -> tuple[list[str], str | None, str | None]:
    """
    Pull ``--settings`` / ``--save-settings`` out of ``argv``.

    They must be known before the parser runs, since the loaded values
    become parser defaults.
    """
    found: dict[str, str | None] = {flag: None for flag in SETTINGS_FLAGS}
    rest: list[str] = []
    args = list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        flag, eq, value = arg.partition("=")
        if flag in found:
            if not eq:
                if i + 1 >= len(args):
                    raise SystemExit(f"{flag} requires a path.")
                value = args[i + 1]
                i += 1
            found[flag] = value
        else:
            rest.append(arg)
        i += 1
    return rest, found["--settings"], found["--save-settings"]


def first_positional(argv: Iterable[str]) -> str | None:
    for arg in argv:
        if not arg.startswith("-"):
            return arg
    return None


def _csv_value(raw: str) -> Any:
    text = raw.strip()
    if not text:
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def load_settings(path: Path) -> dict[str, Any]:
    """Read a flat CSV (key,value rows) or a JSON object."""
    if not path.exists():
        raise SystemExit(f"Settings file not found: {path}")

    if path.suffix.lower() == ".csv":
        data: dict[str, Any] = {}
        with path.open("r", newline="", encoding="utf-8") as handle:
            for row in csv.reader(handle):
                if not row or not row[0].strip():
                    continue
                key = row[0].strip()
                if key.lower() == "key":
                    continue
                data[key] = _csv_value(row[1]) if len(row) > 1 else ""
        return data

    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise SystemExit(f"Settings file must be a JSON object: {path}")
    return data


def select_settings(data: dict[str, Any], command: str | None) -> dict[str, Any]:
    """
    Pick the section for ``command``.

    JSON files may hold one object per subcommand plus a ``default`` section;
    a flat file applies to every command.
    """
    if command and isinstance(data.get(command), dict):
        return dict(data[command])
    if isinstance(data.get("default"), dict):
        return dict(data["default"])
    if all(not isinstance(v, dict) for v in data.values()):
        return dict(data)
    return {}


def _option_actions(parser: argparse.ArgumentParser) -> list[argparse.Action]:
    return [a for a in parser._actions if a.option_strings and a.dest != "help"]


def apply_settings(parser: argparse.ArgumentParser, settings: dict[str, Any]) -> None:
    for action in _option_actions(parser):
        if action.dest in settings:
            action.default = settings[action.dest]
            action.required = False


def find_subparser(
    parser: argparse.ArgumentParser,
    command: str | None,
) -> argparse.ArgumentParser | None:
    if not command:
        return None
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action.choices.get(command)
    return None


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if hasattr(value, "item"):
        return value.item()
    return value


def collect_settings(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    *,
    exclude: Iterable[str] = (),
) -> dict[str, Any]:
    skip = set(exclude)
    return {
        a.dest: _plain(getattr(args, a.dest, None))
        for a in _option_actions(parser)
        if a.dest not in skip and a.dest != "version"
    }


def save_settings(
    path: Path,
    settings: dict[str, Any],
    *,
    command: str | None = None,
) -> None:
    """
    Write ``settings``. JSON output is sectioned by ``command`` and merged
    into an existing file; CSV output is flat.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(["key", "value"])
            for key in sorted(settings):
                writer.writerow([key, json.dumps(settings[key], ensure_ascii=True)])
        return

    data: dict[str, Any] = {}
    if path.exists():
        data = load_settings(path)
        if data and all(not isinstance(v, dict) for v in data.values()):
            data = {"default": data}
    if command:
        data[command] = settings
    else:
        data = settings

    with path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, sort_keys=True, ensure_ascii=True)
        handle.write("\n")
