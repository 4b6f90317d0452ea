import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    BuildStatus,
    HistoryError,
    Stage,
    Task,
    TaskEntry,
    TaskStatus,
    UnsupportedHistoryFormatError,
)

logger = logging.getLogger(__name__)


def load_history(path: str | Path) -> list[BuildStatus]:
    """
    Load a build history document, newest build first.

    The order of the ``builds`` list is kept as-is; callers rely on the
    first entry being the most recent build.
    """
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise HistoryError(f"History file not found: {pure_path}")

    if not pure_path.is_file():
        raise HistoryError(f"History path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    history = _build_history(raw_file)
    logger.debug("Loaded %d build(s) from %s", len(history), pure_path)
    return history


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedHistoryFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise HistoryError(f"{path}: not valid UTF-8") from exc
    except OSError as exc:
        raise HistoryError(f"{path}: can't read file") from exc


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(_read_text(path))
    except yaml.YAMLError as exc:
        raise HistoryError(f"{path}: invalid YAML") from exc

    return _ensure_mapping(path, "YAML", raw_file)


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(_read_text(path))
    except tomllib.TOMLDecodeError as exc:
        raise HistoryError(f"{path}: invalid TOML") from exc

    return _ensure_mapping(path, "TOML", raw_file)


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise HistoryError(f"{path}: invalid JSON") from exc

    return _ensure_mapping(path, "JSON", raw_file)


def _ensure_mapping(path: Path, fmt: str, raw_file: object) -> Mapping[str, Any]:
    if not isinstance(raw_file, Mapping):
        raise HistoryError(
            f"{path}: {fmt} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_history(raw: Mapping[str, Any]) -> list[BuildStatus]:
    if "builds" not in raw:
        raise HistoryError("Missing 'builds' field")

    if not isinstance(raw["builds"], list):
        raise HistoryError(f"'builds' must be a list, got {type(raw['builds'])}")

    return [_build_status(index, fields) for index, fields in enumerate(raw["builds"])]


def _build_status(index: int, fields: object) -> BuildStatus:
    where = f"build #{index}"
    keys = {"commit", "stages"}
    commit = None
    stages = []
    seen: set[str] = set()

    if not isinstance(fields, Mapping):
        raise HistoryError(f"{where} must be a mapping")

    for field in fields.keys():
        if field not in keys:
            raise HistoryError(f"{where}: Can't process: {field}")

    if "commit" in fields:
        if not isinstance(fields["commit"], str) or len(fields["commit"].strip()) < 1:
            raise HistoryError(f"{where}: The commit should be a non-empty string")

        commit = fields["commit"].strip()
        where = f"build {commit}"

    raw_stages = fields.get("stages", [])
    if not isinstance(raw_stages, list):
        raise HistoryError(f"{where}: Stages should be in a list.")

    for stage_fields in raw_stages:
        stage = _build_stage(where, stage_fields)
        for entry in stage:
            # Task names define the tracking scope, so they must not repeat.
            if entry.task.name in seen:
                raise HistoryError(f"{where}: Duplicate task name: {entry.task.name}")
            seen.add(entry.task.name)
        stages.append(stage)

    return BuildStatus(stages=tuple(stages), commit=commit)


def _build_stage(where: str, fields: object) -> Stage:
    keys = {"name", "tasks"}

    if not isinstance(fields, Mapping):
        raise HistoryError(f"{where}: A stage must be a mapping")

    for field in fields.keys():
        if field not in keys:
            raise HistoryError(f"{where}: Can't process: {field}")

    if "name" not in fields:
        raise HistoryError(f"{where}: stage missing 'name'")

    if not isinstance(fields["name"], str) or len(fields["name"].strip()) < 1:
        raise HistoryError(f"{where}: The stage name should be a non-empty string")

    name = fields["name"].strip()

    raw_tasks = fields.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise HistoryError(f"{where}/{name}: Tasks should be in a list.")

    tasks = tuple(TaskEntry(_build_task(f"{where}/{name}", item)) for item in raw_tasks)
    return Stage(name=name, tasks=tasks)


def _build_task(where: str, fields: object) -> Task:
    keys = {"name", "status", "flaky"}
    flaky = False

    if not isinstance(fields, Mapping):
        raise HistoryError(f"{where}: A task must be a mapping")

    for field in fields.keys():
        if field not in keys:
            raise HistoryError(f"{where}: Can't process: {field}")

    if "name" not in fields:
        raise HistoryError(f"{where}: task missing 'name'")

    if not isinstance(fields["name"], str):
        raise HistoryError(f"{where}: The task name should be a string")

    if len(fields["name"].strip()) < 1:
        raise HistoryError(f"{where}: A task name can't be empty")

    name = fields["name"].strip()

    if "status" not in fields:
        raise HistoryError(f"{where}/{name}: missing 'status'")

    try:
        status = TaskStatus(fields["status"])
    except ValueError as exc:
        expected = ", ".join(s.value for s in TaskStatus)
        raise HistoryError(
            f"{where}/{name}: Unknown status {fields['status']!r}\n Expected one of: {expected}"
        ) from exc

    if "flaky" in fields:
        if not isinstance(fields["flaky"], bool):
            raise HistoryError(f"{where}/{name}: flaky should be a boolean")

        flaky = fields["flaky"]

    return Task(name, status, flaky)
