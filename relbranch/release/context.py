"""Event context: who triggered the run and what it is about.

The context comes either from a JSON file (for runs outside CI, or replays)
or from the GitHub Actions environment:

- file: {"context": {"eventName": ..., "sha": ..., "payload": {...}}}
        (the "context" wrapper is optional)
- env:  GITHUB_EVENT_NAME, GITHUB_SHA, and the payload JSON at GITHUB_EVENT_PATH
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from relbranch.core.result import Err, Ok, Result
from relbranch.core.structured import StrDict, as_str_dict, get_path, get_str
from relbranch.release.errors import ReleaseError

__all__ = [
    "EventContext",
    "load_event_context",
    "load_optional_event_context",
]

ENV_EVENT_NAME = "GITHUB_EVENT_NAME"
ENV_EVENT_PATH = "GITHUB_EVENT_PATH"
ENV_SHA = "GITHUB_SHA"


def _empty_payload() -> StrDict:
    return {}


@dataclass(frozen=True, slots=True)
class EventContext:
    event_name: str
    sha: str
    payload: StrDict = field(default_factory=_empty_payload)

    def default_branch(self) -> str | None:
        return _payload_str(self.payload, "repository", "default_branch")

    def release_tag(self) -> str | None:
        return _payload_str(self.payload, "release", "tag_name")

    def target_branch(self) -> str | None:
        return _payload_str(self.payload, "release", "target_commitish")


def _payload_str(payload: StrDict, *keys: str) -> str | None:
    value = get_path(payload, *keys)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _invalid(message: str, hint: str | None = None) -> Err[ReleaseError]:
    return Err(ReleaseError(kind="context_invalid", message=message, hint=hint))


def _read_json(path: Path, what: str) -> Result[StrDict, ReleaseError]:
    try:
        obj: object = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _invalid(f"{what} not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        return _invalid(f"Cannot read {what} {path}: {e}")
    except json.JSONDecodeError as e:
        return _invalid(f"{what} is not valid JSON: {path}: {e}")

    data = as_str_dict(obj)
    if data is None:
        return _invalid(f"{what} must contain a JSON object: {path}")
    return Ok(data)


def _from_file(path: Path) -> Result[EventContext, ReleaseError]:
    read = _read_json(path, "Context file")
    if isinstance(read, Err):
        return read
    root = read.value

    context: StrDict | None = root
    if "context" in root:
        context = as_str_dict(root["context"])
        if context is None:
            return _invalid(f"'context' in {path} must be an object")

    payload_obj = context.get("payload", {})
    payload = as_str_dict(payload_obj)
    if payload is None:
        return _invalid(f"'payload' in {path} must be an object")

    return Ok(
        EventContext(
            event_name=get_str(context, "eventName") or "",
            sha=get_str(context, "sha") or "",
            payload=payload,
        )
    )


def _from_env(env: Mapping[str, str]) -> Result[EventContext, ReleaseError]:
    event_path = env.get(ENV_EVENT_PATH, "").strip()
    if not event_path:
        return _invalid(
            "No event context available",
            hint=f"Pass --context-file or run inside GitHub Actions ({ENV_EVENT_PATH} is not set)",
        )

    read = _read_json(Path(event_path), "Event payload")
    if isinstance(read, Err):
        return read

    return Ok(
        EventContext(
            event_name=env.get(ENV_EVENT_NAME, "").strip(),
            sha=env.get(ENV_SHA, "").strip(),
            payload=read.value,
        )
    )


def load_event_context(
    context_file: Path | None,
    env: Mapping[str, str],
) -> Result[EventContext, ReleaseError]:
    """Load the event context from context_file, else from the environment."""
    if context_file is not None:
        return _from_file(context_file)
    return _from_env(env)


def load_optional_event_context(
    context_file: Path | None,
    env: Mapping[str, str],
) -> Result[EventContext | None, ReleaseError]:
    """Like load_event_context, but Ok(None) when no context source exists at all.

    A context source that exists but cannot be read is still an error.
    """
    if context_file is None and not env.get(ENV_EVENT_PATH, "").strip():
        return Ok(None)
    return load_event_context(context_file, env)
