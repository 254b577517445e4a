"""CLI commands: add / list / find / delete / config."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from application.address_book import AddressBookModel
from application.commands import AddCommand, Command, CommandResult, DeleteCommand, FindCommand, ListCommand
from config import get_data_dir as configured_data_dir, get_log_level, set_data_dir, set_log_level
from core import CommandError, Person
from infrastructure.file_repository import FilePersonRepository
from interface.cli_io import describe_failure, plain_response, structured_error, structured_response
from interface.data_dir_resolver import get_data_dir
from interface.serializers import person_to_dict
from interface.table import render_person_table

ModelFactory = Callable[[Any], Any]

logger = logging.getLogger("payback.cli")


def default_model_factory(args) -> AddressBookModel:
    data_dir = get_data_dir(getattr(args, "data_dir", None))
    return AddressBookModel.from_repository(FilePersonRepository(data_dir))


@dataclass
class CliDeps:
    model_factory: ModelFactory
    person_to_dict: Callable[[Person], Dict[str, Any]]
    output: str = "json"


CLI_DEPS = CliDeps(model_factory=default_model_factory, person_to_dict=person_to_dict)


def output_mode(args, deps: CliDeps) -> str:
    return getattr(args, "format", None) or deps.output


def respond(
    args,
    deps: CliDeps,
    command: str,
    message: str,
    *,
    persons: Optional[Sequence[Person]] = None,
    payload: Optional[Dict[str, Any]] = None,
    summary: Optional[str] = None,
) -> int:
    if output_mode(args, deps) == "table":
        return plain_response(message, render_person_table(persons) if persons is not None else "")
    body = dict(payload or {})
    if persons is not None:
        body["total"] = len(persons)
        body["persons"] = [deps.person_to_dict(p) for p in persons]
    return structured_response(command, message=message, payload=body, summary=summary)


def fail(args, deps: CliDeps, command: str, exc: Exception) -> int:
    code, message, details = describe_failure(exc)
    if output_mode(args, deps) == "table":
        return plain_response(f"Error: {message}", exit_code=1)
    return structured_error(command, code, message, **details)


def run_command(args, deps: CliDeps, name: str, build: Callable[[], Command]):
    """Build and execute a command; returns (result, model) or an exit code on failure."""
    try:
        command = build()
    except ValueError as exc:
        return fail(args, deps, name, exc)
    try:
        model = deps.model_factory(args)
        result: CommandResult = command.execute(model)
    except CommandError as exc:
        return fail(args, deps, name, exc)
    except OSError as exc:
        logger.error("%s failed on storage: %s", name, exc)
        return fail(args, deps, name, exc)
    return result, model


def _split_tags(raw: Optional[str]) -> List[str]:
    return [t.strip() for t in (raw or "").split(",") if t.strip()]


def cmd_add(args, deps: CliDeps = CLI_DEPS) -> int:
    year = getattr(args, "year", None) or datetime.now().year
    outcome = run_command(
        args,
        deps,
        "add",
        lambda: AddCommand(args.name, args.phone, args.email, args.address, year, _split_tags(getattr(args, "tags", None))),
    )
    if isinstance(outcome, int):
        return outcome
    result, model = outcome
    added = model.persons()[-1]
    return respond(
        args,
        deps,
        "add",
        result.feedback,
        persons=[added] if output_mode(args, deps) == "table" else None,
        payload={"person": deps.person_to_dict(added)},
        summary=f"{added.id} added",
    )


def cmd_list(args, deps: CliDeps = CLI_DEPS) -> int:
    outcome = run_command(args, deps, "list", ListCommand)
    if isinstance(outcome, int):
        return outcome
    result, model = outcome
    persons = model.filtered_persons()
    return respond(args, deps, "list", result.feedback, persons=persons, summary=f"{len(persons)} persons")


def cmd_find(args, deps: CliDeps = CLI_DEPS) -> int:
    keywords = list(getattr(args, "keywords", []) or [])
    outcome = run_command(args, deps, "find", lambda: FindCommand(keywords))
    if isinstance(outcome, int):
        return outcome
    result, model = outcome
    return respond(
        args,
        deps,
        "find",
        result.feedback,
        persons=model.filtered_persons(),
        payload={"keywords": keywords},
    )


def cmd_delete(args, deps: CliDeps = CLI_DEPS) -> int:
    outcome = run_command(args, deps, "delete", lambda: DeleteCommand(args.person_id))
    if isinstance(outcome, int):
        return outcome
    result, _ = outcome
    return respond(args, deps, "delete", result.feedback, payload={"id": args.person_id}, summary=f"{args.person_id} deleted")


def cmd_config(args, deps: CliDeps = CLI_DEPS) -> int:
    """Show the user config, updating data_dir/log_level when given."""
    if getattr(args, "set_data_dir", None) is not None:
        set_data_dir(args.set_data_dir)
    if getattr(args, "set_log_level", None) is not None:
        set_log_level(args.set_log_level)
    payload = {"data_dir": configured_data_dir(), "log_level": get_log_level()}
    if output_mode(args, deps) == "table":
        return plain_response("\n".join(f"{k}: {v or '-'}" for k, v in payload.items()))
    return structured_response("config", message="Configuration", payload=payload)


__all__ = [
    "CliDeps",
    "CLI_DEPS",
    "default_model_factory",
    "respond",
    "fail",
    "output_mode",
    "run_command",
    "cmd_add",
    "cmd_list",
    "cmd_find",
    "cmd_delete",
    "cmd_config",
]
