"""Edit command wiring: argparse namespace -> EditCommand."""

from typing import List, Optional, Tuple

from application.commands import EditCommand, EditPersonDescriptor
from core import FieldValidationError, NotEditedError
from interface.cli_commands import CLI_DEPS, CliDeps, fail, output_mode, respond, run_command


def parse_tag_args(values: Optional[List[str]]) -> Tuple[Optional[int], Optional[str]]:
    """Split ``--tag INDEX [NEW_TAG]`` into (index, text)."""
    if not values:
        return None, None
    if len(values) > 2:
        raise FieldValidationError("tag", "Tag edit takes an index and a single new tag")
    try:
        index = int(values[0])
    except ValueError:
        raise FieldValidationError("tag", f"Tag index must be a number: {values[0]!r}") from None
    text = values[1] if len(values) > 1 else None
    if index != -1 and text is None:
        raise FieldValidationError("tag", "A new tag is required unless the index is -1")
    return index, text


def build_descriptor(args) -> EditPersonDescriptor:
    tag_index, tag_text = parse_tag_args(getattr(args, "tag", None))
    descriptor = EditPersonDescriptor.from_input(
        name=getattr(args, "name", None),
        phone=getattr(args, "phone", None),
        email=getattr(args, "email", None),
        address=getattr(args, "address", None),
        tag_index=tag_index,
        tag_text=tag_text,
    )
    if descriptor.is_empty():
        raise NotEditedError()
    return descriptor


def cmd_edit(args, deps: CliDeps = CLI_DEPS) -> int:
    try:
        descriptor = build_descriptor(args)
    except (NotEditedError, FieldValidationError) as exc:
        return fail(args, deps, "edit", exc)

    outcome = run_command(args, deps, "edit", lambda: EditCommand(args.person_id, descriptor))
    if isinstance(outcome, int):
        return outcome
    result, model = outcome
    edited = model.find_by_id(args.person_id)
    return respond(
        args,
        deps,
        "edit",
        result.feedback,
        persons=[edited] if output_mode(args, deps) == "table" else None,
        payload={"person": deps.person_to_dict(edited)},
        summary=f"{args.person_id} updated",
    )


__all__ = ["cmd_edit", "build_descriptor", "parse_tag_args"]
