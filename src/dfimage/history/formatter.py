"""Translate layer creation commands into Dockerfile instructions."""

import re

# Marker the builder puts in front of metadata-only instructions
NOP_MARKER = "#(nop) "
SHELL_PREFIX = "/bin/sh -c "
CHAIN_INDENT = "\n        "

WHITESPACE_PATTERN = re.compile(r"\s+")
CHAIN_PATTERN = re.compile(r" ?&&")


def get_step(created_by: str) -> str:
    """Turn a raw creation command into an instruction.

    Args:
        created_by: ``CreatedBy`` string of a history event

    Returns:
        The text after the ``#(nop) `` marker for metadata-only layers,
        otherwise the command prefixed with ``RUN``

    Raises:
        ValueError: If the marker is present but nothing follows it
    """
    if NOP_MARKER in created_by:
        _, _, instruction = created_by.partition(NOP_MARKER)
        if not instruction:
            raise ValueError(f"Empty instruction after marker in: {created_by!r}")
        return instruction
    return f"RUN {created_by}"


def standardize_spaces(step: str) -> str:
    """Collapse every whitespace run into a single space."""
    return WHITESPACE_PATTERN.sub(" ", step).strip()


def sanitize_step(step: str) -> str:
    """Normalize an instruction for display.

    Collapses whitespace, drops the ``/bin/sh -c`` shell prefix and breaks
    ``&&`` chains onto indented lines.
    """
    step = standardize_spaces(step)
    step = step.replace(SHELL_PREFIX, "")
    return CHAIN_PATTERN.sub(f"{CHAIN_INDENT}&&", step)


def format_step(created_by: str) -> str:
    """Format one history event's command as a Dockerfile line."""
    return sanitize_step(get_step(created_by))
