"""Conversational contract for the auto-insurance intake assistant."""

import json
from dataclasses import dataclass
from pathlib import Path

DATA_DIR = Path(__file__).parent / "data"
TOOLS_FILE = "tools.json"
INSTRUCTIONS_FILE = "instructions.md"

UPSERT_FIELD_PATHS = (
    "vehicleDetails.make",
    "vehicleDetails.model",
    "vehicleDetails.year",
    "previousClaims.claimMadeInLast3Years",
    "previousClaims.claimAtFault",
    "postalCode",
)


@dataclass(frozen=True)
class IntakeContract:
    """Tool declarations and instructions sent with every realtime session."""

    tools: list[dict]
    instructions: str


def _load_tools(tools_file: Path) -> list[dict]:
    """Load function tool declarations from a JSON file."""
    with open(tools_file, encoding="utf-8") as f:
        tools = json.load(f)
    if not isinstance(tools, list):
        raise ValueError(f"{tools_file} must contain a JSON list of tools")
    return tools


def load_intake_contract(directory: Path | None = None) -> IntakeContract:
    """
    Load the intake contract from disk.

    The files are read on every call so each session request gets its own
    copy of the tool declarations.

    Args:
        directory: Folder holding ``tools.json`` and ``instructions.md``.
            Defaults to the contract shipped with the package.
    """
    directory = directory or DATA_DIR
    tools = _load_tools(directory / TOOLS_FILE)
    instructions = (directory / INSTRUCTIONS_FILE).read_text(encoding="utf-8")
    return IntakeContract(tools=tools, instructions=instructions)
