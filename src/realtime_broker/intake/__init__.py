"""Intake assistant contract (tools + instructions)."""

from .contract import UPSERT_FIELD_PATHS, IntakeContract, load_intake_contract

__all__ = ["UPSERT_FIELD_PATHS", "IntakeContract", "load_intake_contract"]
