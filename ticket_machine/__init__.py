"""Ticket purchase workflow modelled as a finite state machine"""

from ticket_machine.config import MachineConfig
from ticket_machine.core import (
    InvalidOperation,
    MachineAction,
    MachineState,
    TicketMachine,
    TransitionRecord,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidOperation",
    "MachineAction",
    "MachineConfig",
    "MachineState",
    "TicketMachine",
    "TransitionRecord",
]
