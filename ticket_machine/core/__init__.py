from ticket_machine.core.machine_states import (
    ALLOWED_ACTIONS,
    FUNDED_STATES,
    UNREACHABLE_STATES,
    MachineAction,
    MachineState,
    allowed_actions,
)
from ticket_machine.core.ticket_fsm import (
    HANDLERS,
    INVALID_OPERATION_MESSAGE,
    InvalidOperation,
    TicketMachine,
    TransitionRecord,
)

__all__ = [
    "ALLOWED_ACTIONS",
    "FUNDED_STATES",
    "HANDLERS",
    "INVALID_OPERATION_MESSAGE",
    "InvalidOperation",
    "MachineAction",
    "MachineState",
    "TicketMachine",
    "TransitionRecord",
    "UNREACHABLE_STATES",
    "allowed_actions",
]
