"""
Ticket Machine States
The machine is in exactly ONE of these states at any time
"""

from enum import Enum


class MachineState(str, Enum):
    IDLE = "IDLE"                                  # Nothing selected yet
    WAITING_FOR_MONEY = "WAITING_FOR_MONEY"        # Ticket chosen, collecting coins
    MONEY_RECEIVED = "MONEY_RECEIVED"              # Balance covers the price
    TICKET_DISPENSED = "TICKET_DISPENSED"          # Ticket is out
    TRANSACTION_CANCELED = "TRANSACTION_CANCELED"  # Never entered by a transition


class MachineAction(str, Enum):
    SELECT_TICKET = "SELECT_TICKET"
    INSERT_MONEY = "INSERT_MONEY"
    DISPENSE_TICKET = "DISPENSE_TICKET"
    CANCEL_TRANSACTION = "CANCEL_TRANSACTION"


# States where a non-zero balance is allowed
FUNDED_STATES = {
    MachineState.WAITING_FOR_MONEY,
    MachineState.MONEY_RECEIVED,
}

# No handler moves the machine here; only set_state() or the constructor can
UNREACHABLE_STATES = {
    MachineState.TRANSACTION_CANCELED,
}

# Which actions each state accepts. Everything else is an invalid operation.
ALLOWED_ACTIONS = {
    MachineState.IDLE: {MachineAction.SELECT_TICKET},
    MachineState.WAITING_FOR_MONEY: {
        MachineAction.INSERT_MONEY,
        MachineAction.CANCEL_TRANSACTION,
    },
    MachineState.MONEY_RECEIVED: {
        MachineAction.DISPENSE_TICKET,
        MachineAction.CANCEL_TRANSACTION,
    },
    MachineState.TICKET_DISPENSED: {MachineAction.SELECT_TICKET},
    MachineState.TRANSACTION_CANCELED: {MachineAction.SELECT_TICKET},
}


def allowed_actions(state: MachineState) -> frozenset:
    """Actions the given state defines"""
    return frozenset(ALLOWED_ACTIONS.get(state, ()))
