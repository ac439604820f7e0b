"""
Ticket Machine FSM
==================
Same table-driven pattern as the coffee machine, but each
(state, action) pair maps to a handler instead of a bare next state,
because inserting money has to update the balance and check the price.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from ticket_machine.config import MachineConfig
from ticket_machine.core.machine_states import FUNDED_STATES, MachineAction, MachineState


logger = logging.getLogger(__name__)

INVALID_OPERATION_MESSAGE = "Invalid operation in the current state."


class InvalidOperation(ValueError):
    """An action was called in a state that does not define it"""

    def __init__(self, state: MachineState, action: MachineAction):
        self.state = state
        self.action = action
        super().__init__(INVALID_OPERATION_MESSAGE)


class TransitionRecord(BaseModel):
    """One accepted action. Append-only, never edited."""

    model_config = ConfigDict(frozen=True)

    from_state: MachineState
    action: MachineAction
    to_state: MachineState
    amount: Optional[float] = None
    balance: float
    occurred_at: datetime = Field(default_factory=datetime.now)


def format_money(value: float) -> str:
    """5.0 -> '5', 2.5 -> '2.5'"""
    return f"{value:g}"


# ── Handlers ──────────────────────────────────────────────────────────────────

def _select_from_idle(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Ticket selected. Waiting for money.")
    machine.set_state(MachineState.WAITING_FOR_MONEY)


def _insert_while_waiting(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.balance += amount
    machine.say(
        f"Inserted ${format_money(amount)}. "
        f"Current balance: ${format_money(machine.balance)}"
    )

    if machine.balance >= machine.ticket_price:
        machine.say("Sufficient money received.")
        machine.set_state(MachineState.MONEY_RECEIVED)


def _cancel_while_waiting(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Transaction canceled. Returning to Idle state.")
    machine.balance = 0.0
    machine.set_state(MachineState.IDLE)


def _dispense_when_paid(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Dispensing ticket...")
    machine.balance = 0.0
    machine.set_state(MachineState.TICKET_DISPENSED)


def _cancel_when_paid(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Transaction canceled. Returning money and resetting to Idle state.")
    machine.balance = 0.0
    machine.set_state(MachineState.IDLE)


def _select_after_dispense(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Ticket already dispensed. Returning to Idle state.")
    machine.set_state(MachineState.IDLE)


def _select_after_cancel(machine: "TicketMachine", amount: Optional[float]) -> None:
    machine.say("Transaction canceled. Returning to Idle state.")
    machine.set_state(MachineState.IDLE)


Handler = Callable[["TicketMachine", Optional[float]], None]

# (current_state, action) → handler. Missing pairs are invalid operations.
HANDLERS: dict[tuple[MachineState, MachineAction], Handler] = {
    (MachineState.IDLE, MachineAction.SELECT_TICKET): _select_from_idle,

    (MachineState.WAITING_FOR_MONEY, MachineAction.INSERT_MONEY): _insert_while_waiting,
    (MachineState.WAITING_FOR_MONEY, MachineAction.CANCEL_TRANSACTION): _cancel_while_waiting,

    (MachineState.MONEY_RECEIVED, MachineAction.DISPENSE_TICKET): _dispense_when_paid,
    (MachineState.MONEY_RECEIVED, MachineAction.CANCEL_TRANSACTION): _cancel_when_paid,

    (MachineState.TICKET_DISPENSED, MachineAction.SELECT_TICKET): _select_after_dispense,

    # Dead path: nothing ever transitions into TRANSACTION_CANCELED
    (MachineState.TRANSACTION_CANCELED, MachineAction.SELECT_TICKET): _select_after_cancel,
}


# ── The machine ───────────────────────────────────────────────────────────────

@dataclass
class TicketMachine:
    """
    Holds the current state and balance.
    Every action is looked up in HANDLERS for the current state.
    """
    config: MachineConfig = field(default_factory=MachineConfig)
    state: MachineState = MachineState.IDLE
    balance: float = 0.0
    history: list = field(default_factory=list)  # TransitionRecord entries
    out: Optional[TextIO] = None  # None means whatever sys.stdout is at print time

    def __post_init__(self):
        self.set_state(self.state)

    @classmethod
    def from_config(cls, config: MachineConfig, out: Optional[TextIO] = None) -> "TicketMachine":
        return cls(config=config, out=out)

    @property
    def ticket_price(self) -> float:
        return self.config.ticket_price

    def say(self, message: str) -> None:
        print(message, file=self.out)

    def set_state(self, state: MachineState) -> None:
        """Replace the active state wholesale. Unfunded states hold no money."""
        self.state = MachineState(state)
        if self.state not in FUNDED_STATES:
            self.balance = 0.0

    def apply_action(self, action: MachineAction, amount: Optional[float] = None) -> None:
        """
        Run one action against the current state.
        Invalid operations are reported and ignored; nothing is raised.
        """
        action = MachineAction(action)
        if action is MachineAction.INSERT_MONEY and amount is None:
            raise ValueError("INSERT_MONEY needs an amount")

        old_state = self.state
        try:
            handler = HANDLERS.get((old_state, action))
            if handler is None:
                raise InvalidOperation(old_state, action)
            handler(self, amount)
        except InvalidOperation as e:
            logger.warning("Rejected %s in state %s", e.action.value, e.state.value)
            self.say(str(e))
            return

        self.history.append(TransitionRecord(
            from_state=old_state,
            action=action,
            to_state=self.state,
            amount=amount,
            balance=self.balance,
        ))
        logger.info(
            "%s + %s → %s (balance %s)",
            old_state.value, action.value, self.state.value, format_money(self.balance),
        )

    def select_ticket(self) -> None:
        self.apply_action(MachineAction.SELECT_TICKET)

    def insert_money(self, amount: float) -> None:
        # amount is trusted to be non-negative
        self.apply_action(MachineAction.INSERT_MONEY, amount)

    def dispense_ticket(self) -> None:
        self.apply_action(MachineAction.DISPENSE_TICKET)

    def cancel_transaction(self) -> None:
        self.apply_action(MachineAction.CANCEL_TRANSACTION)
