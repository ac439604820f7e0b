"""
Ticket Machine - Demo Driver
============================
Walks one customer through a full purchase
"""

import logging
from typing import Optional, TextIO

from ticket_machine.config import MachineConfig
from ticket_machine.core.ticket_fsm import TicketMachine


def run_demo(config: Optional[MachineConfig] = None, out: Optional[TextIO] = None) -> TicketMachine:
    """Happy path: select, pay in two halves, dispense, reset"""
    machine = TicketMachine.from_config(config or MachineConfig(), out=out)

    machine.select_ticket()        # → WAITING_FOR_MONEY
    machine.insert_money(5.0)      # not enough yet
    machine.insert_money(5.0)      # → MONEY_RECEIVED
    machine.dispense_ticket()      # → TICKET_DISPENSED
    machine.select_ticket()        # → IDLE

    return machine


def main() -> int:
    config = MachineConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    machine = run_demo(config)

    print("\n📜 Full history:")
    for entry in machine.history:
        print(f"  {entry.from_state.value:20} → {entry.to_state.value:20} via {entry.action.value}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
