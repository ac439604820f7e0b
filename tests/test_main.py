from ticket_machine.core.machine_states import MachineState
from ticket_machine.main import main, run_demo


DEMO_OUTPUT = [
    "Ticket selected. Waiting for money.",
    "Inserted $5. Current balance: $5",
    "Inserted $5. Current balance: $10",
    "Sufficient money received.",
    "Dispensing ticket...",
    "Ticket already dispensed. Returning to Idle state.",
]


def test_run_demo_prints_purchase(capsys):
    machine = run_demo()

    assert capsys.readouterr().out.splitlines() == DEMO_OUTPUT
    assert machine.state is MachineState.IDLE
    assert machine.balance == 0
    assert len(machine.history) == 5


def test_main_exits_cleanly_and_prints_history(capsys):
    assert main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:len(DEMO_OUTPUT)] == DEMO_OUTPUT
    assert "📜 Full history:" in lines
    assert any("via DISPENSE_TICKET" in line for line in lines)
