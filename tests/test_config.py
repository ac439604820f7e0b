import pytest
from pydantic import ValidationError

from ticket_machine.config import DEFAULT_TICKET_PRICE, MachineConfig
from ticket_machine.core.ticket_fsm import TicketMachine


def test_default_ticket_price():
    assert MachineConfig().ticket_price == DEFAULT_TICKET_PRICE == 10.0


@pytest.mark.parametrize("price", [0, -1.5])
def test_rejects_non_positive_price(price):
    with pytest.raises(ValidationError):
        MachineConfig(ticket_price=price)


def test_config_is_frozen():
    config = MachineConfig()
    with pytest.raises(ValidationError):
        config.ticket_price = 1.0


def test_machine_price_comes_from_config():
    machine = TicketMachine.from_config(MachineConfig(ticket_price=2.5))
    assert machine.ticket_price == 2.5


def test_machine_price_is_read_only():
    machine = TicketMachine()
    with pytest.raises(AttributeError):
        machine.ticket_price = 1.0


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        MachineConfig(log_level="bogus")


def test_accepts_standard_log_level():
    assert MachineConfig(log_level="DEBUG").log_level == "DEBUG"
