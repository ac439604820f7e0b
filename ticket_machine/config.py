"""
Machine Configuration
=====================
Fixed settings a ticket machine is built with
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TICKET_PRICE = 10.0


class MachineConfig(BaseModel):
    """Frozen so the ticket price can't change after construction"""

    model_config = ConfigDict(frozen=True)

    ticket_price: float = Field(default=DEFAULT_TICKET_PRICE, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
