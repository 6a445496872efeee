"""Address block models."""

from pydantic import BaseModel, Field, model_validator

MAX_ADDRESS = 0xFFFFFFFF


class CidrSpec(BaseModel):
    """Parsed ``address/prefix`` pair."""

    model_config = {"frozen": True}

    address: int = Field(ge=0, le=MAX_ADDRESS)
    prefix_length: int = Field(ge=0, le=32)


class NetworkRange(BaseModel):
    """Boundaries of an IPv4 block, all as 32-bit integers."""

    model_config = {"frozen": True}

    prefix_length: int = Field(ge=0, le=32)
    network_addr: int = Field(ge=0, le=MAX_ADDRESS)
    broadcast_addr: int = Field(ge=0, le=MAX_ADDRESS)
    netmask: int = Field(ge=0, le=MAX_ADDRESS)
    first_host: int = Field(ge=0, le=MAX_ADDRESS)
    last_host: int = Field(ge=0, le=MAX_ADDRESS)

    @model_validator(mode="after")
    def check_order(self) -> "NetworkRange":
        inside = (
            self.network_addr
            <= self.first_host
            <= self.last_host
            <= self.broadcast_addr
        )
        if not inside:
            raise ValueError("host range must lie inside the network block")
        return self

    @property
    def host_count(self) -> int:
        """Number of usable host addresses."""
        return self.last_host - self.first_host + 1

    @property
    def size(self) -> int:
        """Number of addresses in the whole block."""
        return 1 << (32 - self.prefix_length)
