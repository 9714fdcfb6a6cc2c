"""Parser configuration: engine id, carrier sets, default quantity."""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Settings for one award search engine."""

    engine: str = "CX"
    primary_carrier: str = Field(default="CX", min_length=2, max_length=2)
    # Carriers treated like the primary carrier when flagging partner awards
    affiliate_carriers: list[str] = Field(default_factory=lambda: ["KA"])
    default_quantity: int = Field(default=1, ge=1, le=9)

    @field_validator("engine", "primary_carrier", mode="before")
    @classmethod
    def uppercase(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("affiliate_carriers", mode="before")
    @classmethod
    def uppercase_affiliates(cls, v: list[str]) -> list[str]:
        if isinstance(v, str):
            v = [v]
        return [c.upper() if isinstance(c, str) else c for c in v]

    def is_partner(self, airline: str) -> bool:
        """True for carriers that are neither the primary carrier nor an affiliate."""
        code = airline.upper()
        return code != self.primary_carrier and code not in self.affiliate_carriers


def load_config(path: Optional[Union[str, Path]] = None) -> ParserConfig:
    """Load a ParserConfig from YAML. No path means defaults.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If the file is not a YAML mapping.
        pydantic.ValidationError: If a field is invalid.
    """
    if path is None:
        return ParserConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return ParserConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a YAML mapping in {path}, got {type(raw).__name__}")
    return ParserConfig(**raw)
