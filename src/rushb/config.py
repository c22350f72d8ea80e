"""Suite output configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SuiteSettings(BaseSettings):
    """Configuration for suite output.

    Loads from environment variables automatically:
        RUSHB_COLOR, RUSHB_WIDTH

    Or pass values directly to Printer.from_settings().
    """

    color: bool = Field(
        default=True,
        description="Force colored output, even when stdout is not a terminal (CI consoles)",
    )
    width: int | None = Field(default=None, gt=0, description="Console width override")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="RUSHB_",
    )
