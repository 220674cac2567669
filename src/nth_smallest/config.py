"""Configuration system for nth-smallest.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (NTH_*) -> .env file -> field defaults.

The selection strategy is fixed when a SelectionService is built from the
config; nothing here is overridable per call.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nth_smallest.exceptions import ConfigValidationError
from nth_smallest.selection.base import SelectionStrategy

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class NthSmallestConfig(BaseSettings):
    """Configuration for nth-smallest.

    Resolution order: init kwargs -> env vars (NTH_*) -> .env file -> defaults.

    Fields are divided into three groups:
    - **Selection**: which strategy the service delegates to and the seed
      for its pivot generator.
    - **Data source**: which worksheet and column numbers are read from.
    - **Boundary / logging**: HTTP bind address and selection log verbosity.
    """

    model_config = SettingsConfigDict(
        env_prefix="NTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection ---

    selection_strategy: str = Field(
        default=SelectionStrategy.QUICKSELECT.value,
        description="Selection strategy: 'quickselect' or 'bounded_heap'",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the quickselect pivot generator (None = OS entropy)",
    )

    # --- Data source ---

    sheet_index: int = Field(
        default=0,
        ge=0,
        description="Zero-based worksheet index read from xlsx workbooks",
    )
    column_index: int = Field(
        default=0,
        ge=0,
        description="Zero-based column index read from tabular sources (0 = A)",
    )

    # --- HTTP boundary ---

    host: str = Field(
        default="127.0.0.1",
        description="HTTP bind host",
    )
    port: int = Field(
        default=8080,
        description="HTTP bind port",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Selection logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )

    @field_validator("selection_strategy", mode="before")
    @classmethod
    def _check_strategy(cls, value: object) -> str:
        try:
            return SelectionStrategy(value).value
        except ValueError:
            available = ", ".join(s.value for s in SelectionStrategy)
            raise ConfigValidationError(
                f"Unknown selection strategy: {value!r}. Available: {available}"
            ) from None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ConfigValidationError(
                f"Unknown log level: {value!r}. Available: {', '.join(sorted(_LOG_LEVELS))}"
            )
        return value

    @property
    def strategy(self) -> SelectionStrategy:
        """The configured strategy as a :class:`SelectionStrategy` member."""
        return SelectionStrategy(self.selection_strategy)
