"""Configuration management for lsp-bank."""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from lsp_bank.exceptions import ConfigurationError


@dataclass
class ClientConfig:
    """Amounts the bank client moves during a transaction run."""

    deposit_amount: Decimal = Decimal("1000")
    withdraw_amount: Decimal = Decimal("500")
    fixed_deposit_amount: Decimal = Decimal("5000")
    raise_on_failure: bool = False


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    topic: str = "bank.transactions"
    acks: str = "all"
    linger_ms: int = 5
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "linger.ms": self.linger_ms,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class LspBankConfig:
    """Main configuration for lsp-bank."""

    client: ClientConfig = field(default_factory=ClientConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LspBankConfig":
        """Create config from environment variables."""
        client = ClientConfig(
            deposit_amount=_env_decimal("LSP_DEPOSIT_AMOUNT", "1000"),
            withdraw_amount=_env_decimal("LSP_WITHDRAW_AMOUNT", "500"),
            fixed_deposit_amount=_env_decimal("LSP_FIXED_DEPOSIT_AMOUNT", "5000"),
            raise_on_failure=os.getenv("LSP_RAISE_ON_FAILURE", "false").lower() == "true",
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            topic=os.getenv("KAFKA_TOPIC", "bank.transactions"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            client=client,
            kafka=kafka,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a decimal amount, got {raw!r}") from e
    if not value.is_finite() or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative amount, got {raw!r}")
    return value
