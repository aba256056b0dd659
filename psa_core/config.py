"""Configuration management for psa-core."""

from dataclasses import dataclass, field

from psa_core.exceptions import ConfigurationError

STORAGE_BACKENDS = ("memory", "postgres")


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "psa"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class ExecutorConfig:
    """Worker pool that runs repository operations."""

    max_workers: int = 8
    thread_name_prefix: str = "psa-core"


@dataclass
class SeedConfig:
    """Development data seeding."""

    enabled: bool = False
    synthetic_occurrences: int = 0
    seed: int | None = None
    locale: str = "pt_BR"


@dataclass
class PsaConfig:
    """Main configuration for psa-core."""

    storage_backend: str = "memory"
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    executor: ExecutorConfig = field(default_factory=ExecutorConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend {self.storage_backend!r}, "
                f"expected one of {', '.join(STORAGE_BACKENDS)}"
            )
        if self.executor.max_workers < 1:
            raise ConfigurationError("Executor needs at least one worker")

    @classmethod
    def from_env(cls) -> "PsaConfig":
        """Create config from environment variables."""
        import os

        try:
            postgres = PostgresConfig(
                host=os.getenv("POSTGRES_HOST", "localhost"),
                port=int(os.getenv("POSTGRES_PORT", "5432")),
                database=os.getenv("POSTGRES_DB", "psa"),
                user=os.getenv("POSTGRES_USER", "postgres"),
                password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            )

            executor = ExecutorConfig(
                max_workers=int(os.getenv("EXECUTOR_MAX_WORKERS", "8")),
            )

            seed = SeedConfig(
                enabled=os.getenv("SEED_ENABLED", "false").lower() == "true",
                synthetic_occurrences=int(os.getenv("SEED_SYNTHETIC_OCCURRENCES", "0")),
                seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
                locale=os.getenv("SEED_LOCALE", "pt_BR"),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        return cls(
            storage_backend=os.getenv("STORAGE_BACKEND", "memory").lower(),
            postgres=postgres,
            executor=executor,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
