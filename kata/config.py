"""Configuration management for kata."""

from dataclasses import dataclass, field

from kata.exceptions import ConfigurationError


@dataclass(frozen=True)
class ProductListLayout:
    """Column layout for formatted product listings.

    The defaults produce lines such as
    ``"OFFICE     Pencils          $   5.79"``.
    """

    category_width: int = 10
    name_width: int = 16
    price_width: int = 7
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        for name in ("category_width", "name_width", "price_width"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")


@dataclass
class GeneratorConfig:
    """Synthetic data generator configuration."""

    seed: int | None = None
    locale: str = "en_US"


@dataclass
class KataConfig:
    """Main configuration for kata."""

    layout: ProductListLayout = field(default_factory=ProductListLayout)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "KataConfig":
        """Create config from environment variables."""
        import os

        layout = ProductListLayout(currency_symbol=os.getenv("KATA_CURRENCY", "$"))

        seed_str = os.getenv("KATA_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"KATA_SEED must be an integer, got {seed_str!r}") from exc

        generator = GeneratorConfig(
            seed=seed,
            locale=os.getenv("KATA_LOCALE", "en_US"),
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            layout=layout,
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
