"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetSettings(BaseSettings):
    """Location of the labelled fear/greed training data."""

    model_config = SettingsConfigDict(env_prefix="DATASET_")

    csv_path: str = "dataset_btc_fear_greed.csv"


class TrainingSettings(BaseSettings):
    """Classifier fitting parameters.

    Defaults follow the browser demo: 50 epochs over mini-batches of 32.
    All fields configurable via TRAINING_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINING_")

    epochs: int = 50
    batch_size: int = 32
    hidden_layer_sizes: tuple[int, ...] = (16, 16)
    learning_rate_init: float = 0.01
    random_state: int | None = None


class QuoteSettings(BaseSettings):
    """Live Bitcoin quote lookup.

    When every public API fails, the sample price/volume are offered instead
    so the user can still edit and submit a prediction.
    """

    model_config = SettingsConfigDict(env_prefix="QUOTES_")

    enabled: bool = True
    timeout_seconds: float = 10.0
    sample_price: float = 95000.0
    sample_volume: float = 45_000_000_000.0


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    service_name: str = "btc-sentiment"
    dataset: DatasetSettings = DatasetSettings()
    training: TrainingSettings = TrainingSettings()
    quotes: QuoteSettings = QuoteSettings()
    dashboard: DashboardSettings = DashboardSettings()
