from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Defaults for quantile evaluation, loaded from environment variables and optionally .env.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------
    # Distribution parameters used when a call omits them
    # -------------------------
    default_lambda: float = Field(1.0, alias="WEIBULL_LAMBDA")
    default_k: float = Field(1.0, alias="WEIBULL_K")

    # -------------------------
    # Output / path handling
    # default_dtype applies to freshly allocated typed-array and matrix outputs
    # -------------------------
    default_sep: str = Field(".", alias="WEIBULL_PATH_SEP")
    default_dtype: str = Field("float64", alias="WEIBULL_DTYPE")

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field("WARNING", alias="WEIBULL_LOG_LEVEL")
    log_format: Optional[str] = Field(None, alias="WEIBULL_LOG_FORMAT")

    # -------------------------
    # HTTP service
    # -------------------------
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"], alias="WEIBULL_CORS_ORIGINS")

    def model_post_init(self, __context) -> None:
        """
        Normalize the log level name and fall back to "." for an empty separator.
        """
        self.log_level = (self.log_level or "WARNING").strip().upper()
        if not self.default_sep:
            self.default_sep = "."


settings = Settings()
