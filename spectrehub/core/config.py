from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Run history
    STORAGE_DIR: str = ".spectre"
    LAST_RUNS: int = 7

    # CI gating; 0 disables the threshold check
    FAIL_THRESHOLD: int = 0

    # Reporting
    TOP_RECOMMENDATIONS: int = 10
    DIFF_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    COMPARISON_DATE_FORMAT: str = "%Y-%m-%d"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix="SPECTREHUB_",
        env_file=".env",
        extra="ignore",
    )

    def should_fail_on_threshold(self, issue_count: int) -> bool:
        if self.FAIL_THRESHOLD <= 0:
            return False
        return issue_count > self.FAIL_THRESHOLD


settings = Settings()
