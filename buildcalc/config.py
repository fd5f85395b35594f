from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "BuildCalc"
    DEFAULT_COUNTRY: str = "US"
    DEFAULT_LOCALE: str = "en"

    # Waste/overage bounds (the UI slider range)
    WASTE_MIN: float = 0.0
    WASTE_MAX: float = 0.35

    # Unknown formula keys return an empty result unless strict mode is on
    STRICT_FORMULA_KEYS: bool = False

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
