from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # External calculation / quote engine
    CALCULATION_API_URL: str = "http://localhost:8080"
    CALCULATION_API_TOKEN: str = ""  # sent as Bearer token when set
    CALCULATION_TIMEOUT_SECONDS: float = 60.0

    # Cutting settings sent with every project cart unless the caller overrides them
    DEFAULT_STOCK_LENGTH: float = 6.0       # metres (6 or 5.58)
    DEFAULT_BLADE_KERF: float = 5.0         # mm
    DEFAULT_WASTE_THRESHOLD: float = 200.0  # mm

    # Payment block printed on quote previews
    PAYMENT_ACCOUNT_NAME: str = "Leads Glazing LTD"
    PAYMENT_ACCOUNT_NUMBER: str = "10-4030-011094"
    PAYMENT_BANK_NAME: str = "Zenith Bank"

    LOG_LEVEL: str = "INFO"


settings = Settings()
