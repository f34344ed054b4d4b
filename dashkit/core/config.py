from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Message given to every ValidationError the adapter raises or returns.
    VALIDATION_ERROR_MESSAGE: str = "Validation failed"

    # When false, HTTP 422 envelopes carry only `code` and `message`.
    EXPOSE_VALIDATION_DETAILS: bool = True


settings = Settings()
