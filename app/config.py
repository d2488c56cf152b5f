from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    mongodb_connection_string: str
    mongodb_database: str = "hotel-booking"
    stripe_api_key: str
    jwt_secret_key: str
    payment_currency: str = "usd"
    log_level: str = "INFO"
