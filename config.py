from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    NETWORK: str = "baseMainnet"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
