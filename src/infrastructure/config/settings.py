"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "users-service"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    table_name: str = "go-serverless-aws-lambda-dynamodb"
    dynamodb_endpoint_url: str = ""  # LocalStack / DynamoDB Local 用

    # "dynamodb" or "memory"
    store_backend: str = "dynamodb"

    class Config:
        env_prefix = "USERS_"
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
