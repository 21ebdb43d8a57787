"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS Configuration
    aws_region: str = "us-east-2"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None

    @field_validator(
        "aws_access_key_id", "aws_secret_access_key", "aws_session_token", mode="before"
    )
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Convert empty strings to None so boto3 falls back to the IAM role."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # DynamoDB Configuration
    dynamodb_endpoint_url: str | None = None
    dynamodb_table_name: str = "workshop-data"

    # Application Configuration
    log_level: str = "INFO"
    api_title: str = "Workshop Data API"
    api_version: str = "1.0.0"

    # CSV Export
    csv_export_partition: str = "default"
    csv_export_directory: str = "/tmp/csv-exports"
    csv_export_max_pending: int = 10


# Global settings instance
settings = Settings()
