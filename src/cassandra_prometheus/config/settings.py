"""
Configuration settings for the Cassandra driver Prometheus exporter
"""

from enum import Enum

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Environment types"""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log levels"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MonitoringSettings(BaseSettings):
    """Exposition endpoint configuration"""

    prometheus_host: str = Field(default="0.0.0.0")
    prometheus_port: int = Field(default=9500, ge=0, le=65535)
    auto_register: bool = Field(default=True)

    class Config:
        env_prefix = "MONITORING_"


class Settings(BaseSettings):
    """Main application settings"""

    environment: Environment = Field(default=Environment.DEVELOPMENT)
    log_level: LogLevel = Field(default=LogLevel.INFO)
    app_name: str = Field(default="cassandra-driver-prometheus")

    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @validator("environment", pre=True)
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @validator("log_level", pre=True)
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment == Environment.DEVELOPMENT

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
