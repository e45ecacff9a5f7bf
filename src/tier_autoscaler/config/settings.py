#!/usr/bin/env python3
"""
Configuration settings using Pydantic for environment variable loading
"""

import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file if it exists
load_dotenv()


class LoggingSettings(BaseSettings):
    """Logging configuration settings"""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file: Optional[str] = os.getenv("LOG_FILE", None)
    enable_colors: bool = os.getenv("LOG_COLORS", "true").lower() == "true"

    class Config:
        extra = "ignore"


class DecisionSettings(BaseSettings):
    """Decision runner configuration settings"""
    snapshot_path: Optional[str] = os.getenv("AUTOSCALER_SNAPSHOT_PATH", None)
    validate_policies: bool = os.getenv("AUTOSCALER_VALIDATE_POLICIES", "true").lower() == "true"

    # Prometheus textfile export
    metrics_enabled: bool = os.getenv("AUTOSCALER_METRICS_ENABLED", "false").lower() == "true"
    metrics_textfile: str = os.getenv("AUTOSCALER_METRICS_TEXTFILE", "autoscaler_decisions.prom")

    class Config:
        extra = "ignore"


class Settings(BaseSettings):
    """Main settings class that includes all sub-settings"""
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    decision: DecisionSettings = Field(default_factory=DecisionSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def get_config_dict(self) -> Dict[str, Any]:
        """Convert settings to a plain dictionary"""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file": self.logging.file,
                "enable_colors": self.logging.enable_colors
            },
            "decision": {
                "snapshot_path": self.decision.snapshot_path,
                "validate_policies": self.decision.validate_policies,
                "metrics_enabled": self.decision.metrics_enabled,
                "metrics_textfile": self.decision.metrics_textfile
            }
        }

    @classmethod
    def load_from_yaml_with_env_override(cls, yaml_path: str) -> "Settings":
        """Load settings from YAML file, expanding ${VAR} references from the environment"""
        import yaml

        yaml_config = {}
        if os.path.exists(yaml_path):
            with open(yaml_path, 'r') as f:
                yaml_content = f.read()
                for key, value in os.environ.items():
                    yaml_content = yaml_content.replace(f"${{{key}}}", value)
                yaml_config = yaml.safe_load(yaml_content) or {}

        return Settings(
            environment=yaml_config.get("environment", "development"),
            debug=yaml_config.get("debug", False),
            logging=LoggingSettings(**yaml_config.get("logging", {})),
            decision=DecisionSettings(**yaml_config.get("decision", {}))
        )


# Global settings instance
settings = Settings()
