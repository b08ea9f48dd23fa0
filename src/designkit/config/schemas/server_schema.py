"""Server configuration schema for the front controller's HTTP surface."""
from pydantic import BaseModel, ConfigDict, Field


class ServerConfig(BaseModel):
    """REST API server configuration."""
    model_config = ConfigDict(extra="forbid")

    host: str = Field("127.0.0.1", description="Server host")
    port: int = Field(8000, description="Server port")
    log_level: str = Field("info", description="Server log level")
    access_log: bool = Field(True, description="Enable access logging")
    docs_enabled: bool = Field(False, description="Enable API documentation")
