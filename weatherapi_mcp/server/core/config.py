"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class WeatherApiConfig(BaseModel):
    """WeatherAPI.com upstream configuration."""

    base_url: str = Field(
        default="https://api.weatherapi.com/v1",
        alias="WEATHERAPI_BASE_URL",
        description="Base URL of the WeatherAPI.com REST API",
    )
    timeout: float = Field(
        default=10.0, alias="WEATHERAPI_TIMEOUT", description="Upstream request timeout in seconds"
    )
    signup_url: str = Field(
        default="https://www.weatherapi.com/signup.aspx",
        alias="WEATHERAPI_SIGNUP_URL",
        description="Where callers can obtain an API key (used in error hints)",
    )

    model_config = {"populate_by_name": True}


class MCPServerConfig(BaseModel):
    """Identity advertised to MCP clients on ``initialize``."""

    name: str = Field(default="weatherapi-mcp", alias="MCP_SERVER_NAME", description="Server name")
    version: str = Field(default="1.0.0", alias="MCP_SERVER_VERSION", description="Server version")
    protocol_version: str = Field(
        default="2024-11-05", alias="MCP_PROTOCOL_VERSION", description="MCP protocol revision"
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_methods: list[str] = Field(
        default=["POST", "OPTIONS"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}

# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(default="0.0.0.0", description="Host address to bind to", alias="HOST")
    server_port: int = Field(default=3000, description="Port number to listen on", alias="PORT")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="LOG_LEVEL",
    )

    # =====================================================================
    # Upstream Configuration
    # =====================================================================
    weatherapi_base_url: str = Field(default="https://api.weatherapi.com/v1", alias="WEATHERAPI_BASE_URL")
    weatherapi_timeout: float = Field(default=10.0, alias="WEATHERAPI_TIMEOUT")
    weatherapi_signup_url: str = Field(
        default="https://www.weatherapi.com/signup.aspx", alias="WEATHERAPI_SIGNUP_URL"
    )

    # =====================================================================
    # MCP Identity
    # =====================================================================
    mcp_server_name: str = Field(default="weatherapi-mcp", alias="MCP_SERVER_NAME")
    mcp_server_version: str = Field(default="1.0.0", alias="MCP_SERVER_VERSION")
    mcp_protocol_version: str = Field(default="2024-11-05", alias="MCP_PROTOCOL_VERSION")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_methods: list[str] = Field(default=["POST", "OPTIONS"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def weather_api(self) -> WeatherApiConfig:
        """Get WeatherAPI.com configuration from environment variables."""
        return WeatherApiConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def mcp_server(self) -> MCPServerConfig:
        """Get MCP server identity from environment variables."""
        return MCPServerConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
