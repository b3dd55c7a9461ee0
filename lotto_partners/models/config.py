from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8765, ge=1, le=65535)
    api_prefix: str = "/api"


class GeminiConfig(BaseModel):
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_sec: int = Field(default=120, ge=1)


class DefaultsConfig(BaseModel):
    model: str = "gemini-2.5-flash"


class ClientConfig(BaseModel):
    base_url: str = "http://127.0.0.1:8765"
    proxy_path: str = "/api/gemini"
    timeout_sec: int = Field(default=120, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
