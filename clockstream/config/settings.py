from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    stream_path: str = "/sse"
    interval: float = 2.0
    log_level: str = "info"
    # None means no cap on open streams
    limit_concurrency: Optional[int] = None
    shutdown_timeout: float = 5.0

    class Config:
        env_file = ".env"
        env_prefix = "CLOCKSTREAM_"
